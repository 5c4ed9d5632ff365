"""
Shared pytest fixtures for couchette tests.

This module provides:
- FakeTransport: in-memory ITransport recording every request
- fake_transport: a FakeTransport answering like an empty CouchDB server
- make_package: builds an importable package as a directory or zip archive
- reset_container: clears the DI container between tests
"""

import io
import json
import uuid
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from couchette.core.bootstrap import reset as reset_bootstrap
from couchette.core.exceptions import NoDocumentError
from couchette.core.interfaces.transport import ITransport
from couchette.core.models.http import HttpRequest
from couchette.http.codec import JsonCodec

BASE_URI = "http://localhost:5984/"


class TrackedStream(io.BytesIO):
    """BytesIO that remembers whether it was closed."""

    was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


class FakeTransport(ITransport):
    """
    In-memory transport.

    Responses are keyed by (method, uri). A value can be a JSON-serializable
    payload or an exception to raise. Unknown GETs raise NoDocumentError,
    other unknown requests answer ``{"ok": true}``. A successful PUT on a
    URI makes later GETs of that URI succeed.
    """

    def __init__(self, db_name: str = "testdb"):
        self._codec = JsonCodec()
        self._db_name = db_name
        self.requests: list[HttpRequest] = []
        self.streams: list[TrackedStream] = []
        self.responses: dict[tuple[str, str], Any] = {
            ("GET", BASE_URI): {"couchdb": "Welcome", "version": "3.3.3"},
        }

    @property
    def base_uri(self) -> str:
        return BASE_URI

    @property
    def db_uri(self) -> str:
        return f"{BASE_URI}{self._db_name}/"

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    def respond(self, method: str, uri: str, payload: Any) -> None:
        self.responses[(method, uri)] = payload

    def calls(self, method: str | None = None) -> list[HttpRequest]:
        return [r for r in self.requests if method is None or r.method == method]

    def execute_request(self, request: HttpRequest) -> TrackedStream:
        self.requests.append(request)
        key = (request.method, request.uri)
        if key in self.responses:
            payload = self.responses[key]
        elif request.method == "GET":
            raise NoDocumentError("HTTP 404: not_found: missing", status_code=404, url=request.uri)
        else:
            payload = {"ok": True}

        if isinstance(payload, Exception):
            raise payload

        if request.method == "PUT":
            self.responses.setdefault(("GET", request.uri), {"db_name": request.uri})

        stream = TrackedStream(json.dumps(payload).encode())
        self.streams.append(stream)
        return stream


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A transport bound to 'testdb' on an otherwise empty server."""
    return FakeTransport()


@pytest.fixture(autouse=True)
def reset_container():
    """Ensure each test starts with an empty service container."""
    reset_bootstrap()
    yield
    reset_bootstrap()


@pytest.fixture
def make_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., str]:
    """
    Factory creating a uniquely named importable package holding files.

    Usage:
        name = make_package({"docs/a.js": "..."}, archive=True)

    Returns the package name; its location is prepended to sys.path.
    """

    def _make(files: dict[str, str | bytes], archive: bool = False) -> str:
        name = f"respkg_{uuid.uuid4().hex[:12]}"
        members: dict[str, str | bytes] = {f"{name}/__init__.py": ""}
        members.update({f"{name}/{path}": content for path, content in files.items()})

        if archive:
            location = tmp_path / f"{name}.zip"
            with zipfile.ZipFile(location, "w") as zf:
                for path, content in members.items():
                    zf.writestr(path, content)
        else:
            location = tmp_path / "site"
            for path, content in members.items():
                target = location / path
                target.parent.mkdir(parents=True, exist_ok=True)
                if isinstance(content, bytes):
                    target.write_bytes(content)
                else:
                    target.write_text(content, newline="")

        monkeypatch.syspath_prepend(str(location))
        return name

    return _make
