"""urllib-based transport for the database REST API."""

from __future__ import annotations

import base64
import json
import urllib.error
import urllib.request
from typing import IO

from ..core.exceptions import (
    CouchAPIError,
    CouchConnectionError,
    NoDocumentError,
    PreconditionFailedError,
)
from ..core.interfaces.logger import ILogger
from ..core.interfaces.transport import ITransport
from ..core.models.http import HttpRequest
from ..core.models.properties import DatabaseProperties
from ..services.logging import get_logger
from .codec import JsonCodec
from .uri import build_uri

_STATUS_ERRORS: dict[int, type[CouchAPIError]] = {
    404: NoDocumentError,
    412: PreconditionFailedError,
}


def _error_detail(error: urllib.error.HTTPError) -> str:
    """Extract ``error: reason`` from a CouchDB error body."""
    try:
        body = error.read().decode() if error.fp else ""
    except OSError:
        body = ""
    if not body.strip():
        return str(error.reason)
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        preview = body[:100].replace("\n", " ")
        return f"Non-JSON response: '{preview}'"
    if isinstance(data, dict):
        error_name = data.get("error")
        reason = data.get("reason")
        if error_name and reason:
            return f"{error_name}: {reason}"
        return str(error_name or reason or error.reason)
    return str(error.reason)


class UrllibTransport(ITransport):
    """Transport bound to the server and database described by properties."""

    def __init__(
        self,
        properties: DatabaseProperties,
        codec: JsonCodec | None = None,
        logger: ILogger | None = None,
    ):
        self.properties = properties
        self._codec = codec or JsonCodec()
        self._logger = logger or get_logger(__name__)
        self._auth_header = self._make_auth_header()

    @property
    def base_uri(self) -> str:
        return self.properties.base_uri

    @property
    def db_uri(self) -> str:
        if not self.properties.db_name:
            return self.base_uri
        return build_uri(self.base_uri, self.properties.db_name) + "/"

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    def _make_auth_header(self) -> str | None:
        if not self.properties.has_credentials:
            return None
        token = f"{self.properties.username}:{self.properties.password}".encode()
        return "Basic " + base64.b64encode(token).decode()

    def execute_request(self, request: HttpRequest) -> IO[bytes]:
        """Send request; the caller must close the returned stream."""
        req = urllib.request.Request(
            request.uri,
            data=request.body,
            method=request.method,
        )
        req.add_header("Accept", "application/json")
        if request.body is not None:
            req.add_header("Content-Type", "application/json")
        if self._auth_header:
            req.add_header("Authorization", self._auth_header)
        for name, value in request.headers.items():
            req.add_header(name, value)

        self._logger.debug(
            "API request: %s %s (body: %d bytes)",
            request.method,
            request.uri,
            len(request.body) if request.body else 0,
        )

        try:
            response = urllib.request.urlopen(req, timeout=self.properties.connection_timeout)
        except urllib.error.HTTPError as e:
            detail = _error_detail(e)
            self._logger.debug(
                "API error: %s %s -> HTTP %d: %s",
                request.method,
                request.uri,
                e.code,
                detail[:200],
            )
            error_cls = _STATUS_ERRORS.get(e.code, CouchAPIError)
            raise error_cls(
                f"HTTP {e.code}: {detail}", status_code=e.code, url=request.uri, cause=e
            ) from e
        except urllib.error.URLError as e:
            self._logger.debug("Connection error to %s: %s", request.uri, e)
            raise CouchConnectionError(
                f"Connection error: {e.reason}", url=request.uri, cause=e
            ) from e
        except TimeoutError as e:
            self._logger.debug("Request to %s timed out", request.uri)
            raise CouchConnectionError(
                "Request timed out",
                url=request.uri,
                context={"timeout": self.properties.connection_timeout},
                cause=e,
            ) from e

        self._logger.debug(
            "API response: %s %s -> HTTP %d", request.method, request.uri, response.status
        )
        return response
