"""
Transport interface for talking to the database server.

Implementations own connection handling; callers receive closeable byte
streams and must release them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING

from ..models.http import HttpRequest

if TYPE_CHECKING:
    from ...http.codec import JsonCodec


class ITransport(ABC):
    """
    Interface for HTTP access to one database server.

    Any request answered with HTTP 404 raises NoDocumentError, so callers
    can tell a missing document or database apart from other failures.
    """

    @property
    @abstractmethod
    def base_uri(self) -> str:
        """Server root URI, ending with a slash."""
        pass

    @property
    @abstractmethod
    def db_uri(self) -> str:
        """URI of the bound database, ending with a slash."""
        pass

    @property
    @abstractmethod
    def codec(self) -> JsonCodec:
        """JSON codec for request bodies and responses."""
        pass

    @abstractmethod
    def execute_request(self, request: HttpRequest) -> IO[bytes]:
        """
        Send a request and return the response body stream.

        Raises:
            NoDocumentError: On HTTP 404
            CouchAPIError: On any other error status
            CouchConnectionError: If the server cannot be reached
        """
        pass

    def get(self, uri: str) -> IO[bytes]:
        """GET uri and return the response stream."""
        return self.execute_request(HttpRequest(method="GET", uri=uri))

    def post(self, uri: str, body: str | bytes | None = None) -> IO[bytes]:
        """POST a JSON body to uri and return the response stream."""
        return self.execute_request(HttpRequest(method="POST", uri=uri, body=_as_bytes(body)))

    def put(self, uri: str, body: str | bytes | None = None) -> IO[bytes]:
        """PUT a JSON body to uri and return the response stream."""
        return self.execute_request(HttpRequest(method="PUT", uri=uri, body=_as_bytes(body)))

    def delete(self, uri: str) -> None:
        """DELETE uri; the response is released immediately."""
        self.execute_request(HttpRequest(method="DELETE", uri=uri)).close()


def _as_bytes(body: str | bytes | None) -> bytes | None:
    if isinstance(body, str):
        return body.encode("utf-8")
    return body
