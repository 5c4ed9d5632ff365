"""URI helpers for the database REST surface."""

from __future__ import annotations

from urllib.parse import quote, urlencode


def build_uri(base: str, *segments: str, query: dict[str, object] | None = None) -> str:
    """Append percent-encoded path segments and a query string to base.

    Database names may contain ``/`` which must be sent as ``%2F``.

    >>> build_uri("http://localhost:5984/", "a/b", "_compact")
    'http://localhost:5984/a%2Fb/_compact'
    """
    uri = base if base.endswith("/") else base + "/"
    uri += "/".join(quote(segment, safe="") for segment in segments)
    if query:
        uri += "?" + urlencode(query)
    return uri
