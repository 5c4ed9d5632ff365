"""
HTTP request model passed to transports.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import ImmutableModel

HttpMethod = Literal["GET", "HEAD", "PUT", "POST", "DELETE", "COPY"]


class HttpRequest(ImmutableModel):
    """A single request to the database server."""

    method: HttpMethod
    uri: str
    body: bytes | None = None
    headers: dict[str, str] = Field(default_factory=dict)
