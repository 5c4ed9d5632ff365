"""
Server and database information snapshots.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import ResponseModel


class DatabaseInfo(ResponseModel):
    """Database information as returned by ``GET /{db}``.

    ``update_seq`` and ``purge_seq`` are integers on CouchDB 1.x and opaque
    strings from 2.x onwards, so both are accepted.
    """

    db_name: str
    doc_count: int = 0
    doc_del_count: int = 0
    update_seq: int | str | None = None
    purge_seq: int | str | None = None
    compact_running: bool = False
    disk_size: int | None = None
    data_size: int | None = None
    instance_start_time: str | None = None
    disk_format_version: int | None = None
    sizes: dict[str, int] = Field(default_factory=dict)


class ServerInfo(ResponseModel):
    """Server welcome document as returned by ``GET /``."""

    couchdb: str | None = None
    version: str | None = None
    uuid: str | None = None
    git_sha: str | None = None
    features: list[str] = Field(default_factory=list)
    vendor: dict[str, Any] = Field(default_factory=dict)
