"""
Connection properties for a single database.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, field_validator

from .base import ImmutableModel

Protocol = Literal["http", "https"]


class DatabaseProperties(ImmutableModel):
    """Connection target and options for one database.

    Frozen: derive variants with :meth:`with_database` instead of mutating.
    """

    protocol: Protocol = "http"
    host: str = "localhost"
    port: Annotated[int, Field(ge=1, le=65535)] = 5984
    path: str | None = None
    db_name: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    create_db_if_not_exist: bool = False
    connection_timeout: Annotated[float, Field(gt=0)] = 30.0

    @field_validator("path")
    @classmethod
    def normalize_path(cls, v: str | None) -> str | None:
        """Strip surrounding slashes from the path prefix."""
        if v is None:
            return None
        v = v.strip("/")
        return v or None

    @property
    def base_uri(self) -> str:
        """Server root URI, always ending with a slash."""
        uri = f"{self.protocol}://{self.host}:{self.port}/"
        if self.path:
            uri += f"{self.path}/"
        return uri

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and self.password is not None

    def with_database(
        self, db_name: str, create_db_if_not_exist: bool = False
    ) -> DatabaseProperties:
        """Return a copy bound to another database.

        Args:
            db_name: Name of the database the copy targets
            create_db_if_not_exist: Whether a client built from the copy
                should create the database on startup

        Returns:
            New properties instance; this one is left untouched
        """
        return self.model_copy(
            update={
                "db_name": db_name,
                "create_db_if_not_exist": create_db_if_not_exist,
            }
        )
