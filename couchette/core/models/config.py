"""
Configuration models.

Provides Pydantic models for couchette configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal
from urllib.parse import urlsplit

from pydantic import ConfigDict, Field, field_validator

from .base import CouchetteBaseModel
from .properties import DatabaseProperties, Protocol

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(CouchetteBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class CouchDbConfig(ConfigBaseModel):
    """Database server configuration section."""

    protocol: Protocol = "http"
    host: str = "localhost"
    port: Annotated[int, Field(ge=1, le=65535)] = 5984
    path: str | None = None
    name: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    create_db_if_not_exist: bool = False
    connection_timeout: Annotated[float, Field(gt=0)] = 30.0

    @field_validator("protocol", mode="before")
    @classmethod
    def normalize_protocol(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def to_properties(self) -> DatabaseProperties:
        """Build connection properties from this section."""
        return DatabaseProperties(
            protocol=self.protocol,
            host=self.host,
            port=self.port,
            path=self.path,
            db_name=self.name,
            username=self.username,
            password=self.password,
            create_db_if_not_exist=self.create_db_if_not_exist,
            connection_timeout=self.connection_timeout,
        )

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> CouchDbConfig:
        """Build a section from a server URL such as ``http://admin:pw@db:5984/``."""
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https"):
            raise ValueError("CouchDB URL must start with http:// or https://")
        values: dict[str, Any] = {
            "protocol": parts.scheme,
            "host": parts.hostname or "localhost",
            "port": parts.port or (443 if parts.scheme == "https" else 5984),
        }
        if parts.path.strip("/"):
            values["path"] = parts.path.strip("/")
        if parts.username:
            values["username"] = parts.username
        if parts.password is not None:
            values["password"] = parts.password
        values.update(overrides)
        return cls(**values)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

