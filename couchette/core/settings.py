"""
Pydantic Settings for couchette configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import CouchDbConfig, LoggingConfig


def _get_logger():
    from ..services.logging import get_logger

    return get_logger(__name__)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .couchette/config.toml by walking up from start_dir (or cwd).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / ".couchette" / "config.toml"
        if config_path.exists():
            return config_path

        # Also check for pyproject.toml with [tool.couchette] section
        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "couchette" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigFileError(
                "Failed to parse config file", file_path=str(path), cause=e
            ) from e
        except OSError as e:
            raise ConfigFileError(
                "Failed to read config file", file_path=str(path), cause=e
            ) from e

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("couchette", {})

        _get_logger().debug("Loaded couchette config from %s", path)
        self._data = data
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class CouchetteSettings(BaseSettings):
    """Couchette configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (COUCHETTE_<section>__<field>)
    3. TOML config file (.couchette/config.toml or pyproject.toml [tool.couchette])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "COUCHETTE_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    couchdb: CouchDbConfig = CouchDbConfig()
    logging: LoggingConfig = LoggingConfig()

    @model_validator(mode="before")
    @classmethod
    def handle_url_env_var(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Fill protocol, host, port and credentials from COUCHDB_URL."""
        url = os.environ.get("COUCHDB_URL")
        if not url:
            return data

        couchdb = data.get("couchdb", {})
        if isinstance(couchdb, CouchDbConfig):
            couchdb = couchdb.model_dump(exclude_unset=True)
        if not isinstance(couchdb, dict):
            return data

        from_url = CouchDbConfig.from_url(url).model_dump(exclude_unset=True)
        # Explicit section values win over the URL
        data["couchdb"] = {**from_url, **couchdb}
        return data

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML location cannot be passed through here, so it travels in
        module-level variables set by load_settings().
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key (e.g. 'couchdb.host')."""
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None, **overrides: Any
) -> CouchetteSettings:
    """Load couchette settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        CouchetteSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file exists but cannot be read or parsed
        ConfigValidationError: If a value from any source is invalid
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        return CouchetteSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        value = None if key.endswith("password") else str(first.get("input"))
        raise ConfigValidationError(
            f"Invalid configuration value: {first['msg']}",
            key=key or None,
            value=value,
            cause=e,
        ) from e
    finally:
        _current_config_path = None
        _current_start_dir = None
