"""
Client entry point.

    client = CouchDbClient(DatabaseProperties(db_name="orders", create_db_if_not_exist=True))
    client.context.info().doc_count
    archive = client.context.clone_for_database("orders-archive", True)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .context import DatabaseContext
from .core.interfaces.logger import ILogger
from .core.interfaces.resources import IResourceProvider
from .core.interfaces.transport import ITransport
from .core.models.properties import DatabaseProperties
from .core.settings import load_settings
from .http.transport import UrllibTransport


class CouchDbClient:
    """Client bound to one database.

    Subclasses keep their type when cloned through
    ``context.clone_for_database()``, as long as they accept properties as
    the single positional argument.
    """

    def __init__(
        self,
        properties: DatabaseProperties | None = None,
        *,
        transport: ITransport | None = None,
        resource_provider: IResourceProvider | None = None,
        logger: ILogger | None = None,
    ):
        self.properties = properties or DatabaseProperties()
        self.transport = transport or UrllibTransport(self.properties, logger=logger)
        self.context = DatabaseContext(
            self.transport,
            self.properties,
            resource_provider=resource_provider,
            client_factory=type(self),
            logger=logger,
        )

    @classmethod
    def from_settings(cls, config_path: Path | None = None, **overrides: Any) -> CouchDbClient:
        """Build a client from config files and COUCHETTE_* environment variables."""
        settings = load_settings(config_path=config_path, **overrides)
        return cls(settings.couchdb.to_properties())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.transport.db_uri!r}>"
