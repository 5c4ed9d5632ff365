"""
Database server administration APIs.

DatabaseContext performs lifecycle operations (create, delete, info,
compaction, commits, uuid allocation) against the server a transport is
bound to, and builds sibling clients for other databases.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .core.di import resolve_or_default
from .core.exceptions import (
    CloneConstructionError,
    InvalidArgumentError,
    NoDocumentError,
    PreconditionFailedError,
)
from .core.interfaces.logger import ILogger
from .core.interfaces.resources import IResourceProvider
from .core.interfaces.transport import ITransport
from .core.models.http import HttpRequest
from .core.models.info import DatabaseInfo, ServerInfo
from .core.models.properties import DatabaseProperties
from .http.codec import get_as_string
from .http.uri import build_uri
from .resources.classpath import ClasspathResourceProvider
from .services.logging import get_logger
from .utils.couch import assert_not_empty, released

DELETE_CONFIRMATION = "delete database"

ClientFactory = Callable[[DatabaseProperties], Any]


class DatabaseContext:
    """
    Server and database administration for one client.

    Usage:
        ctx = DatabaseContext(transport, properties)
        ctx.create_database_if_missing("orders")
        names = ctx.list_all_databases()

    On construction the context creates the configured database when
    ``properties.create_db_if_not_exist`` is set, otherwise it requests the
    server version to warm up the connection.
    """

    def __init__(
        self,
        transport: ITransport,
        properties: DatabaseProperties,
        *,
        resource_provider: IResourceProvider | None = None,
        client_factory: ClientFactory | None = None,
        logger: ILogger | None = None,
    ):
        """
        Args:
            transport: Shared transport; its lifetime is owned by the caller
            properties: Connection properties of the owning client
            resource_provider: Locator for packaged resources
            client_factory: Builds a client from properties, used by
                clone_for_database()
            logger: Diagnostic logger
        """
        self._transport = transport
        self._properties = properties
        self._client_factory = client_factory
        self._logger = logger or get_logger(__name__)
        self._resource_provider = resource_provider or resolve_or_default(
            IResourceProvider,  # type: ignore[type-abstract]
            ClasspathResourceProvider,
        )

        if properties.create_db_if_not_exist:
            self.create_database_if_missing(properties.db_name)  # type: ignore[arg-type]
        else:
            self.server_version()

    @property
    def properties(self) -> DatabaseProperties:
        return self._properties

    @property
    def resource_provider(self) -> IResourceProvider:
        return self._resource_provider

    @resource_provider.setter
    def resource_provider(self, provider: IResourceProvider) -> None:
        self._resource_provider = provider

    # -------------------------------------------------------------------------
    # Database lifecycle
    # -------------------------------------------------------------------------

    def delete_database(self, name: str, confirm: str) -> None:
        """
        Delete a database.

        Args:
            name: The database name
            confirm: Must be exactly ``"delete database"``

        Raises:
            InvalidArgumentError: If name is empty or confirm does not match
        """
        assert_not_empty(name, "dbName")
        if confirm != DELETE_CONFIRMATION:
            raise InvalidArgumentError("Invalid confirm!", argument="confirm", value=confirm)
        self._transport.delete(build_uri(self._transport.base_uri, name))

    def create_database_if_missing(self, name: str) -> None:
        """
        Create a database unless it already exists.

        Two callers racing here may both see the database missing and both
        issue the PUT. The loser gets HTTP 412 from the server, which is
        treated as "already exists".

        Args:
            name: The database name

        Raises:
            InvalidArgumentError: If name is empty
        """
        assert_not_empty(name, "dbName")
        uri = build_uri(self._transport.base_uri, name)
        try:
            probe = self._transport.get(uri)
        except NoDocumentError:
            try:
                response = self._transport.execute_request(HttpRequest(method="PUT", uri=uri))
            except PreconditionFailedError:
                self._logger.debug("Database '%s' was created concurrently", name)
                return
            with released(response, self._logger):
                self._logger.info("Created Database: '%s'", name)
            return
        with released(probe, self._logger):
            pass

    def list_all_databases(self) -> list[str]:
        """Return the names of all databases on the server."""
        stream = self._transport.get(build_uri(self._transport.base_uri, "_all_dbs"))
        with released(stream, self._logger):
            return self._transport.codec.decode_as(stream, list[str])

    def clone_for_database(self, name: str, create_db_if_not_exist: bool = False) -> Any:
        """
        Create a client with the same type and connection parameters as the
        one this context belongs to, bound to another database.

        Args:
            name: Database the new client targets
            create_db_if_not_exist: Whether the new client creates the
                database if it does not already exist

        Returns:
            Whatever the client factory builds

        Raises:
            InvalidArgumentError: If name is empty
            CloneConstructionError: If no factory is configured or it fails
        """
        assert_not_empty(name, "dbName")
        factory = self._client_factory
        if factory is None:
            raise CloneConstructionError(
                "No client factory configured, unable to construct client",
                db_name=name,
            )

        factory_name = getattr(factory, "__qualname__", type(factory).__name__)
        properties = self._properties.with_database(name, create_db_if_not_exist)
        try:
            return factory(properties)
        except Exception as e:
            raise CloneConstructionError(
                f"Unable to construct client, {factory_name}, for dbName: {name}",
                db_name=name,
                client_type=factory_name,
                cause=e,
            ) from e

    # -------------------------------------------------------------------------
    # Server and database information
    # -------------------------------------------------------------------------

    def info(self) -> DatabaseInfo:
        """Return information about the bound database."""
        stream = self._transport.get(self._transport.db_uri)
        with released(stream, self._logger):
            return self._transport.codec.decode_as(stream, DatabaseInfo)

    def server_info(self) -> ServerInfo:
        """Return the server welcome document."""
        stream = self._transport.get(self._transport.base_uri)
        with released(stream, self._logger):
            return self._transport.codec.decode_as(stream, ServerInfo)

    def server_version(self) -> str | None:
        """Return the server version, or None if the server does not report one."""
        stream = self._transport.get(self._transport.base_uri)
        with released(stream, self._logger):
            return get_as_string(self._transport.codec.decode(stream), "version")

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def compact(self) -> None:
        """Trigger compaction of the bound database."""
        response = self._transport.post(build_uri(self._transport.db_uri, "_compact"), "")
        with released(response, self._logger):
            pass

    def ensure_full_commit(self) -> None:
        """Ask the server to commit recent changes of the bound database to disk."""
        response = self._transport.post(
            build_uri(self._transport.db_uri, "_ensure_full_commit"), ""
        )
        with released(response, self._logger):
            pass

    def generate_uuids(self, count: int) -> list[str]:
        """
        Ask the server for a batch of UUIDs.

        Args:
            count: Number of UUIDs to generate

        Returns:
            The UUIDs in the order the server sent them
        """
        uri = build_uri(self._transport.base_uri, "_uuids", query={"count": count})
        stream = self._transport.get(uri)
        with released(stream, self._logger):
            payload = self._transport.codec.decode(stream)
        return self._transport.codec.convert(payload["uuids"], list[str])
