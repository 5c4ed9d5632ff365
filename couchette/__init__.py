"""
couchette: administration client for CouchDB-compatible document databases.

Provides:
- CouchDbClient / DatabaseContext: database lifecycle and server APIs
- ClasspathResourceProvider: read resources shipped inside packages or archives
- DesignDocumentLoader: build design documents from packaged files
"""

from .client import CouchDbClient
from .context import DELETE_CONFIRMATION, DatabaseContext
from .core.exceptions import (
    CloneConstructionError,
    CouchAPIError,
    CouchConnectionError,
    CouchetteException,
    InvalidArgumentError,
    NoDocumentError,
    ResourceNotFoundError,
    ResourceProviderError,
)
from .core.models import DatabaseInfo, DatabaseProperties, ServerInfo
from .design import DesignDocumentLoader
from .resources import ClasspathResourceProvider

__version__ = "0.1.0"

__all__ = [
    "DELETE_CONFIRMATION",
    "ClasspathResourceProvider",
    "CloneConstructionError",
    "CouchAPIError",
    "CouchConnectionError",
    "CouchDbClient",
    "CouchetteException",
    "DatabaseContext",
    "DatabaseInfo",
    "DatabaseProperties",
    "DesignDocumentLoader",
    "InvalidArgumentError",
    "NoDocumentError",
    "ResourceNotFoundError",
    "ResourceProviderError",
    "ServerInfo",
]
