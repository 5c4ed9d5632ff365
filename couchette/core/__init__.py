"""
Core infrastructure for couchette.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for transports, loggers and resource providers
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    CloneConstructionError,
    ConfigFileError,
    ConfigValidationError,
    CouchAPIError,
    CouchConnectionError,
    CouchetteConfigError,
    CouchetteException,
    CouchetteNetworkError,
    CouchetteValidationError,
    InvalidArgumentError,
    NoDocumentError,
    PreconditionFailedError,
    ResourceNotFoundError,
    ResourceProviderError,
)

__all__ = [
    "CloneConstructionError",
    "ConfigFileError",
    "ConfigValidationError",
    "CouchAPIError",
    "CouchConnectionError",
    "CouchetteConfigError",
    "CouchetteException",
    "CouchetteNetworkError",
    "CouchetteValidationError",
    "InvalidArgumentError",
    "NoDocumentError",
    "PreconditionFailedError",
    "ResourceNotFoundError",
    "ResourceProviderError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
