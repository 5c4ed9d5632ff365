"""
Custom exception hierarchy for couchette.

Every error raised by the client carries a human readable message, optional
debugging context and, where one exists, the underlying cause chained as
``__cause__``.
"""

from __future__ import annotations


class CouchetteException(Exception):
    """
    Base exception for all couchette errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (URLs, paths, names, etc.)
        recoverable: Whether retry/recovery may be possible
    """

    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class CouchetteConfigError(CouchetteException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(CouchetteConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(CouchetteConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class CouchetteValidationError(CouchetteException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError, validation always happens before any request
    is sent to the server.
    """

    recoverable: bool = False


class InvalidArgumentError(CouchetteValidationError):
    """
    Invalid function parameter.

    Raised for empty database names and a wrong delete confirmation.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Network Errors
# =============================================================================


class CouchetteNetworkError(CouchetteException):
    """Base class for network-related errors."""

    pass


class CouchConnectionError(CouchetteNetworkError):
    """
    Error connecting to the database server.

    Raised for connection refusals, timeouts, DNS failures, SSL errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if url:
            ctx["url"] = url
        super().__init__(message, context=ctx, cause=cause)


class CouchAPIError(CouchetteNetworkError):
    """
    The server answered with an error status.

    Includes the HTTP status code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if status_code:
            ctx["status_code"] = status_code
        if url:
            ctx["url"] = url
        super().__init__(message, context=ctx, cause=cause)
        self.status_code = status_code


class NoDocumentError(CouchAPIError):
    """The requested document or database does not exist (HTTP 404)."""

    recoverable: bool = False


class PreconditionFailedError(CouchAPIError):
    """The server rejected a request precondition (HTTP 412)."""

    recoverable: bool = False


# =============================================================================
# Resource Errors
# =============================================================================


class ResourceProviderError(CouchetteException):
    """
    Error enumerating or reading packaged resources.

    Wraps the archive, stream or filesystem error that caused it.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path is not None:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


class ResourceNotFoundError(ResourceProviderError):
    """No resource stream could be opened for the requested path."""

    recoverable: bool = False


# =============================================================================
# Client Errors
# =============================================================================


class CloneConstructionError(CouchetteException):
    """
    A sibling client for another database could not be constructed.

    Wraps whatever the client factory raised.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        db_name: str | None = None,
        client_type: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if db_name:
            ctx["db_name"] = db_name
        if client_type:
            ctx["client_type"] = client_type
        super().__init__(message, context=ctx, cause=cause)
