"""
Small helpers shared by the client, context and resource providers.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

from ..core.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger

T = TypeVar("T")


def assert_not_empty(value: Any, name: str) -> None:
    """Raise InvalidArgumentError if value is None or an empty string."""
    if value is None:
        raise InvalidArgumentError(f"{name} may not be null.", argument=name)
    if isinstance(value, str) and len(value) == 0:
        raise InvalidArgumentError(f"{name} may not be empty.", argument=name, value=value)


def assert_null(value: Any, name: str) -> None:
    """Raise InvalidArgumentError unless value is None."""
    if value is not None:
        raise InvalidArgumentError(f"{name} should be null.", argument=name, value=str(value))


def generate_uuid() -> str:
    """Random UUID as 32 lowercase hex characters, no dashes."""
    return uuid.uuid4().hex


def remove_extension(file_name: str) -> str:
    """Strip the last extension: ``map.js`` -> ``map``.

    Names without a dot are returned unchanged.
    """
    dot = file_name.rfind(".")
    if dot < 0:
        return file_name
    return file_name[:dot]


@contextmanager
def released(resource: T, logger: ILogger | None = None) -> Iterator[T]:
    """Yield resource and close it on every exit path.

    A failing close() is logged at debug level and never replaces an
    exception raised inside the block.
    """
    try:
        yield resource
    finally:
        close = getattr(resource, "close", None)
        if close is not None:
            try:
                close()
            except Exception as e:
                if logger is not None:
                    logger.debug("Failed to release %r: %s", resource, e)
