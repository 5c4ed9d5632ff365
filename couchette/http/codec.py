"""
JSON encoding and decoding for request bodies and response streams.
"""

from __future__ import annotations

import json
from typing import IO, Any, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class JsonCodec:
    """Encode request bodies and decode response streams."""

    def encode(self, obj: Any) -> bytes:
        return json.dumps(obj, ensure_ascii=False).encode("utf-8")

    def decode(self, stream: IO[bytes]) -> Any:
        """Parse a whole response stream as JSON."""
        return json.load(stream)

    def decode_as(self, stream: IO[bytes], type_: type[T]) -> T:
        """Parse a response stream and validate it against ``type_``.

        ``type_`` can be a pydantic model or any annotation TypeAdapter
        understands, such as ``list[str]``.
        """
        return TypeAdapter(type_).validate_python(self.decode(stream))

    def convert(self, value: Any, type_: type[T]) -> T:
        """Validate an already decoded value against ``type_``."""
        return TypeAdapter(type_).validate_python(value)


def get_as_string(obj: dict[str, Any], key: str) -> str | None:
    """Return a JSON member as a string, or None if not found."""
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value)



def get_as_int(obj: dict[str, Any], key: str, default: int = 0) -> int:
    """Return a JSON member as an int, or ``default`` if not found.

    Numeric strings are parsed and floats truncated.

    Raises:
        ValueError: If the member is not a number or numeric string
    """
    value = obj.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"JSON member {key!r} is not a number: {value!r}")
    return int(value)


def get_as_long(obj: dict[str, Any], key: str, default: int = 0) -> int:
    """Same as get_as_int; Python ints cover the full 64-bit range."""
    return get_as_int(obj, key, default)
