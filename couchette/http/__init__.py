"""HTTP transport, JSON codec and URI helpers."""

from .codec import JsonCodec, get_as_int, get_as_long, get_as_string
from .transport import UrllibTransport
from .uri import build_uri

__all__ = ["JsonCodec", "UrllibTransport", "build_uri", "get_as_int", "get_as_long", "get_as_string"]
