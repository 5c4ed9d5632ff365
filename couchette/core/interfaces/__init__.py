"""
Interface definitions for couchette's services.

These define the contracts implementations must follow, so transports,
loggers and resource providers can be swapped (in tests, for example).
"""

from .logger import ILogger
from .resources import IResourceProvider
from .transport import ITransport

__all__ = [
    "ILogger",
    "IResourceProvider",
    "ITransport",
]
