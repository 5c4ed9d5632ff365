"""
Pydantic models for couchette.
"""

from .base import CouchetteBaseModel, ImmutableModel, ResponseModel
from .config import CouchDbConfig, LoggingConfig
from .http import HttpRequest
from .info import DatabaseInfo, ServerInfo
from .properties import DatabaseProperties

__all__ = [
    "CouchDbConfig",
    "CouchetteBaseModel",
    "DatabaseInfo",
    "DatabaseProperties",
    "HttpRequest",
    "ImmutableModel",
    "LoggingConfig",
    "ResponseModel",
    "ServerInfo",
]
