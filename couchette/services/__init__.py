"""Service implementations."""

from .logging import CouchetteLogger, configure_logging, get_logger

__all__ = ["CouchetteLogger", "configure_logging", "get_logger"]
