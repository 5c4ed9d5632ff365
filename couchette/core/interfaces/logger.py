"""
Logger interface accepted by couchette components.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Printf-style diagnostics at four levels.

    Messages take ``%s`` arguments, so formatting is skipped when the
    level is disabled.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any) -> None: ...
