"""
Logging for couchette.

Each module logs through its own child of the ``couchette`` logger
(``couchette.context``, ``couchette.http.transport``, ...). Nothing is
printed unless the host application configures logging, or settings
enable couchette's own handlers through configure_logging().
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

ROOT_LOGGER = "couchette"
LOG_FILE_PATH = Path.home() / ".couchette" / "couchette.log"
MAX_FILE_SIZE = 10 * 1024 * 1024
BACKUP_COUNT = 3

# Marks handlers installed here so reconfiguring never touches the host's own
_OWNED = "_couchette_owned"


class CouchetteLogger(ILogger):
    """ILogger over a stdlib logger in the ``couchette`` hierarchy."""

    def __init__(self, name: str = ROOT_LOGGER) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)

    def __repr__(self) -> str:
        return f"<CouchetteLogger {self.name!r}>"


def get_logger(module: str) -> CouchetteLogger:
    """Logger for a module, usually called as ``get_logger(__name__)``.

    Names outside the package are nested under ``couchette.``.
    """
    if module != ROOT_LOGGER and not module.startswith(ROOT_LOGGER + "."):
        module = f"{ROOT_LOGGER}.{module}"
    return CouchetteLogger(module)


def configure_logging(config: LoggingConfig, log_file: Path | None = None) -> None:
    """Apply a ``[logging]`` settings section to the ``couchette`` logger.

    Handlers from an earlier call are replaced. Handlers added by the host
    application are left alone, and records still propagate to the root
    logger.

    Args:
        config: Level and which handlers to attach
        log_file: Override for the rotating log file location
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if getattr(h, _OWNED, False)]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(config.level.upper())
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.console:
        _attach(root, logging.StreamHandler(sys.stderr), formatter)
    if config.file:
        path = log_file or LOG_FILE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(
            root,
            RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT),
            formatter,
        )


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    setattr(handler, _OWNED, True)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
