"""Application logger writing to platformdirs user_log_dir.

Modules ask for ``get_logger(__name__)`` and receive a child of the
``tomate_cli`` logger; only the parent carries the rotating file handler.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tomate_cli"
_LOG_FILE = "tomate.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and h.baseFilename == target
        for h in logger.handlers
    )


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def _app_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / _LOG_FILE

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    # Other handlers (e.g. pytest's capture handlers) may already be attached
    if not _has_file_handler(logger, log_file):
        logger.addHandler(_file_handler(log_file))
    logger.propagate = False

    _logger = logger
    return _logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the application logger, initialising it on first call.

    Args:
        name: Module name such as ``__name__``. When given, a child logger
            is returned whose records end up in the same log file.
    """
    logger = _app_logger()
    if not name or name == _APP_NAME:
        return logger
    if name.startswith(_APP_NAME + "."):
        name = name[len(_APP_NAME) + 1 :]
    return logger.getChild(name)
