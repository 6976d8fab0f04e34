from __future__ import annotations

import logging
import logging.handlers
import os
from typing import Optional

from .config import LOGGER_NAME, TableSettings

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _file_handler(log_file: str, fmt: logging.Formatter) -> logging.Handler:
    parent = os.path.dirname(log_file)
    if parent:
        os.makedirs(parent, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    settings: Optional[TableSettings] = None,
) -> logging.Logger:
    """Configure the package logger.

    Explicit ``level`` and ``log_file`` win over ``settings``; anything left
    unset comes from ``settings`` (or the defaults when none are given).
    """
    settings = settings or TableSettings()
    level_name = (level or settings.log_level or "INFO").upper()
    log_file = settings.log_file if log_file is None else log_file

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_file:
        logger.addHandler(_file_handler(log_file, fmt))

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(getattr(logging, level_name, logging.INFO))
    stream_handler.setFormatter(fmt)
    logger.addHandler(stream_handler)

    return logger


__all__ = ["setup_logging", "LOG_FORMAT"]
