"""Logging setup for opcalc.

All package modules log through children of the ``opcalc_pkg`` logger, so a
single call to :func:`setup_logging` controls the whole package.
"""

from __future__ import annotations

import logging

from .config import LOG_FORMAT
from .config import LOG_LEVEL

PACKAGE_LOGGER = "opcalc_pkg"

_configured = False


def setup_logging(level: str = LOG_LEVEL, log_file: str | None = None) -> logging.Logger:
    """Configure package logging to stderr and, optionally, a file.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path that also receives every record

    Returns:
        The package logger
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    if _configured:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    _configured = True
    return logger


def set_level(level: int) -> None:
    """Change the package log level at runtime (used by the debug command)."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``get_logger("cli")``."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
