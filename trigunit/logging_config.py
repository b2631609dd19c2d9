"""Logging setup for trigunit.

The library itself only creates module loggers; nothing is printed unless
the host application configures logging, either on its own or through
:func:`setup_logging`, which attaches a rich handler to the package logger.
"""

from __future__ import annotations

import logging

from environs import Env
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

PACKAGE_LOGGER = "trigunit"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Args:
        level: Level name or number. Falls back to the ``TRIGUNIT_LOG_LEVEL``
            environment variable, then to WARNING.

    Returns:
        logging.Logger: The configured ``trigunit`` logger.

    Raises:
        ValueError: If the level name is not a valid logging level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if level is None:
        level = Env().str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")
    else:
        numeric_level = level
    logger.setLevel(numeric_level)

    # Only install our handler once
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
