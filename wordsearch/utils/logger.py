"""Logging setup for the ``wordsearch`` package.

Library modules only ever call :func:`get_logger`; nothing is attached to a
handler until an application (the CLI, or a caller embedding the generator)
calls :func:`configure_logging`. Only the package logger is configured, so the
host application's root logging is left alone.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO


PACKAGE_LOGGER = "wordsearch"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send package records at ``level`` and above to ``stream`` (stderr by default).

    Calling it again replaces the previous handler instead of stacking a new one.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``wordsearch`` namespace."""

    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
