"""Logging setup for the verse filter.

Pandoc reads the transformed document from stdout, so diagnostics always go
to stderr through a single handler on the package logger.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "verse_filter"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Calling this again only updates the level; handlers are never duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
