"""Logging configuration for the tic-tac-toe game."""

from __future__ import annotations

import logging
import sys

from tictactoe.config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER = "tictactoe"

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = LOG_LEVEL, format_style: str = LOG_FORMAT) -> logging.Logger:
    """
    Configure the "tictactoe" logger tree. Calling it again replaces the
    previous handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        format_style: "simple" or "detailed"; anything else is "simple".

    Returns:
        The configured package logger.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    # stderr, so records never land inside the rendered grid
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMATS.get(format_style, FORMATS["simple"])))

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module loggers live under the "tictactoe" tree; pass __name__."""
    return logging.getLogger(name)
