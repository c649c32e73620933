"""Logging setup: one console handler, quiet third-party loggers."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries that are chatty at INFO/DEBUG.
_NOISY_LOGGERS = ("passlib", "sqlalchemy.engine", "multipart")

# Handler installed by the last setup_logging() call.
_console_handler: logging.Handler | None = None


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stream handler.

    Safe to call more than once (each app factory call does): the handler
    installed by a previous call is replaced rather than duplicated.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    global _console_handler
    if _console_handler is not None:
        root.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setLevel(level)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_console_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
