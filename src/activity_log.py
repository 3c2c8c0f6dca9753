"""Append-only activity log.

Every audit line written through the ``todo.activity`` logger ends up in
the log file as ``[YYYY-MM-DD HH:MM:SS] <message>``. Failing to open the
file is not an error: the logger gets a NullHandler instead. Later write
failures are dropped by the handler, and the session carries on.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

ACTIVITY_LOGGER = "todo.activity"
LINE_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(ACTIVITY_LOGGER)

class QuietFileHandler(logging.FileHandler):
    """FileHandler that drops records it fails to write."""

    def handleError(self, record: logging.LogRecord) -> None:
        pass

def configure(path: Optional[Union[str, Path]]) -> logging.Handler:
    """Route activity messages to ``path`` (appending); None disables the file.

    Replaces any handler installed by a previous call and returns the new one.
    """
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    handler: logging.Handler
    if path is None:
        handler = logging.NullHandler()
    else:
        try:
            handler = QuietFileHandler(str(path), mode="a", encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
        handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return handler

def log(message: str) -> None:
    logger.info(message)
