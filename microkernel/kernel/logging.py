"""
Logging setup - colored console output and optional rotating log file.

Modules log through ``logging.getLogger(__name__)``; this only configures
the handlers of the package logger.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

ROOT_LOGGER = "microkernel"

CONSOLE_FORMAT = (
    "%(log_color)s%(asctime)s | %(levelname)-8s | %(name)s%(reset)s | %(message)s"
)
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Marks handlers installed here so repeated setup replaces them
_HANDLER_FLAG = "_microkernel_handler"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: int | str = "INFO",
    log_file: str | Path | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Calling this again replaces the handlers from the previous call.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_resolve_level(level))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            CONSOLE_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS
        )
    )
    setattr(console_handler, _HANDLER_FLAG, True)
    root.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        setattr(file_handler, _HANDLER_FLAG, True)
        root.addHandler(file_handler)

    return root
