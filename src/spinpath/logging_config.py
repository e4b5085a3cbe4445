"""Logging setup for the command line tool."""

from __future__ import annotations

import logging
import sys
from os import PathLike
from typing import Optional

LOGGER_NAME = "spinpath"


def setup_logging(
    level: int = logging.WARNING, log_file: Optional[str | PathLike[str]] = None
) -> logging.Logger:
    """Configure the ``spinpath`` package logger.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path that receives a copy of every record.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate records when main() runs more than once in a process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # stdout may carry the SVG document
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]
