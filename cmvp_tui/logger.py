"""Logging setup for the cmvp_tui package."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "cmvp_tui"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def setup_logger(verbosity: int = 0, log_file: str | None = None, console: bool = False) -> logging.Logger:
    """Configure the package logger.

    `console` attaches a RichHandler on stderr; the full-screen session must
    leave it off so log lines never land on the alternate screen.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbosity >= 1 else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    if console:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=verbosity >= 1,
            rich_tracebacks=True,
        )
        handler.setLevel(logging.DEBUG if verbosity >= 1 else logging.WARNING)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING if verbosity < 2 else logging.DEBUG)
    return logger
