"""Logging setup for the swf_timeline package."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "swf_timeline"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Route package log records to stderr through rich."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear duplicate handlers if reinit
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

