"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from swf_timeline.log import LOGGER_NAME, setup_logging
from swf_timeline.movie import split_frames
from swf_timeline.tags import ShowFrame


def test_setup_logging_replaces_handlers():
    setup_logging("INFO")
    logger = setup_logging(logging.DEBUG)

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_module_loggers_inherit_package_level(caplog):
    logger = setup_logging(logging.DEBUG)
    logger.propagate = True

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        split_frames([ShowFrame()])

    assert "Split movie into 1 frame(s)" in caplog.text
