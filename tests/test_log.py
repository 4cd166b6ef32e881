"""Tests for the logging helpers."""

import logging

from gst_tool.core.log import base_logger, set_logger


def test_set_logger_replaces_handlers():
    name = "gst_tool.test_log"
    set_logger(name, level="DEBUG")
    logger = set_logger(name, level="INFO", fmt="%(message)s", remove_handlers=True)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == "%(message)s"

    logger.handlers.clear()


def test_module_loggers_are_children():
    assert base_logger.name == "gst_tool"
    assert base_logger.getChild("tiling").name == "gst_tool.tiling"
