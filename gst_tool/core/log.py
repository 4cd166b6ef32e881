"""Logging helpers shared by the gst_tool modules."""

import logging
from typing import Optional, Union

base_logger = logging.getLogger('gst_tool')


def set_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
    remove_handlers: bool = False
) -> logging.Logger:
    """
    Attach a stream handler to a logger.

    Args:
        name: Logger name, e.g. 'gst_tool' or 'gst_tool.tiling'
        level: Level name or number
        fmt: Format string for the handler
        remove_handlers: Drop existing handlers before adding the new one

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if remove_handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or '%(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
