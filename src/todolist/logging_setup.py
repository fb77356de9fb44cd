"""Logging setup for applications embedding todolist."""

import logging
import sys
from typing import Optional, Union

from .config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    The library never calls this itself; host applications call it once,
    early. Calling it again replaces the handler instead of stacking another.

    Args:
        level: Logging level name or number (defaults to config.log_level)

    Returns:
        The configured "todolist" logger
    """
    if level is None:
        level = config.log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("todolist")
    logger.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
