"""Logging setup for Secure Window."""

import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configure the 'secure_window' logger.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("secure_window")
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
