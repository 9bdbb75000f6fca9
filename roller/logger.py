"""Logging setup for the command line front end."""

import logging
import sys
from typing import Optional

from roller import config

ROOT_LOGGER_NAME = "roller"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a stderr handler.

    Args:
        level: Level name such as "DEBUG"; defaults to ROLLER_LOG_LEVEL

    Returns:
        The configured "roller" logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or config.LOG_LEVEL).upper(), logging.WARNING))

    # Avoid stacking handlers when main() runs more than once in a process
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)

    return logger
