"""
Logging configuration for command line runs
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
PACKAGE_LOGGER = "miraveja_registrar"


def configure_logging(level: str = "INFO", stream: Optional[object] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler instead of adding another one.

    Args:
        level: Logging level name.
        stream: Stream to write to; defaults to stderr.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
