"""
Logging setup for grunge.

Evaluating noise never logs. Only the helpers around it (grid sampling and
the command line) emit records, all below the 'grunge' namespace logger
configured here.
"""

import logging
import sys

LOGGER_NAME = "grunge"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Route grunge log records to a stream.

    Calling it again replaces the previous handler, so the level can be
    changed at runtime without duplicating output.

    Args:
        level: Logging level for the package logger and its handler
        stream: Destination stream (default: sys.stdout)

    Returns:
        logging.Logger: The 'grunge' package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.debug("grunge logging set to %s", logging.getLevelName(level))
    return logger
