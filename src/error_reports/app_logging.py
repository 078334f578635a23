"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``error_reports`` logger and return it.

    The stream handler is installed once; later calls only adjust the level so
    tests and reloads can change verbosity without duplicating output.
    """
    logger = logging.getLogger("error_reports")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
