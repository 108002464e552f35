"""
Project-wide logging setup.

Usage in the Streamlit app or a pipeline script:

    from forest_watch.logging_utils import get_logger
    logger = get_logger(__name__)
    logger.info("Loaded %d readings", n)

Library modules just use logging.getLogger(__name__) and inherit whatever
the entry point configured.
"""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Return a named logger with a consistent format.

    Safe to call on every Streamlit rerun: handlers are only attached once
    per logger name, so there are no duplicate log lines.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
