import logging
import sys

from zipcodes.config import config

_LOGGER_NAME = "zipcodes"
_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Meant for applications and scripts; the library itself never calls it.
    Safe to call more than once, the handler is only added the first time.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level if level is not None else config.log_level.upper())
    if not logger.handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(ch)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
