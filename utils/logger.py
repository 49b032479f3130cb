"""
utils/logger.py
---------------
One logging setup for the whole bot.
Modules call `get_logger(__name__)`; the first call configures the root
logger from LOG_LEVEL and quiets the chatty third-party loggers.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every request URL at INFO, and Bot API URLs contain the token
_QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}

_configured = False


def _configure() -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name` (usually the caller's ``__name__``)."""
    _configure()
    return logging.getLogger(name)
