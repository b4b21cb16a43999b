"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
The root level comes from LOG_LEVEL. uvicorn is started without its own
logging config, so its server and access lines go through this handler too.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_initialized = False


def resolve_level(name: str) -> int:
    """
    Translate a LOG_LEVEL value into a logging level number.

    Raises:
        ValueError: If the name is not one of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    level = name.strip().upper()
    if level not in _VALID_LEVELS:
        raise ValueError(
            f"Invalid LOG_LEVEL {name!r}; expected one of {', '.join(_VALID_LEVELS)}."
        )
    return getattr(logging, level)


def _init_logging() -> None:
    """Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(resolve_level(LOG_LEVEL))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
