"""Logging helpers for petlift.

The library is silent by default (a ``NullHandler`` sits on the ``petlift``
logger). Call one of the helpers below to see engine activity:

    import petlift

    petlift.enable_console_logging(level="DEBUG")

    # or read PETLIFT_LOGGING=INFO from the environment
    petlift.configure_from_env()
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Optional

__all__ = [
    "configure_from_env",
    "enable_console_logging",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAMES = ("petlift", "dispatch", "server")
ENV_VAR = "PETLIFT_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def enable_console_logging(level: LogLevel | str = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Handler:
    """Attach a stderr stream handler to the petlift loggers."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT))
    numeric = _parse_level(level)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        logger.setLevel(numeric)
    return handler


def configure_from_env() -> Optional[logging.Handler]:
    """Enable console logging if PETLIFT_LOGGING names a level."""
    level = os.environ.get(ENV_VAR)
    if not level:
        return None
    return enable_console_logging(level)


def _parse_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    return numeric


logging.getLogger("petlift").addHandler(logging.NullHandler())
