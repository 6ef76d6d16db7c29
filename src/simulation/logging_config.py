"""Logging helpers for the simulation packages.

The packages are silent by default (``NullHandler``). Drivers such as the
scenario CLI and the API server opt in::

    from simulation.logging_config import configure_from_env
    configure_from_env()  # honours LIFTSIM_LOGGING=DEBUG|INFO|...
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Union

__all__ = ["configure_from_env", "enable_console_logging"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAMES = ("simulation", "scheduler", "server")
ENV_LEVEL = "LIFTSIM_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _resolve_level(level: Union[LogLevel, str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def enable_console_logging(level: Union[LogLevel, str, int] = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Handler:
    """Attach a single stream handler to every package logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT))
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in logger.handlers[:]:
            if isinstance(existing, logging.StreamHandler) and not isinstance(existing, logging.FileHandler):
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
    return handler


def configure_from_env() -> None:
    level = os.environ.get(ENV_LEVEL)
    if level:
        enable_console_logging(level)
