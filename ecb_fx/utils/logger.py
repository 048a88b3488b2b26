"""Logging utilities for the ecb_fx package."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "ecb_fx"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_CONFIGURED: Optional[logging.Logger] = None


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """Return a logger for ``name``; the first call installs a basic root handler."""
    global _CONFIGURED
    if _CONFIGURED is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _CONFIGURED = logging.getLogger(PACKAGE_LOGGER_NAME)
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Adjust verbosity for every ``ecb_fx.*`` logger at once."""

    get_logger().setLevel(level.upper() if isinstance(level, str) else level)


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER_NAME", "get_logger", "set_log_level"]
