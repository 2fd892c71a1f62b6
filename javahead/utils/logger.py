"""
Logging helpers

Console logging goes through rich so compiler diagnostics stay readable.
"""

import logging
from typing import Optional

from rich.logging import RichHandler

from ..config import Config

_ROOT_LOGGER = "javahead"


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a rich console handler.

    Calling this more than once only updates the level.

    Args:
        level: Level name; defaults to Config.log_level()

    Returns:
        The package root logger
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel((level or Config.log_level()).upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
