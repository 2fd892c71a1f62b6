"""
Utility modules for JavaHead
"""

from .logger import setup_logger, get_logger
from .paths import working_directory

__all__ = [
    "setup_logger",
    "get_logger",
    "working_directory",
]
