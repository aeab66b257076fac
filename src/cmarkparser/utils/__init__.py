"""Utility modules for cmarkparser.

Provides:
- logger: get_logger for logging
"""

from cmarkparser.utils.logger import get_logger

__all__ = [
    "get_logger",
]
