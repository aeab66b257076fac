"""Minimal logging utilities for cmarkparser.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from cmarkparser.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning buffer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "cmarkparser." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'cmarkparser.mymodule'
    """
    if not (name == "cmarkparser" or name.startswith("cmarkparser.")):
        name = f"cmarkparser.{name}"
    return logging.getLogger(name)
