"""Minimal logging utilities for solex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from solex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building rule table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "solex." prefix.

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'solex.mymodule'
    """
    if not (name == "solex" or name.startswith("solex.")):
        name = f"solex.{name}"
    return logging.getLogger(name)
