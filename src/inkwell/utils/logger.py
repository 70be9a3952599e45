"""Minimal logging utilities for Inkwell.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from inkwell.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Saving document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "inkwell." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'inkwell.mymodule'
    """
    if not (name == "inkwell" or name.startswith("inkwell.")):
        name = f"inkwell.{name}"
    return logging.getLogger(name)
