"""Minimal logging utilities for jbpl.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from jbpl.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning patch")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "jbpl." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'jbpl.mymodule'
    """
    if not (name == "jbpl" or name.startswith("jbpl.")):
        name = f"jbpl.{name}"
    return logging.getLogger(name)
