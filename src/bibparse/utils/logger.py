"""Minimal logging utilities for bibparse.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from bibparse.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexed %d tokens", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bibparse." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'bibparse.mymodule'
    """
    # Ensure bibparse prefix for consistent namespacing
    if not (name == "bibparse" or name.startswith("bibparse.")):
        name = f"bibparse.{name}"
    return logging.getLogger(name)
