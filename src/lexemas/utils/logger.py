"""Minimal logging utilities for Lexemas.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from lexemas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Analyzing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lexemas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lexemas.mymodule'
    """
    if not (name == "lexemas" or name.startswith("lexemas.")):
        name = f"lexemas.{name}"
    return logging.getLogger(name)
