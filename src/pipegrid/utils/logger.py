"""Minimal logging utilities for pipegrid.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from pipegrid.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pipegrid." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pipegrid.mymodule'
    """
    if not (name == "pipegrid" or name.startswith("pipegrid.")):
        name = f"pipegrid.{name}"
    return logging.getLogger(name)
