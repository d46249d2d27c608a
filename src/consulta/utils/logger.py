"""Minimal logging utilities for Consulta.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from consulta.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning query")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "consulta." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'consulta.mymodule'
    """
    if not (name == "consulta" or name.startswith("consulta.")):
        name = f"consulta.{name}"
    return logging.getLogger(name)
