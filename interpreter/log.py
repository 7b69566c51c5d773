"""Minimal logging utilities for the interpreter.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from interpreter.log import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "interpreter." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "interpreter" or name.startswith("interpreter.")):
        name = f"interpreter.{name}"
    return logging.getLogger(name)
