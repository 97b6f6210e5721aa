"""Minimal logging utilities for Joinery.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from joinery.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Skipping %s fragment on failed builder", "str")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger for a joinery module.

    Names outside the package are moved under "joinery." so that callers
    can tune builder diagnostics with a single logger.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("builder").name
        'joinery.builder'
        >>> get_logger("joinery.config").name
        'joinery.config'
    """
    if not (name == "joinery" or name.startswith("joinery.")):
        name = f"joinery.{name}"
    return logging.getLogger(name)
