"""Utility modules for Joinery.

Provides:
- logger: get_logger for logging
"""

from joinery.utils.logger import get_logger

__all__ = [
    "get_logger",
]
