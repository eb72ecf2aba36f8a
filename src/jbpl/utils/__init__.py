"""Utility modules for jbpl.

Provides:
- logger: get_logger for logging
"""

from jbpl.utils.logger import get_logger

__all__ = [
    "get_logger",
]
