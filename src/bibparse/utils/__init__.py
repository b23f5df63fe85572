"""Utility modules for bibparse.

Provides:
- logger: get_logger for logging
"""

from bibparse.utils.logger import get_logger

__all__ = [
    "get_logger",
]
