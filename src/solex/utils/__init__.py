"""Utility modules for solex.

Provides:
- logger: get_logger for logging
- stringbuilder: StringBuilder for O(n) output accumulation
"""

from solex.utils.logger import get_logger
from solex.utils.stringbuilder import StringBuilder

__all__ = [
    "StringBuilder",
    "get_logger",
]
