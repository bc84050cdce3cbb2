"""Utility modules for pipegrid.

Provides:
- logger: get_logger for namespaced logging
"""

from pipegrid.utils.logger import get_logger

__all__ = [
    "get_logger",
]
