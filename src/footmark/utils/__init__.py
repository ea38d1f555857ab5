"""Utility modules for Footmark.

Provides:
- logger: get_logger for logging
"""

from footmark.utils.logger import get_logger

__all__ = ["get_logger"]
