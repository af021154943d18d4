"""Utility modules for Lexemas.

Provides:
- logger: get_logger for namespaced logging
"""

from lexemas.utils.logger import get_logger

__all__ = ["get_logger"]
