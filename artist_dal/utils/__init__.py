"""
Utilities module for the artist data access layer.

This module provides shared utility functions:
- Logging setup and structured operation logging
"""

from .logging import setup_logging, log_operation_failure, log_operation_rows

__all__ = [
    "setup_logging",
    "log_operation_failure",
    "log_operation_rows",
]
