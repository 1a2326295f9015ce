#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures shared by the configuration,
database and repository layers.
"""

from .database import DatabaseConfig, DatabaseResult

__all__ = [
    "DatabaseConfig",
    "DatabaseResult",
]
