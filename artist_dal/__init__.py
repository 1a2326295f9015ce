#!/usr/bin/env python3
"""
Artist Data Access Layer Package

A thin PostgreSQL data access layer for the artist course-project web
application: artists, comments, row counts and the instrument fun fact.

Every operation opens its own connection, runs one parameterized
statement and releases the connection before returning.
"""

__version__ = "1.0.0"
__author__ = "Artist DAL"
__description__ = (
    "Data access layer for artists and comments backed by PostgreSQL"
)
__license__ = "MIT"

# Import models for public API
from .models import (
    DatabaseConfig,
    DatabaseResult,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_OPERATION_FAILED,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    COUNT_FAILED,
)

# Import the repository for public API
from .core import ArtistRepository

# Import database functions for public API
from .database import (
    create_database_config,
    create_db_connection_pool,
    close_db_connection_pool,
    db_connection,
)

# Import configuration for public API
from .config import Env, ConfigError

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import setup_logging

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "DatabaseConfig",
    "DatabaseResult",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_CONFIG_ERROR",
    "EXIT_OPERATION_FAILED",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "COUNT_FAILED",
    # Repository
    "ArtistRepository",
    # Database functions
    "create_database_config",
    "create_db_connection_pool",
    "close_db_connection_pool",
    "db_connection",
    # Configuration
    "Env",
    "ConfigError",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
