#!/usr/bin/env python3
"""
Application Constants

This module contains table names, failure sentinels, connection defaults
and exit codes used throughout the artist data access layer.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 3
EXIT_OPERATION_FAILED = 5
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Table names
ARTIST_TABLE = "artists"
TEST_ARTIST_TABLE = "test_artists"
COMMENT_TABLE = "comments"
INSTRUMENT_TABLE = "instruments"
PLAYS_TABLE = "plays"
LEGACY_NAME_TABLE = "demotable"  # Only referenced by update_name

COUNTABLE_TABLES = (
    ARTIST_TABLE,
    TEST_ARTIST_TABLE,
    COMMENT_TABLE,
    INSTRUMENT_TABLE,
    PLAYS_TABLE,
    LEGACY_NAME_TABLE,
)

# Values returned to callers when an operation fails
COUNT_FAILED = -1

# Database connection constants
DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = 5432
DEFAULT_CONNECTION_TIMEOUT = 30  # seconds
DEFAULT_POOL_SIZE = 4
