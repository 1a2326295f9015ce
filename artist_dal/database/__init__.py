#!/usr/bin/env python3
"""
Database package for the artist data access layer.

This package provides database connection management, configuration,
SQL statements, operations, and utilities.
"""

from .connection import (
    open_db_connection,
    create_db_connection_pool,
    release_db_connection,
    db_connection,
    close_db_connection_pool,
)

from .config import (
    validate_database_url,
    create_database_config,
    database_config_from_url,
)

from .operations import (
    get_table_name,
    run_database_operation,
    select_artists,
    select_comments,
    select_fun_fact_artists,
    recreate_artist_table,
    insert_artist_row,
    delete_artist_row,
    insert_comment_row,
    update_name_row,
    count_table_rows,
)

from .utils import (
    classify_database_error,
    validate_table_name,
)

__all__ = [
    # Connection management
    "open_db_connection",
    "create_db_connection_pool",
    "release_db_connection",
    "db_connection",
    "close_db_connection_pool",
    # Configuration
    "validate_database_url",
    "create_database_config",
    "database_config_from_url",
    # Operations
    "get_table_name",
    "run_database_operation",
    "select_artists",
    "select_comments",
    "select_fun_fact_artists",
    "recreate_artist_table",
    "insert_artist_row",
    "delete_artist_row",
    "insert_comment_row",
    "update_name_row",
    "count_table_rows",
    # Utilities
    "classify_database_error",
    "validate_table_name",
]
