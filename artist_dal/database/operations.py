"""
Database operations module.

This module holds the statement-level functions that run on an open
connection, and the boundary that runs one of them inside a scoped
connection and turns any failure into a failed DatabaseResult.
"""

import logging
from typing import Callable, Optional

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from ..constants import ARTIST_TABLE, TEST_ARTIST_TABLE
from ..models import DatabaseConfig, DatabaseResult
from ..utils.logging import log_operation_failure, log_operation_rows
from .connection import db_connection
from .queries import (
    q_count_rows,
    q_create_artist_table,
    q_delete_artist,
    q_drop_artist_table,
    q_fun_fact_artists,
    q_insert_artist,
    q_insert_comment,
    q_select_artists,
    q_select_comments,
    q_update_name,
)
from .utils import classify_database_error, validate_table_name

logger = logging.getLogger(__name__)


def get_table_name(test_mode: bool = False) -> str:
    """
    Get the artist table name based on environment/mode.

    Args:
        test_mode: If True, return test table name

    Returns:
        Table name string
    """
    return TEST_ARTIST_TABLE if test_mode else ARTIST_TABLE


def run_database_operation(
    operation: str,
    work: Callable[[psycopg.Connection], DatabaseResult],
    config: Optional[DatabaseConfig] = None,
    pool: Optional[ConnectionPool] = None,
) -> DatabaseResult:
    """
    Run one unit of work on a scoped connection and capture its outcome.

    Args:
        operation: Operation name used in log records
        work: Callable receiving the open connection and returning a DatabaseResult
        config: Database configuration (used when no pool is given)
        pool: Optional connection pool

    Returns:
        The work's DatabaseResult, or a failed DatabaseResult describing the error
    """
    stage = "connect"
    try:
        with db_connection(config, pool) as connection:
            stage = "execute"
            result = work(connection)
        logger.debug(f"{operation} completed (rows_affected={result.rows_affected})")
        return result

    except Exception as e:
        error_type = classify_database_error(e)
        log_operation_failure(
            operation=operation,
            error_type=error_type,
            stage=stage,
            error_message=str(e),
            logger=logger,
        )
        return DatabaseResult(
            success=False,
            error=f"{operation} failed ({error_type}): {str(e)}",
            error_type=error_type,
            stage=stage,
        )


def select_artists(connection: psycopg.Connection, table_name: str) -> DatabaseResult:
    """Fetch every row of the artist table."""
    with connection.cursor(row_factory=dict_row) as cursor:
        cursor.execute(q_select_artists(table_name))
        rows = cursor.fetchall()

    log_operation_rows("select_artists", rows, logger)
    return DatabaseResult(success=True, value=rows)


def select_comments(connection: psycopg.Connection) -> DatabaseResult:
    """Fetch every row of the comment table."""
    with connection.cursor(row_factory=dict_row) as cursor:
        cursor.execute(q_select_comments())
        rows = cursor.fetchall()

    log_operation_rows("select_comments", rows, logger)
    return DatabaseResult(success=True, value=rows)


def select_fun_fact_artists(connection: psycopg.Connection) -> DatabaseResult:
    """Fetch the names of artists who play every catalogued instrument."""
    with connection.cursor(row_factory=dict_row) as cursor:
        cursor.execute(q_fun_fact_artists())
        rows = cursor.fetchall()

    log_operation_rows("select_fun_fact_artists", rows, logger)
    return DatabaseResult(success=True, value=[row["artist_name"] for row in rows])


def recreate_artist_table(connection: psycopg.Connection, table_name: str) -> DatabaseResult:
    """
    Drop the artist table and create it again, empty.

    This is a development reset, not a migration: every stored artist is lost.
    A failed drop is expected when the table does not exist yet and only
    logged; a failed create propagates.

    Args:
        connection: Open database connection (autocommit)
        table_name: Artist table to recreate

    Returns:
        DatabaseResult with value True
    """
    with connection.cursor() as cursor:
        try:
            cursor.execute(q_drop_artist_table(table_name))
            logger.info(f"Dropped table {table_name}")
        except psycopg.Error as e:
            logger.info(f"Table {table_name} might not exist, proceeding to create... ({str(e).strip()})")

        cursor.execute(q_create_artist_table(table_name))

    logger.info(f"Created table {table_name}")
    return DatabaseResult(success=True, value=True)


def insert_artist_row(
    connection: psycopg.Connection,
    table_name: str,
    name: str,
    origin: Optional[str],
) -> DatabaseResult:
    """Insert an artist keyed by name; description and listeners stay NULL."""
    with connection.cursor() as cursor:
        cursor.execute(q_insert_artist(table_name), {"name": name, "origin": origin})
        rows_affected = cursor.rowcount

    return _write_result(rows_affected)


def delete_artist_row(connection: psycopg.Connection, table_name: str, name: str) -> DatabaseResult:
    """Delete the artist whose name matches exactly."""
    with connection.cursor() as cursor:
        cursor.execute(q_delete_artist(table_name), {"name": name})
        rows_affected = cursor.rowcount

    if rows_affected == 0:
        logger.debug(f"No artist named {name!r} in {table_name}")
    return _write_result(rows_affected)


def insert_comment_row(connection: psycopg.Connection, description: str, author: str) -> DatabaseResult:
    """Append a comment."""
    with connection.cursor() as cursor:
        cursor.execute(q_insert_comment(), {"description": description, "author": author})
        rows_affected = cursor.rowcount

    return _write_result(rows_affected)


def update_name_row(connection: psycopg.Connection, old_name: str, new_name: str) -> DatabaseResult:
    """Rename a row of the legacy name table."""
    with connection.cursor() as cursor:
        cursor.execute(q_update_name(), {"old_name": old_name, "new_name": new_name})
        rows_affected = cursor.rowcount

    return _write_result(rows_affected)


def count_table_rows(connection: psycopg.Connection, table_name: str) -> DatabaseResult:
    """
    Count the rows of a known table.

    Raises:
        ValueError: If the table is not one this layer manages
    """
    if not validate_table_name(table_name):
        raise ValueError(f"Unknown table: {table_name!r}")

    with connection.cursor(row_factory=dict_row) as cursor:
        cursor.execute(q_count_rows(table_name.lower()))
        row = cursor.fetchone()

    return DatabaseResult(success=True, value=int(row["row_count"]))


def _write_result(rows_affected: int) -> DatabaseResult:
    # rowcount is -1 when the driver cannot tell
    rows_affected = max(rows_affected or 0, 0)
    return DatabaseResult(success=True, value=rows_affected > 0, rows_affected=rows_affected)
