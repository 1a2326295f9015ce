"""
Database connection management module.

This module handles opening dedicated connections, optional connection
pool creation and cleanup, and the scoped acquisition helper every data
access operation runs inside.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from ..constants import DEFAULT_POOL_SIZE
from ..models import DatabaseConfig

logger = logging.getLogger(__name__)


def open_db_connection(config: DatabaseConfig) -> psycopg.Connection:
    """
    Open a dedicated database connection.

    Connections run in autocommit mode so every statement is committed as
    soon as it executes, and rows come back as dictionaries.

    Args:
        config: Database configuration settings

    Returns:
        Open psycopg connection

    Raises:
        psycopg.OperationalError: If the server cannot be reached or rejects the login
    """
    connection = psycopg.connect(
        config.conninfo(),
        autocommit=True,
        row_factory=dict_row,
    )
    logger.debug(f"Opened database connection to {config.describe()}")
    return connection


def create_db_connection_pool(
    config: DatabaseConfig, max_size: int = DEFAULT_POOL_SIZE
) -> ConnectionPool:
    """
    Create a database connection pool.

    Args:
        config: Database configuration settings
        max_size: Maximum number of pooled connections

    Returns:
        Open connection pool

    Raises:
        Exception: If unable to create connection pool
    """
    try:
        logger.info(
            f"Creating database connection pool for {config.describe()} (max_size={max_size})"
        )

        connection_pool = ConnectionPool(
            config.conninfo(),
            min_size=1,
            max_size=max_size,
            kwargs={"autocommit": True, "row_factory": dict_row},
            timeout=config.connection_timeout,
            open=True,
        )

        logger.info("Database connection pool created successfully")
        return connection_pool

    except Exception as e:
        logger.error(f"Failed to create database connection pool: {str(e)}")
        raise


def release_db_connection(
    connection: Optional[psycopg.Connection],
    pool: Optional[ConnectionPool] = None,
) -> None:
    """
    Release a database connection.

    Pooled connections go back to the pool, dedicated ones are closed.
    Failures are logged and never raised.

    Args:
        connection: Connection to release (ignored if None)
        pool: Pool the connection was taken from, if any
    """
    if connection is None:
        return

    try:
        if pool is not None:
            pool.putconn(connection)
            logger.debug("Returned database connection to pool")
        else:
            connection.close()
            logger.debug("Closed database connection")
    except Exception as e:
        logger.warning(f"Failed to release database connection: {str(e)}")


def _get_pooled_connection(pool: ConnectionPool) -> psycopg.Connection:
    connection = pool.getconn()
    if not connection.autocommit:
        try:
            connection.autocommit = True
        except Exception:
            release_db_connection(connection, pool)
            raise
    return connection


@contextmanager
def db_connection(
    config: Optional[DatabaseConfig] = None,
    pool: Optional[ConnectionPool] = None,
) -> Iterator[psycopg.Connection]:
    """
    Scope one database connection to a block of work.

    The connection is taken from ``pool`` when one is given, otherwise a
    dedicated connection is opened from ``config``. Pooled connections are
    put in autocommit mode before use, like dedicated ones. The connection is released
    exactly once when the block exits, however it exits. Errors are logged
    and re-raised unchanged for the caller to handle.

    Args:
        config: Database configuration settings (required without a pool)
        pool: Optional connection pool to borrow from

    Yields:
        Open database connection

    Raises:
        psycopg.Error: If no connection could be acquired, or the work failed
        ValueError: If neither a config nor a pool is given
    """
    target = config.describe() if config is not None else "connection pool"

    try:
        if pool is not None:
            connection = _get_pooled_connection(pool)
        elif config is not None:
            connection = open_db_connection(config)
        else:
            raise ValueError("Either a database config or a connection pool is required")
    except Exception as e:
        logger.error(f"Failed to acquire database connection ({target}): {str(e)}")
        raise

    try:
        yield connection
    except Exception as e:
        logger.error(f"Database error on {target}: {str(e)}")
        raise
    finally:
        release_db_connection(connection, pool)


def close_db_connection_pool(pool: Optional[ConnectionPool]) -> None:
    """
    Close the database connection pool.

    Args:
        pool: Database connection pool to close
    """
    if pool is None:
        logger.debug("Connection pool is None, nothing to close")
        return

    try:
        logger.info("Closing database connection pool")
        pool.close()
        logger.info("Database connection pool closed successfully")

    except Exception as e:
        logger.error(f"Error closing database connection pool: {str(e)}")
