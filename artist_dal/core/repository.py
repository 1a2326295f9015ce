"""
Artist repository.

This module exposes the data access operations used by the web layer.
Each operation acquires its own connection, runs one statement and
releases the connection before returning.

Two surfaces are offered. The ``fetch_*``/``create_*``-style methods return
a DatabaseResult that keeps the failure reason. The sentinel methods
(``list_artists``, ``insert_artist``, ...) never raise: on failure they
return an empty list, False or -1.
"""

import logging
from typing import Any, Dict, List, Optional

from psycopg_pool import ConnectionPool

from ..constants import COUNT_FAILED
from ..database import (
    count_table_rows,
    delete_artist_row,
    get_table_name,
    insert_artist_row,
    insert_comment_row,
    recreate_artist_table,
    run_database_operation,
    select_artists,
    select_comments,
    select_fun_fact_artists,
    update_name_row,
)
from ..models import DatabaseConfig, DatabaseResult

logger = logging.getLogger(__name__)


class ArtistRepository:
    """
    Data access layer for artists, comments and the instrument catalogue.

    The repository holds no connection and no mutable state, so one
    instance can be shared by concurrent callers.
    """

    def __init__(
        self,
        config: Optional[DatabaseConfig] = None,
        pool: Optional[ConnectionPool] = None,
        test_mode: bool = False,
    ):
        """
        Args:
            config: Database configuration used to open dedicated connections
            pool: Optional connection pool to borrow connections from instead
            test_mode: If True, artist operations use the test table
        """
        if config is None and pool is None:
            raise ValueError("ArtistRepository needs a database config or a connection pool")

        self.config = config
        self.pool = pool
        self.test_mode = test_mode
        self.artist_table = get_table_name(test_mode)

    def _run(self, operation: str, work) -> DatabaseResult:
        return run_database_operation(operation, work, config=self.config, pool=self.pool)

    # Result-level operations

    def check_connection(self) -> DatabaseResult:
        """Acquire and release a connection without running a statement."""
        return self._run("test_connection", lambda connection: DatabaseResult(success=True, value=True))

    def fetch_artists(self) -> DatabaseResult:
        return self._run("list_artists", lambda connection: select_artists(connection, self.artist_table))

    def fetch_fun_fact_artists(self) -> DatabaseResult:
        return self._run("fun_fact_artists", select_fun_fact_artists)

    def fetch_comments(self) -> DatabaseResult:
        return self._run("list_comments", select_comments)

    def initialize_schema(self) -> DatabaseResult:
        """Drop and recreate the artist table. Development reset only."""
        logger.warning(f"Resetting table {self.artist_table}; all artist rows will be removed")
        return self._run("init_schema", lambda connection: recreate_artist_table(connection, self.artist_table))

    def create_artist(self, name: str, listeners: Optional[int], origin: Optional[str]) -> DatabaseResult:
        # Only name and origin are stored; listeners and description stay NULL
        logger.debug(f"Inserting artist {name!r} (listeners={listeners} not persisted)")
        return self._run(
            "insert_artist",
            lambda connection: insert_artist_row(connection, self.artist_table, name, origin),
        )

    def remove_artist(self, name: str) -> DatabaseResult:
        return self._run(
            "delete_artist",
            lambda connection: delete_artist_row(connection, self.artist_table, name),
        )

    def create_comment(self, description: str, author: str) -> DatabaseResult:
        return self._run(
            "add_comment",
            lambda connection: insert_comment_row(connection, description, author),
        )

    def rename(self, old_name: str, new_name: str) -> DatabaseResult:
        """Legacy rename against the demo name table."""
        return self._run(
            "update_name",
            lambda connection: update_name_row(connection, old_name, new_name),
        )

    def count(self, table_name: Optional[str] = None) -> DatabaseResult:
        table = table_name or self.artist_table
        return self._run("count_rows", lambda connection: count_table_rows(connection, table))

    # Sentinel surface

    def test_connection(self) -> bool:
        return self.check_connection().unwrap_or(False)

    def list_artists(self) -> List[Dict[str, Any]]:
        return self.fetch_artists().unwrap_or([])

    def fun_fact_artists(self) -> List[str]:
        return self.fetch_fun_fact_artists().unwrap_or([])

    def list_comments(self) -> List[Dict[str, Any]]:
        return self.fetch_comments().unwrap_or([])

    def init_schema(self) -> bool:
        return self.initialize_schema().unwrap_or(False)

    def insert_artist(self, name: str, listeners: Optional[int], origin: Optional[str]) -> bool:
        return self.create_artist(name, listeners, origin).unwrap_or(False)

    def delete_artist(self, name: str) -> bool:
        return self.remove_artist(name).unwrap_or(False)

    def add_comment(self, description: str, author: str) -> bool:
        return self.create_comment(description, author).unwrap_or(False)

    def update_name(self, old_name: str, new_name: str) -> bool:
        return self.rename(old_name, new_name).unwrap_or(False)

    def count_rows(self, table_name: Optional[str] = None) -> int:
        return self.count(table_name).unwrap_or(COUNT_FAILED)
