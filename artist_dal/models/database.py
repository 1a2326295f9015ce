#!/usr/bin/env python3
"""
Database Models

This module contains data structures related to database configuration
and operation results.
"""

from typing import Any, Optional, NamedTuple

from psycopg.conninfo import make_conninfo


class DatabaseConfig(NamedTuple):
    """
    Database configuration settings.

    Attributes:
        host: Database server hostname
        port: Database server port
        dbname: Name of the database (service) to connect to
        user: Database user
        password: Password for the database user
        connection_timeout: Timeout for establishing a connection (seconds)
    """

    host: str
    port: int
    dbname: str
    user: str
    password: Optional[str] = None
    connection_timeout: int = 30  # seconds

    def conninfo(self) -> str:
        """Render the settings as a libpq connection string."""
        params = {
            "host": self.host,
            "port": self.port,
            "dbname": self.dbname,
            "user": self.user,
            "connect_timeout": self.connection_timeout,
        }
        if self.password:
            params["password"] = self.password
        return make_conninfo("", **params)

    def describe(self) -> str:
        """Connection target without credentials, safe for log lines."""
        return f"{self.user}@{self.host}:{self.port}/{self.dbname}"


class DatabaseResult(NamedTuple):
    """
    Result of a database operation.

    A failed result keeps the reason instead of raising, so the caller
    decides whether to surface it or fall back to a default value.

    Attributes:
        success: Whether the operation succeeded
        value: Data produced by the operation (rows, count, flag)
        rows_affected: Number of rows affected by a write
        error: Error message if the operation failed
        error_type: "permanent", "transient" or "systemic" on failure
        stage: "connect" or "execute", where the failure happened
    """

    success: bool
    value: Any = None
    rows_affected: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None
    stage: Optional[str] = None

    def unwrap_or(self, default: Any) -> Any:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.success else default
