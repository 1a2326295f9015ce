"""
Database utilities module.

This module provides utility functions for database operations including
error classification and table name validation.
"""

import re
from typing import Optional

from ..constants import COUNTABLE_TABLES

# SQLSTATE classes / codes reported by PostgreSQL
_SYSTEMIC_SQLSTATES = {
    "28000",  # invalid_authorization_specification
    "28P01",  # invalid_password
    "3D000",  # invalid_catalog_name
    "42501",  # insufficient_privilege
}
_PERMANENT_SQLSTATE_CLASSES = {
    "22",  # data exception
    "23",  # integrity constraint violation
    "42",  # syntax error or access rule violation
}


def classify_database_error(exception: Exception) -> str:
    """
    Classify database errors into permanent, transient, or systemic categories.

    The SQLSTATE carried by psycopg errors is consulted first; errors without
    one (connection failures, wrapped errors) fall back to message matching.

    Args:
        exception: Database exception to classify

    Returns:
        Error type: "permanent", "transient", or "systemic"
    """
    sqlstate = _find_sqlstate(exception)
    if sqlstate:
        if sqlstate in _SYSTEMIC_SQLSTATES:
            return "systemic"
        if sqlstate[:2] in _PERMANENT_SQLSTATE_CLASSES:
            return "permanent"
        return "transient"

    error_str = str(exception).lower()

    # Permanent errors - the same statement will fail again
    permanent_indicators = [
        "constraint violation",
        "foreign key constraint",
        "check constraint",
        "not null violation",
        "duplicate key",
        "does not exist",  # Table or column doesn't exist
        "syntax error",
    ]

    # Systemic errors - configuration or credentials are wrong
    systemic_patterns = [
        r"authentication failed",
        r"permission denied",
        r"role (\S+ )?does not exist",
        r"database (\S+ )?does not exist",
        r"ssl required",
    ]

    # Systemic messages also contain "does not exist", so check them first
    for pattern in systemic_patterns:
        if re.search(pattern, error_str):
            return "systemic"

    for indicator in permanent_indicators:
        if indicator in error_str:
            return "permanent"

    # Default to transient
    # Includes: connection refused, timeouts, dropped connections, deadlocks, etc.
    return "transient"


def _find_sqlstate(exception: Optional[BaseException]) -> Optional[str]:
    """Return the first SQLSTATE found on the exception or its causes."""
    seen = set()
    while exception is not None and id(exception) not in seen:
        seen.add(id(exception))
        sqlstate = getattr(exception, "sqlstate", None)
        if isinstance(sqlstate, str) and sqlstate:
            return sqlstate
        exception = exception.__cause__
    return None


def validate_table_name(table_name: str) -> bool:
    """
    Check that a table name is one the data access layer knows about.

    Args:
        table_name: Table name to validate

    Returns:
        True if the table may be queried by name, False otherwise
    """
    return isinstance(table_name, str) and table_name.lower() in COUNTABLE_TABLES
