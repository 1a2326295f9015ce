"""
Database configuration management module.

This module handles database configuration creation and URL validation
for database connections.
"""

import logging
from typing import Optional
from urllib.parse import unquote, urlparse

from ..models import DatabaseConfig
from ..constants import (
    DEFAULT_DB_PORT,
    DEFAULT_CONNECTION_TIMEOUT,
)

logger = logging.getLogger(__name__)


def validate_database_url(url: str) -> bool:
    """
    Validate that a database URL has the correct format.

    Args:
        url: Database URL to validate

    Returns:
        True if URL format is valid, False otherwise
    """
    if not url:
        return False

    try:
        parsed = urlparse(url)

        # Check for required components
        if not parsed.scheme:
            logger.error("Database URL missing scheme (e.g., postgresql://)")
            return False

        if parsed.scheme not in ["postgresql", "postgres"]:
            logger.error(
                f"Database URL scheme '{parsed.scheme}' not supported. Use 'postgresql://' or 'postgres://'"
            )
            return False

        if not parsed.hostname:
            logger.error("Database URL missing hostname")
            return False

        if not parsed.username:
            logger.error("Database URL missing username")
            return False

        if not parsed.path or parsed.path == "/":
            logger.error("Database URL missing database name")
            return False

        return True

    except Exception as e:
        logger.error(f"Invalid database URL format: {str(e)}")
        return False


def create_database_config(
    host: str,
    dbname: str,
    user: str,
    password: Optional[str] = None,
    port: Optional[int] = None,
    connection_timeout: Optional[int] = None,
) -> Optional[DatabaseConfig]:
    """
    Create a database configuration with validation.

    Args:
        host: Database server hostname
        dbname: Database (service) name
        user: Database user
        password: Password for the user (optional for trust/peer auth)
        port: Server port (default: DEFAULT_DB_PORT)
        connection_timeout: Connection timeout in seconds (default: DEFAULT_CONNECTION_TIMEOUT)

    Returns:
        DatabaseConfig object or None if validation fails
    """
    final_port = port if port is not None else DEFAULT_DB_PORT
    final_connection_timeout = (
        connection_timeout
        if connection_timeout is not None
        else DEFAULT_CONNECTION_TIMEOUT
    )

    if not host:
        logger.error("Database host is required")
        return None

    if not dbname:
        logger.error("Database name is required")
        return None

    if not user:
        logger.error("Database user is required")
        return None

    if not 1 <= final_port <= 65535:
        logger.error(f"Database port must be between 1 and 65535, got {final_port}")
        return None

    if final_connection_timeout < 1:
        logger.error(
            f"Connection timeout must be at least 1 second, got {final_connection_timeout}"
        )
        return None

    return DatabaseConfig(
        host=host,
        port=final_port,
        dbname=dbname,
        user=user,
        password=password or None,
        connection_timeout=final_connection_timeout,
    )


def database_config_from_url(
    url: str, connection_timeout: Optional[int] = None
) -> Optional[DatabaseConfig]:
    """
    Build a database configuration from a postgresql:// URL.

    Args:
        url: Database connection URL
        connection_timeout: Connection timeout in seconds

    Returns:
        DatabaseConfig object or None if the URL is invalid
    """
    if not validate_database_url(url):
        return None

    parsed = urlparse(url)
    try:
        port = parsed.port
    except ValueError as e:
        logger.error(f"Invalid database URL port: {str(e)}")
        return None

    return create_database_config(
        host=parsed.hostname,
        dbname=unquote(parsed.path.lstrip("/")),
        user=unquote(parsed.username),
        password=unquote(parsed.password) if parsed.password else None,
        port=port,
        connection_timeout=connection_timeout,
    )
