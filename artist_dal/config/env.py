"""
Environment configuration management module.

This module provides a centralized Environment manager class that loads,
validates, and serves all configuration values for the application.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import DEFAULT_CONNECTION_TIMEOUT, DEFAULT_DB_HOST, DEFAULT_DB_PORT
from ..database.config import create_database_config
from ..models import DatabaseConfig
from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """
    Immutable configuration container for environment variables.

    Loaded once at process start and passed to whatever needs it; later
    changes to the environment are not picked up.
    """

    DB_USER: str
    DB_NAME: str
    DB_PASSWORD: Optional[str] = None
    DB_HOST: str = DEFAULT_DB_HOST
    DB_PORT: int = DEFAULT_DB_PORT
    DB_CONNECT_TIMEOUT: int = DEFAULT_CONNECTION_TIMEOUT
    TEST_MODE: bool = False

    @staticmethod
    def load(
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, str]] = None,
    ) -> "Env":
        """
        Load configuration from all sources with precedence handling.

        Args:
            cli_args: Parsed CLI arguments
            cli_overrides: Optional mapping of overrides keyed by env var name

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        logger.debug("Environment configuration loaded successfully")
        return Env.from_schema(config)

    @classmethod
    def from_schema(cls, config: ConfigSchema) -> "Env":
        """Create Env instance from a validated configuration schema."""
        return cls(
            DB_USER=config.db_user,
            DB_NAME=config.db_name,
            DB_PASSWORD=config.db_password,
            DB_HOST=config.db_host,
            DB_PORT=config.db_port,
            DB_CONNECT_TIMEOUT=config.db_connect_timeout,
            TEST_MODE=config.test_mode,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Args:
            mapping: Dictionary of configuration values keyed by env var name

        Returns:
            Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        try:
            config = ConfigLoader.from_mapping(mapping)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        return cls.from_schema(config)

    def database_config(self) -> DatabaseConfig:
        """
        Build the database configuration handed to the data access layer.

        Raises:
            ConfigError: If the values do not form a usable configuration
        """
        config = create_database_config(
            host=self.DB_HOST,
            dbname=self.DB_NAME,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            port=self.DB_PORT,
            connection_timeout=self.DB_CONNECT_TIMEOUT,
        )
        if config is None:
            raise ConfigError("Invalid database configuration")
        return config

    def to_dict(self) -> dict:
        """Convert environment to dictionary representation."""
        return {
            "DB_USER": self.DB_USER,
            "DB_PASSWORD": self.DB_PASSWORD,
            "DB_HOST": self.DB_HOST,
            "DB_PORT": self.DB_PORT,
            "DB_NAME": self.DB_NAME,
            "DB_CONNECT_TIMEOUT": self.DB_CONNECT_TIMEOUT,
            "DAL_TEST_MODE": self.TEST_MODE,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides the password)."""
        masked = self.to_dict()
        masked["DB_PASSWORD"] = "***" if self.DB_PASSWORD else None
        return masked
