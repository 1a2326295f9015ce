"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_CONNECTION_TIMEOUT, DEFAULT_DB_HOST, DEFAULT_DB_PORT


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables (or a .env file) or
    CLI arguments.
    """

    # Database credentials
    db_user: str = Field(
        ...,
        description="Database user",
        json_schema_extra={
            "env_var": "DB_USER",
            "cli_arg": "db_user",
        }
    )

    db_password: Optional[str] = Field(
        None,
        description="Password for the database user",
        json_schema_extra={
            "env_var": "DB_PASSWORD",
            "cli_arg": "db_password",
            "sensitive": True,
        }
    )

    # Database location
    db_host: str = Field(
        DEFAULT_DB_HOST,
        description="Database server hostname",
        json_schema_extra={
            "env_var": "DB_HOST",
            "cli_arg": "db_host",
        }
    )

    db_port: int = Field(
        DEFAULT_DB_PORT,
        ge=1,
        le=65535,
        description="Database server port",
        json_schema_extra={
            "env_var": "DB_PORT",
            "cli_arg": "db_port",
        }
    )

    db_name: str = Field(
        ...,
        description="Database (service) name",
        json_schema_extra={
            "env_var": "DB_NAME",
            "cli_arg": "db_name",
        }
    )

    db_connect_timeout: int = Field(
        DEFAULT_CONNECTION_TIMEOUT,
        ge=1,
        description="Seconds to wait for a database connection",
        json_schema_extra={
            "env_var": "DB_CONNECT_TIMEOUT",
            "cli_arg": "connect_timeout",
        }
    )

    test_mode: bool = Field(
        False,
        description="Use the test_artists table instead of the artists table",
        json_schema_extra={
            "env_var": "DAL_TEST_MODE",
            "cli_arg": "test_mode",
        }
    )

    @field_validator('test_mode', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.strip().lower()
            if v_lower in ('1', 'true', 'yes', 'on'):
                return True
            elif v_lower in ('0', 'false', 'no', 'off'):
                return False
            else:
                raise ValueError(f"Invalid boolean value: {v}")
        return bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
