"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DOTENV_PATH = ".env"


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        dotenv_path: Optional[str] = DOTENV_PATH,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env file (never overrides variables already in the environment)
        3. OS environment variables
        4. CLI arguments / overrides (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Overrides keyed by environment variable name
            dotenv_path: .env file to read, or None to skip it

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load from .env file if present
        if dotenv_path:
            _load_from_dotenv_file(dotenv_path)

        # Step 2: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            env_var = _field_extra(field_info, "env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    # Empty strings fall back to the default
                    stripped = env_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped

        # Step 3: Apply CLI arguments
        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _field_extra(field_info, "cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    _apply_override(config_dict, field_name, getattr(cli_args, cli_arg))

        # Step 4: Apply overrides keyed by env var name
        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                env_var = _field_extra(field_info, "env_var")
                if env_var in cli_overrides:
                    _apply_override(config_dict, field_name, cli_overrides[env_var])

        # Step 5: Create and validate the configuration
        return _validate(schema, config_dict)

    @staticmethod
    def from_mapping(
        mapping: Mapping[str, Any],
        schema: type[ConfigSchema] = ConfigSchema,
    ) -> ConfigSchema:
        """
        Validate configuration given as a mapping keyed by env var name.

        Neither the OS environment nor a .env file is consulted. Empty
        strings count as unset, as they do for environment variables.

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}
        for field_name, field_info in schema.model_fields.items():
            env_var = _field_extra(field_info, "env_var")
            value = mapping.get(env_var) if env_var else None
            if isinstance(value, str):
                value = value.strip() or None
            if value is not None:
                config_dict[field_name] = value

        return _validate(schema, config_dict)

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Run artist data access operations against the database",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            prog="artist-dal",
            description=description,
            epilog="""
Examples:
  artist-dal test-connection
  artist-dal --test-mode init-schema
  artist-dal insert-artist "Radiohead" --origin "Abingdon" --listeners 1000
  artist-dal count --table comments
            """,
        )

        # CLI-only arguments that don't map to config
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        # Schema-based arguments
        for field_name, field_info in schema.model_fields.items():
            cli_arg = _field_extra(field_info, "cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {_field_extra(field_info, 'env_var') or field_name.upper()} env var",
                "default": None,  # Schema defaults are applied by the loader
            }

            field_type = field_info.annotation

            # Unwrap Optional[X]
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float
            elif field_type == bool:
                kwargs["action"] = "store_true"

            parser.add_argument(arg_name, **kwargs)

        return parser


def _validate(schema: type[ConfigSchema], config_dict: Dict[str, Any]) -> ConfigSchema:
    try:
        config = schema(**config_dict)
        logger.debug("Configuration loaded and validated successfully")
        return config
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field = error["loc"][0] if error["loc"] else "config"
            msg = error["msg"]
            field_info = schema.model_fields.get(field)
            env_var = _field_extra(field_info, "env_var") if field_info else None
            errors.append(f"{env_var or str(field).upper()}: {msg}")

        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ValueError(error_msg) from e


def _field_extra(field_info, key: str) -> Optional[Any]:
    """Read a key from a field's json_schema_extra metadata."""
    if field_info is None or not field_info.json_schema_extra:
        return None
    return field_info.json_schema_extra.get(key)


def _apply_override(config_dict: Dict[str, Any], field_name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, str):
        stripped = value.strip()
        # An explicit empty string clears the value
        config_dict[field_name] = stripped if stripped else None
    else:
        config_dict[field_name] = value


def _load_from_dotenv_file(path: str) -> None:
    """Load values from a .env file if it exists."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")
