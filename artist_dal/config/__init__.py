"""
Configuration management for the artist data access layer.

This module provides centralized configuration handling with support for
environment variables, .env files, and CLI overrides, validated by a
Pydantic schema.
"""

from .env import Env, ConfigError
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Env", "ConfigError", "ConfigSchema", "ConfigLoader"]
