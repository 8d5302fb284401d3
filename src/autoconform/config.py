"""
Centralized configuration for autoconform.

Uses Pydantic BaseSettings for environment variable integration
and validation.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (AUTOCONFORM_*)
3. .env file
4. Default values

Example:
    from autoconform.config import get_config

    config = get_config()
    print(config.hash_seed)  # From AUTOCONFORM_HASH_SEED or 0

    # Override at runtime
    config = get_config(emit_span_events=False)
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AutoConformConfig(BaseSettings):
    """
    Central configuration for autoconform.

    All settings can be overridden via environment variables
    prefixed with AUTOCONFORM_.

    Example:
        export AUTOCONFORM_HASH_SEED=42
        export AUTOCONFORM_LOG_LEVEL=debug
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTOCONFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hashing
    hash_seed: int = Field(
        default=0,
        description="Initial state of the hash accumulator when no seed is passed",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        description="Level applied to the 'autoconform' logger by configure_logging()",
    )

    # Telemetry
    emit_span_events: bool = Field(
        default=True,
        description="Add span events for mismatches and ordering decisions",
    )


# Global singleton
_config: Optional[AutoConformConfig] = None


def get_config(**overrides) -> AutoConformConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.

    Args:
        **overrides: Override any config values

    Returns:
        AutoConformConfig instance
    """
    global _config

    if overrides or _config is None:
        _config = AutoConformConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


def get_hash_seed() -> int:
    """Get the configured hash seed."""
    return get_config().hash_seed


def configure_logging() -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    pkg_logger = logging.getLogger("autoconform")
    pkg_logger.setLevel(get_config().log_level.upper())
    return pkg_logger
