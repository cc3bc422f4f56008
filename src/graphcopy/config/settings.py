"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copier.

Usage:
    from graphcopy.config import CopySettings, get_settings

    # Load from environment variables (GRAPHCOPY_*)
    settings = get_settings()

    # Or override with explicit values
    settings = CopySettings(constructor_probing=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for graph copies.

    Attributes:
        constructor_probing: Allow calling a record's initializer with
            placeholder arguments when raw allocation and a zero-argument
            call both fail.
        log_stats: Log a per-copy summary of visited nodes at INFO level.

    Environment Variables:
        GRAPHCOPY_CONSTRUCTOR_PROBING
        GRAPHCOPY_LOG_STATS
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPHCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    constructor_probing: bool = True
    log_stats: bool = False


_settings: CopySettings | None = None


def get_settings() -> CopySettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The shared CopySettings instance.
    """
    global _settings
    if _settings is None:
        _settings = CopySettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access reloads the environment."""
    global _settings
    _settings = None
