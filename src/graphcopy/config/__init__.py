"""Configuration module using Pydantic Settings.

Usage:
    from graphcopy.config import CopySettings

    settings = CopySettings(constructor_probing=False)
"""

from graphcopy.config.settings import CopySettings, get_settings, reset_settings

__all__ = [
    "CopySettings",
    "get_settings",
    "reset_settings",
]
