"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    ErrorDetailLevel,
    HttpSettings,
    LoggingSettings,
    ServiceResultSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "ErrorDetailLevel",
    "HttpSettings",
    "LoggingSettings",
    "ServiceResultSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
