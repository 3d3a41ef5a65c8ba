"""Environment-based configuration using pydantic-settings.

Controls how outcomes are rendered into HTTP response descriptors and how
chatty the package loggers are. Supports .env files and nested configuration.

Example:
    >>> from serviceresult.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.http.error_detail_level
    'messages'
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # SERVICERESULT_HTTP_ERROR_DETAIL_LEVEL=detailed
    # SERVICERESULT_HTTP_INCLUDE_EXCEPTION_DETAILS=true
    # SERVICERESULT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from enum import StrEnum
from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorDetailLevel(StrEnum):
    """How much of a failure outcome ends up in an HTTP error body."""

    GENERIC = "generic"  # only the configured default message
    MESSAGES = "messages"  # the outcome's error list
    DETAILED = "detailed"  # messages plus optional fault details


class HttpSettings(BaseSettings):
    """HTTP mapping configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICERESULT_HTTP_",
        extra="ignore",
    )

    default_error_message: str = Field(
        default="An error occurred while processing the request.",
        min_length=1,
        description="Body message used at the generic detail level",
    )
    error_detail_level: ErrorDetailLevel = ErrorDetailLevel.MESSAGES
    include_exception_details: bool = Field(
        default=False,
        description="Attach captured fault details at the detailed level",
    )
    default_location: str | None = Field(
        default=None,
        description="Location header for Created responses when none is passed",
    )
    no_content_for_void: bool = Field(
        default=True,
        description="Answer 204 instead of 200 for Ok outcomes without data",
    )

    @field_validator("error_detail_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        """Accept any casing from the environment."""
        return v.lower() if isinstance(v, str) else v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICERESULT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @computed_field
    @property
    def numeric_level(self) -> int:
        """Level as a stdlib logging constant."""
        return logging.getLevelNamesMapping()[self.level]


class ServiceResultSettings(BaseSettings):
    """Root settings for serviceresult.

    Loads configuration from environment variables with SERVICERESULT_ prefix.

    Example environment variables:
        SERVICERESULT_DEBUG=true
        SERVICERESULT_HTTP_DEFAULT_LOCATION=/items
        SERVICERESULT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SERVICERESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with SERVICERESULT_HTTP_, SERVICERESULT_LOG_)
    http: HttpSettings = Field(default_factory=HttpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ServiceResultSettings:
    """Get the global settings instance (cached)."""
    return ServiceResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from environment.
    """
    get_settings.cache_clear()


def configure_logging(settings: ServiceResultSettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it.

    Debug mode forces DEBUG regardless of the configured level. Handlers are
    left to the host application.
    """
    settings = settings or get_settings()
    log = logging.getLogger("serviceresult")
    log.setLevel(logging.DEBUG if settings.debug else settings.logging.numeric_level)
    return log
