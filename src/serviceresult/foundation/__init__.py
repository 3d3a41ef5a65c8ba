"""Foundation layer: error taxonomy and configuration."""

from .config import ErrorDetailLevel, ServiceResultSettings, clear_settings_cache, configure_logging, get_settings
from .errors import ArgumentError, ServiceResultError, StateMismatchError, UnmappedKindError

__all__ = [
    # Errors
    "ServiceResultError", "ArgumentError", "StateMismatchError", "UnmappedKindError",
    # Config
    "ErrorDetailLevel", "ServiceResultSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
