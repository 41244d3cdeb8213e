"""Configuration management for tsdbtime."""

from .logging import configure_logging
from .settings import TSDBTimeSettings, get_settings, reload_settings
from .validation import validate_duration, validate_log_level, validate_timezone_name

__all__ = [
    "TSDBTimeSettings",
    "configure_logging",
    "get_settings",
    "reload_settings",
    "validate_duration",
    "validate_log_level",
    "validate_timezone_name",
]
