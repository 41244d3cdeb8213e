"""Configuration settings for tsdbtime using Pydantic Settings."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validation import validate_duration, validate_timezone_name


class TSDBTimeSettings(BaseSettings):
    """Configuration settings for timestamp parsing."""

    model_config = SettingsConfigDict(
        env_prefix="TSDBTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Parsing Defaults ===
    default_timezone: str | None = Field(
        default=None,
        description="Timezone for absolute dates given without one (host local time if unset)",
    )

    default_query_range: str = Field(
        default="1h",
        description="Range covered by a query time range with no start time",
    )

    # === Logging Configuration ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the tsdbtime logger",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("default_timezone")
    @classmethod
    def validate_default_timezone(cls, v: str | None) -> str | None:
        """Reject timezone names missing from the timezone table."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not validate_timezone_name(v):
            raise ValueError(f"Invalid timezone name: {v}")
        return v

    @field_validator("default_query_range")
    @classmethod
    def validate_default_query_range(cls, v: str) -> str:
        """Require a duration parse_duration accepts."""
        v = v.strip()
        if not validate_duration(v):
            raise ValueError(f"Invalid duration: {v}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_file")
    @classmethod
    def expand_path(cls, v: Path | None) -> Path | None:
        """Expand user home directory in paths."""
        if v is None:
            return None
        return Path(os.path.expanduser(str(v)))


# Global settings instance
_settings: TSDBTimeSettings | None = None


def get_settings() -> TSDBTimeSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = TSDBTimeSettings()  # type: ignore
    return _settings


def reload_settings() -> TSDBTimeSettings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = TSDBTimeSettings()  # type: ignore
    return _settings
