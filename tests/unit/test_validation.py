"""Tests for configuration validation functions."""

import pytest

from tsdbtime.config.validation import (
    validate_duration,
    validate_log_level,
    validate_timezone_name,
)


class TestValidateTimezoneName:
    """Tests for timezone name validation."""

    @pytest.mark.parametrize("name", ["UTC", "America/New_York", "Europe/Paris", "Asia/Tokyo"])
    def test_known_zones(self, name: str) -> None:
        """Test validation of known timezones."""
        assert validate_timezone_name(name) is True

    @pytest.mark.parametrize("name", ["", "Not/AZone", "america/new_york", "EST5EDT/Foo"])
    def test_unknown_zones(self, name: str) -> None:
        """Test validation of unknown timezones."""
        assert validate_timezone_name(name) is False


class TestValidateDuration:
    """Tests for duration validation."""

    @pytest.mark.parametrize("duration", ["1h", "30m", "250ms", "2w", "1y"])
    def test_valid(self, duration: str) -> None:
        """Test validation of valid durations."""
        assert validate_duration(duration) is True

    @pytest.mark.parametrize("duration", ["", "0m", "-1h", "10x", "h"])
    def test_invalid(self, duration: str) -> None:
        """Test validation of invalid durations."""
        assert validate_duration(duration) is False


class TestValidateLogLevel:
    """Tests for log level validation."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "debug", "Warning"])
    def test_valid(self, level: str) -> None:
        """Test validation of known log levels in any case."""
        assert validate_log_level(level) is True

    @pytest.mark.parametrize("level", ["", "VERBOSE", "CRITICAL", "WARN", " INFO"])
    def test_invalid(self, level: str) -> None:
        """Test validation of unknown log levels."""
        assert validate_log_level(level) is False
