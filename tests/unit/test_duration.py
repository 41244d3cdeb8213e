"""Tests for human-readable duration parsing."""

import pytest

from tsdbtime.core import (
    LONG_MAX,
    DurationSpec,
    DurationUnit,
    InvalidDurationError,
    MalformedNumberError,
    NullInputError,
    ValueTooLongError,
    parse_duration,
    parse_duration_spec,
)


class TestParseDuration:
    """Test suite for parse_duration function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("5ms", 5),
            ("30s", 30_000),
            ("10m", 600_000),
            ("3h", 10_800_000),
            ("14d", 1_209_600_000),
            ("1w", 604_800_000),
            ("1n", 2_592_000_000),
            ("1y", 31_536_000_000),
        ],
    )
    def test_units(self, text: str, expected: int) -> None:
        """Test each supported suffix."""
        assert parse_duration(text) == expected

    def test_suffix_case_insensitive(self) -> None:
        """Test that the final character is matched case-insensitively."""
        assert parse_duration("10M") == 600_000
        assert parse_duration("2S") == 2_000
        assert parse_duration("1Y") == 31_536_000_000

    def test_milliseconds_need_lowercase_m(self) -> None:
        """Test that only a lowercase 'm' before 's' selects milliseconds."""
        assert parse_duration("5mS") == 5
        assert parse_duration("5MS") == 5_000

    def test_months_and_years_are_fixed_length(self) -> None:
        """Test month and year approximations."""
        assert parse_duration("12n") == 360 * 24 * 3600 * 1000
        assert parse_duration("4y") == 4 * 365 * 24 * 3600 * 1000

    def test_deterministic(self) -> None:
        """Test repeated calls give the same result."""
        assert parse_duration("90m") == parse_duration("90m") == 5_400_000

    def test_zero(self) -> None:
        """Test zero magnitude."""
        with pytest.raises(InvalidDurationError, match="Zero or negative duration"):
            parse_duration("0m")

    def test_negative(self) -> None:
        """Test that a sign is not part of the magnitude."""
        with pytest.raises(InvalidDurationError, match="Invalid duration \\(number\\)"):
            parse_duration("-5m")

    @pytest.mark.parametrize("text", ["10x", "10", "5q"])
    def test_unknown_suffix(self, text: str) -> None:
        """Test unrecognized suffixes."""
        with pytest.raises(InvalidDurationError, match="Invalid duration \\(suffix\\)"):
            parse_duration(text)

    @pytest.mark.parametrize("text", ["", "m", "ms", "h5"])
    def test_missing_magnitude(self, text: str) -> None:
        """Test durations without leading digits."""
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration(text)

        assert isinstance(exc_info.value.__cause__, MalformedNumberError)

    def test_magnitude_too_long(self) -> None:
        """Test magnitude with more digits than a 64-bit value."""
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("1" * 20 + "m")

        assert isinstance(exc_info.value.__cause__, ValueTooLongError)

    def test_overflow(self) -> None:
        """Test products beyond the signed 64-bit range."""
        with pytest.raises(InvalidDurationError, match="Duration must be <"):
            parse_duration(f"{LONG_MAX}s")

        with pytest.raises(InvalidDurationError):
            parse_duration("300000000y")

    def test_largest_milliseconds(self) -> None:
        """Test that milliseconds are returned without multiplication."""
        assert parse_duration(f"{LONG_MAX}ms") == LONG_MAX

    def test_none(self) -> None:
        """Test None input."""
        with pytest.raises(NullInputError):
            parse_duration(None)  # type: ignore[arg-type]

    def test_message_contains_input(self) -> None:
        """Test that the offending text is reported."""
        with pytest.raises(InvalidDurationError, match="42q"):
            parse_duration("42q")


class TestParseDurationSpec:
    """Test suite for parse_duration_spec function."""

    def test_spec_fields(self) -> None:
        """Test magnitude and unit extraction."""
        spec = parse_duration_spec("250ms")

        assert spec == DurationSpec(250, DurationUnit.MILLISECONDS)
        assert spec.to_millis() == 250

    def test_spec_str(self) -> None:
        """Test canonical rendering."""
        assert str(parse_duration_spec("3H")) == "3h"
        assert str(parse_duration_spec("7ms")) == "7ms"

    def test_middle_characters_ignored(self) -> None:
        """Test that only the last character selects the unit."""
        assert parse_duration_spec("10xm").unit is DurationUnit.MINUTES

    def test_unit_millis(self) -> None:
        """Test unit lengths."""
        assert DurationUnit.MILLISECONDS.millis == 1
        assert DurationUnit.SECONDS.millis == 1000
        assert DurationUnit.WEEKS.millis == 7 * DurationUnit.DAYS.millis
        assert DurationUnit.MONTHS.millis == 30 * DurationUnit.DAYS.millis
        assert DurationUnit.YEARS.millis == 365 * DurationUnit.DAYS.millis
