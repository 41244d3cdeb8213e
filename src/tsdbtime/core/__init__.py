"""Timestamp, duration and timezone parsing."""

from .duration import DurationSpec, DurationUnit, parse_duration, parse_duration_spec
from .errors import (
    InvalidAbsoluteDateError,
    InvalidDateError,
    InvalidDurationError,
    InvalidMillisecondFormatError,
    InvalidTimestampError,
    MalformedNumberError,
    NegativeTimestampError,
    NullInputError,
    NumberFormatError,
    NumberOverflowError,
    TimeParseError,
    UnknownTimezoneError,
    ValueTooLongError,
)
from .numbers import LONG_MAX, LONG_MIN, parse_long
from .timestamps import (
    EMPTY_TIMESTAMP,
    DateFormatter,
    current_millis,
    is_relative_date,
    parse_timestamp,
)
from .timezones import (
    TIMEZONES,
    TimezoneTable,
    apply_timezone,
    get_default_timezone,
    reset_default_timezone,
    resolve_timezone,
    set_default_timezone,
    use_timezone,
)

__all__ = [
    "EMPTY_TIMESTAMP",
    "LONG_MAX",
    "LONG_MIN",
    "TIMEZONES",
    "DateFormatter",
    "DurationSpec",
    "DurationUnit",
    "InvalidAbsoluteDateError",
    "InvalidDateError",
    "InvalidDurationError",
    "InvalidMillisecondFormatError",
    "InvalidTimestampError",
    "MalformedNumberError",
    "NegativeTimestampError",
    "NullInputError",
    "NumberFormatError",
    "NumberOverflowError",
    "TimeParseError",
    "TimezoneTable",
    "UnknownTimezoneError",
    "ValueTooLongError",
    "apply_timezone",
    "current_millis",
    "get_default_timezone",
    "is_relative_date",
    "parse_duration",
    "parse_duration_spec",
    "parse_long",
    "parse_timestamp",
    "reset_default_timezone",
    "resolve_timezone",
    "set_default_timezone",
    "use_timezone",
]
