"""Timestamp parsing for query time ranges.

Accepted inputs:
- Relative: '5m-ago', '1h-ago', '2d-ago' (see ``parse_duration``)
- Absolute: 'yyyy/MM/dd', 'yyyy/MM/dd HH:mm', 'yyyy/MM/dd-HH:mm',
  'yyyy/MM/dd HH:mm:ss', 'yyyy/MM/dd-HH:mm:ss'
- Unix time in seconds or milliseconds: '1355961600', '1355961600000',
  '1355961600.000'

Every form is converted to epoch milliseconds.
"""

from __future__ import annotations

import time

import pendulum

from .duration import parse_duration
from .errors import (
    InvalidAbsoluteDateError,
    InvalidDateError,
    InvalidMillisecondFormatError,
    InvalidTimestampError,
    NegativeTimestampError,
    NullInputError,
    NumberFormatError,
)
from .numbers import parse_long
from .timezones import TimezoneInfo, apply_timezone, get_default_timezone

EMPTY_TIMESTAMP = -1

RELATIVE_SUFFIX = "-ago"

# Layouts in pendulum tokens, keyed by the length of the text they match
DATE_LAYOUT = "YYYY/MM/DD"
MINUTE_LAYOUT = "YYYY/MM/DD HH:mm"
MINUTE_DASH_LAYOUT = "YYYY/MM/DD-HH:mm"
SECOND_LAYOUT = "YYYY/MM/DD HH:mm:ss"
SECOND_DASH_LAYOUT = "YYYY/MM/DD-HH:mm:ss"


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class DateFormatter:
    """Parses and renders absolute dates in one fixed layout.

    Attributes:
        layout: pendulum format string
        timezone: Zone the layout is interpreted in. None means the default
            timezone at the time of the call.
    """

    def __init__(self, layout: str, timezone: TimezoneInfo | None = None) -> None:
        self.layout = layout
        self.timezone = timezone

    @classmethod
    def for_text(cls, text: str) -> DateFormatter:
        """
        Pick the layout for an absolute date by the length of its text.

        Raises:
            InvalidAbsoluteDateError: If no layout has that length
        """
        length = len(text)
        if length == 10:
            return cls(DATE_LAYOUT)
        if length == 16:
            return cls(MINUTE_DASH_LAYOUT if "-" in text else MINUTE_LAYOUT)
        if length == 19:
            return cls(SECOND_DASH_LAYOUT if "-" in text else SECOND_LAYOUT)
        raise InvalidAbsoluteDateError(f"Invalid absolute date: {text}")

    def _zone(self) -> TimezoneInfo:
        return self.timezone if self.timezone is not None else get_default_timezone()

    def parse(self, text: str) -> int:
        """
        Parse text in this layout into epoch milliseconds.

        Raises:
            InvalidDateError: If the text does not match the layout or names
                an impossible calendar date
        """
        try:
            dt = pendulum.from_format(text, self.layout, tz=self._zone())
        except ValueError as e:
            raise InvalidDateError(f"Invalid date: {text}. {e}") from e
        return dt.int_timestamp * 1000

    def format(self, epoch_ms: int) -> str:
        """Render epoch milliseconds in this layout."""
        return pendulum.from_timestamp(epoch_ms // 1000, tz=self._zone()).format(self.layout)

    def __repr__(self) -> str:
        return f"DateFormatter(layout={self.layout!r}, timezone={self.timezone!r})"


def is_relative_date(value: str) -> bool:
    """
    Check whether a time is given relative to now, e.g. '1d-ago'.

    The part before '-ago' is not validated, so this can return True for text
    that ``parse_timestamp`` later rejects.

    Raises:
        NullInputError: If value is None
    """
    if value is None:
        raise NullInputError("Timestamp cannot be None")
    return value.lower().endswith(RELATIVE_SUFFIX)


def parse_timestamp(text: str, tz: str | None = None) -> int:
    """
    Parse a relative, absolute or numeric time into epoch milliseconds.

    Args:
        text: Time to parse
        tz: Timezone name for absolute dates. None or empty uses the default
            timezone (see ``get_default_timezone``).

    Returns:
        Epoch milliseconds, or ``EMPTY_TIMESTAMP`` (-1) if text is empty

    Raises:
        NullInputError: If text is None
        InvalidDurationError: If a relative time has a bad duration
        InvalidAbsoluteDateError: If an absolute date is malformed
        InvalidTimestampError: If a numeric timestamp is malformed or negative
        UnknownTimezoneError: If tz is not a known timezone
    """
    if text is None:
        raise NullInputError("Timestamp cannot be None")
    if not text:
        return EMPTY_TIMESTAMP

    if is_relative_date(text):
        interval = parse_duration(text[: -len(RELATIVE_SUFFIX)])
        return current_millis() - interval

    if "/" in text or ":" in text:
        formatter = DateFormatter.for_text(text)
        apply_timezone(formatter, tz)
        return formatter.parse(text)

    return _parse_numeric_timestamp(text)


def _parse_numeric_timestamp(text: str) -> int:
    try:
        if "." in text:
            if len(text) != 14 or text[10] != ".":
                raise InvalidMillisecondFormatError(
                    f"Invalid time: {text}. Millisecond timestamps must be in the format "
                    "<seconds>.<ms> where the milliseconds are limited to 3 digits"
                )
            value = parse_long(text.replace(".", ""))
        else:
            value = parse_long(text)
    except NumberFormatError as e:
        raise InvalidTimestampError(f"Invalid time: {text}. {e}") from e

    if value < 0:
        raise NegativeTimestampError(f"Invalid time: {text}. Negative timestamps are not supported.")

    # Ten characters or fewer means seconds. Holds until Unix seconds need
    # eleven digits in November 2286.
    if len(text) <= 10:
        value *= 1000
    return value
