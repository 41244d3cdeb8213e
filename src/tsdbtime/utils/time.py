"""Query time range helpers built on the timestamp parser."""

import pendulum

from tsdbtime.config import get_settings
from tsdbtime.core import (
    DateFormatter,
    apply_timezone,
    current_millis,
    get_default_timezone,
    parse_duration,
    parse_timestamp,
    resolve_timezone,
)
from tsdbtime.core.timestamps import SECOND_LAYOUT

_DAY = 86_400
_YEAR = 365 * _DAY

# (exclusive upper bound, unit, unit length) in seconds; each bound is at
# least one of the next unit
_AGE_BUCKETS = (
    (60, "second", 1),
    (3600, "minute", 60),
    (_DAY, "hour", 3600),
    (7 * _DAY, "day", _DAY),
    (30 * _DAY, "week", 7 * _DAY),
    (_YEAR, "month", 30 * _DAY),
)


def calculate_time_range(
    start_time: str | None = None,
    end_time: str | None = None,
    tz: str | None = None,
    default_range: str | None = None,
) -> tuple[int, int]:
    """
    Calculate start and end timestamps for a query.

    If end_time is None or empty, defaults to now.
    If start_time is None or empty, defaults to default_range before the end.

    Args:
        start_time: Start time in any format parse_timestamp accepts
        end_time: End time in any format parse_timestamp accepts
        tz: Timezone name for absolute dates
        default_range: Duration covered when start_time is missing
            (defaults to the ``default_query_range`` setting)

    Returns:
        Tuple of (start_timestamp_ms, end_timestamp_ms)

    Raises:
        TimeParseError: If parsing fails
        ValueError: If start_time is after end_time
    """
    if end_time:
        end_ms = parse_timestamp(end_time, tz)
    else:
        end_ms = current_millis()

    if start_time:
        start_ms = parse_timestamp(start_time, tz)
    else:
        start_ms = end_ms - parse_duration(default_range or get_settings().default_query_range)

    if start_ms > end_ms:
        raise ValueError(
            f"Start time ({format_timestamp(start_ms, tz)}) cannot be after "
            f"end time ({format_timestamp(end_ms, tz)})"
        )

    return start_ms, end_ms


def to_datetime(timestamp_ms: int, tz: str | None = None) -> pendulum.DateTime:
    """
    Convert epoch milliseconds to a timezone-aware datetime.

    Args:
        timestamp_ms: Epoch milliseconds
        tz: Timezone name (defaults to the default timezone)

    Returns:
        pendulum DateTime with millisecond precision
    """
    zone = resolve_timezone(tz) if tz else get_default_timezone()
    seconds, millis = divmod(timestamp_ms, 1000)
    return pendulum.from_timestamp(seconds, tz=zone).replace(microsecond=millis * 1000)


def format_timestamp(timestamp_ms: int, tz: str | None = None, layout: str = SECOND_LAYOUT) -> str:
    """
    Format epoch milliseconds in a layout parse_timestamp accepts.

    Args:
        timestamp_ms: Epoch milliseconds
        tz: Timezone name (defaults to the default timezone)
        layout: pendulum format string

    Returns:
        Formatted timestamp string
    """
    formatter = DateFormatter(layout)
    apply_timezone(formatter, tz)
    return formatter.format(timestamp_ms)


def time_ago(timestamp_ms: int) -> str:
    """
    Convert timestamp to human-readable 'time ago' format.

    Examples:
    - "2 minutes ago"
    - "1 hour ago"
    - "3 days ago"
    - "4 weeks ago" (up to 29 days)
    - "12 months ago" (months are 30 days, years 365)

    Args:
        timestamp_ms: Epoch milliseconds

    Returns:
        Human-readable time ago string
    """
    seconds = max(0, (current_millis() - timestamp_ms) // 1000)

    for limit, unit, unit_seconds in _AGE_BUCKETS:
        if seconds < limit:
            return _plural(seconds // unit_seconds, unit)
    return _plural(seconds // _YEAR, "year")


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''} ago"
