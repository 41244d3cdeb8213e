"""Time utilities for building query time ranges."""

from .time import calculate_time_range, format_timestamp, time_ago, to_datetime

__all__ = [
    "calculate_time_range",
    "format_timestamp",
    "time_ago",
    "to_datetime",
]
