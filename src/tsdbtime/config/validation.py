"""Validation functions for configuration values."""

from tsdbtime.core import TIMEZONES, TimeParseError, parse_duration


def validate_timezone_name(name: str) -> bool:
    """
    Validate that a timezone name is known to the host timezone database.

    Args:
        name: Timezone identifier, matched case-sensitively

    Returns:
        True if valid, False otherwise
    """
    if not name:
        return False
    return name in TIMEZONES


def validate_duration(duration: str) -> bool:
    """
    Validate a human-readable duration such as '1h' or '30m'.

    Args:
        duration: Duration string

    Returns:
        True if valid, False otherwise
    """
    if not duration:
        return False
    try:
        parse_duration(duration)
    except TimeParseError:
        return False
    return True


def validate_log_level(level: str) -> bool:
    """
    Validate a log level name.

    Args:
        level: Level name, case-insensitive

    Returns:
        True if valid, False otherwise
    """
    if not level:
        return False
    return level.upper() in ("DEBUG", "INFO", "WARNING", "ERROR")
