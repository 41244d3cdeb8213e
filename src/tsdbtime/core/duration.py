"""Parsing of human-readable durations such as ``10m``, ``3h`` or ``14d``."""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidDurationError, NullInputError, NumberFormatError
from .numbers import LONG_MAX, parse_long


class DurationUnit(Enum):
    """Units a duration suffix can select, keyed by suffix."""

    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"
    MONTHS = "n"  # always 30 days
    YEARS = "y"  # always 365 days

    @property
    def millis(self) -> int:
        """Length of one unit in milliseconds."""
        return _UNIT_MILLIS[self]


_UNIT_MILLIS = {
    DurationUnit.MILLISECONDS: 1,
    DurationUnit.SECONDS: 1000,
    DurationUnit.MINUTES: 60 * 1000,
    DurationUnit.HOURS: 3600 * 1000,
    DurationUnit.DAYS: 3600 * 24 * 1000,
    DurationUnit.WEEKS: 3600 * 24 * 7 * 1000,
    DurationUnit.MONTHS: 3600 * 24 * 30 * 1000,
    DurationUnit.YEARS: 3600 * 24 * 365 * 1000,
}

# Single-character suffixes; "ms" is recognized separately.
_SUFFIXES = {unit.value: unit for unit in DurationUnit if unit is not DurationUnit.MILLISECONDS}


@dataclass(frozen=True)
class DurationSpec:
    """A strictly positive magnitude paired with its unit.

    Attributes:
        magnitude: Number of units, always > 0
        unit: Unit selected by the suffix
    """

    magnitude: int
    unit: DurationUnit

    def to_millis(self) -> int:
        """
        Convert to milliseconds.

        Raises:
            InvalidDurationError: If the result exceeds the signed 64-bit range
        """
        millis = self.magnitude * self.unit.millis
        if millis > LONG_MAX:
            raise InvalidDurationError(f"Duration must be < {LONG_MAX} ms: {self}")
        return millis

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.value}"


def parse_duration_spec(duration: str) -> DurationSpec:
    """
    Split a duration string into its magnitude and unit.

    Only the last character selects the unit (case-insensitively). A string
    whose last two characters are ``ms`` (lowercase ``m``) is read as
    milliseconds. Characters between the digits and the final one are not
    inspected.

    Args:
        duration: Duration text, e.g. ``"5m"`` or ``"250ms"``

    Returns:
        The parsed DurationSpec

    Raises:
        InvalidDurationError: If the magnitude is missing, malformed or not
            positive, or the suffix is unknown
    """
    if duration is None:
        raise NullInputError("Duration cannot be None")

    end = 0
    while end < len(duration) and "0" <= duration[end] <= "9":
        end += 1

    try:
        magnitude = parse_long(duration[:end])
    except NumberFormatError as e:
        raise InvalidDurationError(f"Invalid duration (number): {duration}") from e

    if magnitude <= 0:
        raise InvalidDurationError(f"Zero or negative duration: {duration}")

    suffix = duration[-1].lower()
    if suffix == "s" and duration[-2] == "m":
        return DurationSpec(magnitude, DurationUnit.MILLISECONDS)

    unit = _SUFFIXES.get(suffix)
    if unit is None:
        raise InvalidDurationError(f"Invalid duration (suffix): {duration}")
    return DurationSpec(magnitude, unit)


def parse_duration(duration: str) -> int:
    """
    Parse a human-readable duration into milliseconds.

    Supported suffixes:
    - 'ms': milliseconds
    - 's': seconds
    - 'm': minutes
    - 'h': hours
    - 'd': days
    - 'w': weeks
    - 'n': months (30 days)
    - 'y': years (365 days)

    Args:
        duration: Duration text, e.g. ``"10m"``, ``"3h"`` or ``"14d"``

    Returns:
        A strictly positive number of milliseconds

    Raises:
        InvalidDurationError: If the duration is malformed or overflows
    """
    return parse_duration_spec(duration).to_millis()
