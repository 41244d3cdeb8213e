"""Exception hierarchy for timestamp, duration and timezone parsing."""


class TimeParseError(ValueError):
    """Base class for every parsing failure raised by tsdbtime."""


class NullInputError(TimeParseError, TypeError):
    """Raised when a timestamp is None rather than a string."""


class NumberFormatError(TimeParseError):
    """Raised when a decimal integer cannot be parsed."""


class MalformedNumberError(NumberFormatError):
    """Raised for empty input, a lone sign or a non-digit character."""


class ValueTooLongError(NumberFormatError):
    """Raised when the text has more characters than any 64-bit value."""


class NumberOverflowError(NumberFormatError):
    """Raised when the value does not fit in a signed 64-bit integer."""


class InvalidDurationError(TimeParseError):
    """Raised for a bad magnitude, a bad suffix or an overflowing duration."""


class InvalidAbsoluteDateError(TimeParseError):
    """Raised when an absolute date has no recognized layout."""


class InvalidDateError(InvalidAbsoluteDateError):
    """Raised when absolute date text does not match its layout or calendar."""


class InvalidTimestampError(TimeParseError):
    """Raised when a raw numeric timestamp cannot be parsed."""


class InvalidMillisecondFormatError(InvalidTimestampError):
    """Raised when a fractional timestamp is not ``<10 digits>.<3 digits>``."""


class NegativeTimestampError(InvalidTimestampError):
    """Raised when a raw numeric timestamp is negative."""


class UnknownTimezoneError(TimeParseError):
    """Raised when a timezone name is not in the timezone table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid timezone name: {name}")
        self.name = name
