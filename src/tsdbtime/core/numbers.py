"""Strict decimal parsing of signed 64-bit integers."""

from .errors import MalformedNumberError, NullInputError, NumberOverflowError, ValueTooLongError

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

# "9223372036854775807" and "-9223372036854775808"
MAX_UNSIGNED_LENGTH = 19
MAX_SIGNED_LENGTH = 20

_DIGITS = frozenset("0123456789")


def parse_long(text: str | bytes | bytearray) -> int:
    """
    Parse a decimal integer that must fit in a signed 64-bit range.

    Stricter than ``int()``: only an optional leading ``+``/``-`` followed by
    ASCII digits is accepted. Whitespace, underscores and non-ASCII digits are
    rejected, as is anything longer than the widest 64-bit value.

    Args:
        text: Characters to parse. ASCII ``bytes`` are accepted as well.

    Returns:
        The parsed value.

    Raises:
        NullInputError: If text is None
        MalformedNumberError: If text is empty, a lone sign or has a non-digit
        ValueTooLongError: If text has more characters than any 64-bit value
        NumberOverflowError: If the value is outside the signed 64-bit range
    """
    if text is None:
        raise NullInputError("Cannot parse None as an integer")

    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedNumberError(f"Invalid character in {text!r}") from e

    n = len(text)
    if n == 0:
        raise MalformedNumberError("Empty string")

    if text[0] in "+-":
        if n == 1:
            raise MalformedNumberError(f"Just a sign, no value: {text}")
        if n > MAX_SIGNED_LENGTH:
            raise ValueTooLongError(f"Value too long: {text}")
        digits = text[1:]
    elif n > MAX_UNSIGNED_LENGTH:
        raise ValueTooLongError(f"Value too long: {text}")
    else:
        digits = text

    for c in digits:
        if c not in _DIGITS:
            raise MalformedNumberError(f"Invalid character '{c}' in {text}")

    value = int(text)
    if not LONG_MIN <= value <= LONG_MAX:
        raise NumberOverflowError(f"Overflow in {text}")
    return value
