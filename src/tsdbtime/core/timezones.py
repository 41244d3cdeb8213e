"""Timezone table and the current default timezone.

The table maps every timezone name known to the host (via pendulum's
zoneinfo-backed database) to its timezone object. It is built once at import
and never modified, so any number of threads may read it without locking.

The default timezone used for absolute dates without an explicit zone is kept
in a ``ContextVar`` rather than in process-wide state:

- ``set_default_timezone()`` affects the current execution context only.
  Threads started afterwards begin with an empty context and fall back to the
  configured ``TSDBTIME_DEFAULT_TIMEZONE``, then to the host local timezone.
- asyncio tasks copy the context when they are created, so a task sees the
  default that was active at its creation and its own changes stay local.
- ``use_timezone()`` scopes a default to a ``with`` block.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

import pendulum

from .errors import UnknownTimezoneError

if TYPE_CHECKING:
    from .timestamps import DateFormatter

logger = logging.getLogger(__name__)

TimezoneInfo = Union[pendulum.Timezone, pendulum.FixedTimezone]


class TimezoneTable(Mapping[str, TimezoneInfo]):
    """Read-only mapping of timezone name to timezone object.

    Lookups are exact and case-sensitive: ``"America/New_York"`` resolves,
    ``"america/new_york"`` does not.
    """

    def __init__(self, zones: Mapping[str, TimezoneInfo]) -> None:
        self._zones = MappingProxyType(dict(zones))

    @classmethod
    def from_host(cls) -> TimezoneTable:
        """Load every timezone the host timezone database knows about."""
        zones: dict[str, TimezoneInfo] = {}
        skipped = 0
        for name in sorted(pendulum.timezones()):
            try:
                zones[name] = pendulum.timezone(name)
            except (ValueError, OSError):
                # Listed by the database but without loadable rules
                skipped += 1
        logger.debug(f"Loaded {len(zones)} timezones")
        if skipped:
            logger.debug(f"Skipped {skipped} timezones without loadable rules")
        return cls(zones)

    def __getitem__(self, name: str) -> TimezoneInfo:
        return self._zones[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def resolve(self, name: str) -> TimezoneInfo:
        """
        Look up a timezone by name.

        Args:
            name: Timezone identifier, e.g. ``"Europe/Paris"``

        Returns:
            The timezone object

        Raises:
            UnknownTimezoneError: If the name is not in the table
        """
        tz = self._zones.get(name)
        if tz is None:
            raise UnknownTimezoneError(name)
        return tz


TIMEZONES = TimezoneTable.from_host()

_default_timezone: ContextVar[TimezoneInfo | None] = ContextVar(
    "tsdbtime_default_timezone", default=None
)


def resolve_timezone(name: str) -> TimezoneInfo:
    """Resolve a timezone name through the shared table."""
    return TIMEZONES.resolve(name)


def apply_timezone(formatter: DateFormatter, name: str | None) -> None:
    """
    Bind a named timezone to a date formatter.

    Args:
        formatter: Formatter to update
        name: Timezone name. None or empty leaves the formatter unchanged so
            it uses the default timezone.

    Raises:
        UnknownTimezoneError: If the name is not in the table
    """
    if not name:
        return
    formatter.timezone = TIMEZONES.resolve(name)


def get_default_timezone() -> TimezoneInfo:
    """
    Get the timezone used for absolute dates parsed without one.

    Resolution order: the value set in the current context, then the
    configured ``default_timezone`` setting, then the host local timezone.
    """
    tz = _default_timezone.get()
    if tz is not None:
        return tz

    from tsdbtime.config.settings import get_settings

    name = get_settings().default_timezone
    if name:
        return TIMEZONES.resolve(name)
    return pendulum.local_timezone()


def set_default_timezone(name: str) -> None:
    """
    Set the default timezone for the current execution context.

    This is a configuration action, not something to call per request. See
    the module docstring for how the value propagates to threads and tasks.

    Raises:
        UnknownTimezoneError: If the name is not in the table
    """
    tz = TIMEZONES.resolve(name)
    _default_timezone.set(tz)
    logger.info(f"Default timezone set to {name}")


def reset_default_timezone() -> None:
    """Clear the context default so the configured fallback applies again."""
    _default_timezone.set(None)


@contextmanager
def use_timezone(name: str) -> Iterator[TimezoneInfo]:
    """
    Use a default timezone for the duration of a ``with`` block.

    Raises:
        UnknownTimezoneError: If the name is not in the table
    """
    tz = TIMEZONES.resolve(name)
    token = _default_timezone.set(tz)
    try:
        yield tz
    finally:
        _default_timezone.reset(token)
