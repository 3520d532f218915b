"""TimeUnit enumeration for standard time units.

This module provides the TimeUnit enum representing the time
measurement units Tempotime understands, from milliseconds to years.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from tempotime._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from tempotime.errors import UnsupportedUnit


class TimeUnit(Enum):
    """Standard time units for temporal operations.

    Each unit knows its exact length in milliseconds where one exists.
    YEAR and MONTH have no fixed length (leap years, different month
    lengths) and are handled by calendar arithmetic instead.

    Examples:
        >>> TimeUnit.HOUR.to_milliseconds()
        3600000

        >>> TimeUnit.MONTH.to_milliseconds() is None
        True

        >>> TimeUnit.parse("days")
        <TimeUnit.DAY: 'day'>
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, unit: Union[str, TimeUnit]) -> TimeUnit:
        """Resolve a unit name to a TimeUnit.

        Accepts singular or plural names in any case ("day", "Days"), or
        a TimeUnit instance which is returned unchanged.

        Args:
            unit: Unit name or TimeUnit.

        Returns:
            The matching TimeUnit.

        Raises:
            UnsupportedUnit: If the name is not a known unit.
        """
        if isinstance(unit, TimeUnit):
            return unit
        if not isinstance(unit, str):
            raise UnsupportedUnit(unit, _UNIT_NAMES)
        key = unit.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedUnit(unit, _UNIT_NAMES) from None

    @property
    def plural(self) -> str:
        """Return the plural name used as a Duration key (e.g. "days")."""
        return self.value + "s"

    @property
    def is_calendar(self) -> bool:
        """Return True for units whose length depends on the calendar."""
        return self in (TimeUnit.MONTH, TimeUnit.YEAR)

    def to_milliseconds(self) -> int | None:
        """Convert one unit of this TimeUnit to milliseconds.

        Returns:
            The number of milliseconds in one unit, or None for
            variable-length units (MONTH and YEAR).
        """
        return _FIXED_MS.get(self)


_FIXED_MS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MS_PER_SECOND,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.DAY: MS_PER_DAY,
    TimeUnit.WEEK: MS_PER_WEEK,
}

_UNIT_NAMES: tuple[str, ...] = tuple(unit.value for unit in TimeUnit)

# Largest to smallest; the order in which a Duration is applied
CALENDAR_UNITS: tuple[TimeUnit, ...] = (TimeUnit.YEAR, TimeUnit.MONTH)
FIXED_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.WEEK,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
)


__all__ = ["TimeUnit", "CALENDAR_UNITS", "FIXED_UNITS"]
