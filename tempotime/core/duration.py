"""Duration class representing an amount of calendar and clock units.

This module provides the Duration class: a signed amount per unit
(years, months, weeks, days, hours, minutes, seconds, milliseconds)
that is never normalized. ``Duration(hours=36)`` stays 36 hours.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator, Mapping, Union

from tempotime._internal.constants import (
    MS_PER_DAY,
    NOMINAL_DAYS_PER_MONTH,
    NOMINAL_DAYS_PER_YEAR,
)
from tempotime.arithmetic.field_ops import add_fields, calendar_diff
from tempotime.errors import InvalidDuration
from tempotime.units.timeunit import CALENDAR_UNITS, FIXED_UNITS, TimeUnit

if TYPE_CHECKING:
    from tempotime.core.datetime import DateTime

Number = Union[int, float]

# Largest to smallest
_UNIT_ORDER: tuple[TimeUnit, ...] = CALENDAR_UNITS + FIXED_UNITS

_NOMINAL_MS: dict[TimeUnit, int] = {
    TimeUnit.YEAR: NOMINAL_DAYS_PER_YEAR * MS_PER_DAY,
    TimeUnit.MONTH: NOMINAL_DAYS_PER_MONTH * MS_PER_DAY,
}


def _nominal_ms(unit: TimeUnit) -> int:
    fixed = unit.to_milliseconds()
    return _NOMINAL_MS[unit] if fixed is None else fixed


class Duration:
    """A signed amount of each time unit.

    Components are kept exactly as given; 90 minutes are not rewritten
    as 1 hour 30 minutes. Calendar components (years and months) only
    acquire a length when applied to a date, so conversions between
    units either use nominal lengths (month = 30 days, year = 365 days)
    or, when the duration carries an anchor DateTime, the real calendar.

    Attributes:
        anchor: Optional DateTime that calendar conversions start from.

    Examples:
        >>> Duration(days=1, hours=12).as_unit("hours")
        36.0

        >>> Duration.from_object({"month": 1}).to_object()
        {'months': 1}

        >>> (Duration(days=1) + Duration(days=2, hours=1)).to_object()
        {'days': 3, 'hours': 1}
    """

    __slots__ = ("_values", "_anchor")

    def __init__(
        self,
        *,
        years: Number = 0,
        months: Number = 0,
        weeks: Number = 0,
        days: Number = 0,
        hours: Number = 0,
        minutes: Number = 0,
        seconds: Number = 0,
        milliseconds: Number = 0,
        anchor: DateTime | None = None,
    ) -> None:
        """Create a Duration from unit amounts.

        Args:
            years: Number of years (whole when applied to a date).
            months: Number of months (whole when applied to a date).
            weeks: Number of weeks.
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            anchor: Optional DateTime used by as_unit().

        Raises:
            InvalidDuration: If a value is not a finite int or float.
        """
        given = {
            TimeUnit.YEAR: years,
            TimeUnit.MONTH: months,
            TimeUnit.WEEK: weeks,
            TimeUnit.DAY: days,
            TimeUnit.HOUR: hours,
            TimeUnit.MINUTE: minutes,
            TimeUnit.SECOND: seconds,
            TimeUnit.MILLISECOND: milliseconds,
        }
        self._values: dict[TimeUnit, Number] = _checked(given)
        self._anchor: DateTime | None = anchor

    @classmethod
    def _from_internal(
        cls, values: Mapping[TimeUnit, Number], anchor: DateTime | None
    ) -> Duration:
        instance = object.__new__(cls)
        instance._values = {u: values[u] for u in _UNIT_ORDER if values.get(u)}
        instance._anchor = anchor
        return instance

    @classmethod
    def from_object(
        cls,
        obj: Mapping[Union[str, TimeUnit], Number],
        *,
        anchor: DateTime | None = None,
    ) -> Duration:
        """Create a Duration from a mapping of unit names to amounts.

        Keys may be singular or plural and in any case ("day", "Days").
        A unit given twice (e.g. "day" and "days") is summed.

        Raises:
            UnsupportedUnit: If a key is not a known unit.
            InvalidDuration: If a value is not a finite number.

        Examples:
            >>> Duration.from_object({"hours": 2, "minute": 30}).hours
            2
        """
        values: dict[TimeUnit, Number] = {}
        for key, amount in obj.items():
            unit = TimeUnit.parse(key)
            _check_number(unit, amount)
            values[unit] = values.get(unit, 0) + amount
            _check_number(unit, values[unit])
        return cls._from_internal(values, anchor)

    @classmethod
    def of(cls, unit: Union[str, TimeUnit], amount: Number) -> Duration:
        """Create a single-unit Duration, e.g. ``Duration.of("days", 3)``."""
        return cls.from_object({unit: amount})

    # Components

    def get(self, unit: Union[str, TimeUnit]) -> Number:
        """Return the amount stored for ``unit`` (0 if absent)."""
        return self._values.get(TimeUnit.parse(unit), 0)

    @property
    def years(self) -> Number:
        """Years component."""
        return self._values.get(TimeUnit.YEAR, 0)

    @property
    def months(self) -> Number:
        """Months component."""
        return self._values.get(TimeUnit.MONTH, 0)

    @property
    def weeks(self) -> Number:
        """Weeks component."""
        return self._values.get(TimeUnit.WEEK, 0)

    @property
    def days(self) -> Number:
        """Days component."""
        return self._values.get(TimeUnit.DAY, 0)

    @property
    def hours(self) -> Number:
        """Hours component."""
        return self._values.get(TimeUnit.HOUR, 0)

    @property
    def minutes(self) -> Number:
        """Minutes component."""
        return self._values.get(TimeUnit.MINUTE, 0)

    @property
    def seconds(self) -> Number:
        """Seconds component."""
        return self._values.get(TimeUnit.SECOND, 0)

    @property
    def milliseconds(self) -> Number:
        """Milliseconds component."""
        return self._values.get(TimeUnit.MILLISECOND, 0)

    @property
    def anchor(self) -> DateTime | None:
        """The DateTime calendar conversions start from, if any."""
        return self._anchor

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not self._values

    def items(self) -> Iterator[tuple[TimeUnit, Number]]:
        """Iterate non-zero components from largest to smallest unit."""
        return iter(self._values.items())

    def with_anchor(self, anchor: DateTime | None) -> Duration:
        """Return a copy of this duration using ``anchor`` for conversions."""
        return Duration._from_internal(self._values, anchor)

    def to_object(self) -> dict[str, Number]:
        """Return the non-zero components keyed by plural unit name."""
        return {unit.plural: amount for unit, amount in self._values.items()}

    def as_unit(self, unit: Union[str, TimeUnit]) -> float:
        """Express the whole duration in a single unit.

        Without an anchor, months count as 30 days and years as 365 days.
        With an anchor, the duration is laid onto the calendar from the
        anchor and the real distance is measured.

        Args:
            unit: Target unit name or TimeUnit.

        Returns:
            The duration expressed in ``unit``.

        Raises:
            UnsupportedUnit: If the unit is unknown.

        Examples:
            >>> Duration(months=1).as_unit("days")
            30.0
            >>> Duration(weeks=2).as_unit("day")
            14.0
        """
        target = TimeUnit.parse(unit)
        if self._anchor is not None:
            start = self._anchor.to_fields()
            end = add_fields(start, self._values)
            return calendar_diff(start, end, target)

        total_ms = sum(
            amount * _nominal_ms(u) for u, amount in self._values.items()
        )
        return total_ms / _nominal_ms(target)

    # Arithmetic operators

    def __neg__(self) -> Duration:
        """Negate every component."""
        return Duration._from_internal(
            {u: -amount for u, amount in self._values.items()}, self._anchor
        )

    def __pos__(self) -> Duration:
        return self

    def __add__(self, other: object) -> Duration:
        """Add two durations component-wise; the left anchor is kept."""
        if not isinstance(other, Duration):
            return NotImplemented
        values = dict(self._values)
        for unit, amount in other._values.items():
            values[unit] = values.get(unit, 0) + amount
        return Duration._from_internal(values, self._anchor or other._anchor)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Durations are equal if their non-zero components match."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __bool__(self) -> bool:
        return bool(self._values)

    def __repr__(self) -> str:
        if not self._values:
            return "Duration()"
        parts = ", ".join(
            f"{unit.plural}={amount!r}" for unit, amount in self._values.items()
        )
        return f"Duration({parts})"


def _check_number(unit: TimeUnit, amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidDuration(
            f"{unit.plural} must be an int or float, got {type(amount).__name__}"
        )
    if not math.isfinite(amount):
        raise InvalidDuration(f"{unit.plural} must be finite, got {amount}")


def _checked(values: Mapping[TimeUnit, Number]) -> dict[TimeUnit, Number]:
    for unit, amount in values.items():
        _check_number(unit, amount)
    return {u: values[u] for u in _UNIT_ORDER if values.get(u)}


__all__ = ["Duration"]
