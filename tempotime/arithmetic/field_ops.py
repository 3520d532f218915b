"""Calendar-aware arithmetic on FieldTuples.

This module implements the unit arithmetic shared by DateTime, Duration
and Interval:

    - add_field: add an amount of one unit
    - add_fields: apply a whole set of unit amounts (a Duration)
    - start_of / end_of: snap to the boundaries of a unit
    - calendar_diff: measure the distance between two FieldTuples

Clamping behavior:
    Years and months move the month counter and then clamp the day to the
    last valid day of the target month. Weeks and finer units are exact
    millisecond shifts applied on the Instant.

Examples:
    2024-01-31 + 1 month -> 2024-02-29  (leap year)
    2023-01-31 + 1 month -> 2023-02-28
    2024-02-29 + 1 year  -> 2025-02-28
"""

from __future__ import annotations

import math
from typing import Mapping, Union

from tempotime._internal.calendar import (
    add_months,
    civil_from_days,
    days_from_civil,
    days_in_month,
)
from tempotime._internal.constants import MAX_YEAR, MIN_YEAR, MS_PER_DAY
from tempotime.core.fields import FieldTuple, from_fields, to_fields
from tempotime.errors import InvalidDuration, OverflowError
from tempotime.units.timeunit import TimeUnit

Number = Union[int, float]
UnitLike = Union[str, TimeUnit]


def add_field(fields: FieldTuple, unit: UnitLike, amount: Number) -> FieldTuple:
    """Add ``amount`` of ``unit`` to a FieldTuple.

    Args:
        fields: The starting fields.
        unit: Unit name or TimeUnit.
        amount: Signed amount. Must be integral for years and months.

    Returns:
        The shifted fields, expressed in the same UTC offset.

    Raises:
        UnsupportedUnit: If the unit is unknown.
        InvalidDuration: If a calendar amount is fractional.
        OverflowError: If the result leaves the supported year range.

    Examples:
        >>> add_field(FieldTuple(2024, 1, 31), "month", 1).day
        29
        >>> add_field(FieldTuple(2024, 3, 31), "months", -1).day
        29
    """
    return add_fields(fields, {TimeUnit.parse(unit): amount})


def add_fields(fields: FieldTuple, amounts: Mapping[TimeUnit, Number]) -> FieldTuple:
    """Apply several unit amounts at once.

    Years and months are combined into one month shift with a single
    clamp against the original day of month. The remaining units are
    summed to milliseconds and applied to the resulting Instant.

    Raises:
        InvalidDuration: If a calendar amount is fractional or any amount
            is not a finite number.
        OverflowError: If the result leaves the supported year range.
    """
    months = 0
    millis: Number = 0
    for unit, amount in amounts.items():
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise InvalidDuration(
                f"{unit.plural} must be a number, got {type(amount).__name__}"
            )
        if not math.isfinite(amount):
            raise InvalidDuration(f"{unit.plural} must be finite, got {amount}")
        if unit.is_calendar:
            months += _whole(unit, amount) * (12 if unit is TimeUnit.YEAR else 1)
        else:
            millis += amount * unit.to_milliseconds()
    if not math.isfinite(millis):
        raise OverflowError("duration is too large to apply")

    result = fields
    if months:
        year, month, day = add_months(fields.year, fields.month, fields.day, months)
        _check_year(year)
        result = result.replace(year=year, month=month, day=day)
    millis = round(millis)
    if millis:
        shifted = from_fields(result).shifted(millis)
        result = to_fields(shifted, fields.offset_seconds)
    return result


def start_of(fields: FieldTuple, unit: UnitLike) -> FieldTuple:
    """Return the first millisecond of the ``unit`` containing ``fields``.

    Weeks start on Monday.

    Examples:
        >>> start_of(FieldTuple(2025, 10, 30, 14, 5), "month").day
        1
        >>> start_of(FieldTuple(2025, 10, 30, 14, 5), "week").day
        27
    """
    unit = TimeUnit.parse(unit)
    if unit is TimeUnit.YEAR:
        return fields.replace(month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.MONTH:
        return fields.replace(day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.WEEK:
        year, month, day = _shift_days(fields, -fields.weekday)
        return fields.replace(
            year=year, month=month, day=day, hour=0, minute=0, second=0, millisecond=0
        )
    if unit is TimeUnit.DAY:
        return fields.replace(hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.HOUR:
        return fields.replace(minute=0, second=0, millisecond=0)
    if unit is TimeUnit.MINUTE:
        return fields.replace(second=0, millisecond=0)
    if unit is TimeUnit.SECOND:
        return fields.replace(millisecond=0)
    return fields


def end_of(fields: FieldTuple, unit: UnitLike) -> FieldTuple:
    """Return the last representable millisecond of the ``unit`` containing ``fields``.

    Examples:
        >>> end_of(FieldTuple(2024, 2, 10), "month").day
        29
        >>> end_of(FieldTuple(2024, 2, 10, 8), "day").hour
        23
    """
    unit = TimeUnit.parse(unit)
    last = {"hour": 23, "minute": 59, "second": 59, "millisecond": 999}
    if unit is TimeUnit.YEAR:
        return fields.replace(month=12, day=31, **last)
    if unit is TimeUnit.MONTH:
        return fields.replace(day=days_in_month(fields.year, fields.month), **last)
    if unit is TimeUnit.WEEK:
        year, month, day = _shift_days(fields, 6 - fields.weekday)
        return fields.replace(year=year, month=month, day=day, **last)
    if unit is TimeUnit.DAY:
        return fields.replace(**last)
    if unit is TimeUnit.HOUR:
        return fields.replace(minute=59, second=59, millisecond=999)
    if unit is TimeUnit.MINUTE:
        return fields.replace(second=59, millisecond=999)
    if unit is TimeUnit.SECOND:
        return fields.replace(millisecond=999)
    return fields


def calendar_diff(start: FieldTuple, end: FieldTuple, unit: UnitLike) -> float:
    """Measure ``end - start`` in ``unit``.

    Fixed units (weeks and finer) use the exact ratio of the millisecond
    difference. Months and years count the whole months that can be added
    to ``start`` without passing ``end`` (with day clamping), plus the
    fraction of the next month step that remains.

    Args:
        start: The starting fields.
        end: The ending fields (any offset).
        unit: Unit to measure in.

    Returns:
        The signed distance; negative when end precedes start.

    Examples:
        >>> calendar_diff(FieldTuple(2025, 1, 1), FieldTuple(2025, 1, 2), "hours")
        24.0
        >>> calendar_diff(FieldTuple(2024, 1, 31), FieldTuple(2024, 2, 29), "month")
        1.0
    """
    unit = TimeUnit.parse(unit)
    start_ms = from_fields(start).epoch_ms
    end_ms = from_fields(end).epoch_ms
    if not unit.is_calendar:
        return (end_ms - start_ms) / unit.to_milliseconds()
    if start_ms == end_ms:
        return 0.0

    months = _month_diff(start, to_fields(from_fields(end), start.offset_seconds))
    return months / 12 if unit is TimeUnit.YEAR else months


def _month_diff(start: FieldTuple, end: FieldTuple) -> float:
    """Whole months plus the fractional remainder from ``start`` to ``end``.

    Both FieldTuples must share the same offset. Month steps are measured
    in local milliseconds, so the step past the last supported month can
    still serve as the divisor.
    """
    end_ms = _local_ms(end.year, end.month, end.day, end.millisecond_of_day)
    start_ms = _local_ms(start.year, start.month, start.day, start.millisecond_of_day)
    step = 1 if end_ms > start_ms else -1
    whole = (end.year - start.year) * 12 + (end.month - start.month)

    def shifted_ms(months: int) -> int:
        year, month, day = add_months(start.year, start.month, start.day, months)
        return _local_ms(year, month, day, start.millisecond_of_day)

    anchor = shifted_ms(whole)
    # Day clamping and the time of day can overshoot by one month
    while (anchor - end_ms) * step > 0:
        whole -= step
        anchor = shifted_ms(whole)
    if anchor == end_ms:
        return float(whole)

    following = shifted_ms(whole + step)
    return whole + (end_ms - anchor) / abs(following - anchor)


def _local_ms(year: int, month: int, day: int, millisecond_of_day: int) -> int:
    return days_from_civil(year, month, day) * MS_PER_DAY + millisecond_of_day


def _whole(unit: TimeUnit, amount: Number) -> int:
    if isinstance(amount, float):
        if not amount.is_integer():
            raise InvalidDuration(
                f"{unit.plural} must be a whole number, got {amount}"
            )
        return int(amount)
    return amount


def _shift_days(fields: FieldTuple, days: int) -> tuple[int, int, int]:
    year, month, day = civil_from_days(
        days_from_civil(fields.year, fields.month, fields.day) + days
    )
    _check_year(year)
    return year, month, day


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )


__all__ = [
    "add_field",
    "add_fields",
    "start_of",
    "end_of",
    "calendar_diff",
]
