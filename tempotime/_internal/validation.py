"""Validation utilities for Tempotime.

Field-range checks shared by FieldTuple construction and the parsers.
Every failure raises InvalidCalendarField naming the field.

This module is not part of the public API.
"""

from __future__ import annotations

from tempotime._internal.calendar import days_in_month
from tempotime._internal.constants import MAX_YEAR, MIN_YEAR
from tempotime.errors import InvalidCalendarField


def validate_range(field: str, value: int, low: int, high: int) -> None:
    """Check that an integer field lies within [low, high].

    Args:
        field: Field name used in the error message.
        value: The value to check.
        low: Smallest accepted value (inclusive).
        high: Largest accepted value (inclusive).

    Raises:
        InvalidCalendarField: If value is not an int or is out of range.

    Examples:
        >>> validate_range("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        tempotime.errors.InvalidCalendarField: hour must be between 0 and 23, got 24
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCalendarField(field, value, low, high)
    if value < low or value > high:
        raise InvalidCalendarField(field, value, low, high)


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year (already validated).
        month: The month (already validated).
        day: The day to validate.

    Raises:
        InvalidCalendarField: If day is invalid for the month.
    """
    validate_range("day", day, 1, days_in_month(year, month))


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a complete (year, month, day) triple."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate wall-clock time components."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("millisecond", millisecond, 0, 999)


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
]
