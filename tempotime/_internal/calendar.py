"""Calendar utilities for Tempotime.

This module provides the integer calendar math everything else is built
on: leap year rules, month lengths, and conversions between a civil date
(year, month, day) and a day number counted from 1970-01-01.

All functions use the proleptic Gregorian calendar and astronomical year
numbering (year 0 exists, year -1 is 2 BCE). Python's floor division is
relied on for negative years and day numbers.

This module is not part of the public API.
"""

from __future__ import annotations

from tempotime._internal.constants import (
    CIVIL_EPOCH_SHIFT,
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a civil date to days since 1970-01-01.

    The year is shifted so that it starts in March; February (and its
    leap day) then falls at the end of the shifted year and the month
    lengths before it follow the fixed 153-days-per-5-months pattern.

    Args:
        year: The year (astronomical numbering).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day number, 0 for 1970-01-01, negative before it.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
        >>> days_from_civil(1969, 12, 31)
        -1
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400  # [0, 399]
    shifted_month = (month + 9) % 12  # March = 0
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1  # [0, 365]
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_PER_ERA + day_of_era - CIVIL_EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a civil date.

    Inverse of days_from_civil().

    Args:
        days: Day number (0 = 1970-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(19782)
        (2024, 2, 29)
    """
    z = days + CIVIL_EPOCH_SHIFT
    era = z // DAYS_PER_ERA
    day_of_era = z - era * DAYS_PER_ERA  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365  # [0, 399]
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153  # March = 0
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO day of week (Monday=0, Sunday=6).

    Uses Zeller's congruence for the Gregorian calendar. January and
    February count as months 13 and 14 of the previous year. Zeller's
    result starts the week on Saturday and is rotated to ISO order.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of week (0=Monday, 6=Sunday).

    Examples:
        >>> day_of_week(2025, 10, 30)  # Thursday
        3
        >>> day_of_week(2000, 1, 1)  # Saturday
        5
    """
    if month < 3:
        month += 12
        year -= 1
    century, year_of_century = divmod(year, 100)
    zeller = (
        day
        + (13 * (month + 1)) // 5
        + year_of_century
        + year_of_century // 4
        + century // 4
        + 5 * century
    ) % 7
    return (zeller + 5) % 7


def add_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Shift a date by whole months, clamping the day to the target month.

    Args:
        year: The starting year.
        month: The starting month (1-12).
        day: The starting day.
        months: Number of months to add (can be negative).

    Returns:
        Tuple of (year, month, day) with day clamped.

    Examples:
        >>> add_months(2024, 1, 31, 1)
        (2024, 2, 29)
        >>> add_months(2024, 3, 31, -1)
        (2024, 2, 29)
        >>> add_months(2024, 2, 29, 12)
        (2025, 2, 28)
    """
    total = year * 12 + (month - 1) + months
    new_year, new_month_index = divmod(total, 12)
    new_month = new_month_index + 1
    return (new_year, new_month, min(day, days_in_month(new_year, new_month)))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_from_civil",
    "civil_from_days",
    "day_of_week",
    "add_months",
]
