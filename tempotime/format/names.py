"""Fixed English name tables shared by the formatter and the parser.

Month tables are indexed by ``month - 1`` and weekday tables by the ISO
weekday (0 = Monday).
"""

from __future__ import annotations

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

WEEKDAY_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in WEEKDAY_NAMES)

MERIDIEMS: tuple[str, ...] = ("am", "pm")

ORDINAL_SUFFIXES: tuple[str, ...] = ("st", "nd", "rd", "th")


def ordinal_suffix(n: int) -> str:
    """Return the English ordinal suffix for ``n``.

    Examples:
        >>> [ordinal_suffix(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)]
        ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'rd']
    """
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def meridiem(hour: int) -> str:
    """Return "am" for hours 0-11 and "pm" for 12-23."""
    return MERIDIEMS[0] if hour < 12 else MERIDIEMS[1]


def to_twelve_hour(hour: int) -> int:
    """Convert a 24-hour clock hour to the 12-hour clock (0 -> 12, 13 -> 1)."""
    return hour % 12 or 12


__all__ = [
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
    "MERIDIEMS",
    "ORDINAL_SUFFIXES",
    "ordinal_suffix",
    "meridiem",
    "to_twelve_hour",
]
