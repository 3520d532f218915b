"""Broken-down calendar fields and their conversion to and from Instants.

A FieldTuple is the wall-clock view of an Instant under a fixed UTC
offset. to_fields() and from_fields() are exact inverses for every valid
FieldTuple and every Instant in range.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from tempotime._internal.calendar import (
    civil_from_days,
    day_of_week,
    days_from_civil,
)
from tempotime._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    MAX_YEAR,
    MIN_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from tempotime._internal.validation import validate_date, validate_range, validate_time
from tempotime.core.instant import Instant
from tempotime.errors import OverflowError


@dataclass(frozen=True)
class FieldTuple:
    """Calendar and clock fields of an instant in a given offset.

    Construction validates every field; ``weekday`` is derived from the
    date and cannot be passed in.

    Attributes:
        year: Year, -9999 to 9999 (astronomical numbering).
        month: Month, 1-12.
        day: Day of month, 1 to the month's length.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
        offset_seconds: UTC offset the fields are expressed in.
        weekday: Day of week, 0 = Monday ... 6 = Sunday.

    Examples:
        >>> FieldTuple(2025, 10, 30).weekday
        3
        >>> FieldTuple(2023, 2, 29)
        Traceback (most recent call last):
        ...
        tempotime.errors.InvalidCalendarField: day must be between 1 and 28, got 29
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    offset_seconds: int = 0
    weekday: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        validate_date(self.year, self.month, self.day)
        validate_time(self.hour, self.minute, self.second, self.millisecond)
        validate_range(
            "offset_seconds",
            self.offset_seconds,
            -MAX_UTC_OFFSET_SECONDS,
            MAX_UTC_OFFSET_SECONDS,
        )
        object.__setattr__(self, "weekday", day_of_week(self.year, self.month, self.day))

    def replace(self, **changes: Any) -> FieldTuple:
        """Return a new validated FieldTuple with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @property
    def millisecond_of_day(self) -> int:
        """Milliseconds elapsed since local midnight."""
        return (
            self.hour * MS_PER_HOUR
            + self.minute * MS_PER_MINUTE
            + self.second * MS_PER_SECOND
            + self.millisecond
        )


def to_fields(instant: Instant, offset_seconds: int = 0) -> FieldTuple:
    """Break an Instant into calendar fields under a UTC offset.

    Args:
        instant: The point in time.
        offset_seconds: Offset east of UTC used for the wall-clock view.

    Returns:
        The FieldTuple for that instant.

    Raises:
        OverflowError: If the local date falls outside years -9999..9999.

    Examples:
        >>> to_fields(Instant(0)).year
        1970
        >>> to_fields(Instant(0), -3600).hour
        23
    """
    local_ms = instant.epoch_ms + offset_seconds * MS_PER_SECOND
    days, ms_of_day = divmod(local_ms, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"local year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )

    hour, rest = divmod(ms_of_day, MS_PER_HOUR)
    minute, rest = divmod(rest, MS_PER_MINUTE)
    second, millisecond = divmod(rest, MS_PER_SECOND)
    return FieldTuple(
        year,
        month,
        day,
        hour,
        minute,
        second,
        millisecond,
        offset_seconds=offset_seconds,
    )


def from_fields(fields: FieldTuple) -> Instant:
    """Return the Instant a FieldTuple denotes.

    Raises:
        OverflowError: If the resulting instant is out of range.
    """
    local_ms = (
        days_from_civil(fields.year, fields.month, fields.day) * MS_PER_DAY
        + fields.millisecond_of_day
    )
    return Instant(local_ms - fields.offset_seconds * MS_PER_SECOND)


__all__ = ["FieldTuple", "to_fields", "from_fields"]
