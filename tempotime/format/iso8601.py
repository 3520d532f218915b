"""ISO 8601 formatting and parsing.

This module is the fixed-grammar fast path; it does not use the pattern
compiler.

Functions:
    parse_iso: Parse an ISO 8601 string into a FieldTuple.
    format_iso: Format a FieldTuple as an ISO 8601 string.

Accepted profile:
    YYYY-MM-DD
    YYYY-MM-DDTHH:MM:SS
    YYYY-MM-DDTHH:MM:SS.f          (1-9 fraction digits, truncated to ms)
    any of the above followed by Z, +HH:MM or -HH:MM
    a leading "-" for negative years (-0044-03-15)

A missing time means midnight; a missing offset means UTC.

Examples:
    >>> fields = parse_iso("2025-10-30T14:30:00Z")
    >>> (fields.year, fields.hour)
    (2025, 14)

    >>> format_iso(parse_iso("2025-10-30T14:30:00.120+05:30"))
    '2025-10-30T14:30:00.120+05:30'
"""

from __future__ import annotations

from tempotime._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from tempotime.core.fields import FieldTuple
from tempotime.errors import IsoParseError
from tempotime.units.timezone import format_offset

PRECISIONS: tuple[str, ...] = ("auto", "seconds", "millis")


class _Reader:
    """Cursor over the input that raises IsoParseError on mismatch."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def fail(self, expected: str) -> IsoParseError:
        found = self.text[self.pos:self.pos + 1] or "end of input"
        return IsoParseError(
            f"expected {expected} at offset {self.pos}, found {found!r}",
            offset=self.pos,
            expected=expected,
        )

    def number(self, width: int, expected: str) -> int:
        chunk = self.text[self.pos:self.pos + width]
        if len(chunk) != width or not all("0" <= c <= "9" for c in chunk):
            raise self.fail(expected)
        self.pos += width
        return int(chunk)

    def char(self, ch: str, expected: str) -> None:
        if self.peek() != ch:
            raise self.fail(expected)
        self.pos += 1


def parse_iso(text: str) -> FieldTuple:
    """Parse an ISO 8601 string.

    Args:
        text: The string to parse.

    Returns:
        The FieldTuple, expressed in the offset found in the string.

    Raises:
        IsoParseError: If the text does not follow the profile. ``expected``
            names the missing construct and ``offset`` where it was due.
        InvalidCalendarField: If the fields are out of range (2023-02-29).

    Examples:
        >>> parse_iso("2024-02-29").day
        29
        >>> parse_iso("2025-10-30T09:00:00-05:00").offset_seconds
        -18000
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")

    r = _Reader(text)
    sign = 1
    if r.peek() == "-":
        sign = -1
        r.pos += 1
    year = sign * r.number(4, "4-digit year")
    r.char("-", "'-' after year")
    month = r.number(2, "2-digit month")
    r.char("-", "'-' after month")
    day = r.number(2, "2-digit day")

    hour = minute = second = millisecond = 0
    if r.peek() == "T":
        r.pos += 1
        hour = r.number(2, "2-digit hour")
        r.char(":", "':' after hour")
        minute = r.number(2, "2-digit minute")
        r.char(":", "':' after minute")
        second = r.number(2, "2-digit second")
        if r.peek() == ".":
            r.pos += 1
            millisecond = _fraction(r)

    offset_seconds = 0
    if not r.done:
        offset_seconds = _offset(r)
    if not r.done:
        raise r.fail("end of input")

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


def _fraction(r: _Reader) -> int:
    start = r.pos
    while r.pos < len(r.text) and "0" <= r.text[r.pos] <= "9":
        r.pos += 1
    digits = r.text[start:r.pos]
    if not digits or len(digits) > 9:
        r.pos = start + min(len(digits), 9)
        raise r.fail("1-9 fraction digits")
    return int(digits[:3].ljust(3, "0"))


def _offset(r: _Reader) -> int:
    ch = r.peek()
    if ch == "Z":
        r.pos += 1
        return 0
    if ch not in ("+", "-"):
        raise r.fail("'T', 'Z' or a +HH:MM offset")
    r.pos += 1
    hours = r.number(2, "2-digit offset hours")
    r.char(":", "':' in offset")
    minutes_at = r.pos
    minutes = r.number(2, "2-digit offset minutes")
    if minutes > 59:
        r.pos = minutes_at
        raise r.fail("offset minutes 00-59")
    total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
    return total if ch == "+" else -total


def format_iso(fields: FieldTuple, precision: str = "auto") -> str:
    """Format a FieldTuple as ``YYYY-MM-DDTHH:MM:SS[.sss](Z|+HH:MM)``.

    Args:
        fields: The fields to format.
        precision: "auto" includes milliseconds only when non-zero,
            "seconds" never includes them, "millis" always does.

    Raises:
        ValueError: If precision is not one of the above.

    Examples:
        >>> format_iso(FieldTuple(2025, 1, 2, 3, 4, 5))
        '2025-01-02T03:04:05Z'
        >>> format_iso(FieldTuple(2025, 1, 2, offset_seconds=-18000), "millis")
        '2025-01-02T00:00:00.000-05:00'
    """
    if precision not in PRECISIONS:
        raise ValueError(
            f"precision must be one of {', '.join(PRECISIONS)}, got {precision!r}"
        )

    if fields.year >= 0:
        date_str = f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
    else:
        date_str = f"-{-fields.year:04d}-{fields.month:02d}-{fields.day:02d}"

    time_str = f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    if precision == "millis" or (precision == "auto" and fields.millisecond):
        time_str += f".{fields.millisecond:03d}"

    if fields.offset_seconds == 0:
        suffix = "Z"
    else:
        suffix = format_offset(fields.offset_seconds)
    return f"{date_str}T{time_str}{suffix}"


__all__ = ["PRECISIONS", "parse_iso", "format_iso"]
