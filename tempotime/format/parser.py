"""Parse strings through compiled patterns.

The parser walks the directives of a CompiledPattern against the input,
consuming text for each one, and builds a FieldTuple from what it read.
Fields the pattern does not mention default to 1970-01-01 00:00:00.000.

Functions:
    parse: Parse text with a compiled pattern.
    parse_format: Compile a pattern and parse in one call.

Examples:
    >>> parse_format("Oct 30, 2025", "MMM dd, yyyy").day
    30
    >>> parse_format("3:05 pm", "h:mm a").hour
    15
"""

from __future__ import annotations

import re
from typing import Sequence, Union

from tempotime._internal.validation import validate_range
from tempotime.config import TrailingInputPolicy, get_settings
from tempotime.core.fields import FieldTuple
from tempotime.errors import FieldParseError, LiteralMismatch, TrailingInput, UnknownName
from tempotime.format.names import (
    MERIDIEMS,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    ORDINAL_SUFFIXES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from tempotime.format.tokens import (
    CompiledPattern,
    FieldDirective,
    LiteralDirective,
    Token,
    compile_pattern,
)

_DIGITS = re.compile(r"[0-9]+")

_NAME_TABLES: dict[Token, tuple[str, Sequence[str]]] = {
    Token.MONTH_NAME: ("month name", MONTH_NAMES),
    Token.MONTH_ABBR: ("month abbreviation", MONTH_ABBREVIATIONS),
    Token.WEEKDAY_NAME: ("weekday name", WEEKDAY_NAMES),
    Token.WEEKDAY_ABBR: ("weekday abbreviation", WEEKDAY_ABBREVIATIONS),
    Token.MERIDIEM: ("am/pm", MERIDIEMS),
}

# Field each numeric token writes to
_TARGETS: dict[Token, str] = {
    Token.YEAR: "year",
    Token.YEAR_2: "year2",
    Token.MONTH_2: "month",
    Token.MONTH: "month",
    Token.DAY_ORDINAL: "day",
    Token.DAY_2: "day",
    Token.DAY: "day",
    Token.HOUR_2: "hour",
    Token.HOUR: "hour",
    Token.HOUR12_2: "hour12",
    Token.HOUR12: "hour12",
    Token.MINUTE_2: "minute",
    Token.MINUTE: "minute",
    Token.SECOND_2: "second",
    Token.SECOND: "second",
    Token.MILLISECOND: "millisecond",
}

# Unpadded numeric fields read one or two digits
_UNPADDED_MAX_DIGITS = 2


class _Cursor:
    """Position in the input plus the fields read so far."""

    __slots__ = ("text", "pos", "values", "meridiem")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.values: dict[str, int] = {}
        self.meridiem: str | None = None


def parse(
    compiled: CompiledPattern,
    text: str,
    *,
    offset_seconds: int = 0,
    trailing: Union[TrailingInputPolicy, str, None] = None,
    two_digit_year_base: int | None = None,
) -> FieldTuple:
    """Parse ``text`` according to a compiled pattern.

    Args:
        compiled: The compiled pattern.
        text: The input string.
        offset_seconds: UTC offset the parsed wall-clock fields are in.
        trailing: What to do with input left after the last directive.
            Defaults to the ``trailing_input`` setting.
        two_digit_year_base: Century added to ``yy`` years. Defaults to
            the ``two_digit_year_base`` setting.

    Returns:
        The parsed FieldTuple.

    Raises:
        LiteralMismatch: If literal text is missing from the input.
        FieldParseError: If a numeric field has no (or too few) digits.
        UnknownName: If no name-table entry matches.
        TrailingInput: If input remains and the policy is "reject".
        InvalidCalendarField: If the fields denote an impossible date
            or a 12-hour clock hour outside 1-12.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")

    settings = get_settings()
    policy = TrailingInputPolicy(trailing or settings.trailing_input)
    if two_digit_year_base is None:
        two_digit_year_base = settings.two_digit_year_base

    cursor = _Cursor(text)
    for directive in compiled:
        if isinstance(directive, LiteralDirective):
            _match_literal(cursor, directive.text)
        elif isinstance(directive, FieldDirective):
            _read_field(cursor, directive)

    if cursor.pos < len(text) and policy is TrailingInputPolicy.REJECT:
        raise TrailingInput(
            f"unexpected trailing input {text[cursor.pos:]!r} at offset {cursor.pos}",
            offset=cursor.pos,
            expected="end of input",
        )

    values = cursor.values
    if "year2" in values:
        values["year"] = two_digit_year_base + values.pop("year2")
    if "hour12" in values:
        hour12 = values.pop("hour12")
        validate_range("hour", hour12, 1, 12)
        values["hour"] = hour12 % 12 + (12 if cursor.meridiem == "pm" else 0)

    return FieldTuple(
        values.get("year", 1970),
        values.get("month", 1),
        values.get("day", 1),
        values.get("hour", 0),
        values.get("minute", 0),
        values.get("second", 0),
        values.get("millisecond", 0),
        offset_seconds=offset_seconds,
    )


def parse_format(text: str, pattern: str, **kwargs) -> FieldTuple:
    """Compile ``pattern`` (cached) and parse ``text`` with it."""
    return parse(compile_pattern(pattern), text, **kwargs)


def _match_literal(cursor: _Cursor, literal: str) -> None:
    if not cursor.text.startswith(literal, cursor.pos):
        raise LiteralMismatch(
            f"expected {literal!r} at offset {cursor.pos}",
            offset=cursor.pos,
            expected=literal,
        )
    cursor.pos += len(literal)


def _read_field(cursor: _Cursor, directive: FieldDirective) -> None:
    token = directive.kind
    if token.is_name:
        _read_name(cursor, token)
        return

    start = cursor.pos
    negative = False
    if token is Token.YEAR and cursor.text.startswith("-", start):
        negative = True
        cursor.pos += 1

    digits = _read_digits(cursor, token, directive.width or _UNPADDED_MAX_DIGITS)
    if directive.width and len(digits) != directive.width:
        raise FieldParseError(
            f"{token.value} needs {directive.width} digits at offset {start}, "
            f"got {digits!r}",
            offset=start,
            expected=f"{directive.width} digits",
        )

    value = int(digits)
    cursor.values[_TARGETS[token]] = -value if negative else value

    if token is Token.DAY_ORDINAL:
        _read_ordinal_suffix(cursor)


def _read_digits(cursor: _Cursor, token: Token, limit: int) -> str:
    match = _DIGITS.match(cursor.text, cursor.pos)
    if match is None:
        raise FieldParseError(
            f"expected digits for {token.value} at offset {cursor.pos}",
            offset=cursor.pos,
            expected="digits",
        )
    digits = match.group()[:limit]
    cursor.pos += len(digits)
    return digits


def _read_ordinal_suffix(cursor: _Cursor) -> None:
    candidate = cursor.text[cursor.pos:cursor.pos + 2].lower()
    if candidate not in ORDINAL_SUFFIXES:
        raise FieldParseError(
            f"expected ordinal suffix at offset {cursor.pos}",
            offset=cursor.pos,
            expected="one of " + ", ".join(ORDINAL_SUFFIXES),
        )
    cursor.pos += 2


def _read_name(cursor: _Cursor, token: Token) -> None:
    description, table = _NAME_TABLES[token]
    # Longest entries first so a name wins over any shorter prefix of it
    for index, name in sorted(enumerate(table), key=lambda item: -len(item[1])):
        end = cursor.pos + len(name)
        if cursor.text[cursor.pos:end].lower() == name.lower():
            cursor.pos = end
            _store_name(cursor, token, index)
            return
    raise UnknownName(
        f"expected {description} at offset {cursor.pos}",
        offset=cursor.pos,
        expected=description,
    )


def _store_name(cursor: _Cursor, token: Token, index: int) -> None:
    if token in (Token.MONTH_NAME, Token.MONTH_ABBR):
        cursor.values["month"] = index + 1
    elif token is Token.MERIDIEM:
        cursor.meridiem = MERIDIEMS[index]
    # Weekday names are consumed but not checked against the date


__all__ = ["parse", "parse_format"]
