"""Render FieldTuples through compiled patterns.

Functions:
    render: Produce a string for a FieldTuple.
    render_into: Write the pieces of that string to a sink, one at a time.
    format_fields: Compile a pattern and render in one call.

Examples:
    >>> from tempotime.core.fields import FieldTuple
    >>> format_fields(FieldTuple(2025, 11, 16), "MMMM do, yyyy")
    'November 16th, 2025'
    >>> format_fields(FieldTuple(2025, 10, 30, 0, 5), "h:mm a")
    '12:05 am'
"""

from __future__ import annotations

from typing import Callable, Iterator, Protocol

from tempotime.core.fields import FieldTuple
from tempotime.format.names import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
    meridiem,
    ordinal_suffix,
    to_twelve_hour,
)
from tempotime.format.tokens import (
    CompiledPattern,
    FieldDirective,
    LiteralDirective,
    Token,
    compile_pattern,
)


class Sink(Protocol):
    """Anything with a ``write(str)`` method, e.g. io.StringIO or a text file."""

    def write(self, text: str, /) -> object: ...


def _year(year: int) -> str:
    # At least four digits; negative years keep their sign
    if year >= 0:
        return f"{year:04d}"
    return f"-{-year:04d}"


_RENDERERS: dict[Token, Callable[[FieldTuple], str]] = {
    Token.YEAR: lambda f: _year(f.year),
    Token.YEAR_2: lambda f: f"{f.year % 100:02d}",
    Token.MONTH_NAME: lambda f: MONTH_NAMES[f.month - 1],
    Token.MONTH_ABBR: lambda f: MONTH_ABBREVIATIONS[f.month - 1],
    Token.MONTH_2: lambda f: f"{f.month:02d}",
    Token.MONTH: lambda f: str(f.month),
    Token.DAY_ORDINAL: lambda f: f"{f.day}{ordinal_suffix(f.day)}",
    Token.DAY_2: lambda f: f"{f.day:02d}",
    Token.DAY: lambda f: str(f.day),
    Token.WEEKDAY_NAME: lambda f: WEEKDAY_NAMES[f.weekday],
    Token.WEEKDAY_ABBR: lambda f: WEEKDAY_ABBREVIATIONS[f.weekday],
    Token.HOUR_2: lambda f: f"{f.hour:02d}",
    Token.HOUR: lambda f: str(f.hour),
    Token.HOUR12_2: lambda f: f"{to_twelve_hour(f.hour):02d}",
    Token.HOUR12: lambda f: str(to_twelve_hour(f.hour)),
    Token.MINUTE_2: lambda f: f"{f.minute:02d}",
    Token.MINUTE: lambda f: str(f.minute),
    Token.SECOND_2: lambda f: f"{f.second:02d}",
    Token.SECOND: lambda f: str(f.second),
    Token.MILLISECOND: lambda f: f"{f.millisecond:03d}",
    Token.MERIDIEM: lambda f: meridiem(f.hour),
}


def _pieces(compiled: CompiledPattern, fields: FieldTuple) -> Iterator[str]:
    for directive in compiled:
        if isinstance(directive, LiteralDirective):
            yield directive.text
        elif isinstance(directive, FieldDirective):
            yield _RENDERERS[directive.kind](fields)


def render(compiled: CompiledPattern, fields: FieldTuple) -> str:
    """Render ``fields`` through a compiled pattern.

    Never fails for a valid FieldTuple.
    """
    return "".join(_pieces(compiled, fields))


def render_into(compiled: CompiledPattern, fields: FieldTuple, sink: Sink) -> None:
    """Write each rendered piece straight to ``sink.write``.

    Examples:
        >>> import io
        >>> from tempotime.core.fields import FieldTuple
        >>> buf = io.StringIO()
        >>> render_into(compile_pattern("yyyy/MM"), FieldTuple(2025, 3, 1), buf)
        >>> buf.getvalue()
        '2025/03'
    """
    for piece in _pieces(compiled, fields):
        sink.write(piece)


def format_fields(fields: FieldTuple, pattern: str) -> str:
    """Compile ``pattern`` (cached) and render ``fields`` with it."""
    return render(compile_pattern(pattern), fields)


__all__ = ["Sink", "render", "render_into", "format_fields"]
