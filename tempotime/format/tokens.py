"""Format pattern compiler.

A pattern such as ``"MMMM do, yyyy 'at' h:mm a"`` is compiled once into a
CompiledPattern: an ordered tuple of FieldDirective and LiteralDirective
entries shared by the formatter and the parser.

Supported Tokens (longest match wins):
    yyyy - 4-digit year          yy   - 2-digit year
    MMMM - full month name       MMM  - short month name
    MM   - 2-digit month         M    - month
    do   - day with ordinal      dd   - 2-digit day      d - day
    EEEE - full weekday name     EEE  - short weekday name
    HH   - 2-digit hour (0-23)   H    - hour (0-23)
    hh   - 2-digit hour (1-12)   h    - hour (1-12)
    mm   - 2-digit minute        m    - minute
    ss   - 2-digit second        s    - second
    SSS  - 3-digit millisecond
    a    - am/pm

Quoting:
    Text between single quotes is literal. Two single quotes ('') stand
    for one quote character, inside or outside a quoted run. Any other
    character that does not start a token is copied verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from tempotime._internal.decorators import memoize
from tempotime.errors import UnterminatedLiteral

logger = logging.getLogger(__name__)

QUOTE = "'"

# Compiled patterns kept by compile_pattern before the oldest is dropped
PATTERN_CACHE_SIZE = 256


class Token(Enum):
    """Field tokens recognized in format patterns."""

    YEAR = "yyyy"
    YEAR_2 = "yy"
    MONTH_NAME = "MMMM"
    MONTH_ABBR = "MMM"
    MONTH_2 = "MM"
    MONTH = "M"
    DAY_ORDINAL = "do"
    DAY_2 = "dd"
    DAY = "d"
    WEEKDAY_NAME = "EEEE"
    WEEKDAY_ABBR = "EEE"
    HOUR_2 = "HH"
    HOUR = "H"
    HOUR12_2 = "hh"
    HOUR12 = "h"
    MINUTE_2 = "mm"
    MINUTE = "m"
    SECOND_2 = "ss"
    SECOND = "s"
    MILLISECOND = "SSS"
    MERIDIEM = "a"

    @property
    def width(self) -> int:
        """Fixed digit count for padded numeric tokens, 0 otherwise."""
        return _WIDTHS.get(self, 0)

    @property
    def is_name(self) -> bool:
        """Return True for tokens matched against a name table."""
        return self in _NAME_TOKENS


_WIDTHS: dict[Token, int] = {
    Token.YEAR: 4,
    Token.YEAR_2: 2,
    Token.MONTH_2: 2,
    Token.DAY_2: 2,
    Token.HOUR_2: 2,
    Token.HOUR12_2: 2,
    Token.MINUTE_2: 2,
    Token.SECOND_2: 2,
    Token.MILLISECOND: 3,
}

_NAME_TOKENS: frozenset[Token] = frozenset(
    {
        Token.MONTH_NAME,
        Token.MONTH_ABBR,
        Token.WEEKDAY_NAME,
        Token.WEEKDAY_ABBR,
        Token.MERIDIEM,
    }
)

# Longest first so that MMMM wins over MMM over MM over M
_TOKENS_BY_LENGTH: tuple[Token, ...] = tuple(
    sorted(Token, key=lambda token: len(token.value), reverse=True)
)


@dataclass(frozen=True)
class FieldDirective:
    """A field to render or parse.

    Attributes:
        kind: The token that produced this directive.
        width: Fixed digit count for padded numeric fields, 0 otherwise.
    """

    kind: Token
    width: int = 0


@dataclass(frozen=True)
class LiteralDirective:
    """Text copied verbatim when rendering and matched exactly when parsing."""

    text: str


Directive = Union[FieldDirective, LiteralDirective]


@dataclass(frozen=True)
class CompiledPattern:
    """The compiled form of a format pattern.

    Attributes:
        pattern: The source pattern string.
        directives: Directives in pattern order; adjacent literal text
            is merged into a single LiteralDirective.
    """

    pattern: str
    directives: tuple[Directive, ...]

    def __iter__(self) -> Iterator[Directive]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)

    @property
    def fields(self) -> tuple[Token, ...]:
        """Return the field tokens in pattern order."""
        return tuple(d.kind for d in self.directives if isinstance(d, FieldDirective))


@memoize(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a format pattern into directives.

    Compilation is purely syntactic and cached per pattern string. The
    cache holds at most PATTERN_CACHE_SIZE patterns.

    Args:
        pattern: The format pattern.

    Returns:
        The CompiledPattern.

    Raises:
        TypeError: If pattern is not a string.
        UnterminatedLiteral: If a quoted run is never closed; ``offset``
            is the index of the opening quote.

    Examples:
        >>> compile_pattern("yyyy-MM").directives
        (FieldDirective(kind=<Token.YEAR: 'yyyy'>, width=4), LiteralDirective(text='-'), FieldDirective(kind=<Token.MONTH_2: 'MM'>, width=2))

        >>> compile_pattern("h 'o''clock'").directives[1]
        LiteralDirective(text=" o'clock")
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")

    directives: list[Directive] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            directives.append(LiteralDirective("".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]

        if ch == QUOTE:
            if pattern.startswith(QUOTE * 2, i):
                literal.append(QUOTE)
                i += 2
                continue
            i = _read_quoted(pattern, i, literal)
            continue

        token = _match_token(pattern, i)
        if token is None:
            literal.append(ch)
            i += 1
            continue

        flush()
        directives.append(FieldDirective(token, token.width))
        i += len(token.value)

    flush()
    compiled = CompiledPattern(pattern, tuple(directives))
    logger.debug("compiled pattern %r into %d directives", pattern, len(compiled))
    return compiled


def _read_quoted(pattern: str, start: int, out: list[str]) -> int:
    """Consume a quoted run opening at ``start``; return the index after it."""
    i = start + 1
    n = len(pattern)
    while i < n:
        if pattern[i] == QUOTE:
            if pattern.startswith(QUOTE * 2, i):
                out.append(QUOTE)
                i += 2
                continue
            return i + 1
        out.append(pattern[i])
        i += 1
    raise UnterminatedLiteral(
        f"unterminated literal starting at offset {start} in pattern {pattern!r}",
        offset=start,
    )


def _match_token(pattern: str, i: int) -> Token | None:
    for token in _TOKENS_BY_LENGTH:
        if pattern.startswith(token.value, i):
            return token
    return None


__all__ = [
    "Token",
    "FieldDirective",
    "LiteralDirective",
    "Directive",
    "CompiledPattern",
    "compile_pattern",
]
