"""Tempotime exception hierarchy.

All Tempotime-specific exceptions inherit from TempotimeError. Parse and
pattern errors carry the input offset where matching failed so callers
can point at the offending character.
"""

from __future__ import annotations


class TempotimeError(Exception):
    """Base exception for all Tempotime errors."""

    pass


class ValidationError(TempotimeError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.
    """

    pass


class InvalidCalendarField(ValidationError):
    """A calendar field is outside its valid range.

    Raised on direct field construction (month 13, day 32, Feb 29 in a
    common year, hour 24, ...). Field *addition* clamps instead.

    Attributes:
        field: Name of the offending field (e.g. "day").
        value: The rejected value.
        low: Smallest accepted value.
        high: Largest accepted value.
    """

    def __init__(self, field: str, value: object, low: int, high: int) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{field} must be between {low} and {high}, got {value}")


class InvalidDuration(ValidationError):
    """A duration cannot be applied as requested.

    Examples:
        - A fractional number of months or years
        - A non-numeric component value
    """

    pass


class ParseError(TempotimeError):
    """Failed to parse a string.

    Attributes:
        offset: Index into the input where matching failed.
        expected: Short description of the construct that was expected.
    """

    def __init__(self, message: str, *, offset: int = 0, expected: str = "") -> None:
        self.offset = offset
        self.expected = expected
        super().__init__(message)


class IsoParseError(ParseError):
    """Input does not follow the ISO 8601 profile."""

    pass


class FieldParseError(ParseError):
    """A numeric field directive found no digits where it needed them."""

    pass


class LiteralMismatch(ParseError):
    """Literal pattern text is not present at the current input offset."""

    pass


class UnknownName(ParseError):
    """No month name, weekday name or meridiem matched the input."""

    pass


class TrailingInput(ParseError):
    """Input remains after every directive has been consumed."""

    pass


class PatternError(TempotimeError):
    """A format pattern could not be compiled.

    Attributes:
        offset: Index into the pattern where the problem starts.
    """

    def __init__(self, message: str, *, offset: int = 0) -> None:
        self.offset = offset
        super().__init__(message)


class UnterminatedLiteral(PatternError):
    """A quoted literal in a pattern has no closing quote."""

    pass


class UnsupportedUnit(TempotimeError, ValueError):
    """An unrecognized unit name was passed to a unit-taking operation.

    Attributes:
        unit: The rejected unit name.
    """

    def __init__(self, unit: object, supported: tuple[str, ...] = ()) -> None:
        self.unit = unit
        message = f"unsupported unit: {unit!r}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class OverflowError(TempotimeError):
    """Arithmetic operation exceeded the representable range.

    Examples:
        - Adding a duration that goes past year 9999
        - Subtracting a duration that goes before year -9999
    """

    pass


class TimezoneError(TempotimeError):
    """Invalid timezone specification.

    Examples:
        - Malformed UTC offset string
        - Offset outside the valid range (-14h to +14h)
    """

    pass


class UnknownZone(TimezoneError):
    """The zone resolver has no entry for the requested zone name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown zone: {name!r}")


__all__ = [
    "TempotimeError",
    "ValidationError",
    "InvalidCalendarField",
    "InvalidDuration",
    "ParseError",
    "IsoParseError",
    "FieldParseError",
    "LiteralMismatch",
    "UnknownName",
    "TrailingInput",
    "PatternError",
    "UnterminatedLiteral",
    "UnsupportedUnit",
    "OverflowError",
    "TimezoneError",
    "UnknownZone",
]
