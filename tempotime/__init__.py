"""Tempotime: immutable datetimes with calendar-aware arithmetic.

Tempotime works from a millisecond Instant and derives calendar fields
through its own proleptic Gregorian engine. Formatting and parsing use
token patterns in the style of "MMMM do, yyyy 'at' h:mm a".

Core Types:
    DateTime: An instant viewed through a zone (the main entry point)
    Duration: Amounts of years, months, weeks, days, hours, ...
    Interval: Span between two DateTimes
    Instant: Milliseconds since the Unix epoch
    FieldTuple: Calendar and clock fields

Units:
    TimeUnit: Standard time units (YEAR, MONTH, DAY, etc.)
    Zone: Named UTC offset
    StaticZoneResolver, ZoneInfoResolver: Zone name lookup

Exceptions:
    TempotimeError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    PatternError: Failed to compile a format pattern
    OverflowError: Instant out of range
    TimezoneError: Invalid or unknown zone

Example:
    >>> from tempotime import DateTime
    >>> d = DateTime.from_iso("2025-10-30T14:30:00Z")
    >>> d.plus(weeks=2, days=3).to_format("MMMM do, yyyy")
    'November 16th, 2025'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempotime.core.instant import Instant
from tempotime.core.fields import FieldTuple
from tempotime.core.duration import Duration
from tempotime.core.interval import Interval
from tempotime.core.datetime import DateTime, dt

# Units
from tempotime.units.timeunit import TimeUnit
from tempotime.units.timezone import Zone
from tempotime.units.zones import StaticZoneResolver, ZoneInfoResolver, ZoneResolver

# Configuration
from tempotime.config import Settings, configure, get_settings, reset_settings

# Exceptions
from tempotime.errors import (
    FieldParseError,
    InvalidCalendarField,
    InvalidDuration,
    IsoParseError,
    LiteralMismatch,
    OverflowError,
    ParseError,
    PatternError,
    TempotimeError,
    TimezoneError,
    TrailingInput,
    UnknownName,
    UnknownZone,
    UnsupportedUnit,
    UnterminatedLiteral,
    ValidationError,
)

# Format presets
from tempotime.format.presets import PRESETS

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "Duration",
    "Interval",
    "Instant",
    "FieldTuple",
    "dt",
    # Units
    "TimeUnit",
    "Zone",
    "ZoneResolver",
    "StaticZoneResolver",
    "ZoneInfoResolver",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
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
    # Presets
    "PRESETS",
]
