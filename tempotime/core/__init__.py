"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Milliseconds since the Unix epoch
    - FieldTuple: Calendar and clock fields under a UTC offset
    - Duration: Amounts of calendar and clock units, never normalized
    - Interval: Span between two DateTimes, half-open [min, max)
    - DateTime: An Instant viewed through a Zone
"""

from __future__ import annotations

from tempotime.core.instant import Instant
from tempotime.core.fields import FieldTuple, from_fields, to_fields
from tempotime.core.duration import Duration
from tempotime.core.interval import Interval
from tempotime.core.datetime import DateTime, dt

__all__: list[str] = [
    "Instant",
    "FieldTuple",
    "to_fields",
    "from_fields",
    "Duration",
    "Interval",
    "DateTime",
    "dt",
]
