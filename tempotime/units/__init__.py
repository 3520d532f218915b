"""Temporal units and zones.

This module provides:
    - TimeUnit: Standard time units (YEAR, MONTH, DAY, etc.)
    - Zone: Named UTC offset attached to a DateTime
    - ZoneResolver: Pluggable zone name lookup (static table or zoneinfo)
    - local_zone: The operating system's current UTC offset
"""

from __future__ import annotations

from tempotime.units.timeunit import TimeUnit
from tempotime.units.timezone import Zone
from tempotime.units.zones import (
    StaticZoneResolver,
    ZoneInfoResolver,
    ZoneResolver,
    local_zone,
)

__all__: list[str] = [
    "TimeUnit",
    "Zone",
    "ZoneResolver",
    "StaticZoneResolver",
    "ZoneInfoResolver",
    "local_zone",
]
