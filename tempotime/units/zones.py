"""Zone name resolution.

A ZoneResolver maps a zone name to the UTC offset in effect at a given
instant. Two resolvers ship with the package:

    - StaticZoneResolver: a small fixed table, no daylight saving time.
    - ZoneInfoResolver: the standard-library zoneinfo database, DST aware.

Which one a DateTime uses is decided by the caller (or by the
``zone_backend`` setting), never by inspecting the zone name.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tempotime._internal.constants import SECONDS_PER_HOUR
from tempotime.errors import TimezoneError, UnknownZone
from tempotime.units.timezone import Zone

if TYPE_CHECKING:
    from tempotime.core.instant import Instant

logger = logging.getLogger(__name__)

STATIC_ZONE_OFFSETS: Mapping[str, int] = {
    "UTC": 0,
    "America/New_York": -5 * SECONDS_PER_HOUR,
    "America/Los_Angeles": -8 * SECONDS_PER_HOUR,
    "Europe/London": 0,
    "Europe/Paris": 1 * SECONDS_PER_HOUR,
    "Asia/Tokyo": 9 * SECONDS_PER_HOUR,
    "Asia/Shanghai": 8 * SECONDS_PER_HOUR,
    "Australia/Sydney": 10 * SECONDS_PER_HOUR,
    "Asia/Kolkata": 5 * SECONDS_PER_HOUR + 30 * 60,
    "America/Sao_Paulo": -3 * SECONDS_PER_HOUR,
}

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# One day inside datetime's range so astimezone() never overflows
_EARLIEST = datetime(1, 1, 2, tzinfo=timezone.utc)
_LATEST = datetime(9999, 12, 30, tzinfo=timezone.utc)


class ZoneResolver(ABC):
    """Interface for mapping zone names to UTC offsets."""

    @abstractmethod
    def resolve(self, name: str, at: Instant | None = None) -> int | None:
        """Return the offset in seconds east of UTC for ``name``.

        Args:
            name: Zone name, e.g. "Asia/Tokyo".
            at: Instant at which the offset applies. Resolvers without
                DST rules ignore it.

        Returns:
            The offset in seconds, or None if the name is unknown.
        """

    def zone(self, name: str, at: Instant | None = None) -> Zone:
        """Resolve ``name`` into a Zone.

        Numeric offsets such as "+05:30", "-0800" or "Z" are accepted
        directly without consulting the resolver's table.

        Raises:
            UnknownZone: If the name is neither an offset nor known.
        """
        if name[:1] in ("+", "-") or name.upper() == "Z":
            try:
                return Zone.from_string(name)
            except TimezoneError:
                raise UnknownZone(name) from None

        offset = self.resolve(name, at)
        if offset is None:
            raise UnknownZone(name)
        if name.upper() == "UTC":
            return Zone.utc()
        return Zone(offset, name)


class StaticZoneResolver(ZoneResolver):
    """Resolver backed by a fixed, case-insensitive name table.

    Offsets are standard time; daylight saving time is not modelled.

    Args:
        table: Optional replacement table of name -> offset seconds.

    Examples:
        >>> StaticZoneResolver().resolve("asia/tokyo")
        32400
        >>> StaticZoneResolver().resolve("Mars/Olympus") is None
        True
    """

    def __init__(self, table: Mapping[str, int] | None = None) -> None:
        source = STATIC_ZONE_OFFSETS if table is None else table
        self._table = {key.lower(): value for key, value in source.items()}

    def resolve(self, name: str, at: Instant | None = None) -> int | None:
        offset = self._table.get(name.strip().lower())
        if offset is None:
            logger.debug("static zone table has no entry for %r", name)
        return offset

    def __repr__(self) -> str:
        return f"StaticZoneResolver(zones={len(self._table)})"


class ZoneInfoResolver(ZoneResolver):
    """Resolver backed by the IANA database via ``zoneinfo``.

    The offset, including any DST adjustment, is evaluated at ``at``;
    when ``at`` is omitted the current instant is used.
    """

    def resolve(self, name: str, at: Instant | None = None) -> int | None:
        try:
            tz = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("zoneinfo has no zone named %r", name)
            return None

        if at is None:
            moment = datetime.now(timezone.utc)
        else:
            moment = _utc_datetime(at.epoch_ms)
        offset = moment.astimezone(tz).utcoffset()
        if offset is None:
            return None
        return int(offset.total_seconds())

    def __repr__(self) -> str:
        return "ZoneInfoResolver()"


def local_zone(at: Instant | None = None) -> Zone:
    """Return the operating system's local UTC offset as an unnamed Zone.

    The offset is the one in effect at ``at`` (default: now). It is a
    fixed snapshot; later arithmetic does not follow local DST changes.
    """
    if at is None:
        moment = datetime.now(timezone.utc)
    else:
        moment = _utc_datetime(at.epoch_ms)
    offset = moment.astimezone().utcoffset()
    if not offset:
        return Zone.utc()
    return Zone(int(offset.total_seconds()))


def _utc_datetime(epoch_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware datetime, clamped to its range."""
    try:
        moment = _UNIX_EPOCH + timedelta(milliseconds=epoch_ms)
    except OverflowError:
        return _EARLIEST if epoch_ms < 0 else _LATEST
    return min(max(moment, _EARLIEST), _LATEST)


__all__ = [
    "STATIC_ZONE_OFFSETS",
    "ZoneResolver",
    "StaticZoneResolver",
    "ZoneInfoResolver",
    "local_zone",
]
