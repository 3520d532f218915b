"""DateTime: an Instant viewed through a zone.

This module provides the DateTime class, the public facade of the
library. A DateTime pairs an Instant with a Zone; calendar fields are
derived from the two on demand, and every operation returns a new value.
"""

from __future__ import annotations

import functools
import logging
import math
from typing import Mapping, Union

from tempotime.arithmetic.field_ops import add_fields, calendar_diff, end_of, start_of
from tempotime.config import get_settings, get_zone_resolver
from tempotime.core.duration import Duration
from tempotime.core.fields import FieldTuple, from_fields, to_fields
from tempotime.core.instant import Instant
from tempotime.errors import InvalidDuration, OverflowError
from tempotime.format.formatter import Sink, format_fields, render_into
from tempotime.format.iso8601 import format_iso, parse_iso
from tempotime.format.parser import parse
from tempotime.format.presets import resolve_preset
from tempotime.format.tokens import compile_pattern
from tempotime.units.timeunit import TimeUnit
from tempotime.units.timezone import Zone
from tempotime.units.zones import ZoneResolver, local_zone

logger = logging.getLogger(__name__)

ZoneLike = Union[Zone, str, None]
DurationLike = Union[Duration, Mapping[Union[str, TimeUnit], Union[int, float]]]


@functools.total_ordering
class DateTime:
    """An immutable point in time with a zone for field derivation.

    Two DateTimes are equal when they denote the same instant, whatever
    their zones. Named zones remember the resolver they came from, so
    calendar arithmetic across a DST change keeps the wall-clock time.

    Attributes:
        year: The year in this zone.
        month: The month (1-12).
        day: The day of month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        weekday: Day of week, 0 = Monday ... 6 = Sunday.
        zone: The Zone used for field derivation.

    Examples:
        >>> d = DateTime.from_iso("2025-10-30T14:30:00Z")
        >>> d.plus({"weeks": 2, "days": 3}).start_of("day").to_format("MMMM do, yyyy")
        'November 16th, 2025'

        >>> DateTime.from_iso("2024-01-31").plus(months=1).to_iso()
        '2024-02-29T00:00:00Z'

        >>> DateTime.from_iso("2025-10-30T12:00:00Z").set_zone("America/New_York").to_format("HH")
        '07'
    """

    __slots__ = ("_instant", "_zone", "_resolver")

    def __init__(
        self,
        instant: Union[Instant, int],
        zone: ZoneLike = None,
        *,
        resolver: ZoneResolver | None = None,
    ) -> None:
        """Create a DateTime from an Instant (or epoch milliseconds).

        Args:
            instant: The point in time.
            zone: A Zone, a zone name / offset string, or None for UTC.
            resolver: Resolver for zone names. Defaults to the one selected
                by the ``zone_backend`` setting.

        Raises:
            UnknownZone: If a zone name cannot be resolved.
            OverflowError: If epoch milliseconds are out of range.
        """
        if not isinstance(instant, Instant):
            instant = Instant(instant)
        self._instant: Instant = instant
        self._zone, self._resolver = _resolve_zone(zone, instant, resolver)

    @classmethod
    def _from_internal(
        cls,
        instant: Instant,
        zone: Zone,
        resolver: ZoneResolver | None,
    ) -> DateTime:
        """Create a DateTime from already-resolved parts, skipping lookup."""
        instance = object.__new__(cls)
        instance._instant = instant
        instance._zone = zone
        instance._resolver = resolver
        return instance

    # Construction

    @classmethod
    def now(cls, zone: ZoneLike = None) -> DateTime:
        """Return the current instant in ``zone`` (default: ``default_zone`` setting)."""
        if zone is None:
            zone = get_settings().default_zone
        return cls(Instant.now(), zone)

    @classmethod
    def local(cls) -> DateTime:
        """Return the current instant in the operating system's local offset.

        The zone is a fixed, unnamed offset (UTC when the system is on UTC).
        Use now() with a zone name for DST-aware local time.
        """
        instant = Instant.now()
        return cls._from_internal(instant, local_zone(instant), None)

    @classmethod
    def from_epoch_ms(cls, ms: int, zone: ZoneLike = None) -> DateTime:
        """Create a DateTime from milliseconds since the Unix epoch."""
        return cls(Instant(ms), zone)

    @classmethod
    def from_iso(cls, text: str) -> DateTime:
        """Parse an ISO 8601 string.

        The zone of the result is the offset written in the string (UTC
        when absent).

        Raises:
            IsoParseError: If the text does not follow the ISO profile.
            InvalidCalendarField: If a field is out of range.

        Examples:
            >>> DateTime.from_iso("2025-10-30T09:00:00-05:00").to_utc().hour
            14
        """
        fields = parse_iso(text)
        if fields.offset_seconds == 0:
            zone = Zone.utc()
        else:
            zone = Zone(fields.offset_seconds)
        return cls._from_internal(from_fields(fields), zone, None)

    @classmethod
    def from_format(
        cls,
        text: str,
        pattern: str,
        *,
        zone: ZoneLike = None,
        trailing: str | None = None,
    ) -> DateTime:
        """Parse ``text`` with a token pattern.

        Args:
            text: The input string.
            pattern: Format pattern (see tempotime.format.tokens).
            zone: Zone the wall-clock fields are in. Defaults to the
                ``default_zone`` setting.
            trailing: "reject" or "ignore" for leftover input. Defaults to
                the ``trailing_input`` setting.

        Raises:
            PatternError: If the pattern cannot be compiled.
            ParseError: If the text does not match the pattern.
            InvalidCalendarField: If the parsed date is impossible.

        Examples:
            >>> DateTime.from_format("Oct 30, 2025", "MMM dd, yyyy").to_iso()
            '2025-10-30T00:00:00Z'
        """
        fields = parse(compile_pattern(pattern), text, trailing=trailing)
        if zone is None:
            zone = get_settings().default_zone
        return _place(fields, *_resolve_zone(zone, from_fields(fields), None))

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        zone: ZoneLike = None,
    ) -> DateTime:
        """Create a DateTime from wall-clock fields in ``zone`` (default UTC).

        Raises:
            InvalidCalendarField: If any field is out of range.

        Examples:
            >>> DateTime.from_fields(2025, 1, 15, 8, 30).to_iso()
            '2025-01-15T08:30:00Z'
        """
        fields = FieldTuple(year, month, day, hour, minute, second, millisecond)
        return _place(fields, *_resolve_zone(zone, from_fields(fields), None))

    # Fields

    def to_fields(self) -> FieldTuple:
        """Return the calendar fields of this instant in its zone."""
        return to_fields(self._instant, self._zone.offset_seconds)

    @property
    def year(self) -> int:
        """Return the year."""
        return self.to_fields().year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self.to_fields().month

    @property
    def day(self) -> int:
        """Return the day of month."""
        return self.to_fields().day

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self.to_fields().hour

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self.to_fields().minute

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self.to_fields().second

    @property
    def millisecond(self) -> int:
        """Return the millisecond (0-999)."""
        return self.to_fields().millisecond

    @property
    def weekday(self) -> int:
        """Return the day of week (0 = Monday, 6 = Sunday)."""
        return self.to_fields().weekday

    @property
    def zone(self) -> Zone:
        """Return the zone used for field derivation."""
        return self._zone

    @property
    def instant(self) -> Instant:
        """Return the underlying Instant."""
        return self._instant

    def to_epoch_ms(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._instant.epoch_ms

    # Transformation

    def plus(self, duration: DurationLike | None = None, **units: Union[int, float]) -> DateTime:
        """Return this DateTime moved forward by a duration.

        Accepts a Duration, a mapping of unit names to amounts, or unit
        keyword arguments. Years and months are applied first, together,
        with one clamp of the day of month; weeks and finer units are
        then added as exact milliseconds.

        Raises:
            UnsupportedUnit: If a unit name is unknown.
            InvalidDuration: If years or months are fractional.
            OverflowError: If the result is out of range.

        Examples:
            >>> DateTime.from_iso("2024-01-31").plus(months=1).plus(months=1).day
            29
        """
        delta = _to_duration(duration, units)
        calendar: dict[TimeUnit, Union[int, float]] = {}
        millis: Union[int, float] = 0
        for unit, amount in delta.items():
            if unit.is_calendar:
                calendar[unit] = amount
            else:
                millis += amount * unit.to_milliseconds()
        if not math.isfinite(millis):
            raise OverflowError("duration is too large to apply")

        result = self
        if calendar:
            moved = add_fields(self.to_fields(), calendar)
            result = _place(moved, self._zone, self._resolver)
        millis = round(millis)
        if millis:
            result = result._at(result._instant.shifted(millis))
        return result

    def minus(self, duration: DurationLike | None = None, **units: Union[int, float]) -> DateTime:
        """Return this DateTime moved backward by a duration; see plus()."""
        return self.plus(-_to_duration(duration, units))

    def start_of(self, unit: Union[str, TimeUnit]) -> DateTime:
        """Return the first millisecond of the unit containing this DateTime.

        Supported units: year, month, week (Monday start), day, hour,
        minute, second.

        Raises:
            UnsupportedUnit: If the unit is unknown.
        """
        return _place(start_of(self.to_fields(), unit), self._zone, self._resolver)

    def end_of(self, unit: Union[str, TimeUnit]) -> DateTime:
        """Return the last millisecond of the unit containing this DateTime."""
        return _place(end_of(self.to_fields(), unit), self._zone, self._resolver)

    def set_zone(
        self,
        zone: Union[Zone, str],
        *,
        resolver: ZoneResolver | None = None,
    ) -> DateTime:
        """Return the same instant viewed in another zone.

        Args:
            zone: A Zone, a zone name ("Asia/Tokyo") or an offset ("+05:30").
            resolver: Resolver for names; defaults to this DateTime's
                resolver, then to the configured backend.

        Raises:
            UnknownZone: If the name cannot be resolved.

        Examples:
            >>> DateTime.from_iso("2025-10-30T00:00:00Z").set_zone("Asia/Tokyo").hour
            9
        """
        zone_obj, used = _resolve_zone(zone, self._instant, resolver or self._resolver)
        return DateTime._from_internal(self._instant, zone_obj, used)

    def to_utc(self) -> DateTime:
        """Return the same instant in UTC."""
        return DateTime._from_internal(self._instant, Zone.utc(), None)

    def _at(self, instant: Instant) -> DateTime:
        """Return ``instant`` in this zone, re-resolving a named zone."""
        if self._resolver is None or self._zone.name is None:
            return DateTime._from_internal(instant, self._zone, self._resolver)
        zone = self._resolver.zone(self._zone.name, instant)
        return DateTime._from_internal(instant, zone, self._resolver)

    # Output

    def to_iso(self, precision: str = "auto") -> str:
        """Return the ISO 8601 form, e.g. ``2025-10-30T14:30:00Z``.

        Args:
            precision: "auto" (milliseconds when non-zero), "seconds" or
                "millis".
        """
        return format_iso(self.to_fields(), precision)

    def to_format(self, pattern: str) -> str:
        """Render this DateTime with a token pattern.

        Raises:
            PatternError: If the pattern cannot be compiled.
        """
        return format_fields(self.to_fields(), pattern)

    def format_into(self, pattern: str, sink: Sink) -> None:
        """Write this DateTime rendered with ``pattern`` to ``sink.write``."""
        render_into(compile_pattern(pattern), self.to_fields(), sink)

    def to_locale_string(self, preset: str) -> str:
        """Render with a named preset ("DATE_MED") or a raw pattern.

        Examples:
            >>> DateTime.from_iso("2025-10-30T14:30:00Z").to_locale_string("DATETIME_MED")
            'Oct 30, 2025, 2:30 pm'
        """
        return self.to_format(resolve_preset(preset))

    # Queries

    def diff(self, other: DateTime, unit: Union[str, TimeUnit] = TimeUnit.MILLISECOND) -> float:
        """Return ``self - other`` measured in ``unit``.

        Months and years are counted on the calendar starting from
        ``other``, with a fractional remainder.

        Raises:
            UnsupportedUnit: If the unit is unknown.

        Examples:
            >>> a = DateTime.from_iso("2025-01-01")
            >>> DateTime.from_iso("2025-01-03T12:00:00Z").diff(a, "days")
            2.5
        """
        if not isinstance(other, DateTime):
            raise TypeError(f"diff() expects a DateTime, got {type(other).__name__}")
        return calendar_diff(other.to_fields(), self.to_fields(), unit)

    # Operators

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Union[DateTime, Duration]:
        """Subtract a Duration, or return the Duration between two DateTimes."""
        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, DateTime):
            return Duration(milliseconds=self._instant - other._instant)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """DateTimes are equal if they denote the same instant."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant < other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        return f"DateTime({self.to_iso()!r}, zone={str(self._zone)!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso()


def dt() -> DateTime:
    """Return DateTime.now() in the configured default zone."""
    return DateTime.now()


def _resolve_zone(
    zone: ZoneLike,
    at: Instant,
    resolver: ZoneResolver | None,
) -> tuple[Zone, ZoneResolver | None]:
    """Turn a zone argument into a Zone plus the resolver that produced it."""
    if zone is None:
        return Zone.utc(), None
    if isinstance(zone, Zone):
        return zone, None
    if not isinstance(zone, str):
        raise TypeError(f"zone must be a Zone or str, got {type(zone).__name__}")
    resolver = resolver or get_zone_resolver()
    resolved = resolver.zone(zone, at)
    logger.debug("resolved zone %r to offset %d", zone, resolved.offset_seconds)
    return resolved, resolver


def _place(
    fields: FieldTuple,
    zone: Zone,
    resolver: ZoneResolver | None,
) -> DateTime:
    """Build the DateTime whose wall-clock fields in ``zone`` are ``fields``.

    For a named zone with a resolver, the offset is looked up again at
    the resulting instant so that fields landing on the other side of a
    DST transition get the offset that applies there.
    """
    instant = from_fields(fields.replace(offset_seconds=zone.offset_seconds))
    if resolver is None or zone.name is None:
        return DateTime._from_internal(instant, zone, None)
    local = resolver.zone(zone.name, instant)
    if local.offset_seconds != zone.offset_seconds:
        instant = from_fields(fields.replace(offset_seconds=local.offset_seconds))
    return DateTime._from_internal(instant, local, resolver)


def _to_duration(
    duration: DurationLike | None,
    units: Mapping[str, Union[int, float]],
) -> Duration:
    if duration is None:
        return Duration.from_object(units)
    if units:
        raise InvalidDuration("pass either a duration or unit keywords, not both")
    if isinstance(duration, Duration):
        return duration
    if isinstance(duration, Mapping):
        return Duration.from_object(duration)
    raise TypeError(
        f"expected a Duration or a mapping of units, got {type(duration).__name__}"
    )


__all__ = ["DateTime", "dt"]
