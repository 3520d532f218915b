"""Zone representation using a fixed UTC offset.

This module provides the Zone class: an optional zone name together
with the offset in seconds east of UTC that applies to a DateTime.
Looking a name up is the job of a ZoneResolver (see units.zones).
"""

from __future__ import annotations

import re
from typing import ClassVar

from tempotime._internal.constants import MAX_UTC_OFFSET_SECONDS
from tempotime.errors import TimezoneError

_OFFSET_RE = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")


class Zone:
    """A zone represented as a name plus a UTC offset.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC.

    Attributes:
        offset_seconds: The UTC offset in seconds.
        name: Optional zone name (e.g. "Asia/Tokyo").

    Examples:
        >>> Zone.utc().is_utc
        True

        >>> Zone.from_string("+05:30").offset_seconds
        19800

        >>> Zone(9 * 3600, "Asia/Tokyo").iso_suffix
        '+09:00'
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Zone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Zone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds. Positive values are
                east of UTC, negative values are west.
            name: Optional name for the zone.

        Raises:
            TimezoneError: If offset_seconds is not an int or outside +/-14h.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name

    @classmethod
    def utc(cls) -> Zone:
        """Return the shared UTC zone instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_string(cls, s: str) -> Zone:
        """Parse an offset string into a Zone.

        Supported formats:
            - "Z", "z" or "UTC": UTC
            - "+HH:MM" or "-HH:MM"
            - "+HHMM" or "-HHMM"
            - "+HH" or "-HH"

        Args:
            s: String representation of the offset.

        Returns:
            A new unnamed Zone (or the UTC zone).

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> Zone.from_string("Z").is_utc
            True

            >>> Zone.from_string("-0500").offset_seconds
            -18000
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_RE.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse offset string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * 3600 + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds (positive east of UTC)."""
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        """Return the zone name, or None for a bare offset."""
        return self._name

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_seconds == 0

    @property
    def iso_suffix(self) -> str:
        """Return the ISO 8601 offset suffix: "Z" or "+HH:MM"."""
        if self._offset_seconds == 0:
            return "Z"
        return format_offset(self._offset_seconds)

    def __eq__(self, other: object) -> bool:
        """Two zones are equal if they have the same offset."""
        if not isinstance(other, Zone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"Zone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Zone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the zone name if set, otherwise "+HH:MM" (or "UTC")."""
        if self._name:
            return self._name
        if self._offset_seconds == 0:
            return "UTC"
        return format_offset(self._offset_seconds)


def format_offset(offset_seconds: int) -> str:
    """Format an offset in seconds as "+HH:MM" / "-HH:MM"."""
    sign = "+" if offset_seconds >= 0 else "-"
    total_minutes = abs(offset_seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Zone", "format_offset"]
