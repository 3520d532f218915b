"""Instant: a point on the UTC timeline.

An Instant is a signed count of milliseconds since 1970-01-01T00:00:00Z.
It carries no zone and no calendar fields; those are derived on demand
by tempotime.core.fields.
"""

from __future__ import annotations

import functools
import time as _time

from tempotime._internal.calendar import days_from_civil
from tempotime._internal.constants import MAX_YEAR, MIN_YEAR, MS_PER_DAY
from tempotime.errors import OverflowError

# First and last millisecond whose UTC date lies in [MIN_YEAR, MAX_YEAR]
MIN_EPOCH_MS: int = days_from_civil(MIN_YEAR, 1, 1) * MS_PER_DAY
MAX_EPOCH_MS: int = days_from_civil(MAX_YEAR + 1, 1, 1) * MS_PER_DAY - 1


@functools.total_ordering
class Instant:
    """An immutable point in time with millisecond resolution.

    Attributes:
        epoch_ms: Milliseconds since the Unix epoch (negative before it).

    Examples:
        >>> Instant(0).epoch_ms
        0
        >>> (Instant(1_000) + 500).epoch_ms
        1500
        >>> Instant(2_000) - Instant(500)
        1500
    """

    __slots__ = ("_ms",)

    def __init__(self, epoch_ms: int) -> None:
        """Create an Instant.

        Args:
            epoch_ms: Milliseconds since 1970-01-01T00:00:00Z.

        Raises:
            TypeError: If epoch_ms is not an integer.
            OverflowError: If the instant falls outside years -9999..9999.
        """
        if isinstance(epoch_ms, bool) or not isinstance(epoch_ms, int):
            raise TypeError(
                f"epoch_ms must be an integer, got {type(epoch_ms).__name__}"
            )
        if epoch_ms < MIN_EPOCH_MS or epoch_ms > MAX_EPOCH_MS:
            raise OverflowError(
                f"instant {epoch_ms} ms is outside the supported range "
                f"of years {MIN_YEAR} to {MAX_YEAR}"
            )
        self._ms: int = epoch_ms

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant from the system clock."""
        return cls(_time.time_ns() // 1_000_000)

    @property
    def epoch_ms(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._ms

    def shifted(self, ms: int) -> Instant:
        """Return a new Instant ``ms`` milliseconds later (earlier if negative)."""
        return Instant(self._ms + ms)

    def __add__(self, other: object) -> Instant:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.shifted(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Instant | int:
        if isinstance(other, Instant):
            return self._ms - other._ms
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.shifted(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms < other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f"Instant({self._ms})"


__all__ = ["Instant", "MIN_EPOCH_MS", "MAX_EPOCH_MS"]
