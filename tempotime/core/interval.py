"""Interval class representing the span between two DateTimes.

An Interval keeps its endpoints exactly as given. When ``end`` precedes
``start`` the interval is inverted: it still covers the same span for
containment, but its length is negative.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union, overload

from tempotime.arithmetic.field_ops import calendar_diff
from tempotime.core.duration import Duration
from tempotime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from tempotime.core.datetime import DateTime


class Interval:
    """A span between two DateTimes, half-open [min, max).

    The earlier endpoint is inclusive and the later one exclusive,
    so [a, b) and [b, c) share no instant and leave no gap.

    Attributes:
        start: The first endpoint, as given.
        end: The second endpoint, as given.

    Examples:
        >>> from tempotime.core.datetime import DateTime
        >>> i = Interval(DateTime.from_iso("2025-01-01"), DateTime.from_iso("2025-01-31"))
        >>> DateTime.from_iso("2025-01-15") in i
        True
        >>> DateTime.from_iso("2025-01-31") in i  # End is exclusive
        False
        >>> i.length("days").days
        30
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: DateTime, end: DateTime) -> None:
        """Create an interval between two DateTimes.

        Args:
            start: First endpoint.
            end: Second endpoint; may precede ``start``.
        """
        self._start = start
        self._end = end

    @property
    def start(self) -> DateTime:
        """Return the first endpoint."""
        return self._start

    @property
    def end(self) -> DateTime:
        """Return the second endpoint."""
        return self._end

    @property
    def is_inverted(self) -> bool:
        """Return True if end precedes start."""
        return self._end < self._start

    @property
    def is_empty(self) -> bool:
        """Return True if both endpoints are the same instant."""
        return self._start == self._end

    def _bounds(self) -> tuple[DateTime, DateTime]:
        if self.is_inverted:
            return self._end, self._start
        return self._start, self._end

    def length(self, unit: Union[str, TimeUnit] = TimeUnit.MILLISECOND) -> Duration:
        """Return the signed length of the interval in ``unit``.

        Months and years are measured on the calendar from ``start``.
        The single component is an int when the length is whole.

        Examples:
            >>> from tempotime.core.datetime import DateTime
            >>> a = DateTime.from_iso("2024-01-31")
            >>> Interval(a, DateTime.from_iso("2024-02-29")).length("months").months
            1
            >>> Interval(a, DateTime.from_iso("2024-01-30")).length("days").days
            -1
        """
        target = TimeUnit.parse(unit)
        value = calendar_diff(self._start.to_fields(), self._end.to_fields(), target)
        if float(value).is_integer():
            value = int(value)
        return Duration.of(target, value)

    @overload
    def contains(self, other: DateTime) -> bool: ...

    @overload
    def contains(self, other: Interval) -> bool: ...

    def contains(self, other: Union[DateTime, Interval]) -> bool:
        """Check whether a DateTime or a whole Interval lies inside this one.

        A point is contained when ``min <= point < max``. An interval is
        contained when its own span lies within this one's span.
        """
        low, high = self._bounds()
        if isinstance(other, Interval):
            other_low, other_high = other._bounds()
            return low <= other_low and other_high <= high
        return low <= other < high

    def __contains__(self, point: DateTime) -> bool:
        """Support ``point in interval``."""
        return self.contains(point)

    def overlaps(self, other: Interval) -> bool:
        """Return True if the two spans share at least one instant."""
        low, high = self._bounds()
        other_low, other_high = other._bounds()
        if low == high or other_low == other_high:
            return False
        return low < other_high and other_low < high

    def __eq__(self, other: object) -> bool:
        """Intervals are equal if both endpoints are the same instants."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 interval form ``start/end``."""
        return f"{self._start}/{self._end}"


__all__ = ["Interval"]
