"""Tests for the Interval class."""

from __future__ import annotations

import pytest

from tempotime import DateTime, Duration, Interval


def at(text: str) -> DateTime:
    return DateTime.from_iso(text)


@pytest.fixture
def january() -> Interval:
    return Interval(at("2025-01-01"), at("2025-01-31"))


class TestContains:
    """Tests for point and interval containment."""

    def test_inside(self, january: Interval) -> None:
        """Mid-January lies inside."""
        assert january.contains(at("2025-01-15")) is True

    def test_after(self, january: Interval) -> None:
        """February 1st lies outside."""
        assert january.contains(at("2025-02-01")) is False

    def test_start_inclusive_end_exclusive(self, january: Interval) -> None:
        """The interval is half-open."""
        assert at("2025-01-01") in january
        assert at("2025-01-31") not in january
        assert at("2025-01-30T23:59:59.999Z") in january

    def test_other_zone_same_instant(self, january: Interval) -> None:
        """Containment compares instants, not wall clocks."""
        assert at("2025-01-01T09:00:00+09:00") in january

    def test_inverted_covers_same_span(self) -> None:
        """An inverted interval contains the same points."""
        inverted = Interval(at("2025-01-31"), at("2025-01-01"))
        assert inverted.is_inverted
        assert at("2025-01-15") in inverted
        assert at("2025-01-01") in inverted
        assert at("2025-01-31") not in inverted

    def test_empty_contains_nothing(self) -> None:
        """An empty interval has no points."""
        empty = Interval(at("2025-01-01"), at("2025-01-01"))
        assert empty.is_empty
        assert at("2025-01-01") not in empty

    def test_contains_interval(self, january: Interval) -> None:
        """A sub-interval is contained; an overhanging one is not."""
        assert january.contains(Interval(at("2025-01-05"), at("2025-01-10")))
        assert january.contains(january)
        assert not january.contains(Interval(at("2025-01-05"), at("2025-02-10")))


class TestOverlaps:
    """Tests for overlaps()."""

    def test_overlapping(self, january: Interval) -> None:
        """Shared instants mean overlap."""
        assert january.overlaps(Interval(at("2025-01-20"), at("2025-02-20")))

    def test_adjacent_do_not_overlap(self, january: Interval) -> None:
        """Back-to-back half-open intervals share nothing."""
        assert not january.overlaps(Interval(at("2025-01-31"), at("2025-02-28")))

    def test_empty_never_overlaps(self, january: Interval) -> None:
        """An empty interval overlaps nothing."""
        assert not january.overlaps(Interval(at("2025-01-10"), at("2025-01-10")))


class TestLength:
    """Tests for length()."""

    def test_default_milliseconds(self, january: Interval) -> None:
        """Without a unit the length is in milliseconds."""
        assert january.length() == Duration(milliseconds=30 * 86_400_000)

    def test_days(self, january: Interval) -> None:
        """Whole lengths are ints."""
        length = january.length("days")
        assert length.days == 30
        assert isinstance(length.days, int)

    def test_fractional_days(self) -> None:
        """Partial units stay fractional."""
        i = Interval(at("2025-01-01"), at("2025-01-02T12:00:00Z"))
        assert i.length("days").days == 1.5

    def test_months_on_calendar(self) -> None:
        """Months are measured on the calendar from start."""
        i = Interval(at("2025-01-31"), at("2025-02-28"))
        assert i.length("months").months == 1

    def test_inverted_is_negative(self) -> None:
        """Inverted intervals have negative length."""
        inverted = Interval(at("2025-01-31"), at("2025-01-01"))
        assert inverted.length("days") == Duration(days=-30)


    def test_months_in_first_supported_month(self) -> None:
        """A partial month at the start of year -9999 is measured."""
        i = Interval(DateTime.from_fields(-9999, 1, 15), DateTime.from_fields(-9999, 1, 1))
        assert i.length("months").months == pytest.approx(-14 / 31)


class TestIntervalValue:
    """Tests for equality and string forms."""

    def test_equality_by_instant(self) -> None:
        """Endpoints compare as instants."""
        a = Interval(at("2025-01-01"), at("2025-01-02"))
        b = Interval(at("2025-01-01T01:00:00+01:00"), at("2025-01-02"))
        assert a == b
        assert hash(a) == hash(b)

    def test_endpoints_kept_as_given(self) -> None:
        """Inverted endpoints are not swapped."""
        i = Interval(at("2025-02-01"), at("2025-01-01"))
        assert i.start == at("2025-02-01")
        assert i.end == at("2025-01-01")

    def test_str(self, january: Interval) -> None:
        """str() is the ISO start/end form."""
        assert str(january) == "2025-01-01T00:00:00Z/2025-01-31T00:00:00Z"
