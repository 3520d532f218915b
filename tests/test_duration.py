"""Tests for the Duration class."""

from __future__ import annotations

import pytest

from tempotime import DateTime, Duration, TimeUnit
from tempotime.errors import InvalidDuration, UnsupportedUnit


class TestDurationConstruction:
    """Tests for building Durations."""

    def test_keyword_components(self) -> None:
        """Components are stored as given."""
        d = Duration(years=1, months=2, weeks=3, days=4, hours=5, minutes=6, seconds=7, milliseconds=8)
        assert (d.years, d.months, d.weeks, d.days) == (1, 2, 3, 4)
        assert (d.hours, d.minutes, d.seconds, d.milliseconds) == (5, 6, 7, 8)

    def test_not_normalized(self) -> None:
        """36 hours stay 36 hours."""
        d = Duration(hours=36, minutes=90)
        assert d.hours == 36
        assert d.days == 0
        assert d.minutes == 90

    def test_from_object_singular_plural_case(self) -> None:
        """Mapping keys may be singular, plural or any case."""
        d = Duration.from_object({"Day": 1, "hours": 2, "MINUTE": 3})
        assert d.to_object() == {"days": 1, "hours": 2, "minutes": 3}

    def test_from_object_sums_duplicates(self) -> None:
        """A unit spelled twice is summed."""
        assert Duration.from_object({"day": 1, "days": 2}).days == 3

    def test_from_object_accepts_time_units(self) -> None:
        """TimeUnit keys work too."""
        assert Duration.from_object({TimeUnit.WEEK: 2}).weeks == 2

    def test_of(self) -> None:
        """of() builds a single-unit duration."""
        assert Duration.of("months", 3).to_object() == {"months": 3}

    def test_unknown_unit(self) -> None:
        """Unknown keys raise UnsupportedUnit, which is a ValueError."""
        with pytest.raises(UnsupportedUnit) as exc_info:
            Duration.from_object({"fortnight": 1})
        assert exc_info.value.unit == "fortnight"
        with pytest.raises(ValueError):
            Duration.from_object({"decades": 1})

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_non_number_values(self, value: object) -> None:
        """Values must be ints or floats."""
        with pytest.raises(InvalidDuration):
            Duration(days=value)  # type: ignore[arg-type]
        with pytest.raises(InvalidDuration):
            Duration.from_object({"days": value})  # type: ignore[dict-item]

    def test_to_object_omits_zeros(self) -> None:
        """Only non-zero components are reported, largest first."""
        d = Duration(seconds=5, years=1, days=0)
        assert list(d.to_object()) == ["years", "seconds"]

    def test_get(self) -> None:
        """get() accepts unit names and returns 0 when absent."""
        d = Duration(hours=2)
        assert d.get("hour") == 2
        assert d.get(TimeUnit.DAY) == 0

    def test_zero(self) -> None:
        """An empty duration is zero and falsy."""
        assert Duration().is_zero
        assert not Duration()
        assert Duration(days=1)

    @pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, amount: float) -> None:
        """Infinite and NaN amounts raise InvalidDuration."""
        with pytest.raises(InvalidDuration):
            Duration(days=amount)
        with pytest.raises(InvalidDuration):
            Duration.from_object({"hours": amount})

    def test_from_object_sum_must_be_finite(self) -> None:
        """A unit given twice may not add up to infinity."""
        with pytest.raises(InvalidDuration):
            Duration.from_object({"day": 1e308, "days": 1e308})


class TestAsUnit:
    """Tests for as_unit conversions."""

    def test_fixed_units(self) -> None:
        """Fixed units convert exactly."""
        assert Duration(days=1, hours=12).as_unit("hours") == 36.0
        assert Duration(weeks=2).as_unit("day") == 14.0
        assert Duration(minutes=90).as_unit("hours") == 1.5

    def test_nominal_calendar_lengths(self) -> None:
        """Without an anchor a month is 30 days and a year 365."""
        assert Duration(months=1).as_unit("days") == 30.0
        assert Duration(years=1).as_unit("days") == 365.0
        assert Duration(days=60).as_unit("months") == 2.0

    def test_anchored_month(self) -> None:
        """An anchor in February 2024 makes a month 29 days."""
        anchor = DateTime.from_iso("2024-02-01")
        assert Duration(months=1, anchor=anchor).as_unit("days") == 29.0

    def test_anchored_year(self) -> None:
        """An anchor in a leap year makes a year 366 days."""
        anchor = DateTime.from_iso("2024-01-01")
        assert Duration(years=1, anchor=anchor).as_unit("days") == 366.0

    def test_anchored_days_in_months(self) -> None:
        """Fixed components measured in months use the real calendar."""
        anchor = DateTime.from_iso("2025-02-01")
        assert Duration(days=28, anchor=anchor).as_unit("months") == 1.0

    def test_with_anchor(self) -> None:
        """with_anchor() returns an anchored copy."""
        anchor = DateTime.from_iso("2023-02-01")
        d = Duration(months=1)
        anchored = d.with_anchor(anchor)
        assert anchored.anchor is anchor
        assert d.anchor is None
        assert anchored.as_unit("days") == 28.0

    def test_unknown_unit(self) -> None:
        """Unknown target units raise UnsupportedUnit."""
        with pytest.raises(UnsupportedUnit):
            Duration(days=1).as_unit("lightyears")

    def test_anchored_in_last_supported_month(self) -> None:
        """An anchor in December 9999 still measures months."""
        anchor = DateTime.from_fields(9999, 12, 1)
        assert Duration(days=14, anchor=anchor).as_unit("months") == pytest.approx(14 / 31)


class TestDurationOperators:
    """Tests for Duration arithmetic and comparison."""

    def test_negation(self) -> None:
        """Negation flips every component."""
        assert (-Duration(days=1, hours=2)).to_object() == {"days": -1, "hours": -2}

    def test_addition(self) -> None:
        """Addition is component-wise, without normalizing."""
        total = Duration(days=1, hours=20) + Duration(hours=10)
        assert total.to_object() == {"days": 1, "hours": 30}

    def test_subtraction_cancels(self) -> None:
        """Components that cancel disappear."""
        assert (Duration(days=2, hours=1) - Duration(hours=1)).to_object() == {"days": 2}

    def test_addition_keeps_left_anchor(self) -> None:
        """The left operand's anchor wins."""
        anchor = DateTime.from_iso("2024-01-01")
        assert (Duration(days=1, anchor=anchor) + Duration(days=1)).anchor is anchor

    def test_equality_ignores_explicit_zeros(self) -> None:
        """Zero components do not affect equality or hashing."""
        assert Duration(days=1) == Duration(days=1, hours=0)
        assert hash(Duration(days=1)) == hash(Duration(days=1, hours=0))

    def test_equality_is_componentwise(self) -> None:
        """24 hours is not the same Duration as 1 day."""
        assert Duration(hours=24) != Duration(days=1)

    def test_repr(self) -> None:
        """repr lists non-zero components."""
        assert repr(Duration(days=1, hours=2)) == "Duration(days=1, hours=2)"
        assert repr(Duration()) == "Duration()"

    def test_items_order(self) -> None:
        """items() runs from largest to smallest unit."""
        d = Duration(milliseconds=1, years=1, hours=1)
        assert [unit for unit, _ in d.items()] == [TimeUnit.YEAR, TimeUnit.HOUR, TimeUnit.MILLISECOND]
