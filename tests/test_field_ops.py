"""Tests for calendar-aware FieldTuple arithmetic."""

from __future__ import annotations

import pytest

from tempotime.arithmetic import add_field, add_fields, calendar_diff, end_of, start_of
from tempotime.core.fields import FieldTuple
from tempotime.errors import InvalidDuration, OverflowError, UnsupportedUnit
from tempotime.units import TimeUnit


def ymd(fields: FieldTuple) -> tuple[int, int, int]:
    return fields.year, fields.month, fields.day


class TestAddField:
    """Tests for add_field / add_fields."""

    def test_month_end_clamping_chain(self) -> None:
        """Jan 31 -> Feb 29 -> Mar 29, never rolling into March 3."""
        jan31 = FieldTuple(2024, 1, 31)
        feb = add_field(jan31, "months", 1)
        mar = add_field(feb, "months", 1)
        assert ymd(feb) == (2024, 2, 29)
        assert ymd(mar) == (2024, 3, 29)

    def test_leap_day_plus_year(self) -> None:
        """Feb 29 + 1 year clamps to Feb 28."""
        assert ymd(add_field(FieldTuple(2024, 2, 29), TimeUnit.YEAR, 1)) == (2025, 2, 28)

    def test_negative_months(self) -> None:
        """Subtracting months clamps the same way."""
        assert ymd(add_field(FieldTuple(2024, 3, 31), "month", -1)) == (2024, 2, 29)

    def test_years_and_months_clamp_once(self) -> None:
        """Years and months combine before the single day clamp."""
        start = FieldTuple(2023, 1, 31)
        result = add_fields(start, {TimeUnit.YEAR: 1, TimeUnit.MONTH: 1})
        assert ymd(result) == (2024, 2, 29)

    def test_calendar_then_fixed(self) -> None:
        """Fixed units are applied after the calendar shift."""
        start = FieldTuple(2024, 1, 31, 12)
        result = add_fields(start, {TimeUnit.MONTH: 1, TimeUnit.DAY: 1})
        assert ymd(result) == (2024, 3, 1)
        assert result.hour == 12

    def test_fixed_units_cross_midnight(self) -> None:
        """Hours roll over into the next day."""
        result = add_field(FieldTuple(2025, 12, 31, 23, 30), "minutes", 45)
        assert ymd(result) == (2026, 1, 1)
        assert (result.hour, result.minute) == (0, 15)

    def test_offset_is_preserved(self) -> None:
        """Results keep the starting offset."""
        start = FieldTuple(2025, 1, 1, 22, offset_seconds=-18000)
        result = add_field(start, "hours", 3)
        assert result.offset_seconds == -18000
        assert (result.day, result.hour) == (2, 1)

    def test_fractional_days_allowed(self) -> None:
        """Fixed units may be fractional."""
        result = add_field(FieldTuple(2025, 1, 1), "days", 1.5)
        assert (result.day, result.hour) == (2, 12)

    def test_whole_float_months_allowed(self) -> None:
        """A float month amount with no fraction is fine."""
        assert add_field(FieldTuple(2025, 1, 15), "months", 2.0).month == 3

    def test_fractional_months_rejected(self) -> None:
        """Fractional months raise InvalidDuration."""
        with pytest.raises(InvalidDuration):
            add_field(FieldTuple(2025, 1, 15), "months", 1.5)

    def test_non_number_rejected(self) -> None:
        """Amounts must be numbers."""
        with pytest.raises(InvalidDuration):
            add_fields(FieldTuple(2025, 1, 15), {TimeUnit.DAY: "1"})

    def test_unknown_unit(self) -> None:
        """Unknown unit names raise UnsupportedUnit."""
        with pytest.raises(UnsupportedUnit):
            add_field(FieldTuple(2025, 1, 15), "fortnights", 1)

    def test_year_overflow(self) -> None:
        """Moving past year 9999 raises OverflowError."""
        with pytest.raises(OverflowError):
            add_field(FieldTuple(9999, 6, 1), "years", 1)


class TestStartEndOf:
    """Tests for start_of / end_of."""

    BASE = FieldTuple(2025, 10, 30, 14, 30, 15, 250)

    @pytest.mark.parametrize(
        "unit, expected",
        [
            ("year", (2025, 1, 1, 0, 0, 0, 0)),
            ("month", (2025, 10, 1, 0, 0, 0, 0)),
            ("week", (2025, 10, 27, 0, 0, 0, 0)),
            ("day", (2025, 10, 30, 0, 0, 0, 0)),
            ("hour", (2025, 10, 30, 14, 0, 0, 0)),
            ("minute", (2025, 10, 30, 14, 30, 0, 0)),
            ("second", (2025, 10, 30, 14, 30, 15, 0)),
            ("millisecond", (2025, 10, 30, 14, 30, 15, 250)),
        ],
    )
    def test_start_of(self, unit: str, expected: tuple) -> None:
        """start_of zeroes every field below the unit."""
        f = start_of(self.BASE, unit)
        assert (f.year, f.month, f.day, f.hour, f.minute, f.second, f.millisecond) == expected

    @pytest.mark.parametrize(
        "unit, expected",
        [
            ("year", (2025, 12, 31, 23, 59, 59, 999)),
            ("month", (2025, 10, 31, 23, 59, 59, 999)),
            ("week", (2025, 11, 2, 23, 59, 59, 999)),
            ("day", (2025, 10, 30, 23, 59, 59, 999)),
            ("hour", (2025, 10, 30, 14, 59, 59, 999)),
            ("minute", (2025, 10, 30, 14, 30, 59, 999)),
            ("second", (2025, 10, 30, 14, 30, 15, 999)),
        ],
    )
    def test_end_of(self, unit: str, expected: tuple) -> None:
        """end_of fills every field below the unit with its maximum."""
        f = end_of(self.BASE, unit)
        assert (f.year, f.month, f.day, f.hour, f.minute, f.second, f.millisecond) == expected

    def test_week_starts_monday_across_months(self) -> None:
        """Sunday 2025-03-02 belongs to the week starting Monday 2025-02-24."""
        assert ymd(start_of(FieldTuple(2025, 3, 2), "week")) == (2025, 2, 24)

    def test_monday_is_its_own_week_start(self) -> None:
        """A Monday is the first day of its week."""
        assert ymd(start_of(FieldTuple(2025, 10, 27, 9), "weeks")) == (2025, 10, 27)

    def test_end_of_february_leap(self) -> None:
        """end_of month honors leap years."""
        assert end_of(FieldTuple(2024, 2, 3), "month").day == 29
        assert end_of(FieldTuple(2023, 2, 3), "month").day == 28

    def test_offset_kept(self) -> None:
        """Snapping happens on the wall clock of the same offset."""
        f = start_of(FieldTuple(2025, 1, 1, 5, offset_seconds=3600), "day")
        assert f.offset_seconds == 3600
        assert f.hour == 0

    def test_unknown_unit(self) -> None:
        """Unknown units raise UnsupportedUnit."""
        with pytest.raises(UnsupportedUnit):
            start_of(self.BASE, "quarter")


class TestCalendarDiff:
    """Tests for calendar_diff."""

    def test_fixed_units(self) -> None:
        """Fixed units use the exact millisecond ratio."""
        a = FieldTuple(2025, 1, 1)
        b = FieldTuple(2025, 1, 2, 12)
        assert calendar_diff(a, b, "hours") == 36.0
        assert calendar_diff(a, b, "days") == 1.5
        assert calendar_diff(b, a, "days") == -1.5

    def test_offsets_respected(self) -> None:
        """Both sides are compared as instants."""
        a = FieldTuple(2025, 1, 1, 9, offset_seconds=9 * 3600)
        b = FieldTuple(2025, 1, 1, 0)
        assert calendar_diff(a, b, "milliseconds") == 0.0

    def test_whole_months(self) -> None:
        """Whole calendar months count as integers."""
        assert calendar_diff(FieldTuple(2025, 1, 15), FieldTuple(2025, 4, 15), "months") == 3.0

    def test_clamped_month(self) -> None:
        """Jan 31 to Feb 29 is exactly one month."""
        assert calendar_diff(FieldTuple(2024, 1, 31), FieldTuple(2024, 2, 29), "month") == 1.0

    def test_fractional_month(self) -> None:
        """Partial months are the fraction of the following month step."""
        result = calendar_diff(FieldTuple(2025, 1, 1), FieldTuple(2025, 1, 16), "months")
        assert result == pytest.approx(15 / 31)

    def test_time_of_day_overshoot(self) -> None:
        """An end earlier in the day does not count a full month."""
        result = calendar_diff(FieldTuple(2025, 1, 15, 12), FieldTuple(2025, 2, 15, 0), "months")
        assert 0 < result < 1

    def test_negative_months(self) -> None:
        """Going backward yields negative months."""
        assert calendar_diff(FieldTuple(2025, 3, 31), FieldTuple(2025, 2, 28), "months") == -1.0

    def test_years(self) -> None:
        """Years are months divided by twelve."""
        assert calendar_diff(FieldTuple(2024, 2, 29), FieldTuple(2025, 2, 28), "years") == 1.0
        assert calendar_diff(FieldTuple(2020, 1, 1), FieldTuple(2023, 7, 1), "years") == 3.5

    def test_same_instant(self) -> None:
        """Identical fields are zero apart in any unit."""
        f = FieldTuple(2025, 5, 5)
        assert calendar_diff(f, f, "years") == 0.0

    def test_unknown_unit(self) -> None:
        """Unknown units raise UnsupportedUnit."""
        with pytest.raises(UnsupportedUnit):
            calendar_diff(FieldTuple(2025, 1, 1), FieldTuple(2025, 1, 2), "eons")

    def test_months_in_last_supported_month(self) -> None:
        """A partial December 9999 measures against a 31-day step."""
        result = calendar_diff(FieldTuple(9999, 12, 1), FieldTuple(9999, 12, 15), "months")
        assert result == pytest.approx(14 / 31)

    def test_months_in_first_supported_month(self) -> None:
        """A partial January -9999 backward measures against a 31-day step."""
        result = calendar_diff(FieldTuple(-9999, 1, 15), FieldTuple(-9999, 1, 1), "months")
        assert result == pytest.approx(-14 / 31)

    def test_whole_month_at_range_end(self) -> None:
        """A whole month ending in year 9999 is exact."""
        assert calendar_diff(FieldTuple(9999, 11, 30), FieldTuple(9999, 12, 30), "months") == 1.0

    def test_years_at_range_end(self) -> None:
        """Years up to the last day of 9999 are measured."""
        result = calendar_diff(FieldTuple(9999, 1, 1), FieldTuple(9999, 12, 31), "years")
        assert result == pytest.approx((11 + 30 / 31) / 12)


class TestNonFiniteAmounts:
    """Tests for infinite and NaN amounts."""

    @pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
    @pytest.mark.parametrize("unit", [TimeUnit.DAY, TimeUnit.MONTH, TimeUnit.MILLISECOND])
    def test_rejected(self, unit: TimeUnit, amount: float) -> None:
        """Non-finite amounts raise InvalidDuration."""
        with pytest.raises(InvalidDuration):
            add_fields(FieldTuple(2025, 1, 1), {unit: amount})

    def test_total_too_large(self) -> None:
        """Finite amounts whose total is infinite raise OverflowError."""
        with pytest.raises(OverflowError):
            add_fields(FieldTuple(2025, 1, 1), {TimeUnit.WEEK: 1e306})
