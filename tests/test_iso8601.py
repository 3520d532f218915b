"""Tests for ISO 8601 parsing and formatting."""

from __future__ import annotations

import pytest

from tempotime.core.fields import FieldTuple
from tempotime.errors import InvalidCalendarField, IsoParseError, ParseError
from tempotime.format.iso8601 import format_iso, parse_iso


class TestParseIso:
    """Tests for parse_iso."""

    def test_date_only(self) -> None:
        """A bare date is midnight UTC."""
        assert parse_iso("2025-10-30") == FieldTuple(2025, 10, 30)

    def test_utc_designator(self) -> None:
        """A trailing Z means offset zero."""
        fields = parse_iso("2025-10-30T14:30:00Z")
        assert (fields.hour, fields.minute, fields.offset_seconds) == (14, 30, 0)

    def test_missing_offset_is_utc(self) -> None:
        """No offset suffix means UTC."""
        assert parse_iso("2025-10-30T14:30:00").offset_seconds == 0

    @pytest.mark.parametrize(
        "suffix, seconds",
        [("+05:30", 19800), ("-05:00", -18000), ("+00:00", 0), ("-09:30", -34200)],
    )
    def test_numeric_offsets(self, suffix: str, seconds: int) -> None:
        """Numeric offsets are converted to seconds east of UTC."""
        assert parse_iso("2025-10-30T14:30:00" + suffix).offset_seconds == seconds

    @pytest.mark.parametrize(
        "fraction, ms",
        [(".5", 500), (".12", 120), (".123", 123), (".1239", 123), (".123456789", 123)],
    )
    def test_fraction_truncated(self, fraction: str, ms: int) -> None:
        """1-9 fraction digits are truncated to milliseconds."""
        assert parse_iso(f"2025-10-30T14:30:00{fraction}Z").millisecond == ms

    def test_negative_year(self) -> None:
        """A leading minus marks a negative year."""
        assert parse_iso("-0044-03-15").year == -44

    def test_leap_day(self) -> None:
        """Feb 29 parses in a leap year."""
        assert parse_iso("2024-02-29").day == 29

    def test_impossible_date(self) -> None:
        """Feb 29 in a common year is a field error, not a syntax error."""
        with pytest.raises(InvalidCalendarField):
            parse_iso("2023-02-29")

    def test_non_string(self) -> None:
        """Input must be a string."""
        with pytest.raises(TypeError):
            parse_iso(None)  # type: ignore[arg-type]


class TestParseIsoErrors:
    """Tests for IsoParseError offsets and expectations."""

    @pytest.mark.parametrize(
        "text, offset, expected",
        [
            ("25-10-30", 0, "4-digit year"),
            ("2025/10/30", 4, "'-' after year"),
            ("2025-1-30", 5, "2-digit month"),
            ("2025-10-30T14:30", 16, "':' after minute"),
            ("2025-10-30 14:30:00", 10, "'T', 'Z' or a +HH:MM offset"),
            ("2025-10-30T14:30:00.", 20, "1-9 fraction digits"),
            ("2025-10-30T14:30:00.1234567890", 29, "1-9 fraction digits"),
            ("2025-10-30T14:30:00+0530", 22, "':' in offset"),
            ("2025-10-30T14:30:00+05:60", 23, "offset minutes 00-59"),
            ("2025-10-30Zx", 11, "end of input"),
        ],
    )
    def test_error_details(self, text: str, offset: int, expected: str) -> None:
        """Each failure names the offset and the expected construct."""
        with pytest.raises(IsoParseError) as exc_info:
            parse_iso(text)
        assert exc_info.value.offset == offset
        assert exc_info.value.expected == expected

    def test_empty_input(self) -> None:
        """An empty string fails at offset 0."""
        with pytest.raises(ParseError) as exc_info:
            parse_iso("")
        assert exc_info.value.offset == 0


class TestFormatIso:
    """Tests for format_iso."""

    def test_utc(self) -> None:
        """Offset zero renders as Z."""
        assert format_iso(FieldTuple(2025, 10, 30, 14, 30)) == "2025-10-30T14:30:00Z"

    def test_numeric_offset(self) -> None:
        """Other offsets render as +HH:MM / -HH:MM."""
        fields = FieldTuple(2025, 10, 30, 9, offset_seconds=-18000)
        assert format_iso(fields) == "2025-10-30T09:00:00-05:00"
        fields = FieldTuple(2025, 10, 30, 20, offset_seconds=19800)
        assert format_iso(fields) == "2025-10-30T20:00:00+05:30"

    def test_precision(self) -> None:
        """auto shows non-zero milliseconds; seconds and millis are fixed."""
        with_ms = FieldTuple(2025, 1, 1, 0, 0, 0, 120)
        without_ms = FieldTuple(2025, 1, 1)
        assert format_iso(with_ms) == "2025-01-01T00:00:00.120Z"
        assert format_iso(without_ms) == "2025-01-01T00:00:00Z"
        assert format_iso(with_ms, "seconds") == "2025-01-01T00:00:00Z"
        assert format_iso(without_ms, "millis") == "2025-01-01T00:00:00.000Z"

    def test_invalid_precision(self) -> None:
        """Unknown precision names raise ValueError."""
        with pytest.raises(ValueError):
            format_iso(FieldTuple(2025, 1, 1), "nanos")

    def test_negative_year(self) -> None:
        """Negative years keep four digits after the sign."""
        assert format_iso(FieldTuple(-44, 3, 15)) == "-0044-03-15T00:00:00Z"

    @pytest.mark.parametrize(
        "text",
        [
            "2025-10-30T14:30:00Z",
            "2024-02-29T23:59:59.999+14:00",
            "1969-12-31T00:00:00.001-12:00",
            "-0044-03-15T12:00:00Z",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        """Canonical strings survive parse then format unchanged."""
        assert format_iso(parse_iso(text)) == text
