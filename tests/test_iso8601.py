"""Tests for ISO 8601 parsing and formatting."""

from __future__ import annotations

import logging

import pytest

from picochron._internal.calendar import MICRO_PICO, MILLI_MICRO_NANO_PICO, Components
from picochron.core.datetime import DateTime
from picochron.core.gpstime import GPSTime
from picochron.errors import ErrorCategory, InvalidArgument
from picochron.format.iso8601 import (
    format_components,
    format_iso8601,
    parse_components,
    parse_iso8601,
)


class TestParseComponents:
    """Tests for parse_components."""

    def test_t_separator(self) -> None:
        """The canonical form uses T."""
        c = parse_components("2000-01-02T03:04:05", MILLI_MICRO_NANO_PICO)
        assert c == Components(2000, 1, 2, 3, 4, 5, (0, 0, 0, 0))

    def test_space_separator(self) -> None:
        """A single space may replace T."""
        c = parse_components("2001-02-03 04:05:06.78", MILLI_MICRO_NANO_PICO)
        assert c.subseconds == (780, 0, 0, 0)

    def test_full_fraction(self) -> None:
        """Twelve fraction digits fill every group."""
        c = parse_components("2000-01-02T03:04:05.006007008009", MILLI_MICRO_NANO_PICO)
        assert c.subseconds == (6, 7, 8, 9)
        c = parse_components("2000-01-02T03:04:05.000006000007", MICRO_PICO)
        assert c.subseconds == (6, 7)

    def test_range_not_checked(self) -> None:
        """Field ranges are left to calendar validation."""
        c = parse_components("2000-13-40T25:61:61", MICRO_PICO)
        assert (c.month, c.day, c.hour) == (13, 40, 25)

    def test_malformed(self) -> None:
        """Anything outside the strict grammar is rejected."""
        for text in (
            "",
            "2000-01-02",
            "2000-01-02T03:04",
            "2000-1-02T03:04:05",
            "2000-01-02t03:04:05",
            "2000-01-02T03:04:05.",
            "2000-01-02T03:04:05.0000000000001",
            "2000-01-02T03:04:05Z",
            " 2000-01-02T03:04:05",
            "2000-01-02T03:04:05 ",
            "２０００-01-02T03:04:05",
        ):
            with pytest.raises(InvalidArgument) as exc_info:
                parse_components(text, MILLI_MICRO_NANO_PICO)
            assert exc_info.value.category is ErrorCategory.ISO8601

    def test_non_string(self) -> None:
        """Only str is accepted."""
        with pytest.raises(TypeError):
            parse_components(b"2000-01-02T03:04:05", MICRO_PICO)  # type: ignore[arg-type]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected input is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="picochron.format.iso8601"):
            with pytest.raises(InvalidArgument):
                parse_components("nope", MICRO_PICO)
        assert "nope" in caplog.text


class TestFormatComponents:
    """Tests for format_components."""

    def test_no_fraction(self) -> None:
        """Whole seconds have no fraction."""
        c = Components(1, 1, 1, 0, 0, 0, (0, 0))
        assert format_components(c, MICRO_PICO) == "0001-01-01T00:00:00"

    def test_trimmed_fraction(self) -> None:
        """Trailing zeros are stripped."""
        c = Components(2000, 1, 2, 3, 4, 5, (678, 900, 0, 0))
        assert format_components(c, MILLI_MICRO_NANO_PICO) == "2000-01-02T03:04:05.6789"

    def test_leading_zeros_kept(self) -> None:
        """Groups are zero-padded to their width."""
        c = Components(2000, 1, 2, 3, 4, 5, (6, 7))
        assert format_components(c, MICRO_PICO) == "2000-01-02T03:04:05.000006000007"


class TestParseFormatInstants:
    """Tests for parse_iso8601 and format_iso8601."""

    def test_default_kind_is_datetime(self) -> None:
        """parse_iso8601 builds a DateTime unless told otherwise."""
        dt = parse_iso8601("2000-01-02T03:04:05.006007008009")
        assert dt == DateTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)

    def test_explicit_kind(self) -> None:
        """The kind selects the scale and layout."""
        t = parse_iso8601("2000-01-02T03:04:05.789", GPSTime)
        assert isinstance(t, GPSTime)
        assert t.microsecond == 789_000

    def test_round_trip(self) -> None:
        """Formatting then parsing gives the same instant."""
        dt = DateTime(2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)
        assert format_iso8601(dt) == "2000-01-02T03:04:05.006007008009"
        assert parse_iso8601(format_iso8601(dt)) == dt

    def test_extremes(self) -> None:
        """The range limits format and parse."""
        assert format_iso8601(DateTime.min()) == "0001-01-01T00:00:00"
        assert format_iso8601(DateTime.max()) == "9999-12-31T23:59:59.999999999999"
        assert parse_iso8601("9999-12-31T23:59:59.999999999999") == DateTime.max()

    def test_out_of_range_fields(self) -> None:
        """Well-formed but impossible dates fail calendar validation."""
        with pytest.raises(InvalidArgument) as exc_info:
            parse_iso8601("2023-02-29T00:00:00")
        assert exc_info.value.category is ErrorCategory.CALENDAR
        with pytest.raises(InvalidArgument):
            parse_iso8601("0000-12-31T23:59:59")
        with pytest.raises(InvalidArgument):
            parse_iso8601("2000-01-01T24:00:00")
