"""Tests for TimeDelta formatting."""

from __future__ import annotations

import pytest

from picochron.core.timedelta import TimeDelta
from picochron.format.timedelta import format_timedelta


class TestFormatTimeDelta:
    """Tests for the compact duration format."""

    def test_picoseconds(self) -> None:
        """Below a nanosecond the unit is ps."""
        assert str(TimeDelta.picoseconds(123)) == "123ps"

    def test_nanoseconds_fraction(self) -> None:
        """Fractions are trimmed of trailing zeros."""
        assert str(TimeDelta.picoseconds(1_230)) == "1.23ns"

    def test_microseconds(self) -> None:
        """Microseconds use the ASCII suffix us."""
        assert str(TimeDelta.nanoseconds(12_345)) == "12.345us"

    def test_negative_milliseconds(self) -> None:
        """Negative values carry a leading minus."""
        assert str(TimeDelta.milliseconds(-999)) == "-999ms"

    def test_minutes_and_seconds(self) -> None:
        """Leading units appear once the magnitude reaches them."""
        assert str(TimeDelta.minutes(12) + TimeDelta.seconds(34)) == "12m34s"

    def test_zero_minutes_kept(self) -> None:
        """A zero inner component is still written."""
        dt = -(TimeDelta.hours(1) + TimeDelta.picoseconds(1))
        assert str(dt) == "-1h0m0.000000000001s"

    def test_days(self) -> None:
        """Days, hours, minutes and fractional seconds."""
        dt = (
            TimeDelta.days(1)
            + TimeDelta.hours(23)
            + TimeDelta.minutes(4)
            + TimeDelta.milliseconds(56_789)
        )
        assert str(dt) == "1d23h4m56.789s"

    def test_zero(self) -> None:
        """Zero formats as 0ps."""
        assert str(TimeDelta.zero()) == "0ps"

    def test_exact_hours(self) -> None:
        """Whole hours still show the trailing minutes and seconds."""
        assert str(TimeDelta.hours(2)) == "2h0m0s"

    def test_show_sign(self) -> None:
        """show_sign prefixes non-negative values with +."""
        assert format_timedelta(TimeDelta.seconds(10), show_sign=True) == "+10s"
        assert format_timedelta(TimeDelta.seconds(-10), show_sign=True) == "-10s"

    def test_show_point(self) -> None:
        """show_point writes .0 after an integral final component."""
        assert format_timedelta(TimeDelta.seconds(-10), show_point=True) == "-10.0s"
        assert format_timedelta(TimeDelta.milliseconds(1500), show_point=True) == "1.5s"

    def test_format_spec(self) -> None:
        """f-string flags map to the formatting options."""
        assert f"{TimeDelta.seconds(10):+}" == "+10s"
        assert f"{TimeDelta.seconds(-10):#}" == "-10.0s"
        assert f"{TimeDelta.seconds(10):+#}" == "+10.0s"
        assert f"{TimeDelta.seconds(10)}" == "10s"

    def test_bad_format_spec(self) -> None:
        """Unknown format flags are rejected."""
        with pytest.raises(ValueError):
            format(TimeDelta.seconds(1), ">10")

    def test_extremes(self) -> None:
        """The range limits format without error."""
        assert str(TimeDelta.min()).startswith("-")
        assert str(TimeDelta.max()).endswith("s")
