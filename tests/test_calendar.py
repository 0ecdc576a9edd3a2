"""Tests for the internal calendar converter."""

from __future__ import annotations

import datetime

import pytest

from picochron._internal.calendar import (
    MICRO_PICO,
    MILLI_MICRO_NANO_PICO,
    Components,
    SubsecondLayout,
    civil_from_days,
    days_from_civil,
    days_in_month,
    days_in_year,
    from_components,
    is_leap_year,
    is_valid_date,
    to_components,
    weekday_from_days,
)
from picochron.errors import ErrorCategory, InvalidArgument

ONE_SECOND = 10**12
ONE_DAY = 86_400 * ONE_SECOND


class TestLeapYears:
    """Tests for the proleptic Gregorian leap rule."""

    def test_leap_years(self) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert is_leap_year(1920)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)

    def test_days_in_month(self) -> None:
        """February depends on the leap rule."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Month 13 has no length."""
        with pytest.raises(ValueError):
            days_in_month(2023, 13)

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2000) == 366
        assert days_in_year(1900) == 365


class TestDayCount:
    """Tests for closed-form civil date conversion."""

    def test_unix_epoch_is_zero(self) -> None:
        """1970-01-01 is day zero."""
        assert days_from_civil(1970, 1, 1) == 0
        assert civil_from_days(0) == (1970, 1, 1)

    def test_day_before_epoch(self) -> None:
        """Negative day counts precede the epoch."""
        assert days_from_civil(1969, 12, 31) == -1
        assert civil_from_days(-1) == (1969, 12, 31)

    def test_gps_epoch(self) -> None:
        """1980-01-06 is 3657 days after 1970-01-01."""
        assert days_from_civil(1980, 1, 6) == 3657

    def test_matches_stdlib_ordinals(self) -> None:
        """Day counts agree with datetime.date.toordinal across the range."""
        offset = datetime.date(1970, 1, 1).toordinal()
        for date in (
            datetime.date(1, 1, 1),
            datetime.date(4, 2, 29),
            datetime.date(1600, 2, 29),
            datetime.date(1900, 3, 1),
            datetime.date(2000, 2, 29),
            datetime.date(2100, 12, 31),
            datetime.date(9999, 12, 31),
        ):
            days = days_from_civil(date.year, date.month, date.day)
            assert days == date.toordinal() - offset
            assert civil_from_days(days) == (date.year, date.month, date.day)

    def test_leap_day_neighbors(self) -> None:
        """The days around a leap day are consecutive."""
        feb29 = days_from_civil(1920, 2, 29)
        assert civil_from_days(feb29 - 1) == (1920, 2, 28)
        assert civil_from_days(feb29 + 1) == (1920, 3, 1)


class TestWeekday:
    """Tests for weekday computation (Monday=0)."""

    def test_known_weekdays(self) -> None:
        """Spot checks against known calendar days."""
        assert weekday_from_days(days_from_civil(2021, 4, 3)) == 5  # Saturday
        assert weekday_from_days(days_from_civil(1969, 12, 31)) == 2  # Wednesday
        assert weekday_from_days(days_from_civil(1920, 2, 29)) == 6  # Sunday
        assert weekday_from_days(days_from_civil(1920, 3, 1)) == 0  # Monday

    def test_matches_stdlib(self) -> None:
        """Weekdays agree with datetime.date.weekday."""
        for date in (datetime.date(1, 1, 1), datetime.date(9999, 12, 31)):
            days = days_from_civil(date.year, date.month, date.day)
            assert weekday_from_days(days) == date.weekday()


class TestSubsecondLayout:
    """Tests for sub-second digit grouping."""

    def test_split(self) -> None:
        """Picoseconds split into fixed-width groups."""
        assert MILLI_MICRO_NANO_PICO.split(6_007_008_009) == (6, 7, 8, 9)
        assert MICRO_PICO.split(6_000_007) == (6, 7)

    def test_join(self) -> None:
        """join is the inverse of split."""
        assert MILLI_MICRO_NANO_PICO.join((6, 7, 8, 9)) == 6_007_008_009
        assert MICRO_PICO.join((999_999, 999_999)) == ONE_SECOND - 1

    def test_widths_must_cover_twelve_digits(self) -> None:
        """A layout must account for every sub-second digit."""
        with pytest.raises(ValueError):
            SubsecondLayout(names=("millisecond",), widths=(3,))

    def test_validate_rejects_wide_group(self) -> None:
        """Each group must fit its width."""
        with pytest.raises(InvalidArgument, match="microsecond"):
            MICRO_PICO.validate((1_000_000, 0))

    def test_validate_rejects_wrong_arity(self) -> None:
        """The number of groups must match the layout."""
        with pytest.raises(TypeError):
            MICRO_PICO.validate((1, 2, 3))


class TestComponents:
    """Tests for tick/component conversion."""

    def test_from_components_at_epoch(self) -> None:
        """Components at the epoch give tick zero."""
        c = Components(1970, 1, 1, 0, 0, 0, (0, 0, 0, 0))
        assert from_components(c, MILLI_MICRO_NANO_PICO, 0) == 0

    def test_from_components_offset_epoch(self) -> None:
        """Ticks are relative to the given epoch day."""
        epoch = days_from_civil(1980, 1, 6)
        c = Components(1980, 1, 7, 0, 0, 1, (0, 5))
        assert from_components(c, MICRO_PICO, epoch) == ONE_DAY + ONE_SECOND + 5

    def test_to_components_before_epoch(self) -> None:
        """Negative ticks floor to the previous day."""
        c = to_components(-1, MICRO_PICO, 0)
        assert c == Components(1969, 12, 31, 23, 59, 59, (999_999, 999_999))

    def test_round_trip(self) -> None:
        """to_components inverts from_components."""
        c = Components(2000, 2, 29, 23, 59, 59, (999, 0, 1, 999))
        ticks = from_components(c, MILLI_MICRO_NANO_PICO, 0)
        assert to_components(ticks, MILLI_MICRO_NANO_PICO, 0) == c

    def test_component_order_is_chronological(self) -> None:
        """Component tuples compare like the instants they describe."""
        earlier = to_components(ONE_DAY - 1, MICRO_PICO, 0)
        later = to_components(ONE_DAY, MICRO_PICO, 0)
        assert earlier < later


class TestComponentValidation:
    """Tests for field range checks."""

    @staticmethod
    def _build(**fields: object) -> int:
        values = dict(
            year=2000, month=1, day=1, hour=0, minute=0, second=0, subseconds=(0, 0)
        )
        values.update(fields)
        return from_components(Components(**values), MICRO_PICO, 0)  # type: ignore[arg-type]

    def test_year_range(self) -> None:
        """Years must be 1-9999."""
        with pytest.raises(InvalidArgument, match="year"):
            self._build(year=0)
        with pytest.raises(InvalidArgument, match="year"):
            self._build(year=10_000)

    def test_month_range(self) -> None:
        """Months must be 1-12."""
        with pytest.raises(InvalidArgument, match="month"):
            self._build(month=13)

    def test_day_range(self) -> None:
        """Days depend on the month and year."""
        with pytest.raises(InvalidArgument, match="day"):
            self._build(year=2023, month=2, day=29)
        assert self._build(year=2024, month=2, day=29) > 0

    def test_hour_minute_second_range(self) -> None:
        """Time fields are half-open ranges."""
        with pytest.raises(InvalidArgument, match="hour"):
            self._build(hour=24)
        with pytest.raises(InvalidArgument, match="minute"):
            self._build(minute=60)
        with pytest.raises(InvalidArgument, match="second"):
            self._build(second=60)
        with pytest.raises(InvalidArgument, match="second"):
            self._build(second=-1)

    def test_first_bad_field_is_reported(self) -> None:
        """Validation stops at the first invalid field."""
        with pytest.raises(InvalidArgument, match="month"):
            self._build(month=0, hour=99)

    def test_error_category(self) -> None:
        """Calendar failures are tagged CALENDAR."""
        with pytest.raises(InvalidArgument) as exc_info:
            self._build(day=32)
        assert exc_info.value.category is ErrorCategory.CALENDAR

    def test_float_fields_rejected(self) -> None:
        """Non-integer fields are a TypeError."""
        with pytest.raises(TypeError, match="hour"):
            self._build(hour=1.5)

    def test_is_valid_date(self) -> None:
        """Non-raising date check."""
        assert is_valid_date(2024, 2, 29)
        assert not is_valid_date(2023, 2, 29)
        assert not is_valid_date(0, 1, 1)
        assert not is_valid_date(2023, 13, 1)
