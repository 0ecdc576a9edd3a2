"""Calendar conversion for Picochron.

This module converts between linear tick counts and broken-down calendar
components in the proleptic Gregorian calendar. Dates map to a day count
relative to 1970-01-01 with closed-form arithmetic (no iteration over
years or months), so every conversion costs the same regardless of how
far the date lies from the epoch.

Each time scale supplies its own epoch as a day count; tick counts are
always relative to that epoch.

This module is not part of the public API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from picochron._internal.constants import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    SUBSECOND_DIGITS,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from picochron._internal.validation import (
    require_int,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

# Day count of 0000-03-01 relative to 1970-01-01
_MARCH_ZERO_OFFSET = 719_468
_DAYS_PER_ERA = 146_097  # 400 Gregorian years


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a civil date to days since 1970-01-01.

    Years are counted from March so the leap day falls at the end of the
    counting year; a 400-year era then always has the same length.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
        >>> days_from_civil(1969, 12, 31)
        -1
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    day_of_year = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _MARCH_ZERO_OFFSET


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a civil (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(11017)
        (2000, 3, 1)
    """
    z = days + _MARCH_ZERO_OFFSET
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week (Monday=0, Sunday=6) for days since 1970-01-01.

    1970-01-01 was a Thursday.

    Examples:
        >>> weekday_from_days(0)
        3
    """
    return (days + 3) % 7


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True if the date exists and lies in the supported year range."""
    if not MIN_YEAR <= year <= MAX_YEAR or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


@dataclass(frozen=True)
class SubsecondLayout:
    """How the 12 sub-second digits are grouped into named components.

    Attributes:
        names: Component names, most significant first.
        widths: Number of decimal digits in each component.

    Examples:
        >>> MICRO_PICO.split(6_000_007)
        (6, 7)
        >>> MILLI_MICRO_NANO_PICO.split(6_000_007)
        (0, 6, 0, 7)
    """

    names: tuple[str, ...]
    widths: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.names) != len(self.widths):
            raise ValueError("names and widths must have the same length")
        if sum(self.widths) != SUBSECOND_DIGITS:
            raise ValueError(
                f"widths must cover {SUBSECOND_DIGITS} digits, got {sum(self.widths)}"
            )

    def split(self, ticks: int) -> tuple[int, ...]:
        """Split picoseconds within a second into component groups."""
        groups = []
        remaining_digits = SUBSECOND_DIGITS
        for width in self.widths:
            remaining_digits -= width
            group, ticks = divmod(ticks, 10**remaining_digits)
            groups.append(group)
        return tuple(groups)

    def join(self, groups: tuple[int, ...]) -> int:
        """Combine already-validated component groups into picoseconds."""
        ticks = 0
        for group, width in zip(groups, self.widths):
            ticks = ticks * 10**width + group
        return ticks

    def validate(self, groups: tuple[int, ...]) -> tuple[int, ...]:
        """Check each group against its width; return the groups as ints.

        Raises:
            TypeError: If the wrong number of groups is given or a group is
                not an integer.
            InvalidArgument: If a group is negative or too wide.
        """
        if len(groups) != len(self.widths):
            raise TypeError(
                f"expected {len(self.widths)} sub-second components, got {len(groups)}"
            )
        checked = []
        for name, width, group in zip(self.names, self.widths, groups):
            group = require_int(name, group)
            validate_range(name, group, 0, 10**width)
            checked.append(group)
        return tuple(checked)


MILLI_MICRO_NANO_PICO = SubsecondLayout(
    names=("millisecond", "microsecond", "nanosecond", "picosecond"),
    widths=(3, 3, 3, 3),
)
MICRO_PICO = SubsecondLayout(
    names=("microsecond", "picosecond"),
    widths=(6, 6),
)


class Components(NamedTuple):
    """Broken-down calendar fields of an instant.

    Tuple order makes lexicographic comparison match chronological order.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    subseconds: tuple[int, ...]


def from_components(
    components: Components, layout: SubsecondLayout, epoch_days: int
) -> int:
    """Validate components and convert them to ticks since an epoch.

    Fields are checked in order: year, month, day, hour, minute, second,
    then each sub-second group.

    Args:
        components: The calendar fields.
        layout: Sub-second grouping of ``components.subseconds``.
        epoch_days: The epoch as days since 1970-01-01.

    Returns:
        Ticks since the epoch.

    Raises:
        InvalidArgument: If any field is out of range.
        TypeError: If any field is not an integer.

    Examples:
        >>> c = Components(1970, 1, 1, 0, 0, 1, (0, 0, 0, 5))
        >>> from_components(c, MILLI_MICRO_NANO_PICO, 0)
        1000000000005
    """
    year = require_int("year", components.year)
    month = require_int("month", components.month)
    day = require_int("day", components.day)
    hour = require_int("hour", components.hour)
    minute = require_int("minute", components.minute)
    second = require_int("second", components.second)

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    validate_range("hour", hour, 0, 24)
    validate_range("minute", minute, 0, 60)
    validate_range("second", second, 0, 60)
    subseconds = layout.validate(tuple(components.subseconds))

    days = days_from_civil(year, month, day) - epoch_days
    return (
        days * TICKS_PER_DAY
        + hour * TICKS_PER_HOUR
        + minute * TICKS_PER_MINUTE
        + second * TICKS_PER_SECOND
        + layout.join(subseconds)
    )


def to_components(ticks: int, layout: SubsecondLayout, epoch_days: int) -> Components:
    """Convert ticks since an epoch to calendar components.

    Ticks before the epoch floor to the previous day, so the time of day is
    always non-negative.

    Examples:
        >>> to_components(-1, MICRO_PICO, 0)
        Components(year=1969, month=12, day=31, hour=23, minute=59, second=59, subseconds=(999999, 999999))
    """
    days, tick_of_day = divmod(ticks, TICKS_PER_DAY)
    year, month, day = civil_from_days(days + epoch_days)
    hour, rest = divmod(tick_of_day, TICKS_PER_HOUR)
    minute, rest = divmod(rest, TICKS_PER_MINUTE)
    second, rest = divmod(rest, TICKS_PER_SECOND)
    return Components(year, month, day, hour, minute, second, layout.split(rest))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_from_civil",
    "civil_from_days",
    "weekday_from_days",
    "is_valid_date",
    "SubsecondLayout",
    "MILLI_MICRO_NANO_PICO",
    "MICRO_PICO",
    "Components",
    "from_components",
    "to_components",
]
