"""Validation utilities for Picochron.

Each check raises InvalidArgument naming the offending field. Checks are
called in field order so the first invalid field is the one reported.

This module is not part of the public API.
"""

from __future__ import annotations

import operator

from picochron._internal.constants import MAX_YEAR, MIN_YEAR
from picochron.errors import ErrorCategory, InvalidArgument


def require_int(name: str, value: object) -> int:
    """Coerce an integer-like component to int.

    Args:
        name: Field name used in the error message.
        value: The component value.

    Returns:
        The value as a plain int.

    Raises:
        TypeError: If value is not an integer (floats are rejected).
    """
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def validate_range(name: str, value: int, lower: int, upper: int) -> None:
    """Validate that lower <= value < upper.

    Args:
        name: Field name used in the error message.
        value: The value to validate.
        lower: Inclusive lower bound.
        upper: Exclusive upper bound.

    Raises:
        InvalidArgument: If value is outside [lower, upper).

    Examples:
        >>> validate_range("hour", 24, 0, 24)
        Traceback (most recent call last):
        ...
        picochron.errors.InvalidArgument: hour must be in [0, 24), got 24
    """
    if value < lower or value >= upper:
        raise InvalidArgument(
            f"{name} must be in [{lower}, {upper}), got {value}",
            category=ErrorCategory.CALENDAR,
        )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidArgument: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidArgument(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
            category=ErrorCategory.CALENDAR,
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidArgument: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidArgument(
            f"month must be between 1 and 12, got {month}",
            category=ErrorCategory.CALENDAR,
        )


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12, already validated).
        day: The day to validate.

    Raises:
        InvalidArgument: If day is invalid for the month.
    """
    from picochron._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidArgument(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}",
            category=ErrorCategory.CALENDAR,
        )


__all__ = [
    "require_int",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
