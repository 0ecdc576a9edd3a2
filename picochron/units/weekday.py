"""Weekday enumeration.

Days of the week numbered from Monday=0, matching ``datetime.date.weekday``.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week.

    Examples:
        >>> Weekday(5)
        <Weekday.SATURDAY: 5>

        >>> Weekday.SUNDAY.is_weekend
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY


__all__ = ["Weekday"]
