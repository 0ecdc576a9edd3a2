"""Instant: a calendar point in time on some time scale.

This module provides the Instant base class. An Instant stores only a
tick count (picoseconds since the midnight that starts its scale's epoch).
Calendar fields are derived on demand through the calendar converter.

Concrete kinds (DateTime, UTCTime, GPSTime) differ only in two class
attributes:

    scale:  the TimeScale (epoch and fixed UTC offset)
    layout: how the sub-second digits are grouped into components

Instants of different scales never mix: arithmetic and ordering between
them raise TypeError, and they never compare equal.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar, TypeVar

from picochron._internal.calendar import (
    Components,
    SubsecondLayout,
    civil_from_days,
    days_from_civil,
    from_components,
    to_components,
    weekday_from_days,
)
from picochron._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from picochron.core.timedelta import TimeDelta
from picochron.core.timescale import TimeScale
from picochron.errors import ErrorCategory, InvalidArgument
from picochron.units.weekday import Weekday

InstantT = TypeVar("InstantT", bound="Instant")


class Instant:
    """Base class for calendar instants with picosecond resolution.

    Subclasses set ``scale`` and ``layout`` and provide an ``__init__``
    taking calendar fields. Everything else is shared.

    The representable range is 0001-01-01T00:00:00 through
    9999-12-31T23:59:59.999999999999 on every scale.
    """

    __slots__ = ("_ticks",)

    scale: ClassVar[TimeScale]
    layout: ClassVar[SubsecondLayout]

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("Instant is abstract; use DateTime, UTCTime or GPSTime")

    def _init_from_fields(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        subseconds: tuple[int, ...],
    ) -> None:
        components = Components(year, month, day, hour, minute, second, subseconds)
        self._ticks = from_components(components, self.layout, self.scale.epoch_days)

    @classmethod
    def _from_ticks(cls: type[InstantT], ticks: int) -> InstantT:
        """Create an instance from a tick count without validation."""
        result = object.__new__(cls)
        result._ticks = ticks
        return result

    @classmethod
    def _min_ticks(cls) -> int:
        return (days_from_civil(MIN_YEAR, 1, 1) - cls.scale.epoch_days) * TICKS_PER_DAY

    @classmethod
    def _max_ticks(cls) -> int:
        last_day = days_from_civil(MAX_YEAR, 12, 31) - cls.scale.epoch_days
        return (last_day + 1) * TICKS_PER_DAY - 1

    @classmethod
    def _checked(cls: type[InstantT], ticks: int) -> InstantT:
        if ticks < cls._min_ticks() or ticks > cls._max_ticks():
            raise InvalidArgument(
                f"{cls.__name__} out of range: {ticks} ticks since "
                f"{cls.scale.epoch[0]:04d}-{cls.scale.epoch[1]:02d}-{cls.scale.epoch[2]:02d} "
                f"is outside years {MIN_YEAR}-{MAX_YEAR}",
                category=ErrorCategory.CALENDAR,
            )
        return cls._from_ticks(ticks)

    # Construction

    @classmethod
    def from_ticks(cls: type[InstantT], ticks: int) -> InstantT:
        """Create an instant from ticks since the scale's epoch.

        Raises:
            TypeError: If ticks is not an integer.
            InvalidArgument: If the instant falls outside years 1-9999.
        """
        if not isinstance(ticks, int):
            raise TypeError(f"ticks must be an integer, got {type(ticks).__name__}")
        return cls._checked(ticks)

    @classmethod
    def from_components(cls: type[InstantT], components: Components) -> InstantT:
        """Create an instant from a Components tuple in this kind's layout.

        Raises:
            InvalidArgument: If any field is out of range.
        """
        return cls._from_ticks(
            from_components(components, cls.layout, cls.scale.epoch_days)
        )

    @classmethod
    def from_iso_format(cls: type[InstantT], text: str) -> InstantT:
        """Parse ``YYYY-MM-DD[T ]hh:mm:ss[.f{1,12}]``.

        Raises:
            InvalidArgument: If the text is malformed or a field is out of
                range.

        Examples:
            >>> from picochron import DateTime
            >>> DateTime.from_iso_format("2001-02-03 04:05:06.78").millisecond
            780
        """
        from picochron.format.iso8601 import parse_components

        return cls.from_components(parse_components(text, cls.layout))

    @classmethod
    def now(cls: type[InstantT]) -> InstantT:
        """Return the current instant from the host real-time clock."""
        from picochron._internal.clock import system_time_ns
        from picochron.convert.epoch import from_unix_nanos

        return from_unix_nanos(system_time_ns(), cls)

    @classmethod
    def min(cls: type[InstantT]) -> InstantT:
        """Return 0001-01-01T00:00:00 on this scale."""
        return cls._from_ticks(cls._min_ticks())

    @classmethod
    def max(cls: type[InstantT]) -> InstantT:
        """Return 9999-12-31T23:59:59.999999999999 on this scale."""
        return cls._from_ticks(cls._max_ticks())

    @classmethod
    def resolution(cls) -> TimeDelta:
        """Return the smallest difference between two instants."""
        return TimeDelta.resolution()

    # Accessors

    @property
    def ticks(self) -> int:
        """Return picoseconds since the scale's epoch."""
        return self._ticks

    def components(self) -> Components:
        """Return the broken-down calendar fields."""
        return to_components(self._ticks, self.layout, self.scale.epoch_days)

    @property
    def year(self) -> int:
        """Return the year (1-9999)."""
        return self._civil()[0]

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._civil()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._civil()[2]

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._tick_of_day() // TICKS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._tick_of_day() % TICKS_PER_HOUR // TICKS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._tick_of_day() % TICKS_PER_MINUTE // TICKS_PER_SECOND

    @property
    def subseconds(self) -> tuple[int, ...]:
        """Return the sub-second groups in this kind's layout."""
        return self.layout.split(self._ticks % TICKS_PER_SECOND)

    def _civil(self) -> tuple[int, int, int]:
        days = self._ticks // TICKS_PER_DAY
        return civil_from_days(days + self.scale.epoch_days)

    def _tick_of_day(self) -> int:
        return self._ticks % TICKS_PER_DAY

    def date(self) -> _datetime.date:
        """Return the calendar date as a ``datetime.date``."""
        return _datetime.date(*self._civil())

    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> from picochron import DateTime
            >>> DateTime(2021, 4, 3).weekday()
            <Weekday.SATURDAY: 5>
        """
        days = self._ticks // TICKS_PER_DAY + self.scale.epoch_days
        return Weekday(weekday_from_days(days))

    def time_of_day(self) -> TimeDelta:
        """Return the time elapsed since midnight."""
        return TimeDelta(self._tick_of_day())

    def increment(self: InstantT) -> InstantT:
        """Return the instant one tick later."""
        return self._checked(self._ticks + 1)

    def decrement(self: InstantT) -> InstantT:
        """Return the instant one tick earlier."""
        return self._checked(self._ticks - 1)

    def to_iso_format(self) -> str:
        """Format as ``YYYY-MM-DDThh:mm:ss[.fraction]``."""
        from picochron.format.iso8601 import format_components

        return format_components(self.components(), self.layout)

    # Arithmetic

    def _same_scale(self, other: object) -> bool:
        return isinstance(other, Instant) and other.scale == self.scale

    def __add__(self: InstantT, other: object) -> InstantT:
        """Shift by a TimeDelta.

        Raises:
            InvalidArgument: If the result falls outside years 1-9999.
        """
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self._checked(self._ticks + other.ticks)

    def __radd__(self: InstantT, other: object) -> InstantT:
        """Support TimeDelta + instant."""
        return self.__add__(other)

    def __sub__(self, other: object) -> Instant | TimeDelta:
        """Shift back by a TimeDelta, or measure the span to another instant.

        Returns:
            An instant of the same kind for a TimeDelta operand; a TimeDelta
            for an instant of the same scale.

        Raises:
            InvalidArgument: If a shifted result falls outside years 1-9999.
        """
        if isinstance(other, TimeDelta):
            return self._checked(self._ticks - other.ticks)
        if self._same_scale(other):
            return TimeDelta(self._ticks - other._ticks)  # type: ignore[union-attr]
        return NotImplemented

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._same_scale(other) and self._ticks == other._ticks

    def __lt__(self, other: object) -> bool:
        if not self._same_scale(other):
            return NotImplemented
        return self._ticks < other._ticks  # type: ignore[union-attr]

    def __le__(self, other: object) -> bool:
        if not self._same_scale(other):
            return NotImplemented
        return self._ticks <= other._ticks  # type: ignore[union-attr]

    def __gt__(self, other: object) -> bool:
        if not self._same_scale(other):
            return NotImplemented
        return self._ticks > other._ticks  # type: ignore[union-attr]

    def __ge__(self, other: object) -> bool:
        if not self._same_scale(other):
            return NotImplemented
        return self._ticks >= other._ticks  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((self.scale.name, self._ticks))

    # String conversion

    def __str__(self) -> str:
        return self.to_iso_format()

    def __repr__(self) -> str:
        c = self.components()
        fields = ", ".join(
            f"{name}={value}" for name, value in zip(self.layout.names, c.subseconds)
        )
        return (
            f"{type(self).__name__}({c.year}, {c.month}, {c.day}, "
            f"{c.hour}, {c.minute}, {c.second}, {fields})"
        )


__all__ = ["Instant"]
