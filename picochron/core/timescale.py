"""Time scales: an epoch plus a fixed offset from UTC.

A TimeScale tells an Instant how to read its tick count: ticks count from
midnight at the start of ``epoch``, and the scale runs
``utc_offset_seconds`` ahead of UTC. The offset is a single versioned
constant; leap-second history is not modeled.
"""

from __future__ import annotations

from dataclasses import dataclass

from picochron._internal.calendar import days_from_civil
from picochron._internal.constants import (
    CALENDAR_EPOCH,
    GPS_EPOCH,
    GPS_UTC_OFFSET_SECONDS,
    TICKS_PER_SECOND,
    UNIX_EPOCH,
)


@dataclass(frozen=True)
class TimeScale:
    """Epoch and UTC offset of a family of instants.

    Attributes:
        name: Short display name.
        epoch: The (year, month, day) whose midnight is tick zero.
        utc_offset_seconds: How far the scale runs ahead of UTC.

    Examples:
        >>> GPS.epoch_days
        3657
        >>> UTC.epoch_days
        0
    """

    name: str
    epoch: tuple[int, int, int]
    utc_offset_seconds: int = 0

    @property
    def epoch_days(self) -> int:
        """The epoch as days since 1970-01-01."""
        return days_from_civil(*self.epoch)

    @property
    def utc_offset_ticks(self) -> int:
        """The UTC offset in ticks."""
        return self.utc_offset_seconds * TICKS_PER_SECOND


CALENDAR = TimeScale("calendar", CALENDAR_EPOCH)
UTC = TimeScale("UTC", UNIX_EPOCH)
GPS = TimeScale("GPS", GPS_EPOCH, GPS_UTC_OFFSET_SECONDS)


__all__ = [
    "TimeScale",
    "CALENDAR",
    "UTC",
    "GPS",
]
