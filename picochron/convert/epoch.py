"""Unix epoch conversion for instants.

This module converts between instants and Unix timestamps (time elapsed
since 1970-01-01 00:00:00 UTC, ignoring leap seconds). The instant's scale
supplies its epoch and its fixed offset from UTC, so a GPSTime read from a
Unix timestamp is 18 seconds ahead of the UTC wall-clock reading.

Functions:
    to_unix_seconds: Convert an instant to whole Unix seconds.
    from_unix_seconds: Create an instant from Unix seconds.
    to_unix_nanos: Convert an instant to Unix nanoseconds.
    from_unix_nanos: Create an instant from Unix nanoseconds.

Conversions to a coarser unit floor toward negative infinity, so an
instant before 1970 maps to the timestamp at or before it.

Examples:
    >>> from picochron import DateTime, GPSTime
    >>> to_unix_seconds(DateTime(1970, 1, 1))
    0

    >>> from_unix_seconds(0, GPSTime)
    GPSTime(1970, 1, 1, 0, 0, 18, microsecond=0, picosecond=0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from picochron._internal.constants import (
    TICKS_PER_DAY,
    TICKS_PER_NANOSECOND,
    TICKS_PER_SECOND,
)

if TYPE_CHECKING:
    from picochron.core.instant import Instant

InstantT = TypeVar("InstantT", bound="Instant")


def _unix_ticks(value: "Instant") -> int:
    """Picoseconds since the Unix epoch, in UTC reckoning."""
    scale = value.scale
    return value.ticks + scale.epoch_days * TICKS_PER_DAY - scale.utc_offset_ticks


def _from_unix_ticks(ticks: int, kind: type[InstantT] | None) -> InstantT:
    if kind is None:
        from picochron.core.datetime import DateTime

        kind = DateTime  # type: ignore[assignment]
    scale = kind.scale  # type: ignore[union-attr]
    return kind.from_ticks(  # type: ignore[union-attr]
        ticks - scale.epoch_days * TICKS_PER_DAY + scale.utc_offset_ticks
    )


def to_unix_seconds(value: "Instant") -> int:
    """Convert an instant to whole seconds since the Unix epoch.

    Examples:
        >>> from picochron import UTCTime
        >>> to_unix_seconds(UTCTime(2024, 1, 15, 12, 30))
        1705321800
    """
    return _unix_ticks(value) // TICKS_PER_SECOND


def from_unix_seconds(seconds: int, kind: type[InstantT] | None = None) -> InstantT:
    """Create an instant from seconds since the Unix epoch.

    Args:
        seconds: Unix timestamp in seconds.
        kind: The instant class to build (DateTime when omitted).

    Raises:
        InvalidArgument: If the result falls outside years 1-9999.
    """
    return _from_unix_ticks(seconds * TICKS_PER_SECOND, kind)


def to_unix_nanos(value: "Instant") -> int:
    """Convert an instant to nanoseconds since the Unix epoch."""
    return _unix_ticks(value) // TICKS_PER_NANOSECOND


def from_unix_nanos(nanos: int, kind: type[InstantT] | None = None) -> InstantT:
    """Create an instant from nanoseconds since the Unix epoch.

    Examples:
        >>> from picochron import UTCTime
        >>> from_unix_nanos(123_456_789, UTCTime).nanosecond
        789
    """
    return _from_unix_ticks(nanos * TICKS_PER_NANOSECOND, kind)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_nanos",
    "from_unix_nanos",
]
