"""ISO 8601 formatting and parsing for instants.

This module converts instants to and from a strict subset of ISO 8601
extended format:

    YYYY-MM-DDThh:mm:ss[.f]

where the separator may be ``T`` or a single space, every field has its
full fixed width, and the optional fraction has 1 to 12 ASCII digits.
Time zone designators, week dates and ordinal dates are not accepted.

The fraction is read as decimal digits of a second: ``.78`` is 780 ms,
not 78 ms. It is right-padded to 12 digits and cut into the sub-second
groups of the target kind's layout.

Examples:
    >>> from picochron import DateTime, GPSTime
    >>> parse_iso8601("2000-01-02T03:04:05.006007008009")
    DateTime(2000, 1, 2, 3, 4, 5, millisecond=6, microsecond=7, nanosecond=8, picosecond=9)

    >>> format_iso8601(GPSTime(2000, 1, 2, 3, 4, 5, 6, 7))
    '2000-01-02T03:04:05.000006000007'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, TypeVar

from picochron._internal.calendar import Components, SubsecondLayout
from picochron._internal.constants import SUBSECOND_DIGITS
from picochron.errors import ErrorCategory, InvalidArgument

if TYPE_CHECKING:
    from picochron.core.instant import Instant

InstantT = TypeVar("InstantT", bound="Instant")

logger = logging.getLogger(__name__)

_ISO_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,12}))?",
    re.ASCII,
)


def parse_components(text: str, layout: SubsecondLayout) -> Components:
    """Parse an ISO 8601 string into calendar components.

    Only the shape of the string is checked here; field ranges are checked
    when the components are converted to an instant.

    Args:
        text: The string to parse. The whole string must match.
        layout: Sub-second grouping for the result.

    Returns:
        The parsed components.

    Raises:
        InvalidArgument: If the string does not match the grammar.

    Examples:
        >>> from picochron._internal.calendar import MICRO_PICO
        >>> parse_components("2000-01-02 03:04:05.5", MICRO_PICO).subseconds
        (500000, 0)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = _ISO_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("rejected ISO 8601 input %r", text)
        raise InvalidArgument(
            f"invalid ISO 8601 datetime: {text!r} "
            "(expected YYYY-MM-DDThh:mm:ss[.fraction] with up to 12 fraction digits)",
            category=ErrorCategory.ISO8601,
        )

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    digits = (match.group(7) or "").ljust(SUBSECOND_DIGITS, "0")

    subseconds = []
    start = 0
    for width in layout.widths:
        subseconds.append(int(digits[start : start + width]))
        start += width

    return Components(year, month, day, hour, minute, second, tuple(subseconds))


def format_components(components: Components, layout: SubsecondLayout) -> str:
    """Format calendar components as an ISO 8601 string.

    The fraction is written only when some sub-second group is non-zero,
    with trailing zeros removed.

    Examples:
        >>> from picochron._internal.calendar import MILLI_MICRO_NANO_PICO
        >>> c = Components(2000, 1, 2, 3, 4, 5, (678, 900, 0, 0))
        >>> format_components(c, MILLI_MICRO_NANO_PICO)
        '2000-01-02T03:04:05.6789'
    """
    result = (
        f"{components.year:04d}-{components.month:02d}-{components.day:02d}"
        f"T{components.hour:02d}:{components.minute:02d}:{components.second:02d}"
    )
    if any(components.subseconds):
        fraction = "".join(
            f"{group:0{width}d}"
            for group, width in zip(components.subseconds, layout.widths)
        )
        result += "." + fraction.rstrip("0")
    return result


def parse_iso8601(text: str, kind: type[InstantT] | None = None) -> InstantT:
    """Parse an ISO 8601 string into an instant.

    Args:
        text: The string to parse.
        kind: The instant class to build (DateTime when omitted).

    Raises:
        InvalidArgument: If the string is malformed or a field is out of
            range.
    """
    if kind is None:
        from picochron.core.datetime import DateTime

        kind = DateTime  # type: ignore[assignment]
    return kind.from_iso_format(text)  # type: ignore[union-attr]


def format_iso8601(value: "Instant") -> str:
    """Format an instant as an ISO 8601 string."""
    return format_components(value.components(), value.layout)


__all__ = [
    "parse_components",
    "format_components",
    "parse_iso8601",
    "format_iso8601",
]
