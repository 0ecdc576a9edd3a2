"""Temporal formatting and parsing.

This module provides functions for converting temporal objects to and from
string representations:
    - ISO 8601 formatting and parsing of instants
    - Compact formatting of TimeDelta values

Functions:
    parse_iso8601: Parse an ISO 8601 string into an instant.
    format_iso8601: Format an instant as an ISO 8601 string.
    parse_components: Parse an ISO 8601 string into calendar components.
    format_components: Format calendar components as ISO 8601.
    format_timedelta: Format a TimeDelta such as ``1d23h4m56.789s``.

Examples:
    >>> from picochron import DateTime
    >>> from picochron.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15T14:30:45").hour
    14

    >>> format_iso8601(DateTime(2024, 1, 15, 14, 30, 45))
    '2024-01-15T14:30:45'
"""

from __future__ import annotations

from picochron.format.iso8601 import (
    format_components,
    format_iso8601,
    parse_components,
    parse_iso8601,
)
from picochron.format.timedelta import format_timedelta

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    "parse_components",
    "format_components",
    # TimeDelta
    "format_timedelta",
]
