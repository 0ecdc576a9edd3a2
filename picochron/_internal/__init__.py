"""Internal utilities for Picochron.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar conversion between ticks and components
    - Truncating integer arithmetic
    - Field validation
    - Host clock access

Note: This module is not part of the public API.
"""

from __future__ import annotations

from picochron._internal.fixedpoint import trunc_div, trunc_mod
from picochron._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "trunc_div",
    "trunc_mod",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
