"""Picochron exception hierarchy.

All Picochron-specific exceptions inherit from PicochronError. Invalid
input is reported with InvalidArgument, which records the kind of check
that failed and the first caller outside the package that triggered it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

_PACKAGE = __name__.partition(".")[0]


class ErrorCategory(Enum):
    """Domain of a rejected argument."""

    CALENDAR = "calendar"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class SourceLocation:
    """A file/line/function triple identifying where an error was raised.

    Examples:
        >>> loc = SourceLocation("app.py", 12, "main")
        >>> str(loc)
        'app.py:12 in main'
    """

    file: str
    line: int
    function: str

    @classmethod
    def caller(cls) -> SourceLocation:
        """Capture the first stack frame outside the picochron package.

        Falls back to the outermost frame when every frame belongs to the
        package (e.g. when a module-level constant fails to build).
        """
        frame = sys._getframe(1)
        while frame.f_back is not None and _in_package(frame.f_globals):
            frame = frame.f_back
        return cls(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)

    def __str__(self) -> str:
        return f"{self.file}:{self.line} in {self.function}"


def _in_package(module_globals: dict[str, object]) -> bool:
    name = module_globals.get("__name__", "")
    return isinstance(name, str) and (
        name == _PACKAGE or name.startswith(_PACKAGE + ".")
    )


class PicochronError(Exception):
    """Base exception for all Picochron errors."""

    pass


class InvalidArgument(PicochronError, ValueError):
    """A value was rejected by calendar validation or the string codec.

    This is the only recoverable error the library raises. It subclasses
    ValueError so generic handlers still catch it.

    Attributes:
        message: Human-readable description of the problem.
        category: Which family of checks rejected the value.
        origin: Where the offending call was made.

    Examples:
        - Month value outside 1-12
        - Day 30 of February
        - "2000-01-02T03:04" (seconds missing)
        - More than 12 fractional-second digits
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.CALENDAR,
        origin: SourceLocation | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.origin = origin if origin is not None else SourceLocation.caller()

    def __repr__(self) -> str:
        return (
            f"InvalidArgument({self.message!r}, category={self.category.value}, "
            f"origin={str(self.origin)!r})"
        )


class TickOverflow(PicochronError, OverflowError):
    """A TimeDelta result does not fit in the signed 128-bit tick range.

    Examples:
        - TimeDelta.max() + TimeDelta(1)
        - abs(TimeDelta.min())
        - TimeDelta.seconds(1e30)
    """

    pass


__all__ = [
    "ErrorCategory",
    "SourceLocation",
    "PicochronError",
    "InvalidArgument",
    "TickOverflow",
]
