"""Host clock access.

The only place Picochron touches the operating system. Kept separate so
tests can patch a single function.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


def system_time_ns() -> int:
    """Read the host real-time clock as nanoseconds since the Unix epoch."""
    nanos = time.time_ns()
    logger.debug("read host clock: %d ns since 1970-01-01", nanos)
    return nanos


__all__ = ["system_time_ns"]
