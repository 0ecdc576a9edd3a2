"""Pytest configuration and fixtures for Picochron tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so picochron can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch):
    """Pin the host clock to a fixed Unix time and return it in nanoseconds."""
    from picochron._internal import clock

    nanos = 1_700_000_000_123_456_789
    monkeypatch.setattr(clock.time, "time_ns", lambda: nanos)
    return nanos
