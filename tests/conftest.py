"""Test fixtures."""

from __future__ import annotations

from datetime import timedelta, timezone

import pytest

from tsconvert.datetime import FixedClock, Instant


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2024-01-01T12:00:00.123Z."""
    return FixedClock(Instant.from_epoch_ms(1704110400123))


@pytest.fixture
def utc_plus_8() -> timezone:
    """Fixed local time zone eight hours ahead of UTC."""
    return timezone(timedelta(hours=8))
