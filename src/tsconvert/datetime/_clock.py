"""Clock capability for reading the current time."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from ._instant import Instant

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
]


class Clock(Protocol):
    """Source of the current time.

    This is the only part of the conversion engine that depends on ambient
    state. Tests pass a `FixedClock` instead of the system clock.
    """

    def now(self) -> Instant:
        """Return the current instant."""


class SystemClock:
    """Clock that reads the system time, truncated to milliseconds."""

    def now(self) -> Instant:
        return Instant.from_datetime(datetime.now(tz=UTC))


class FixedClock:
    """Clock that always returns the same instant.

    Parameters
    ----------
    instant
        Instant to return from `now`.
    """

    def __init__(self, instant: Instant) -> None:
        self.instant = instant

    def now(self) -> Instant:
        return self.instant
