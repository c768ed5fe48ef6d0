"""Instants and clocks used by the conversion engine."""

from ._clock import Clock, FixedClock, SystemClock
from ._instant import Instant

__all__ = [
    "Clock",
    "FixedClock",
    "Instant",
    "SystemClock",
]
