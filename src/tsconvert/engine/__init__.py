"""Conversion between epoch timestamps and date and time strings."""

from ._convert import (
    current_time,
    resolve_format,
    resolve_unit,
    time_to_timestamp,
    timestamp_to_time,
)
from ._service import convert_timestamp, get_current_time

__all__ = [
    "convert_timestamp",
    "current_time",
    "get_current_time",
    "resolve_format",
    "resolve_unit",
    "time_to_timestamp",
    "timestamp_to_time",
]
