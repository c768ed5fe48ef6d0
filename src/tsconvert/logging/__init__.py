"""Utilities for configuring structlog-based logging."""

from ._models import LogLevel, Profile
from ._structlog import add_log_severity, configure_logging, get_logger

__all__ = [
    "LogLevel",
    "Profile",
    "add_log_severity",
    "configure_logging",
    "get_logger",
]
