"""Enums for logging configuration."""

from __future__ import annotations

import logging
from enum import StrEnum

__all__ = [
    "LogLevel",
    "Profile",
]


class Profile(StrEnum):
    """Format of log messages."""

    production = "production"
    """One JSON object per message."""

    development = "development"
    """Key and value pairs meant for reading on a terminal."""


class LogLevel(StrEnum):
    """Python logging level.

    Constructing the enum from a string accepts any case, so ``debug`` and
    ``Debug`` both work, both in code and in `~tsconvert.config.CLIConfig`.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: object) -> LogLevel | None:
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None

    @property
    def number(self) -> int:
        """Numeric level used by the standard library."""
        return logging.getLevelNamesMapping()[self.value]
