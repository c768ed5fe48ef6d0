"""Representation of a point in time with millisecond resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Self

__all__ = ["Instant"]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
"""Start of the Unix epoch."""

_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class Instant:
    """A fully-resolved point in time.

    All conversions pass through this type. The wrapped
    `~datetime.datetime` is always timezone-aware, in UTC, and has a
    microseconds field that is a whole number of milliseconds.

    Use the ``from_*`` constructors rather than constructing this class
    directly.
    """

    utc: datetime
    """The instant as a `~datetime.datetime` in UTC."""

    @classmethod
    def from_epoch_ms(cls, milliseconds: int) -> Self:
        """Construct an instant from milliseconds since the epoch.

        Parameters
        ----------
        milliseconds
            Milliseconds since 1970-01-01T00:00:00Z. May be negative.

        Returns
        -------
        Instant
            The corresponding instant.

        Raises
        ------
        ValueError
            Raised if the value is outside the range of dates that
            `~datetime.datetime` can represent.
        """
        try:
            utc = _EPOCH + timedelta(milliseconds=milliseconds)
        except OverflowError as e:
            msg = f"{milliseconds}ms since epoch is out of range"
            raise ValueError(msg) from e
        return cls(utc)

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Construct an instant from a `~datetime.datetime`.

        Naive datetimes are taken to already be in UTC, not local time.
        Aware datetimes are converted to UTC using their offset. Any
        sub-millisecond part is truncated.

        Raises
        ------
        ValueError
            Raised if converting to UTC leaves the representable range.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            utc = value.replace(tzinfo=UTC)
        else:
            try:
                utc = value.astimezone(UTC)
            except OverflowError as e:
                raise ValueError(f"{value} is out of range in UTC") from e
        microsecond = utc.microsecond - utc.microsecond % 1000
        return cls(utc.replace(microsecond=microsecond))

    @property
    def epoch_ms(self) -> int:
        """Milliseconds since the epoch."""
        return (self.utc - _EPOCH) // _MILLISECOND

    def to_local(self, timezone: tzinfo | None = None) -> datetime:
        """Convert to wall-clock time in a local time zone.

        Parameters
        ----------
        timezone
            Time zone to convert to. If not given, the system local time
            zone is used.

        Returns
        -------
        datetime.datetime
            Timezone-aware wall-clock time.

        Raises
        ------
        ValueError
            Raised if the local time is outside the representable range.
        """
        try:
            return self.utc.astimezone(timezone)
        except (OverflowError, OSError) as e:
            raise ValueError(f"{self.utc} is out of range locally") from e
