"""Utilities for configuring structlog-based logging."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import add_log_level
from structlog.types import EventDict, Processor

from ._models import LogLevel, Profile

__all__ = [
    "add_log_severity",
    "configure_logging",
    "get_logger",
]


def add_log_severity(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the log level to the event dict as ``severity``.

    A structlog processor that behaves like `structlog.stdlib.add_log_level`
    but stores the level under ``severity``, the key log collectors such as
    Google Log Explorer look for in JSON messages.
    """
    event_dict["severity"] = add_log_level(logger, method_name, {})["level"]
    return event_dict


def _build_processors(
    profile: Profile, *, add_timestamp: bool
) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.append(structlog.processors.StackInfoRenderer())
    processors.append(structlog.processors.UnicodeDecoder())
    match profile:
        case Profile.production:
            processors.append(add_log_severity)
            processors.append(structlog.processors.format_exc_info)
            processors.append(structlog.processors.JSONRenderer())
        case Profile.development:
            processors.append(add_log_level)
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    *,
    name: str = "tsconvert",
    profile: Profile | str = Profile.development,
    log_level: LogLevel | str = LogLevel.WARNING,
    add_timestamp: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure logging and structlog.

    Replaces any handlers on the named standard library logger with one
    that writes the message alone to ``stream``, and configures structlog to
    render events according to ``profile``. Calling this more than once is
    safe and does not duplicate messages.

    Parameters
    ----------
    name
        Name of the logger. The conversion engine logs to ``tsconvert``.
    profile
        ``development`` for key and value output, ``production`` for JSON.
        May be given as a `Profile` or a string.
    log_level
        The Python log level. May be given as a `LogLevel` or a
        case-insensitive string.
    add_timestamp
        Whether to add an ISO-format timestamp to each log message.
    stream
        Stream to log to. Defaults to standard error, so that log messages
        never mix with conversion results printed to standard output.

    Examples
    --------
    .. code-block:: python

       from tsconvert.logging import configure_logging, get_logger


       configure_logging(profile="production", log_level="debug")
       get_logger().debug("Converted timestamp to time", format="rfc3339")
    """
    log_level = LogLevel(log_level)
    profile = Profile(profile)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(name)
    logger.handlers = [handler]
    logger.setLevel(log_level.number)

    structlog.configure(
        processors=_build_processors(profile, add_timestamp=add_timestamp),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "tsconvert") -> Any:
    """Return a structlog logger that writes to a standard library logger.

    Until `configure_logging` is called, messages go through the standard
    library logging defaults, so a program using tsconvert as a library
    sees nothing below warning level. Call this each time a logger is needed
    rather than caching the result, so that later calls to
    `configure_logging` take effect.

    Parameters
    ----------
    name
        Name of the standard library logger.

    Returns
    -------
    structlog.typing.BindableLogger
        Lazy structlog logger proxy.
    """
    return structlog.wrap_logger(logging.getLogger(name))
