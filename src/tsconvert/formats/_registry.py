"""Named formats and the templates used to render and parse them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ._template import Template

__all__ = [
    "SUPPORTED_FAMILIES",
    "FormatName",
    "auto_detect_order",
    "parse_templates",
    "render_template",
    "renders_local",
]


class FormatName(StrEnum):
    """Supported date and time formats."""

    LOCAL_READABLE = "local-readable"
    """``2024-01-01 20:00:00`` in the local time zone."""

    UTC_READABLE = "utc-readable"
    """``2024-01-01 12:00:00 UTC``."""

    RFC3339 = "rfc3339"
    """``2024-01-01T12:00:00+00:00``, with milliseconds if nonzero."""

    ISO8601_BASIC = "iso8601-basic"
    """``20240101T120000.000Z``."""

    ISO8601_EXTENDED = "iso8601-extended"
    """``2024-01-01T12:00:00.000Z``."""

    RFC2822 = "rfc2822"
    """``Mon, 01 Jan 2024 12:00:00 +0000``."""


@dataclass(frozen=True)
class _Format:
    render: Template
    parse: tuple[Template, ...]
    local: bool = False


def _templates(*patterns: str) -> tuple[Template, ...]:
    return tuple(Template(p) for p in patterns)


_LOCAL_READABLE = _templates(
    "%Y-%m-%d %H:%M:%S.%3f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
)

_UTC_READABLE = _templates(
    "%Y-%m-%d %H:%M:%S.%3f UTC",
    "%Y-%m-%d %H:%M:%S UTC",
    "%Y-%m-%d %H:%M UTC",
)

_RFC3339 = _templates(
    "%Y-%m-%dT%H:%M:%S%.f%:z",
    "%Y-%m-%d %H:%M:%S%.f%:z",
    "%Y-%m-%dT%H:%M%:z",
    "%Y-%m-%dT%H:%M:%S%.f",
)

_ISO8601_BASIC = _templates(
    "%Y%m%dT%H%M%S.%3fZ",
    "%Y%m%dT%H%M%SZ",
    "%Y%m%dT%H%M%S.%3f",
    "%Y%m%dT%H%M%S",
)

_ISO8601_EXTENDED = _templates(
    "%Y-%m-%dT%H:%M:%S.%3fZ",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%3f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%MZ",
    "%Y-%m-%dT%H:%M",
)

_RFC2822 = _templates(
    "%a, %d %b %Y %H:%M:%S %z",
    "%d %b %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M %z",
    "%a, %d %b %Y %H:%M:%S GMT",
)

_FORMATS = {
    FormatName.LOCAL_READABLE: _Format(
        render=Template("%Y-%m-%d %H:%M:%S"),
        parse=_LOCAL_READABLE,
        local=True,
    ),
    FormatName.UTC_READABLE: _Format(
        render=Template("%Y-%m-%d %H:%M:%S UTC"), parse=_UTC_READABLE
    ),
    FormatName.RFC3339: _Format(
        render=Template("%Y-%m-%dT%H:%M:%S%.f%:z"), parse=_RFC3339
    ),
    FormatName.ISO8601_BASIC: _Format(
        render=Template("%Y%m%dT%H%M%S.%3fZ"), parse=_ISO8601_BASIC
    ),
    FormatName.ISO8601_EXTENDED: _Format(
        render=Template("%Y-%m-%dT%H:%M:%S.%3fZ"), parse=_ISO8601_EXTENDED
    ),
    FormatName.RFC2822: _Format(
        render=Template("%a, %d %b %Y %H:%M:%S %z"), parse=_RFC2822
    ),
}
"""Render and parse templates for each named format."""

# Slash-delimited dates are ambiguous between month-first and day-first
# order. Month-first is always tried first, so 01/02/2024 is January 2 and
# 13/05/2024 only matches day-first.
_AUTO_DETECT_ORDER = tuple(
    dict.fromkeys(
        (
            *_RFC3339,
            *_ISO8601_EXTENDED,
            *_ISO8601_BASIC,
            *_RFC2822,
            *_UTC_READABLE,
            *_LOCAL_READABLE,
            *_templates(
                "%Y/%m/%d %H:%M:%S",
                "%Y/%m/%d %H:%M",
                "%Y/%m/%d",
                "%m/%d/%Y %H:%M:%S",
                "%m/%d/%Y %H:%M",
                "%m/%d/%Y",
                "%d/%m/%Y %H:%M:%S",
                "%d/%m/%Y %H:%M",
                "%d/%m/%Y",
                "%Y-%m-%d",
            ),
        )
    )
)
"""Templates tried, in order, when no format is given."""

SUPPORTED_FAMILIES = [
    "RFC 3339 (2024-01-01T12:00:00+08:00)",
    "ISO 8601 (2024-01-01T12:00:00.000Z, 20240101T120000Z)",
    "RFC 2822 (Mon, 01 Jan 2024 12:00:00 +0000)",
    "readable (2024-01-01 12:00:00, 2024-01-01 12:00:00 UTC)",
    "slash dates (2024/01/31, 01/31/2024, 31/01/2024)",
    "date only (2024-01-31)",
]
"""Human-readable list of the families accepted by auto-detection."""


def render_template(format_name: FormatName) -> Template:
    """Return the canonical template used to render a format."""
    return _FORMATS[format_name].render


def parse_templates(format_name: FormatName) -> tuple[Template, ...]:
    """Return the templates to try, in order, when parsing a format.

    More precise templates (with fractional seconds) come before looser
    ones.
    """
    return _FORMATS[format_name].parse


def renders_local(format_name: FormatName) -> bool:
    """Whether the format is rendered in local time rather than UTC."""
    return _FORMATS[format_name].local


def auto_detect_order() -> tuple[Template, ...]:
    """Return the templates to try, in order, when no format is given.

    The order is RFC 3339 (any offset), ISO 8601 extended, ISO 8601 basic,
    RFC 2822, UTC readable, local readable, year-first slash dates,
    month-first slash dates, day-first slash dates, and finally a bare
    ``YYYY-MM-DD`` date. Inputs without a time of day are taken as
    midnight.
    """
    return _AUTO_DETECT_ORDER
