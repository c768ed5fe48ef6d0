"""Date and time templates shared by rendering and parsing."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta

__all__ = ["Template"]

_DIRECTIVE_PATTERN = re.compile(r"%(\.f|:z|3f|.)")
"""Regular expression matching one directive in a template."""

_LONG_FRACTION_PATTERN = re.compile(r"(\.[0-9]{6})[0-9]+")
"""Regular expression matching a fraction with more than six digits."""

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _format_offset(value: datetime, separator: str) -> str:
    offset = value.utcoffset()
    if offset is None:
        return ""
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}{separator}{minutes % 60:02d}"


def _render_directive(directive: str, value: datetime) -> str:
    millisecond = value.microsecond // 1000
    match directive:
        case "Y":
            return f"{value.year:04d}"
        case "m":
            return f"{value.month:02d}"
        case "d":
            return f"{value.day:02d}"
        case "H":
            return f"{value.hour:02d}"
        case "M":
            return f"{value.minute:02d}"
        case "S":
            return f"{value.second:02d}"
        case "3f":
            return f"{millisecond:03d}"
        case ".f":
            return f".{millisecond:03d}" if millisecond else ""
        case "a":
            return _WEEKDAYS[value.weekday()]
        case "b":
            return _MONTHS[value.month - 1]
        case "z":
            return _format_offset(value, "")
        case ":z":
            return _format_offset(value, ":")
        case "%":
            return "%"
        case _:
            raise ValueError(f"Unsupported template directive %{directive}")


def _strptime_patterns(pattern: str) -> list[str]:
    """Translate a template into the `~datetime.datetime.strptime` formats
    that together accept it.

    ``%.f`` (optional fraction) expands into two formats, with the fraction
    first so that precision is never silently dropped.
    """
    variants = [""]
    position = 0
    for found in _DIRECTIVE_PATTERN.finditer(pattern):
        literal = pattern[position : found.start()]
        match found.group(1):
            case ".f":
                options = [".%f", ""]
            case "3f":
                options = ["%f"]
            case ":z":
                options = ["%z"]
            case _:
                options = [found.group(0)]
        variants = [v + literal + o for v in variants for o in options]
        position = found.end()
    return [v + pattern[position:] for v in variants]


@dataclass(frozen=True)
class Template:
    """A date and time template.

    Templates use `~datetime.datetime.strftime` directives (``%Y``, ``%m``,
    ``%d``, ``%H``, ``%M``, ``%S``, ``%a``, ``%b``, ``%z``) plus three
    extensions:

    ``%3f``
        Milliseconds, always three digits. A fraction of any length is
        accepted when parsing. Digits past the sixth are dropped.
    ``%.f``
        A dot and three digits of milliseconds if they are not zero,
        otherwise nothing. Optional when parsing.
    ``%:z``
        UTC offset as ``+HH:MM``. When parsing, ``Z``, ``+HH:MM`` and
        ``+HHMM`` are all accepted.

    Rendering does not depend on the locale, and years are always rendered
    with four digits. When parsing, only ASCII input is accepted, and a
    ``%a`` weekday must agree with the date.
    """

    pattern: str
    """Template string."""

    def render(self, value: datetime) -> str:
        """Render a `~datetime.datetime` using this template."""
        return _DIRECTIVE_PATTERN.sub(
            lambda m: _render_directive(m.group(1), value), self.pattern
        )

    def parse(self, text: str) -> datetime:
        """Parse a string that exactly matches this template.

        Parameters
        ----------
        text
            String to parse. Surrounding whitespace is not accepted.

        Returns
        -------
        datetime.datetime
            Parsed date and time. It is timezone-aware only if the template
            contains an offset directive.

        Raises
        ------
        ValueError
            Raised if the string does not match the template, names an
            invalid date or time, or names the wrong day of the week.
        """
        if not text.isascii():
            raise ValueError(f"{text!r} contains non-ASCII characters")
        if "%3f" in self.pattern or "%.f" in self.pattern:
            text = _LONG_FRACTION_PATTERN.sub(r"\1", text)
        for pattern in _strptime_patterns(self.pattern):
            try:
                parsed = datetime.strptime(text, pattern)  # noqa: DTZ007
            except ValueError:
                continue
            if "%a" in pattern:
                # datetime.strptime ignores the parsed weekday.
                weekday = time.strptime(text, pattern).tm_wday
                if weekday != parsed.weekday():
                    msg = f"{text!r} names the wrong day of the week"
                    raise ValueError(msg)
            return parsed
        raise ValueError(f"{text!r} does not match {self.pattern}")
