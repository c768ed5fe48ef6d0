"""Conversion operations.

These functions raise `~tsconvert.exceptions.ConversionError` on failure.
Use `convert_timestamp` or `get_current_time` to get a
`~tsconvert.models.ConversionResponse` instead.
"""

from __future__ import annotations

import re
from datetime import datetime, tzinfo

from ..datetime import Clock, Instant, SystemClock
from ..exceptions import (
    FormatMismatchError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidUnitError,
    OutOfRangeError,
    UnrecognizedFormatError,
)
from ..formats import (
    SUPPORTED_FAMILIES,
    FormatName,
    Template,
    auto_detect_order,
    parse_templates,
    render_template,
    renders_local,
)
from ..logging import get_logger
from ..models import CurrentTimeUnit, Unit

__all__ = [
    "current_time",
    "resolve_format",
    "resolve_unit",
    "time_to_timestamp",
    "timestamp_to_time",
]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
"""Regular expression matching a decimal integer with optional sign."""

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def resolve_format(format_name: FormatName | str) -> FormatName:
    """Look up a format by name.

    Raises
    ------
    InvalidFormatError
        Raised if the name is not one of the supported format names. Names
        are case-sensitive.
    """
    try:
        return FormatName(format_name)
    except ValueError:
        raise InvalidFormatError(str(format_name)) from None


def resolve_unit(unit: Unit | str) -> Unit:
    """Look up an epoch unit by name.

    Raises
    ------
    InvalidUnitError
        Raised if the unit is not ``seconds`` or ``milliseconds``.
    """
    try:
        return Unit(unit)
    except ValueError:
        raise InvalidUnitError(str(unit)) from None


def _parse_epoch(value: str) -> int:
    stripped = value.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise InvalidNumberError(value)
    number = int(stripped)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise InvalidNumberError(value)
    return number


def _to_unit(milliseconds: int, unit: Unit) -> str:
    if unit == Unit.MILLISECONDS:
        return str(milliseconds)

    # Truncate toward zero, not toward negative infinity.
    seconds = abs(milliseconds) // 1000
    return str(-seconds if milliseconds < 0 else seconds)


def _render(
    instant: Instant, format_name: FormatName, local_timezone: tzinfo | None
) -> str:
    template = render_template(format_name)
    if renders_local(format_name):
        try:
            value = instant.to_local(local_timezone)
        except ValueError:
            raise OutOfRangeError(instant.epoch_ms) from None
    else:
        value = instant.utc
    return template.render(value)


def _match(
    text: str, templates: tuple[Template, ...]
) -> tuple[Template, datetime] | None:
    for template in templates:
        try:
            return template, template.parse(text)
        except ValueError:
            continue
    return None


def timestamp_to_time(
    value: str,
    unit: Unit | str,
    format_name: FormatName | str | None = None,
    *,
    local_timezone: tzinfo | None = None,
) -> str:
    """Render an epoch value as a date and time string.

    Parameters
    ----------
    value
        Signed 64-bit integer, as a string.
    unit
        Unit of ``value``.
    format_name
        Format to render. Defaults to ``local-readable``. Only
        ``local-readable`` is rendered in local time. All other formats are
        rendered in UTC.
    local_timezone
        Time zone used for ``local-readable``. Defaults to the system local
        time zone.

    Returns
    -------
    str
        Rendered date and time.

    Raises
    ------
    InvalidUnitError
        Raised if the unit is not recognized.
    InvalidFormatError
        Raised if the format name is not recognized.
    InvalidNumberError
        Raised if ``value`` is not a signed 64-bit integer.
    OutOfRangeError
        Raised if the value has no corresponding date and time.
    """
    unit = resolve_unit(unit)
    if format_name is None:
        format_name = FormatName.LOCAL_READABLE
    else:
        format_name = resolve_format(format_name)

    number = _parse_epoch(value)
    milliseconds = number * 1000 if unit == Unit.SECONDS else number
    try:
        instant = Instant.from_epoch_ms(milliseconds)
    except ValueError:
        raise OutOfRangeError(number) from None

    result = _render(instant, format_name, local_timezone)
    get_logger().debug(
        "Converted timestamp to time",
        timestamp=number,
        unit=unit.value,
        format=format_name.value,
    )
    return result


def time_to_timestamp(
    value: str,
    unit: Unit | str,
    format_name: FormatName | str | None = None,
) -> str:
    """Parse a date and time string into an epoch value.

    Date and time strings without a UTC offset are taken to be in UTC, not
    local time. Strings with an offset are converted using that offset.

    Parameters
    ----------
    value
        Date and time to parse. Surrounding whitespace is ignored.
    unit
        Unit of the returned epoch value. Seconds are truncated toward zero.
    format_name
        Format of ``value``. If not given, the format is detected by trying
        each template of `~tsconvert.formats.auto_detect_order` in turn.

    Returns
    -------
    str
        Epoch value as a decimal integer.

    Raises
    ------
    InvalidUnitError
        Raised if the unit is not recognized.
    InvalidFormatError
        Raised if the format name is not recognized.
    FormatMismatchError
        Raised if ``value`` does not match the given format.
    UnrecognizedFormatError
        Raised if no format was given and ``value`` matches none of the
        auto-detected formats.
    OutOfRangeError
        Raised if the parsed date and time cannot be expressed in UTC.
    """
    unit = resolve_unit(unit)
    text = value.strip()
    if format_name is None:
        matched = _match(text, auto_detect_order())
        if matched is None:
            raise UnrecognizedFormatError(SUPPORTED_FAMILIES)
    else:
        format_name = resolve_format(format_name)
        matched = _match(text, parse_templates(format_name))
        if matched is None:
            raise FormatMismatchError(format_name.value)

    template, parsed = matched
    try:
        instant = Instant.from_datetime(parsed)
    except ValueError:
        raise OutOfRangeError(text) from None

    get_logger().debug(
        "Converted time to timestamp",
        template=template.pattern,
        unit=unit.value,
    )
    return _to_unit(instant.epoch_ms, unit)


def current_time(
    unit: CurrentTimeUnit | str,
    format_name: FormatName | str | None = None,
    *,
    clock: Clock | None = None,
    local_timezone: tzinfo | None = None,
) -> str:
    """Return the current time.

    Parameters
    ----------
    unit
        ``seconds`` or ``milliseconds`` to return the raw epoch value, or
        ``formatted`` to render the current time with ``format_name``.
    format_name
        Format used when ``unit`` is ``formatted``. Defaults to
        ``local-readable``. If given, it is validated for every unit.
    clock
        Source of the current time. Defaults to the system clock. The clock
        is read exactly once.
    local_timezone
        Time zone used for ``local-readable``. Defaults to the system local
        time zone.

    Returns
    -------
    str
        Epoch value or rendered date and time.

    Raises
    ------
    InvalidUnitError
        Raised if the unit is not recognized.
    InvalidFormatError
        Raised if the format name is not recognized.
    """
    try:
        unit = CurrentTimeUnit(unit)
    except ValueError:
        raise InvalidUnitError(str(unit)) from None
    if format_name is None:
        format_name = FormatName.LOCAL_READABLE
    else:
        format_name = resolve_format(format_name)

    instant = (clock or SystemClock()).now()
    if unit == CurrentTimeUnit.FORMATTED:
        return _render(instant, format_name, local_timezone)
    return _to_unit(instant.epoch_ms, Unit(unit.value))
