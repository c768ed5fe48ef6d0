"""Conversion entry points that report failures in the response."""

from __future__ import annotations

from datetime import tzinfo

from ..datetime import Clock
from ..exceptions import ConversionError, InvalidModeError
from ..logging import get_logger
from ..models import ConversionRequest, ConversionResponse, Mode
from ._convert import current_time, time_to_timestamp, timestamp_to_time

__all__ = [
    "convert_timestamp",
    "get_current_time",
]


def convert_timestamp(
    request: ConversionRequest, *, local_timezone: tzinfo | None = None
) -> ConversionResponse:
    """Perform the conversion described by a request.

    Failures never raise. They are returned as a response with ``success``
    set to `False` and a user-facing ``error`` message. The mode, unit, and
    format name are validated in that order before the input is examined.

    Parameters
    ----------
    request
        Conversion to perform.
    local_timezone
        Time zone used for ``local-readable``. Defaults to the system local
        time zone.

    Returns
    -------
    ConversionResponse
        Result of the conversion.
    """
    try:
        try:
            mode = Mode(request.mode)
        except ValueError:
            raise InvalidModeError(request.mode) from None
        match mode:
            case Mode.TIMESTAMP_TO_TIME:
                result = timestamp_to_time(
                    request.input,
                    request.unit,
                    request.format,
                    local_timezone=local_timezone,
                )
            case Mode.TIME_TO_TIMESTAMP:
                result = time_to_timestamp(
                    request.input, request.unit, request.format
                )
    except ConversionError as e:
        get_logger().info(
            "Conversion failed",
            mode=request.mode,
            unit=request.unit,
            format=request.format,
            error_kind=e.kind.value,
            error=e.message,
        )
        return ConversionResponse.failure(e.message)
    return ConversionResponse.ok(result)


def get_current_time(
    unit: str,
    format_name: str | None = None,
    *,
    clock: Clock | None = None,
    local_timezone: tzinfo | None = None,
) -> ConversionResponse:
    """Return the current time as a response.

    See `~tsconvert.engine.current_time` for the meaning of the arguments.
    Failures are returned as a response with ``success`` set to `False`.
    """
    try:
        result = current_time(
            unit, format_name, clock=clock, local_timezone=local_timezone
        )
    except ConversionError as e:
        get_logger().info(
            "Current time failed",
            unit=unit,
            format=format_name,
            error_kind=e.kind.value,
            error=e.message,
        )
        return ConversionResponse.failure(e.message)
    return ConversionResponse.ok(result)
