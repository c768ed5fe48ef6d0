"""Exceptions raised by timestamp conversion."""

from __future__ import annotations

from .models import ErrorKind

__all__ = [
    "ConversionError",
    "FormatMismatchError",
    "InvalidFormatError",
    "InvalidModeError",
    "InvalidNumberError",
    "InvalidUnitError",
    "OutOfRangeError",
    "UnrecognizedFormatError",
]


class ConversionError(Exception):
    """A conversion failed.

    The exception message is safe to show to the user and is what ends up in
    the ``error`` field of a failed `~tsconvert.models.ConversionResponse`.

    Parameters
    ----------
    kind
        Category of the failure.
    message
        User-facing message.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InvalidModeError(ConversionError):
    """The conversion mode is not recognized."""

    def __init__(self, mode: str) -> None:
        super().__init__(ErrorKind.INVALID_MODE, "Invalid mode")
        self.mode = mode


class InvalidUnitError(ConversionError):
    """The timestamp unit is not recognized."""

    def __init__(self, unit: str) -> None:
        super().__init__(ErrorKind.INVALID_UNIT, "Invalid unit")
        self.unit = unit


class InvalidFormatError(ConversionError):
    """The format name is not recognized."""

    def __init__(self, format_name: str) -> None:
        super().__init__(ErrorKind.INVALID_FORMAT, "Invalid format")
        self.format_name = format_name


class InvalidNumberError(ConversionError):
    """The epoch value is not a signed 64-bit integer."""

    def __init__(self, value: str) -> None:
        msg = f"Invalid timestamp: {value!r} is not an integer"
        super().__init__(ErrorKind.INVALID_NUMBER, msg)


class OutOfRangeError(ConversionError):
    """The epoch value has no corresponding calendar date and time."""

    def __init__(self, value: int | str) -> None:
        msg = f"Timestamp out of range: {value}"
        super().__init__(ErrorKind.OUT_OF_RANGE, msg)


class FormatMismatchError(ConversionError):
    """The input does not match the explicitly requested format."""

    def __init__(self, format_name: str) -> None:
        msg = f"Input does not match format {format_name}"
        super().__init__(ErrorKind.FORMAT_MISMATCH, msg)
        self.format_name = format_name


class UnrecognizedFormatError(ConversionError):
    """The input matches none of the auto-detected formats."""

    def __init__(self, families: list[str]) -> None:
        supported = ", ".join(families)
        msg = (
            "Unrecognized date/time format. Supported formats:"
            f" {supported}"
        )
        super().__init__(ErrorKind.UNRECOGNIZED_FORMAT, msg)
