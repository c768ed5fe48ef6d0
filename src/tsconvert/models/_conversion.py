"""Models for conversion requests and responses."""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "ConversionRequest",
    "ConversionResponse",
    "CurrentTimeUnit",
    "ErrorKind",
    "Mode",
    "Unit",
]


class Mode(StrEnum):
    """Direction of a conversion."""

    TIMESTAMP_TO_TIME = "timestamp-to-time"
    """Render an epoch value as a date and time string."""

    TIME_TO_TIMESTAMP = "time-to-timestamp"
    """Parse a date and time string into an epoch value."""


class Unit(StrEnum):
    """Unit of a numeric epoch value."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


class CurrentTimeUnit(StrEnum):
    """Output requested when asking for the current time.

    ``formatted`` renders the current time with a named format instead of
    returning the raw epoch number.
    """

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    FORMATTED = "formatted"


class ErrorKind(StrEnum):
    """Category of a conversion failure."""

    INVALID_NUMBER = "InvalidNumber"
    INVALID_UNIT = "InvalidUnit"
    INVALID_MODE = "InvalidMode"
    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    FORMAT_MISMATCH = "FormatMismatch"
    UNRECOGNIZED_FORMAT = "UnrecognizedFormat"


class ConversionRequest(BaseModel):
    """A single conversion request.

    Mode, unit, and format are kept as plain strings so that unknown values
    reach the engine and are reported as conversion failures rather than
    model validation errors.
    """

    model_config = ConfigDict(frozen=True)

    input: str = Field(
        ...,
        title="Input",
        description="Epoch value or date and time string to convert",
        examples=["1704110400", "2024-01-01T12:00:00Z"],
    )

    mode: str = Field(
        ...,
        title="Mode",
        description="Direction of the conversion",
        examples=[Mode.TIMESTAMP_TO_TIME.value],
    )

    unit: str = Field(
        ...,
        title="Unit",
        description="Unit of the epoch value",
        examples=[Unit.SECONDS.value],
    )

    format: str | None = Field(
        None,
        title="Format",
        description=(
            "Name of the date and time format. If omitted, timestamps are"
            " rendered as local-readable and strings are auto-detected."
        ),
        examples=["rfc3339"],
    )


class ConversionResponse(BaseModel):
    """Outcome of a conversion.

    Exactly one of ``result`` and ``error`` is set, depending on
    ``success``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., title="Whether the conversion succeeded")

    result: str | None = Field(
        None, title="Result", examples=["2024-01-01 12:00:00 UTC"]
    )

    error: str | None = Field(None, title="Error", examples=["Invalid unit"])

    @model_validator(mode="after")
    def _validate_outcome(self) -> Self:
        if self.success:
            if self.result is None or self.error is not None:
                raise ValueError("successful response must have only result")
        elif self.error is None or self.result is not None:
            raise ValueError("failed response must have only error")
        return self

    @classmethod
    def ok(cls, result: str) -> Self:
        """Construct a successful response."""
        return cls(success=True, result=result)

    @classmethod
    def failure(cls, error: str) -> Self:
        """Construct a failed response."""
        return cls(success=False, error=error)
