"""Request, response, and enum models for timestamp conversion."""

from ._conversion import (
    ConversionRequest,
    ConversionResponse,
    CurrentTimeUnit,
    ErrorKind,
    Mode,
    Unit,
)

__all__ = [
    "ConversionRequest",
    "ConversionResponse",
    "CurrentTimeUnit",
    "ErrorKind",
    "Mode",
    "Unit",
]
