"""Tests for the conversion operations."""

from __future__ import annotations

from datetime import UTC, timedelta, timezone

import pytest

from tsconvert.datetime import FixedClock
from tsconvert.engine import current_time, time_to_timestamp, timestamp_to_time
from tsconvert.exceptions import (
    ConversionError,
    FormatMismatchError,
    InvalidFormatError,
    InvalidNumberError,
    InvalidUnitError,
    OutOfRangeError,
    UnrecognizedFormatError,
)
from tsconvert.formats import FormatName
from tsconvert.models import ErrorKind


def test_timestamp_to_time() -> None:
    assert timestamp_to_time("0", "seconds", "rfc3339") == (
        "1970-01-01T00:00:00+00:00"
    )
    assert timestamp_to_time("1704110400", "seconds", "utc-readable") == (
        "2024-01-01 12:00:00 UTC"
    )
    assert timestamp_to_time("1704110400123", "milliseconds", "rfc3339") == (
        "2024-01-01T12:00:00.123+00:00"
    )
    assert timestamp_to_time(
        "1704110400123", "milliseconds", "iso8601-basic"
    ) == ("20240101T120000.123Z")
    assert timestamp_to_time(
        "1704110400123", "milliseconds", "iso8601-extended"
    ) == ("2024-01-01T12:00:00.123Z")
    assert timestamp_to_time("1704110400", "seconds", "rfc2822") == (
        "Mon, 01 Jan 2024 12:00:00 +0000"
    )
    assert timestamp_to_time(
        "1704110400", "seconds", FormatName.ISO8601_EXTENDED
    ) == ("2024-01-01T12:00:00.000Z")


def test_timestamp_to_time_local(utc_plus_8: timezone) -> None:
    assert timestamp_to_time(
        "1704110400", "seconds", "local-readable", local_timezone=utc_plus_8
    ) == ("2024-01-01 20:00:00")

    # local-readable is the default.
    assert timestamp_to_time(
        "1704110400", "seconds", local_timezone=utc_plus_8
    ) == ("2024-01-01 20:00:00")

    # Other formats ignore the local time zone.
    assert timestamp_to_time(
        "1704110400", "seconds", "rfc3339", local_timezone=utc_plus_8
    ) == ("2024-01-01T12:00:00+00:00")


def test_timestamp_to_time_system_zone() -> None:
    result = timestamp_to_time("1704110400", "seconds")
    assert len(result) == len("2024-01-01 12:00:00")


def test_timestamp_to_time_negative() -> None:
    assert timestamp_to_time("-1", "seconds", "utc-readable") == (
        "1969-12-31 23:59:59 UTC"
    )
    assert timestamp_to_time("-1500", "milliseconds", "rfc3339") == (
        "1969-12-31T23:59:58.500+00:00"
    )
    assert timestamp_to_time("+60", "seconds", "utc-readable") == (
        "1970-01-01 00:01:00 UTC"
    )
    assert timestamp_to_time(" 60\n", "seconds", "utc-readable") == (
        "1970-01-01 00:01:00 UTC"
    )


@pytest.mark.parametrize(
    "value",
    [
        "99999999999999999999",
        "9223372036854775808",
        "-9223372036854775809",
        "12.5",
        "1e9",
        "abc",
        "",
        "1_000",
        "0x10",
    ],
)
def test_invalid_number(value: str) -> None:
    with pytest.raises(InvalidNumberError) as excinfo:
        timestamp_to_time(value, "seconds")
    assert excinfo.value.kind == ErrorKind.INVALID_NUMBER


def test_out_of_range() -> None:
    assert timestamp_to_time("253402300799", "seconds", "utc-readable") == (
        "9999-12-31 23:59:59 UTC"
    )
    with pytest.raises(OutOfRangeError) as excinfo:
        timestamp_to_time("253402300800", "seconds", "utc-readable")
    assert excinfo.value.kind == ErrorKind.OUT_OF_RANGE
    with pytest.raises(OutOfRangeError):
        timestamp_to_time("9223372036854775807", "seconds")
    with pytest.raises(OutOfRangeError):
        timestamp_to_time("-9223372036854775808", "milliseconds")

    # In range in UTC, but not once shifted to local time.
    west = timezone(timedelta(hours=-5))
    with pytest.raises(OutOfRangeError):
        timestamp_to_time("-62135596800", "seconds", local_timezone=west)


def test_invalid_unit_and_format() -> None:
    with pytest.raises(InvalidUnitError, match="^Invalid unit$"):
        timestamp_to_time("0", "minutes")
    with pytest.raises(InvalidFormatError, match="^Invalid format$"):
        timestamp_to_time("0", "seconds", "iso")
    with pytest.raises(InvalidFormatError, match="^Invalid format$"):
        timestamp_to_time("0", "seconds", "RFC3339")
    with pytest.raises(InvalidUnitError):
        time_to_timestamp("2024-01-01", "Seconds")
    with pytest.raises(InvalidFormatError, match="^Invalid format$"):
        time_to_timestamp("2024-01-01", "seconds", "unknown")

    # The unit and format are checked before the input.
    with pytest.raises(InvalidUnitError):
        timestamp_to_time("abc", "minutes", "unknown")
    with pytest.raises(InvalidFormatError):
        timestamp_to_time("abc", "seconds", "unknown")


def test_time_to_timestamp_auto() -> None:
    assert time_to_timestamp("2024-01-01T12:00:00Z", "milliseconds") == (
        "1704110400000"
    )
    assert time_to_timestamp("2024-01-01T12:00:00Z", "seconds") == (
        "1704110400"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-01T20:00:00+08:00", "1704110400000"),
        ("2024-01-01T07:00:00.123-05:00", "1704110400123"),
        ("2024-01-01 12:00:00+00:00", "1704110400000"),
        ("2024-01-01T12:00:00.123Z", "1704110400123"),
        ("2024-01-01T12:00:00.123456Z", "1704110400123"),
        ("2024-01-01T12:00:00.1234567Z", "1704110400123"),
        ("2024-01-01T12:00:00.123456789Z", "1704110400123"),
        ("2024-01-01T20:00:00.123456789+08:00", "1704110400123"),
        ("20240101T120000.12345678Z", "1704110400123"),
        ("2024-01-01T12:00:00", "1704110400000"),
        ("2024-01-01T12:00", "1704110400000"),
        ("20240101T120000.123Z", "1704110400123"),
        ("20240101T120000Z", "1704110400000"),
        ("20240101T120000", "1704110400000"),
        ("Mon, 01 Jan 2024 12:00:00 +0000", "1704110400000"),
        ("Mon, 01 Jan 2024 20:00:00 +0800", "1704110400000"),
        ("01 Jan 2024 12:00:00 +0000", "1704110400000"),
        ("Mon, 01 Jan 2024 12:00:00 GMT", "1704110400000"),
        ("2024-01-01 12:00:00 UTC", "1704110400000"),
        ("2024-01-01 12:00:00", "1704110400000"),
        ("2024-01-01 12:00:00.5", "1704110400500"),
        ("2024-01-01 12:00", "1704110400000"),
        ("2024/01/01 12:00:00", "1704110400000"),
        ("2024/01/01", "1704067200000"),
        ("01/01/2024 12:00:00", "1704110400000"),
        ("2024-01-01", "1704067200000"),
        ("  2024-01-01T12:00:00Z\n", "1704110400000"),
        ("1969-12-31T23:59:58.500Z", "-1500"),
    ],
)
def test_auto_detect(value: str, expected: str) -> None:
    assert time_to_timestamp(value, "milliseconds") == expected


def test_ambiguous_slash_dates() -> None:
    # Month first is always tried before day first.
    assert time_to_timestamp("01/02/2024", "milliseconds") == "1704153600000"
    # A month of 13 fails month-first parsing and falls through to day first.
    assert time_to_timestamp("13/05/2024", "seconds") == "1715558400"
    assert time_to_timestamp("13/05/2024 12:00", "seconds") == "1715601600"


def test_seconds_truncate_toward_zero() -> None:
    assert time_to_timestamp("2024-01-01T12:00:00.999Z", "seconds") == (
        "1704110400"
    )
    assert time_to_timestamp("1969-12-31T23:59:59.500Z", "seconds") == "0"
    assert time_to_timestamp("1969-12-31T23:59:58.500Z", "seconds") == "-1"


def test_unrecognized_format() -> None:
    with pytest.raises(UnrecognizedFormatError) as excinfo:
        time_to_timestamp("not-a-date", "seconds")
    assert excinfo.value.kind == ErrorKind.UNRECOGNIZED_FORMAT
    assert "Supported formats" in str(excinfo.value)
    assert "RFC 3339" in str(excinfo.value)

    for value in ("", "1704110400", "2024-13-01", "32/13/2024", "2023-02-29"):
        with pytest.raises(UnrecognizedFormatError):
            time_to_timestamp(value, "seconds")


def test_explicit_format() -> None:
    assert time_to_timestamp(
        "2024-01-01T12:00:00+00:00", "seconds", "rfc3339"
    ) == ("1704110400")
    assert time_to_timestamp(
        "20240101T120000.5Z", "milliseconds", "iso8601-basic"
    ) == ("1704110400500")
    assert time_to_timestamp(
        "2024-01-01 12:00:00 UTC", "seconds", "utc-readable"
    ) == ("1704110400")
    for format_name in ("rfc3339", "iso8601-extended"):
        assert time_to_timestamp(
            "2024-01-01T12:00:00.123456789Z", "milliseconds", format_name
        ) == ("1704110400123")
    assert time_to_timestamp(
        "20240101T120000.1234567Z", "milliseconds", "iso8601-basic"
    ) == ("1704110400123")

    # local-readable input without an offset is read as UTC.
    assert time_to_timestamp(
        "2024-01-01 12:00:00", "seconds", "local-readable"
    ) == ("1704110400")


def test_format_mismatch() -> None:
    with pytest.raises(FormatMismatchError) as excinfo:
        time_to_timestamp("2024-01-01", "seconds", "rfc3339")
    assert excinfo.value.kind == ErrorKind.FORMAT_MISMATCH
    assert str(excinfo.value) == "Input does not match format rfc3339"

    # Valid for another format, but not the one requested.
    with pytest.raises(FormatMismatchError, match="iso8601-basic"):
        time_to_timestamp("2024-01-01T12:00:00Z", "seconds", "iso8601-basic")


def test_wrong_weekday() -> None:
    # 2024-01-01 was a Monday.
    with pytest.raises(FormatMismatchError):
        time_to_timestamp(
            "Fri, 01 Jan 2024 12:00:00 +0000", "seconds", "rfc2822"
        )
    with pytest.raises(UnrecognizedFormatError):
        time_to_timestamp("Fri, 01 Jan 2024 12:00:00 GMT", "seconds")


def test_non_ascii_digits() -> None:
    value = "２０２４-01-01T12:00:00Z"  # noqa: RUF001
    with pytest.raises(FormatMismatchError):
        time_to_timestamp(value, "seconds", "rfc3339")
    with pytest.raises(UnrecognizedFormatError):
        time_to_timestamp(value, "seconds")


def test_parsed_out_of_range() -> None:
    with pytest.raises(OutOfRangeError):
        time_to_timestamp("0001-01-01T00:00:00+08:00", "seconds")


_MILLISECOND_VALUES = [0, 1, -1500, 1704110400123, 253402300799999]
_SECOND_VALUES = [0, -1000, 1704110400000, 253402300799000]


@pytest.mark.parametrize(
    "format_name",
    [
        FormatName.RFC3339,
        FormatName.ISO8601_BASIC,
        FormatName.ISO8601_EXTENDED,
    ],
)
def test_round_trip_milliseconds(format_name: FormatName) -> None:
    for value in _MILLISECOND_VALUES:
        rendered = timestamp_to_time(str(value), "milliseconds", format_name)
        parsed = time_to_timestamp(rendered, "milliseconds", format_name)
        assert parsed == str(value)
        assert time_to_timestamp(rendered, "milliseconds") == str(value)


@pytest.mark.parametrize("format_name", list(FormatName))
def test_round_trip_seconds(format_name: FormatName) -> None:
    for value in _SECOND_VALUES:
        rendered = timestamp_to_time(
            str(value), "milliseconds", format_name, local_timezone=UTC
        )
        parsed = time_to_timestamp(rendered, "milliseconds", format_name)
        assert parsed == str(value)

        rendered = timestamp_to_time(
            str(value // 1000), "seconds", format_name, local_timezone=UTC
        )
        assert time_to_timestamp(rendered, "seconds") == str(value // 1000)


def test_round_trip_loses_subseconds_in_seconds() -> None:
    rendered = timestamp_to_time("1704110400999", "milliseconds", "rfc3339")
    assert time_to_timestamp(rendered, "seconds", "rfc3339") == "1704110400"


def test_current_time(fixed_clock: FixedClock, utc_plus_8: timezone) -> None:
    assert current_time("seconds", clock=fixed_clock) == "1704110400"
    assert current_time("milliseconds", clock=fixed_clock) == "1704110400123"
    assert current_time(
        "formatted", "rfc3339", clock=fixed_clock
    ) == "2024-01-01T12:00:00.123+00:00"
    assert current_time(
        "formatted", clock=fixed_clock, local_timezone=utc_plus_8
    ) == ("2024-01-01 20:00:00")

    # The format is validated even when it is not used.
    with pytest.raises(InvalidFormatError):
        current_time("seconds", "bogus", clock=fixed_clock)
    with pytest.raises(InvalidUnitError):
        current_time("minutes", clock=fixed_clock)


def test_current_time_system_clock() -> None:
    seconds = int(current_time("seconds"))
    assert seconds > 1704110400
    milliseconds = int(current_time("milliseconds"))
    assert milliseconds // 1000 >= seconds


def test_error_hierarchy() -> None:
    for error in (
        InvalidNumberError("x"),
        InvalidUnitError("x"),
        InvalidFormatError("x"),
        OutOfRangeError(1),
        FormatMismatchError("rfc3339"),
        UnrecognizedFormatError(["a"]),
    ):
        assert isinstance(error, ConversionError)
        assert error.message == str(error)
