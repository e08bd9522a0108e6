"""Tests for timestamp parsing."""

from datetime import datetime, timezone

import pytest

from crl_store_check.exceptions import TimestampParseError
from crl_store_check.timeparse import format_timestamp, parse_timestamp


def test_parse_openssl_format():
    expected = int(datetime(2027, 1, 5, 9, 0, 0, tzinfo=timezone.utc).timestamp())
    assert parse_timestamp("Jan  5 09:00:00 2027 GMT") == expected


def test_parse_without_timezone_assumes_utc():
    expected = int(datetime(2026, 10, 18, 23, 59, 59, tzinfo=timezone.utc).timestamp())
    assert parse_timestamp("Oct 18 23:59:59 2026") == expected


def test_parse_tolerates_surrounding_whitespace():
    assert parse_timestamp("  Mar 1 00:00:00 2030 UTC\n") == parse_timestamp("Mar  1 00:00:00 2030 GMT")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "garbage",
        "Feb 30 00:00:00 2027 GMT",
        "Foo 10 00:00:00 2027 GMT",
        "Jan 10 25:00:00 2027 GMT",
        "Jan 10 00:00:00 2027 CET",
        "2027-01-10T00:00:00Z",
    ],
)
def test_parse_rejects_invalid_dates(raw):
    with pytest.raises(TimestampParseError) as exc_info:
        parse_timestamp(raw)
    assert exc_info.value.raw == raw


def test_format_pads_single_digit_day():
    value = datetime(2027, 1, 5, 9, 3, 7, tzinfo=timezone.utc)
    assert format_timestamp(value) == "Jan  5 09:03:07 2027 GMT"


def test_format_treats_naive_datetime_as_utc():
    value = datetime(2026, 12, 24, 18, 0, 0)
    assert format_timestamp(value) == "Dec 24 18:00:00 2026 GMT"
    assert parse_timestamp(format_timestamp(value)) == int(value.replace(tzinfo=timezone.utc).timestamp())
