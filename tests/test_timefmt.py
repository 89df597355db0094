from datetime import datetime, timedelta, timezone

import pytest

from activesync.timefmt import format_datetime, parse_datetime


def test_format_converts_to_utc():
    pacific_daylight = timezone(timedelta(hours=-7))
    t = datetime(2025, 4, 27, 19, 30, 5, 123456, tzinfo=pacific_daylight)
    assert format_datetime(t) == "20250428T023005Z"


def test_format_naive_is_utc():
    assert format_datetime(datetime(2025, 1, 2, 3, 4, 5)) == "20250102T030405Z"


def test_parse_round_trip():
    text = "20250101T000000Z"
    parsed = parse_datetime(text)
    assert format_datetime(parsed) == text
    assert parsed.utcoffset() == timedelta(0)


def test_parse_fractional_seconds():
    got = parse_datetime("20250101T000000.123Z")
    assert got == datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    assert got.microsecond == 0


@pytest.mark.parametrize(
    "text",
    ["garbage", "", "2025-01-01T00:00:00Z", "20250101T000000", "20251301T000000Z", "2025101T000000Z"],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_datetime(text)