"""Tests for timestamp normalization and relative time."""

import pytest

from plugin_feed.core import normalize_timestamp, time_ago

NOW = 1_700_000_000_000


def test_seconds_are_converted_to_millis():
    """Test that 10-digit epoch seconds become milliseconds."""
    assert normalize_timestamp(1700000000) == 1700000000000
    assert normalize_timestamp("1700000000") == 1700000000000


def test_millis_are_unchanged():
    """Test that canonical milliseconds normalize to themselves."""
    assert normalize_timestamp(1700000000000) == 1700000000000
    assert normalize_timestamp("1700000000000") == 1700000000000
    assert normalize_timestamp(normalize_timestamp(1700000000)) == 1700000000000


def test_large_eleven_digit_value_is_millis():
    """Test values above 4e10 are treated as milliseconds even with 11 digits."""
    assert normalize_timestamp(50_000_000_000) == 50_000_000_000


def test_nine_digit_value_is_seconds():
    """Test lower bound of the seconds range."""
    assert normalize_timestamp(123456789) == 123456789000


def test_fractional_seconds():
    """Test fractional seconds keep their millisecond part."""
    assert normalize_timestamp(1700000000.5) == 1700000000500


@pytest.mark.parametrize(
    "value",
    [None, 0, "0", "", "abc", float("nan"), float("inf"), True, 12345, [], {}],
)
def test_invalid_or_implausible_values(value):
    """Test that unusable values normalize to 0."""
    assert normalize_timestamp(value) == 0


def test_time_ago_unknown():
    """Test missing timestamp renders as unknown."""
    assert time_ago(0, now_ms=NOW) == "unknown"
    assert time_ago(None, now_ms=NOW) == "unknown"


def test_time_ago_past_buckets():
    """Test relative time buckets for past timestamps."""
    assert time_ago(NOW - 2_000, now_ms=NOW) == "just now"
    assert time_ago(NOW - 30_000, now_ms=NOW) == "30s ago"
    assert time_ago(NOW - 5 * 60_000, now_ms=NOW) == "5m ago"
    assert time_ago(NOW - 3 * 3_600_000, now_ms=NOW) == "3h ago"
    assert time_ago(NOW - 2 * 86_400_000, now_ms=NOW) == "2d ago"
    assert time_ago(NOW - 60 * 86_400_000, now_ms=NOW) == "2mo ago"
    assert time_ago(NOW - 400 * 86_400_000, now_ms=NOW) == "1yr ago"


def test_time_ago_future():
    """Test future timestamps get a leading 'in' and no 'just now'."""
    assert time_ago(NOW + 2_000, now_ms=NOW) == "in 2s"
    assert time_ago(NOW + 3 * 3_600_000, now_ms=NOW) == "in 3h"


def test_time_ago_accepts_seconds():
    """Test raw seconds input is normalized before rendering."""
    assert time_ago(1_700_000_000 - 120, now_ms=NOW) == "2m ago"


def test_digit_group_underscores_are_invalid():
    """Test strings with underscores are not read as numbers."""
    assert normalize_timestamp("1_700_000_000") == 0
    assert normalize_timestamp("1_700_000_000_000") == 0
    assert time_ago("1_700_000_000", now_ms=NOW) == "unknown"
