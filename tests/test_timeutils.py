"""Unit tests for feed timestamp parsing in newsfeed_neon.app.timeutils.

Covers:
- RFC 1123 with named zones (known and unknown)
- RFC 1123 with numeric offsets
- RFC 3339 with and without fractional seconds
- format precedence and unsupported input
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from newsfeed_neon.app.timeutils import SUPPORTED_TIME_FORMATS, parse_published
from newsfeed_neon.errors import UnsupportedTimeFormat


def test_supported_formats_are_tried_in_documented_order() -> None:
    """The precedence of layouts is RFC1123, RFC1123Z, RFC3339."""
    assert [name for name, _ in SUPPORTED_TIME_FORMATS] == ["RFC1123", "RFC1123Z", "RFC3339"]


def test_parse_rfc1123_gmt() -> None:
    """GMT zone names resolve to UTC."""
    parsed = parse_published("Tue, 10 Jun 2003 04:00:00 GMT")
    assert parsed == datetime(2003, 6, 10, 4, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_rfc1123_us_zone_name() -> None:
    """US zone abbreviations carry their fixed offsets."""
    parsed = parse_published("Mon, 02 Jan 2006 15:04:05 EST")
    assert parsed.utcoffset() == timedelta(hours=-5)
    assert parsed.astimezone(timezone.utc) == datetime(2006, 1, 2, 20, 4, 5, tzinfo=timezone.utc)


def test_parse_rfc1123_unknown_zone_name_reads_as_utc() -> None:
    """Unrecognised alphabetic zones fall back to UTC."""
    parsed = parse_published("Mon, 02 Jan 2006 15:04:05 XYZ")
    assert parsed == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def test_parse_rfc1123_numeric_offset() -> None:
    """Numeric offsets are handled by the RFC1123Z layout."""
    parsed = parse_published("Tue, 10 Jun 2003 04:00:00 +0200")
    assert parsed.utcoffset() == timedelta(hours=2)
    assert parsed.astimezone(timezone.utc) == datetime(2003, 6, 10, 2, 0, tzinfo=timezone.utc)


def test_parse_rfc3339_utc() -> None:
    """A trailing Z means UTC."""
    parsed = parse_published("2024-01-15T10:30:00Z")
    assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_parse_rfc3339_fraction_and_offset() -> None:
    """Nanosecond fractions are truncated to microseconds; offsets are kept."""
    parsed = parse_published("2024-01-15T10:30:00.123456789+05:30")
    assert parsed.microsecond == 123456
    assert parsed.utcoffset() == timedelta(hours=5, minutes=30)


def test_parse_strips_surrounding_whitespace() -> None:
    """Feeds sometimes pad their dates with whitespace."""
    parsed = parse_published("  2024-01-15T10:30:00Z\n")
    assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "raw",
    ["", "yesterday", "2024-01-15", "15/01/2024 10:30", "Tue, 10 Jun 2003 04:00:00"],
)
def test_unsupported_formats_raise(raw: str) -> None:
    """Input matching no layout raises UnsupportedTimeFormat carrying the raw value."""
    with pytest.raises(UnsupportedTimeFormat) as excinfo:
        parse_published(raw)
    assert excinfo.value.raw == raw
