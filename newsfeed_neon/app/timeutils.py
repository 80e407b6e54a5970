"""Feed timestamp parsing into timezone-aware instants.

Feeds publish dates in a handful of layouts. ``parse_published`` tries each
layout of ``SUPPORTED_TIME_FORMATS`` in order and returns the first success,
so the precedence of that tuple is part of the contract.

Updates: v0.1 - 2026-10-18 - Replaced timezone coercion helpers with the feed
timestamp parser.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Dict, Tuple

from ..errors import UnsupportedTimeFormat

_RFC1123_LAYOUT = "%a, %d %b %Y %H:%M:%S"

# RFC 822 zone names; any other alphabetic zone is read as UTC.
_NAMED_ZONES: Dict[str, tzinfo] = {
    "UT": timezone.utc,
    "UTC": timezone.utc,
    "GMT": timezone.utc,
    "Z": timezone.utc,
    "EST": timezone(-timedelta(hours=5), name="EST"),
    "EDT": timezone(-timedelta(hours=4), name="EDT"),
    "CST": timezone(-timedelta(hours=6), name="CST"),
    "CDT": timezone(-timedelta(hours=5), name="CDT"),
    "MST": timezone(-timedelta(hours=7), name="MST"),
    "MDT": timezone(-timedelta(hours=6), name="MDT"),
    "PST": timezone(-timedelta(hours=8), name="PST"),
    "PDT": timezone(-timedelta(hours=7), name="PDT"),
}

_RFC3339_PATTERN = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:\d{2})$"
)


def _zone_for_name(name: str) -> tzinfo:
    return _NAMED_ZONES.get(name.upper(), timezone.utc)


def _parse_rfc1123(raw: str) -> datetime:
    head, _, zone = raw.rpartition(" ")
    if not zone.isalpha():
        raise ValueError(f"zone {zone!r} is not a name")
    moment = datetime.strptime(head, _RFC1123_LAYOUT)
    return moment.replace(tzinfo=_zone_for_name(zone))


def _parse_rfc1123z(raw: str) -> datetime:
    return datetime.strptime(raw, f"{_RFC1123_LAYOUT} %z")


def _parse_rfc3339(raw: str) -> datetime:
    match = _RFC3339_PATTERN.match(raw)
    if match is None:
        raise ValueError("not an RFC 3339 timestamp")
    moment = datetime.strptime(match.group("base").upper(), "%Y-%m-%dT%H:%M:%S")
    fraction = match.group("fraction")
    if fraction:
        moment = moment.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    zone = match.group("zone")
    if zone in ("Z", "z"):
        offset: tzinfo = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        offset = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return moment.replace(tzinfo=offset)


SUPPORTED_TIME_FORMATS: Tuple[Tuple[str, Callable[[str], datetime]], ...] = (
    ("RFC1123", _parse_rfc1123),
    ("RFC1123Z", _parse_rfc1123z),
    ("RFC3339", _parse_rfc3339),
)


def parse_published(raw: str) -> datetime:
    """Parse a feed timestamp into an aware datetime.

    Raises:
        UnsupportedTimeFormat: when none of the supported layouts match.
    """
    text = raw.strip() if isinstance(raw, str) else ""
    for _name, parser in SUPPORTED_TIME_FORMATS:
        try:
            return parser(text)
        except ValueError:
            continue
    raise UnsupportedTimeFormat(raw)


__all__ = ["SUPPORTED_TIME_FORMATS", "parse_published"]
