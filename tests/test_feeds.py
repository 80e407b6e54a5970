"""Unit tests for feed downloading in newsfeed_neon.feeds.

Covers:
- RSS parsing into FeedItem records (raw timestamps, missing links)
- Atom entries falling back to the updated timestamp
- HTTP, network and parse failures mapped to FetchError
- title cleanup
"""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
import requests

from newsfeed_neon.errors import FetchError
from newsfeed_neon.feeds import FeedSource, clean_title

RSS_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <item>
      <title>First   story</title>
      <link>https://example.com/1</link>
      <pubDate>Wed, 01 May 2024 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Second story</title>
      <link>https://example.com/2</link>
    </item>
    <item>
      <title>No link here</title>
      <pubDate>Wed, 01 May 2024 09:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

ATOM_BODY = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom example</title>
  <id>urn:example</id>
  <updated>2024-05-01T10:00:00Z</updated>
  <entry>
    <title>Atom entry</title>
    <link href="https://example.com/atom/1"/>
    <id>urn:example:1</id>
    <updated>2024-05-01T10:00:00Z</updated>
  </entry>
</feed>
"""


class FakeResponse:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content


class FakeSession:
    def __init__(self, response: Any) -> None:
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def _source(session: FakeSession) -> FeedSource:
    return FeedSource(timeout=3.0, user_agent="test-agent", session_factory=lambda: session)


def test_fetch_parses_rss_items() -> None:
    """Items keep their raw pubDate; items without a link are skipped."""
    session = FakeSession(FakeResponse(200, RSS_BODY))

    items = _source(session).fetch("https://example.com/rss")

    assert [item.link for item in items] == ["https://example.com/1", "https://example.com/2"]
    assert items[0].title == "First story"
    assert items[0].published_raw == "Wed, 01 May 2024 10:00:00 GMT"
    assert items[1].published_raw is None


def test_fetch_sends_timeout_and_user_agent() -> None:
    """The configured timeout and user agent reach the HTTP session."""
    session = FakeSession(FakeResponse(200, RSS_BODY))
    _source(session).fetch("https://example.com/rss")

    call = session.calls[0]
    assert call["url"] == "https://example.com/rss"
    assert call["timeout"] == 3.0
    assert call["headers"]["User-Agent"] == "test-agent"


def test_fetch_atom_uses_updated_timestamp() -> None:
    """Atom entries without a published date use their updated value."""
    session = FakeSession(FakeResponse(200, ATOM_BODY))
    items = _source(session).fetch("https://example.com/atom")
    assert len(items) == 1
    assert items[0].link == "https://example.com/atom/1"
    assert items[0].published_raw == "2024-05-01T10:00:00Z"


def test_fetch_http_error_raises_fetch_error() -> None:
    """HTTP error statuses become FetchError."""
    session = FakeSession(FakeResponse(500))
    with pytest.raises(FetchError) as excinfo:
        _source(session).fetch("https://example.com/rss")
    assert excinfo.value.reason == "HTTP 500"
    assert excinfo.value.url == "https://example.com/rss"


def test_fetch_network_error_raises_fetch_error() -> None:
    """requests exceptions become FetchError."""
    session = FakeSession(requests.ConnectionError("connection refused"))
    with pytest.raises(FetchError) as excinfo:
        _source(session).fetch("https://example.com/rss")
    assert "connection refused" in excinfo.value.reason


def test_fetch_garbage_body_raises_fetch_error() -> None:
    """A body that is not a feed at all is reported as unparseable."""
    session = FakeSession(FakeResponse(200, b"this is <not> valid & xml <<<"))
    with pytest.raises(FetchError) as excinfo:
        _source(session).fetch("https://example.com/rss")
    assert "unparseable" in excinfo.value.reason


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Plain\n title  ", "Plain title"),
        ("<b>Bold</b> move", "Bold move"),
        (None, ""),
    ],
)
def test_clean_title(raw, expected) -> None:
    """Markup is stripped and whitespace collapsed."""
    assert clean_title(raw) == expected
