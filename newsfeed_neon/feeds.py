"""Feed download and parsing.

``FeedSource.fetch`` downloads one feed URL through the pooled HTTP session and
turns it into raw ``FeedItem`` records; timestamps are left unparsed so the
sync cycle can apply its own parsing policy.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

import feedparser
import requests
from bs4 import BeautifulSoup

from .config import REQUEST_TIMEOUT_SECONDS, USER_AGENT
from .errors import FetchError
from .http_client import get_http_session
from .models import FeedItem

logger = logging.getLogger(__name__)

_ACCEPT_HEADER = (
    "application/rss+xml, application/atom+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5"
)


def clean_title(raw: Optional[str]) -> str:
    """Strip markup and collapse whitespace in a feed title."""

    if not isinstance(raw, str):
        return ""
    text = raw
    if "<" in text:
        text = BeautifulSoup(text, "html.parser").get_text()
    return " ".join(text.split())


def _entry_published(entry: Any) -> Optional[str]:
    for key in ("published", "updated"):
        value = entry.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class FeedSource:
    """Fetch RSS/Atom feeds over HTTP."""

    def __init__(
        self,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
        session_factory: Callable[[], requests.Session] = get_http_session,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._session_factory = session_factory

    def fetch(self, url: str) -> List[FeedItem]:
        """Download and parse ``url``.

        Raises:
            FetchError: on network errors, HTTP errors, or an unparseable body.
        """
        session = self._session_factory()
        try:
            response = session.get(
                url,
                headers={"User-Agent": self.user_agent, "Accept": _ACCEPT_HEADER},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise FetchError(url, str(exc)) from exc

        if response.status_code >= 400:
            raise FetchError(url, f"HTTP {response.status_code}")

        parsed = feedparser.parse(response.content)
        if parsed.bozo and not parsed.entries:
            reason = parsed.get("bozo_exception") or "not a feed"
            raise FetchError(url, f"unparseable feed: {reason}")

        items: List[FeedItem] = []
        for entry in parsed.entries:
            link = entry.get("link")
            if not isinstance(link, str) or not link.strip():
                logger.debug("Skipping feed entry without link from %s", url)
                continue
            items.append(
                FeedItem(
                    title=clean_title(entry.get("title")),
                    link=link.strip(),
                    published_raw=_entry_published(entry),
                )
            )
        logger.debug("Fetched %d item(s) from %s", len(items), url)
        return items


__all__ = ["FeedSource", "clean_title"]
