"""Shared HTTP session management for Newsfeed Neon network requests.

Updates: v0.1 - 2026-10-18 - Narrowed pooled session helpers to feed downloads.
"""

from __future__ import annotations

import atexit
import threading
from typing import Sequence, Set

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

_HTTP_THREAD_LOCAL = threading.local()
_HTTP_SESSION_LOCK = threading.Lock()
_HTTP_SESSIONS: Set[Session] = set()
_RETRY_STATUSES: Set[int] = {
    408,
    429,
    500,
    502,
    503,
    504,
}


def _build_retry() -> Retry:
    return Retry(  # pragma: no cover - network configuration
        total=2,
        backoff_factor=0.3,
        status_forcelist=list(_RETRY_STATUSES),
        allowed_methods=["HEAD", "GET", "OPTIONS"],
        raise_on_status=False,
    )


def get_http_session() -> Session:
    """Return a thread-local shared requests session configured with retries."""

    session = getattr(_HTTP_THREAD_LOCAL, "session", None)
    if session is not None:
        return session
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=4, pool_maxsize=8, max_retries=_build_retry())
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    with _HTTP_SESSION_LOCK:
        _HTTP_SESSIONS.add(session)
    _HTTP_THREAD_LOCAL.session = session
    return session


def release_thread_session() -> None:
    """Close the calling thread's session; worker threads call this on exit."""

    session = getattr(_HTTP_THREAD_LOCAL, "session", None)
    if session is None:
        return
    _HTTP_THREAD_LOCAL.session = None
    with _HTTP_SESSION_LOCK:
        _HTTP_SESSIONS.discard(session)
    session.close()


def close_all_sessions() -> None:
    """Close pooled HTTP sessions at shutdown."""

    with _HTTP_SESSION_LOCK:
        sessions: Sequence[Session] = tuple(_HTTP_SESSIONS)
        _HTTP_SESSIONS.clear()
    for session in sessions:
        try:
            session.close()
        except Exception:  # pragma: no cover - close failures on shutdown
            continue


atexit.register(close_all_sessions)


__all__ = [
    "close_all_sessions",
    "get_http_session",
    "release_thread_session",
]
