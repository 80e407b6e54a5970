"""Late-bound application services used by the controllers.

Concrete implementations are injected at startup so the Tk layer stays
decoupled from the sync engine and the browser (useful for testing and swaps).
"""

from __future__ import annotations

from typing import Callable, Optional

from ..models import SyncResult

_run_sync_cycle_impl: Optional[Callable[[], SyncResult]] = None
_open_link_impl: Optional[Callable[[str], bool]] = None


def configure_app_services(
    *,
    run_sync_cycle: Callable[[], SyncResult],
    open_link: Callable[[str], bool],
) -> None:
    """Configure Newsfeed Neon application service implementations."""
    global _run_sync_cycle_impl
    global _open_link_impl

    _run_sync_cycle_impl = run_sync_cycle
    _open_link_impl = open_link


def run_sync_cycle() -> SyncResult:
    """Run one sync cycle and return its result."""
    if _run_sync_cycle_impl is None:
        raise RuntimeError("run_sync_cycle service not configured")
    return _run_sync_cycle_impl()


def open_link(url: str) -> bool:
    """Ask the platform to open an article link."""
    if _open_link_impl is None:
        raise RuntimeError("open_link service not configured")
    return _open_link_impl(url)


__all__ = ["configure_app_services", "open_link", "run_sync_cycle"]
