"""Controller package re-exports."""
from __future__ import annotations

from .auto_refresh_controller import AutoRefreshController
from .refresh_controller import RefreshController
from .selection_controller import SelectionController

__all__ = [
    "AutoRefreshController",
    "RefreshController",
    "SelectionController",
]
