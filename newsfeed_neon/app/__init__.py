"""Application orchestration package for Newsfeed Neon.

Contains controller-adjacent modules:
- services: late-bound sync and browser services
- timeutils: feed timestamp normalisation
- merging / ordering / filtering: pure article list operations
- sync: cache-then-fetch-then-persist cycle
- view_state: prompt buffer, search and jump interpretation
- rendering: display rows and relative age labels
- actions: opening article links
"""

__all__ = [
    "actions",
    "filtering",
    "merging",
    "ordering",
    "rendering",
    "services",
    "sync",
    "timeutils",
    "view_state",
]
