"""Newsfeed Neon application package bootstrap.

The package syncs configured RSS/Atom feeds into a local article store and
presents them in a Tkinter table with search and numeric jump navigation.

Updates: v0.1 - 2026-10-18 - Created package for the feed reader.
"""

from .main import main

__all__ = ["main"]
