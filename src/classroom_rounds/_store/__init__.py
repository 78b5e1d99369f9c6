# Area: Store
"""Persistence collaborators for players and settings."""

from .database import StateStore, SQLiteStateStore, MemoryStore, STATE_KEY

__all__ = ["StateStore", "SQLiteStateStore", "MemoryStore", "STATE_KEY"]
