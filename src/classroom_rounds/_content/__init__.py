# Area: Content
"""Quiz question bank and memory item catalog."""

from .catalog import (
    Question,
    MemoryItem,
    ContentSource,
    MIN_QUESTION_BANK,
)

__all__ = ["Question", "MemoryItem", "ContentSource", "MIN_QUESTION_BANK"]
