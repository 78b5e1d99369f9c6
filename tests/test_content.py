# Area: Content Tests
"""Tests for the question bank and memory catalog."""

import pytest
from pydantic import ValidationError

from classroom_rounds._content import MIN_QUESTION_BANK, ContentSource, MemoryItem, Question
from classroom_rounds.settings import GRID_PAIRS


class TestBundledContent:
    """The catalog shipped with the package."""

    def test_bundled_bank_is_large_enough(self):
        content = ContentSource()
        assert len(content.questions()) >= MIN_QUESTION_BANK

    def test_bundled_catalog_covers_largest_grid(self):
        content = ContentSource()
        assert len(content.memory_items()) >= max(GRID_PAIRS.values())

    def test_bundled_keys_unique(self):
        keys = [item.key for item in ContentSource().memory_items()]
        assert len(keys) == len(set(keys))

    def test_lists_are_copies(self):
        content = ContentSource()
        content.questions().clear()
        assert content.questions()


class TestValidation:
    """Entries are validated when loaded."""

    def test_custom_entries(self):
        content = ContentSource(
            questions=[{"prompt": "2+2?", "options": ["3", "4"], "correct_index": 1}],
            memory_items=[{"key": "cpu", "label": "CPU"}],
        )
        assert content.questions()[0].correct_index == 1
        assert content.memory_items()[0] == MemoryItem(key="cpu", label="CPU")

    def test_correct_index_out_of_range(self):
        with pytest.raises(ValidationError):
            Question(prompt="?", options=["a", "b"], correct_index=2)

    def test_needs_two_options(self):
        with pytest.raises(ValidationError):
            Question(prompt="?", options=["a"], correct_index=0)

    def test_duplicate_item_keys_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ContentSource(
                questions=[],
                memory_items=[{"key": "a", "label": "A"}, {"key": "a", "label": "B"}],
            )
