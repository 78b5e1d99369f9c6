# Area: Content
"""
classroom_rounds._content.catalog — Content source
==================================================

Supplies the quiz question bank and the memory item catalog.
The bundled JSON files are used unless the host passes its own
entries. Entries are validated with pydantic on load.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger("classroom_rounds.content")

# A quiz round cannot start with a smaller bank
MIN_QUESTION_BANK = 10


class Question(BaseModel):
    """One multiple-choice question."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    correct_index: int
    explanation: str = ""
    category: str = ""

    @model_validator(mode="after")
    def check_correct_index(self) -> "Question":
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correct_index {self.correct_index} out of range "
                f"for {len(self.options)} options"
            )
        return self


class MemoryItem(BaseModel):
    """A picture that appears on exactly two cards of a memory deck."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    label: str
    icon: str = ""


def _load_bundled(filename: str) -> List[Any]:
    text = resources.files(__package__).joinpath("data").joinpath(filename).read_text(encoding="utf-8")
    return json.loads(text)


class ContentSource:
    """
    Question bank + memory item catalog.

    Args:
        questions: Question entries (models or dicts); bundled bank when None
        memory_items: Item entries (models or dicts); bundled catalog when None
    """

    def __init__(
        self,
        questions: Optional[Iterable[Any]] = None,
        memory_items: Optional[Iterable[Any]] = None,
    ):
        if questions is None:
            questions = _load_bundled("questions.json")
        if memory_items is None:
            memory_items = _load_bundled("memory_items.json")
        self._questions = [Question.model_validate(q) for q in questions]
        self._items = [MemoryItem.model_validate(i) for i in memory_items]
        self._check_unique_keys()
        logger.debug(
            f"Content loaded: {len(self._questions)} questions, "
            f"{len(self._items)} memory items"
        )

    def _check_unique_keys(self) -> None:
        keys = [item.key for item in self._items]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate memory item keys: {duplicates}")

    def questions(self) -> List[Question]:
        return list(self._questions)

    def memory_items(self) -> List[MemoryItem]:
        return list(self._items)
