# Area: Settings
"""
classroom_rounds.settings — Classroom settings and round options
================================================================

Pydantic models for the teacher-editable settings (persisted with the
players) and for the per-round options a game is started with.

Out-of-range numbers are clamped into range instead of rejected, so a
hand-edited store or a sloppy form value never blocks the class.
"""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

GRID_PAIRS = {
    "4x4": 8,
    "6x4": 12,
}
DEFAULT_GRID = "4x4"


def clamp(value: Any, low: int, high: int, default: int) -> int:
    """Coerce ``value`` to an int within [low, high]; ``default`` when unparseable."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = default
    return max(low, min(high, number))


def _grid(value: Any) -> str:
    return value if value in GRID_PAIRS else DEFAULT_GRID


# ============================================
# Persisted settings
# ============================================

class QuizSettings(BaseModel):
    """Quiz defaults."""

    model_config = ConfigDict(validate_assignment=True)

    question_count: int = 10
    seconds_per_question: int = 15
    correct_points: int = 1
    speed_bonus_points: int = 1

    @field_validator("question_count", mode="before")
    @classmethod
    def clamp_question_count(cls, value: Any) -> int:
        return clamp(value, 5, 50, 10)

    @field_validator("seconds_per_question", mode="before")
    @classmethod
    def clamp_seconds(cls, value: Any) -> int:
        return clamp(value, 5, 120, 15)

    @field_validator("correct_points", "speed_bonus_points", mode="before")
    @classmethod
    def clamp_points(cls, value: Any) -> int:
        return clamp(value, 0, 999, 0)


class MatchPairsSettings(BaseModel):
    """Memory game defaults."""

    model_config = ConfigDict(validate_assignment=True)

    grid: Literal["4x4", "6x4"] = DEFAULT_GRID

    @field_validator("grid", mode="before")
    @classmethod
    def known_grid(cls, value: Any) -> str:
        return _grid(value)


class Settings(BaseModel):
    """
    Classroom-wide settings.

    Attributes:
        win_points: Awarded to the winner of any round
        draw_points: Awarded to each player on a draw
        quiz: Quiz defaults
        match_pairs: Memory game defaults
    """

    model_config = ConfigDict(validate_assignment=True)

    win_points: int = 3
    draw_points: int = 1
    quiz: QuizSettings = Field(default_factory=QuizSettings)
    match_pairs: MatchPairsSettings = Field(default_factory=MatchPairsSettings)

    @field_validator("win_points", "draw_points", mode="before")
    @classmethod
    def clamp_award(cls, value: Any) -> int:
        return clamp(value, 0, 999, 0)

    @classmethod
    def from_stored(cls, data: Any) -> "Settings":
        """Load stored settings, falling back to defaults for anything missing."""
        if not isinstance(data, dict):
            return cls()
        merged: Dict[str, Any] = {}
        for key in ("win_points", "draw_points"):
            if key in data:
                merged[key] = data[key]
        for key in ("quiz", "match_pairs"):
            if isinstance(data.get(key), dict):
                merged[key] = data[key]
        return cls.model_validate(merged)


# ============================================
# Per-round options
# ============================================

class QuizOptions(BaseModel):
    """Options a quiz round is started with."""

    model_config = ConfigDict(frozen=True)

    question_count: int = 10
    seconds_per_question: int = 15
    correct_points: int = 1
    speed_bonus_points: int = 1

    @field_validator("question_count", mode="before")
    @classmethod
    def clamp_question_count(cls, value: Any) -> int:
        return clamp(value, 5, 20, 10)

    @field_validator("seconds_per_question", mode="before")
    @classmethod
    def clamp_seconds(cls, value: Any) -> int:
        return clamp(value, 10, 60, 15)

    @field_validator("correct_points", "speed_bonus_points", mode="before")
    @classmethod
    def clamp_points(cls, value: Any) -> int:
        return clamp(value, 0, 10, 0)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "QuizOptions":
        values = settings.quiz.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class MatchPairsOptions(BaseModel):
    """Options a memory round is started with."""

    model_config = ConfigDict(frozen=True)

    grid: Literal["4x4", "6x4"] = DEFAULT_GRID

    @field_validator("grid", mode="before")
    @classmethod
    def known_grid(cls, value: Any) -> str:
        return _grid(value)

    @property
    def pairs_needed(self) -> int:
        return GRID_PAIRS[self.grid]

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "MatchPairsOptions":
        values = settings.match_pairs.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class TurnBoardOptions(BaseModel):
    """The board game takes no options."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "TurnBoardOptions":
        return cls()
