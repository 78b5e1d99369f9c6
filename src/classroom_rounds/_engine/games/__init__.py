# Area: Games
"""
Game modules
============

One module per mini-game, all behind the ``GameModule`` contract.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional, Type

from ..._config import RuntimeConfig
from ..._content import ContentSource
from ..enums import GameKind
from .base import GameModule, Step
from .match_pairs import Card, MatchPairsModule, MatchPairsState
from .quiz import QuizModule, QuizState
from .turnboard import Mark, TurnBoardModule, TurnBoardState, WIN_LINES, find_winner

GAME_MODULES: Dict[GameKind, Type[GameModule]] = {
    GameKind.QUIZ: QuizModule,
    GameKind.TURNBOARD: TurnBoardModule,
    GameKind.MATCHPAIRS: MatchPairsModule,
}


def create_module(
    kind: GameKind,
    player1_id: str,
    player2_id: str,
    options: Any = None,
    content: Optional[ContentSource] = None,
    rng: Optional[random.Random] = None,
    runtime: Optional[RuntimeConfig] = None,
) -> GameModule:
    """Instantiate the module for ``kind`` with its game-specific arguments."""
    kind = GameKind(kind)
    runtime = runtime or RuntimeConfig()
    extras: Dict[GameKind, Dict[str, Any]] = {
        GameKind.QUIZ: {
            "content": content,
            "feedback_seconds": runtime.quiz_feedback_seconds,
        },
        GameKind.MATCHPAIRS: {
            "content": content,
            "reveal_seconds": runtime.match_reveal_seconds,
        },
    }
    module_cls = GAME_MODULES[kind]
    return module_cls(player1_id, player2_id, options, rng=rng, **extras.get(kind, {}))


__all__ = [
    "GAME_MODULES",
    "create_module",
    "GameModule",
    "Step",
    "Card",
    "MatchPairsModule",
    "MatchPairsState",
    "QuizModule",
    "QuizState",
    "Mark",
    "TurnBoardModule",
    "TurnBoardState",
    "WIN_LINES",
    "find_winner",
]
