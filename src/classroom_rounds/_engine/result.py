# Area: Engine
"""
classroom_rounds._engine.result — Round outcome and result
==========================================================

``Outcome`` is what a game module signals when it reaches a terminal
position. ``SessionResult`` is the immutable summary a finished round
hands to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .enums import GameKind


@dataclass(frozen=True)
class Outcome:
    """
    Terminal outcome of a round.

    Attributes:
        winner_id: Winning player's id, or None on a draw
        is_draw: True if nobody won
        winner_symbol: Board mark of the winner, for symbol-based games
    """

    winner_id: Optional[str]
    is_draw: bool
    winner_symbol: Optional[str] = None

    def __post_init__(self):
        if self.is_draw == (self.winner_id is not None):
            raise ValueError("An outcome is either a draw or has a winner, not both")

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(winner_id=None, is_draw=True)

    @classmethod
    def win(cls, winner_id: str, symbol: Optional[str] = None) -> "Outcome":
        return cls(winner_id=winner_id, is_draw=False, winner_symbol=symbol)

    @classmethod
    def by_comparison(cls, tallies: Mapping[str, int], player1_id: str, player2_id: str) -> "Outcome":
        """Higher tally wins; equal tallies draw."""
        p1 = tallies.get(player1_id, 0)
        p2 = tallies.get(player2_id, 0)
        if p1 > p2:
            return cls.win(player1_id)
        if p2 > p1:
            return cls.win(player2_id)
        return cls.draw()


@dataclass(frozen=True)
class SessionResult:
    """
    Summary of a resolved round.

    Attributes:
        game: Which game was played
        player1_id: First player
        player2_id: Second player
        award_p1: End-of-round points given to player 1
        award_p2: End-of-round points given to player 2
        winner_id: Winner's id, or None on a draw
        is_draw: True if the round was drawn
        summary: Game-specific details (read-only)
        started_at: When the round became active
        finished_at: When the round was resolved
    """

    game: GameKind
    player1_id: str
    player2_id: str
    award_p1: int
    award_p2: int
    winner_id: Optional[str]
    is_draw: bool
    summary: Mapping[str, Any] = field(default_factory=dict)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game": self.game.value,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "award_p1": self.award_p1,
            "award_p2": self.award_p2,
            "winner_id": self.winner_id,
            "is_draw": self.is_draw,
            "summary": dict(self.summary),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
        }
