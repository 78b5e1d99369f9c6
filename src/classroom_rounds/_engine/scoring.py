# Area: Engine
"""
classroom_rounds._engine.scoring — End-of-round awards
======================================================

Runs once per round when it becomes terminal:

- draw: both players receive ``draw_points``;
- otherwise the winner receives ``win_points`` and the loser nothing.

Quiz points earned per correct answer are credited during play and
are not part of this award; both land in the same cumulative score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .._registry import PlayerRegistry
from ..errors import UnknownPlayer
from ..settings import Settings
from .result import Outcome

logger = logging.getLogger("classroom_rounds.scoring")


@dataclass(frozen=True)
class Awards:
    """Points granted to each player by the resolver."""
    player1: int
    player2: int


def compute_awards(
    outcome: Outcome,
    player1_id: str,
    player2_id: str,
    win_points: int,
    draw_points: int,
) -> Awards:
    """Pure award rule; applies nothing."""
    if outcome.is_draw:
        return Awards(draw_points, draw_points)
    if outcome.winner_id == player1_id:
        return Awards(win_points, 0)
    if outcome.winner_id == player2_id:
        return Awards(0, win_points)
    raise ValueError(f"Winner {outcome.winner_id!r} is not in this round")


class ScoringResolver:
    """
    Computes and applies the end-of-round award.

    Args:
        registry: Where the points are credited
        win_points: Award for a decisive win
        draw_points: Award for each player on a draw
    """

    def __init__(self, registry: PlayerRegistry, win_points: int, draw_points: int):
        self.registry = registry
        self.win_points = win_points
        self.draw_points = draw_points

    @classmethod
    def from_settings(cls, registry: PlayerRegistry, settings: Settings) -> "ScoringResolver":
        return cls(registry, settings.win_points, settings.draw_points)

    def resolve(self, outcome: Outcome, player1_id: str, player2_id: str) -> Awards:
        """Credit the award for ``outcome`` exactly once per affected player."""
        awards = compute_awards(
            outcome, player1_id, player2_id, self.win_points, self.draw_points
        )
        if outcome.is_draw:
            self._credit(player1_id, awards.player1)
            self._credit(player2_id, awards.player2)
            logger.info(f"Draw: +{self.draw_points} to {player1_id} and {player2_id}")
        else:
            winner_award = awards.player1 if outcome.winner_id == player1_id else awards.player2
            self._credit(outcome.winner_id, winner_award)
            logger.info(f"Win: +{winner_award} to {outcome.winner_id}")
        return awards

    def _credit(self, player_id: str, points: int) -> None:
        try:
            self.registry.add_points(player_id, points)
        except UnknownPlayer:
            logger.warning(f"Player {player_id} left the registry before the award")