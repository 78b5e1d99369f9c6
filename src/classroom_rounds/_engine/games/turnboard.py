# Area: Games
"""
classroom_rounds._engine.games.turnboard — 3×3 board game (XO)
==============================================================

Player 1 plays X and always opens; player 2 plays O. Players
alternate placing their mark on an empty cell. Three equal marks on
a row, column or diagonal win; a full board with no line is a draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..enums import GameKind
from ..result import Outcome
from .base import GameModule, Step

logger = logging.getLogger("classroom_rounds.turnboard")

BOARD_CELLS = 9

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


class Mark(Enum):
    """Board symbols. X belongs to player 1."""
    X = "X"
    O = "O"

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


@dataclass
class TurnBoardState:
    """Board, whose turn, and the terminal flags."""

    cells: List[Optional[Mark]] = field(default_factory=lambda: [None] * BOARD_CELLS)
    turn: Mark = Mark.X
    winner: Optional[Mark] = None
    is_draw: bool = False
    win_line: Optional[Tuple[int, int, int]] = None

    @property
    def finished(self) -> bool:
        return self.winner is not None or self.is_draw


def find_winner(cells: Sequence[Optional[Mark]]) -> Tuple[Optional[Mark], Optional[Tuple[int, int, int]]]:
    """Return (mark, line) for the first complete line, or (None, None)."""
    for line in WIN_LINES:
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a], line
    return None, None


class TurnBoardModule(GameModule[TurnBoardState]):
    """XO on a 3×3 board."""

    kind = GameKind.TURNBOARD
    supports_restart = True

    def initial_state(self) -> TurnBoardState:
        return TurnBoardState()

    def player_for(self, mark: Mark) -> str:
        return self.player1_id if mark is Mark.X else self.player2_id

    def mark_for(self, player_id: str) -> Optional[Mark]:
        if player_id == self.player1_id:
            return Mark.X
        if player_id == self.player2_id:
            return Mark.O
        return None

    def whose_turn(self, state: TurnBoardState) -> Optional[str]:
        if state.finished:
            return None
        return self.player_for(state.turn)

    def apply_input(self, state: TurnBoardState, player_id: str, payload: Any) -> Step:
        if state.finished:
            return Step.rejected()
        if self.mark_for(player_id) is not state.turn:
            return Step.rejected()
        cell = _as_cell(payload)
        if cell is None or state.cells[cell] is not None:
            logger.debug(f"Placement rejected: {payload!r}")
            return Step.rejected()

        state.cells[cell] = state.turn
        winner, line = find_winner(state.cells)
        if winner is not None:
            state.winner = winner
            state.win_line = line
            return Step(accepted=True, terminal=Outcome.win(self.player_for(winner), winner.value))
        if all(c is not None for c in state.cells):
            state.is_draw = True
            return Step(accepted=True, terminal=Outcome.draw())

        state.turn = state.turn.other
        return Step(accepted=True)

    def public_view(self, state: TurnBoardState) -> Dict[str, Any]:
        return {
            "cells": [c.value if c else None for c in state.cells],
            "turn": state.turn.value,
            "winner": state.winner.value if state.winner else None,
            "is_draw": state.is_draw,
            "win_line": list(state.win_line) if state.win_line else None,
        }

    def summary(self, state: TurnBoardState) -> Dict[str, Any]:
        return {
            "p1_symbol": Mark.X.value,
            "p2_symbol": Mark.O.value,
            "win_line": list(state.win_line) if state.win_line else None,
            "moves": sum(1 for c in state.cells if c is not None),
        }


def _as_cell(payload: Any) -> Optional[int]:
    if isinstance(payload, bool) or not isinstance(payload, int):
        return None
    if not 0 <= payload < BOARD_CELLS:
        return None
    return payload
