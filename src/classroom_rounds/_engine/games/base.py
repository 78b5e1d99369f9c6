# Area: Games
"""
classroom_rounds._engine.games.base — Game module contract
==========================================================

Every mini-game implements the same contract so the round session
never looks at game-specific fields:

    initial_state()                          -> state
    apply_input(state, player_id, payload)   -> Step
    complete_pause(state)                    -> Step   (paused games only)
    whose_turn(state)                        -> player id

Modules mutate the state object they are given and report what
happened in a ``Step``. They never touch the player registry: points
earned mid-round are returned in ``Step.awards`` and the session
applies them.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from ..enums import GameKind, MovePhase
from ..result import Outcome

S = TypeVar("S")


@dataclass
class Step:
    """
    What one input (or one elapsed pause) did.

    Attributes:
        accepted: False when the input was ignored; nothing changed
        terminal: Set once the game has reached a winner or a draw
        pause_seconds: Set when the module now waits for ``complete_pause``
        awards: Points to credit to players right away
    """

    accepted: bool
    terminal: Optional[Outcome] = None
    pause_seconds: Optional[float] = None
    awards: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def rejected(cls) -> "Step":
        return cls(accepted=False)


class GameModule(ABC, Generic[S]):
    """
    Base class for a two-player mini-game.

    Subclasses set ``kind`` and implement the abstract methods. The
    module instance holds configuration only (players, options, content,
    random source); all mutable game data lives in the state object.
    """

    kind: GameKind
    supports_restart: bool = False

    def __init__(
        self,
        player1_id: str,
        player2_id: str,
        options: Any = None,
        rng: Optional[random.Random] = None,
    ):
        self.player1_id = player1_id
        self.player2_id = player2_id
        self.options = options
        self.rng = rng or random.Random()

    def other_player(self, player_id: str) -> str:
        return self.player2_id if player_id == self.player1_id else self.player1_id

    @abstractmethod
    def initial_state(self) -> S:
        """Build a fresh state. May raise InsufficientContent."""
        ...

    @abstractmethod
    def apply_input(self, state: S, player_id: str, payload: Any) -> Step:
        """Apply one move by ``player_id``."""
        ...

    def complete_pause(self, state: S) -> Step:
        """Finish the evaluation a previous ``apply_input`` paused for."""
        return Step(accepted=False)

    @abstractmethod
    def whose_turn(self, state: S) -> Optional[str]:
        """Id of the player expected to move next (None once finished)."""
        ...

    def phase(self, state: S) -> MovePhase:
        return getattr(state, "phase", MovePhase.READY)

    def is_locked(self, state: S) -> bool:
        return self.phase(state) is MovePhase.AWAITING_EVALUATION

    @abstractmethod
    def public_view(self, state: S) -> Dict[str, Any]:
        """What the projector may show right now."""
        ...

    @abstractmethod
    def summary(self, state: S) -> Dict[str, Any]:
        """Game-specific details for the round result."""
        ...
