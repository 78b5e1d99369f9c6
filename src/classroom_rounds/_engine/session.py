# Area: Engine
"""
classroom_rounds._engine.session — Round session
================================================

Runs one round of one game between two registered players:

    SETUP --start()--> ACTIVE --terminal--> TERMINAL --awards--> RESOLVED
    SETUP or ACTIVE --abandon()--> ABANDONED

``submit_input`` is the only gameplay entry point. Input is dropped
(returns False, no error) when the round is not active, while a
feedback/reveal pause is pending, or when it is not that player's turn.

Pauses are scheduled on a ``PauseScheduler``; the session keeps the
handle so quitting the round cancels the pending evaluation.
"""

from __future__ import annotations

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Union

from .._config import RuntimeConfig
from .._content import ContentSource
from .._registry import PlayerRegistry
from ..errors import InsufficientPlayers, InvalidSelection, UnknownPlayer
from ..settings import MatchPairsOptions, QuizOptions, Settings, TurnBoardOptions
from ..types import RoundSnapshot
from .enums import GameKind, SessionEvent, SessionState
from .games import GameModule, Step, create_module
from .result import Outcome, SessionResult
from .scheduler import PauseHandle, PauseScheduler
from .scoring import ScoringResolver
from .snapshot import build_round_snapshot
from .state_machine import SessionStateMachine

logger = logging.getLogger("classroom_rounds.session")

OPTION_MODELS = {
    GameKind.QUIZ: QuizOptions,
    GameKind.TURNBOARD: TurnBoardOptions,
    GameKind.MATCHPAIRS: MatchPairsOptions,
}

# listener(event, payload): ("state", RoundSnapshot) or ("result", SessionResult)
Listener = Callable[[str, Any], None]


def resolve_options(game: GameKind, settings: Settings, options: Any = None) -> Any:
    """Turn None / a dict of overrides / a model into the game's option model."""
    model = OPTION_MODELS[game]
    if options is None:
        return model.from_settings(settings)
    if isinstance(options, dict):
        return model.from_settings(settings, **options)
    if not isinstance(options, model):
        raise TypeError(f"{game.value} expects {model.__name__}, got {type(options).__name__}")
    return options


class RoundSession:
    """
    One round between two players.

    Args:
        registry: Player registry (read for validation, credited with points)
        settings: Classroom settings, read at start
        game: Which game to play
        player1_id: First player (moves first)
        player2_id: Second player
        options: Game options: a model, a dict of overrides, or None for defaults
        content: Question bank / memory catalog
        scheduler: Where pauses are scheduled; a private one when omitted
        rng: Random source for question sampling and deck shuffling
        runtime: Pause durations
        listener: Receives snapshots and the final result
        module: A pre-built game module (e.g. with a fixed deck)
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        settings: Settings,
        game: Union[GameKind, str],
        player1_id: str,
        player2_id: str,
        options: Any = None,
        content: Optional[ContentSource] = None,
        scheduler: Optional[PauseScheduler] = None,
        rng: Optional[random.Random] = None,
        runtime: Optional[RuntimeConfig] = None,
        listener: Optional[Listener] = None,
        module: Optional[GameModule] = None,
    ):
        self.session_id = uuid.uuid4().hex[:8]
        self.registry = registry
        self.settings = settings
        self.game = GameKind(game)
        self.player1_id = player1_id
        self.player2_id = player2_id
        self.options = options
        self.content = content
        self.scheduler = scheduler or PauseScheduler()
        self.rng = rng
        self.runtime = runtime or RuntimeConfig()
        self.listener = listener

        self.module: Optional[GameModule] = module
        self.game_state: Any = None
        self.started_at: Optional[datetime] = None
        self.result: Optional[SessionResult] = None
        self._resolver: Optional[ScoringResolver] = None
        self._pending: Optional[PauseHandle] = None
        self._machine = SessionStateMachine(label=f"{self.game.value}:{self.session_id}")

    # ── Lifecycle ────────────────────────────────────────────

    @property
    def session_state(self) -> SessionState:
        return self._machine.current_state

    @property
    def status(self) -> str:
        """'active' until the round is resolved or abandoned, then 'finished'."""
        return "finished" if self._machine.is_final else "active"

    @property
    def log_extra(self) -> Dict[str, str]:
        """Round fields for ``logger.*(..., extra=...)``."""
        return {"session_id": self.session_id, "game": self.game.value}

    def start(self) -> "RoundSession":
        """
        Validate the players and build the game's initial state.

        Nothing changes if this raises.

        Raises:
            InsufficientPlayers: Fewer than two registered players
            InvalidSelection: The players are equal or not registered
            InsufficientContent: Not enough questions or memory items
        """
        if self.session_state is not SessionState.SETUP:
            raise ValueError(f"Round already started ({self.session_state.value})")
        if len(self.registry) < 2:
            raise InsufficientPlayers(len(self.registry))
        self._validate_selection()

        module = self.module
        if module is None:
            options = resolve_options(self.game, self.settings, self.options)
            module = create_module(
                self.game, self.player1_id, self.player2_id, options,
                content=self.content, rng=self.rng, runtime=self.runtime,
            )
        elif (module.kind is not self.game
              or (module.player1_id, module.player2_id) != (self.player1_id, self.player2_id)):
            raise ValueError("Pre-built module does not match this round")

        game_state = module.initial_state()

        self.module = module
        self.options = module.options
        self.game_state = game_state
        self._resolver = ScoringResolver.from_settings(self.registry, self.settings)
        self.started_at = datetime.now(timezone.utc)
        self._machine.transition(SessionEvent.START)
        logger.info(
            f"Round started: {self.game.value} "
            f"{self.registry.name_of(self.player1_id)} vs {self.registry.name_of(self.player2_id)}",
            extra=self.log_extra,
        )
        self._publish_state()
        return self

    def _validate_selection(self) -> None:
        p1, p2 = self.player1_id, self.player2_id
        if not p1 or not p2:
            raise InvalidSelection(p1, p2, "two players must be chosen")
        if p1 == p2:
            raise InvalidSelection(p1, p2, "players must be different")
        for pid in (p1, p2):
            if pid not in self.registry:
                raise InvalidSelection(p1, p2, f"unknown player '{pid}'")

    def abandon(self) -> bool:
        """
        Quit the round. The pending pause is cancelled and no end-of-round
        award is made; points already credited during play are kept.
        """
        if self._machine.is_final or not self._machine.can_transition(SessionEvent.ABANDON):
            return False
        self._cancel_pending()
        self._machine.transition(SessionEvent.ABANDON)
        logger.info("Round abandoned", extra=self.log_extra)
        return True

    def restart(self) -> bool:
        """Start the same game over with the same players (board and memory only)."""
        if self.session_state is not SessionState.ACTIVE or not self.module.supports_restart:
            return False
        self._cancel_pending()
        self.game_state = self.module.initial_state()
        logger.info("Round restarted", extra=self.log_extra)
        self._publish_state()
        return True

    # ── Gameplay ─────────────────────────────────────────────

    @property
    def whose_turn(self) -> Optional[str]:
        if self.session_state is not SessionState.ACTIVE:
            return None
        return self.module.whose_turn(self.game_state)

    @property
    def is_locked(self) -> bool:
        return self.module is not None and self.module.is_locked(self.game_state)

    @property
    def has_pending_pause(self) -> bool:
        return self._pending is not None and self._pending.active

    def submit_input(self, player_id: str, payload: Any) -> bool:
        """
        Forward one move to the game.

        Returns:
            True if the move was accepted, False if it was ignored
        """
        if self.session_state is not SessionState.ACTIVE:
            logger.debug(
                f"Input ignored, round is {self.session_state.value}",
                extra=self.log_extra,
            )
            return False
        if self.module.is_locked(self.game_state):
            logger.debug(
                f"Input ignored, waiting for evaluation ({player_id})",
                extra=self.log_extra,
            )
            return False
        if player_id != self.module.whose_turn(self.game_state):
            logger.debug(
                f"Input ignored, not {player_id}'s turn",
                extra=self.log_extra,
            )
            return False

        step = self.module.apply_input(self.game_state, player_id, payload)
        if not step.accepted:
            logger.debug(
                f"Input rejected by {self.game.value}: {payload!r}",
                extra=self.log_extra,
            )
            return False
        self._apply_step(step)
        return True

    def get_current_state(self) -> RoundSnapshot:
        return build_round_snapshot(self)

    def _apply_step(self, step: Step) -> None:
        for player_id, points in step.awards.items():
            self._credit(player_id, points)

        if step.pause_seconds is not None and step.terminal is None:
            self._pending = self.scheduler.schedule(
                f"{self.game.value}:{self.session_id}",
                step.pause_seconds,
                self._on_pause_elapsed,
            )

        self._publish_state()
        if step.terminal is not None:
            self._finish(step.terminal)

    def _on_pause_elapsed(self) -> None:
        self._pending = None
        if self.session_state is not SessionState.ACTIVE:
            return
        step = self.module.complete_pause(self.game_state)
        if step.accepted:
            self._apply_step(step)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None

    def _credit(self, player_id: str, points: int) -> None:
        try:
            self.registry.add_points(player_id, points)
        except UnknownPlayer:
            logger.warning(
                "Player left the registry mid-round, points dropped",
                extra={**self.log_extra, "player_id": player_id},
            )

    # ── Resolution ───────────────────────────────────────────

    def _finish(self, outcome: Outcome) -> None:
        self._machine.transition(SessionEvent.TERMINAL_REACHED)
        self._cancel_pending()

        awards = self._resolver.resolve(outcome, self.player1_id, self.player2_id)
        self.result = SessionResult(
            game=self.game,
            player1_id=self.player1_id,
            player2_id=self.player2_id,
            award_p1=awards.player1,
            award_p2=awards.player2,
            winner_id=outcome.winner_id,
            is_draw=outcome.is_draw,
            summary=self._summary(outcome),
            started_at=self.started_at,
            finished_at=datetime.now(timezone.utc),
        )
        self._machine.transition(SessionEvent.RESOLVE)
        winner = "draw" if outcome.is_draw else self.registry.name_of(outcome.winner_id)
        logger.info(f"Round resolved: {winner}", extra=self.log_extra)
        self._notify("result", self.result)

    def _summary(self, outcome: Outcome) -> Dict[str, Any]:
        summary = self.module.summary(self.game_state)
        if outcome.winner_symbol is not None:
            summary["winner_symbol"] = outcome.winner_symbol
        return summary

    # ── Presentation ─────────────────────────────────────────

    def _publish_state(self) -> None:
        if self.listener is not None:
            self._notify("state", self.get_current_state())

    def _notify(self, event: str, payload: Any) -> None:
        if self.listener is not None:
            self.listener(event, payload)
