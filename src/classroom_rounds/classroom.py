# Area: Classroom
"""
classroom_rounds.classroom — Classroom facade
=============================================

Owns the player registry, the settings and the persistence store, and
sets rounds up. A host (projector UI, CLI) holds one Classroom and
talks to the current RoundSession through it.

Every registry or settings change is written to the store right away.
Store failures are logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Optional, Union

from ._config import RuntimeConfig, load_runtime_config
from ._content import ContentSource
from ._engine import GameKind, PauseScheduler, RoundSession, SessionResult
from ._engine.session import Listener
from ._registry import PlayerRegistry
from ._shared.randomness import pick_pair
from ._store import MemoryStore, SQLiteStateStore, StateStore
from .errors import InsufficientPlayers, InvalidSelection
from .settings import Settings

logger = logging.getLogger("classroom_rounds.classroom")


class Classroom:
    """
    Players, settings and the round currently being played.

    Args:
        store: Persistence collaborator; an in-memory store when omitted
        content: Question bank / memory catalog; the bundled one when omitted
        scheduler: Pause scheduler shared by all rounds
        runtime: Pause durations and other process settings
        rng: Random source for pairing, sampling and shuffling
    """

    def __init__(
        self,
        store: Optional[StateStore] = None,
        content: Optional[ContentSource] = None,
        scheduler: Optional[PauseScheduler] = None,
        runtime: Optional[RuntimeConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.store = store if store is not None else MemoryStore()
        self.content = content or ContentSource()
        self.scheduler = scheduler or PauseScheduler()
        self.runtime = runtime or RuntimeConfig()
        self.rng = rng or random.Random()

        saved = self._load()
        self.settings = Settings.from_stored(saved.get("settings"))
        self.players = PlayerRegistry.from_stored(saved.get("players"), on_change=self.save)

        self.round: Optional[RoundSession] = None
        self.last_result: Optional[SessionResult] = None

    @classmethod
    def from_config(cls, runtime: Optional[RuntimeConfig] = None, **kwargs: Any) -> "Classroom":
        """Build a Classroom backed by the SQLite store named in the runtime config."""
        runtime = runtime or load_runtime_config()
        return cls(store=SQLiteStateStore(runtime.db_path), runtime=runtime, **kwargs)

    # ── Persistence ──────────────────────────────────────────

    def _load(self) -> Dict[str, Any]:
        try:
            saved = self.store.load_state()
        except Exception:
            logger.warning("Could not load saved state, starting empty", exc_info=True)
            return {}
        return saved if isinstance(saved, dict) else {}

    def snapshot(self) -> Dict[str, Any]:
        return {
            "players": self.players.to_rows(),
            "settings": self.settings.model_dump(),
        }

    def save(self) -> None:
        """Write players and settings to the store (fire-and-forget)."""
        try:
            self.store.save_state(self.snapshot())
        except Exception:
            logger.warning("Could not save state", exc_info=True)

    # ── Settings ─────────────────────────────────────────────

    def update_settings(self, **changes: Any) -> Settings:
        """
        Change settings. Nested groups take dicts:

            classroom.update_settings(win_points=5, quiz={"correct_points": 2})
        """
        data = self.settings.model_dump()
        for key, value in changes.items():
            if key not in data:
                raise KeyError(f"Unknown setting: {key}")
            if isinstance(data[key], dict) and isinstance(value, dict):
                data[key].update(value)
            else:
                data[key] = value
        self.settings = Settings.model_validate(data)
        logger.info("Settings updated")
        self.save()
        return self.settings

    def reset_settings(self) -> Settings:
        self.settings = Settings()
        logger.info("Settings reset to defaults")
        self.save()
        return self.settings

    # ── Rounds ───────────────────────────────────────────────

    def random_pair(self) -> tuple:
        """Two distinct registered players, picked uniformly at random."""
        if len(self.players) < 2:
            raise InsufficientPlayers(len(self.players))
        return pick_pair(self.players.ids(), self.rng)

    def start_round(
        self,
        game: Union[GameKind, str],
        player1_id: Optional[str] = None,
        player2_id: Optional[str] = None,
        options: Any = None,
        listener: Optional[Listener] = None,
    ) -> RoundSession:
        """
        Set up and start a round. Missing players are drawn at random.

        Any round still in progress is abandoned first.

        Raises:
            InsufficientPlayers: Fewer than two registered players
            InvalidSelection: The chosen players are equal or unknown
            InsufficientContent: The question bank or catalog is too small
        """
        game = GameKind(game)
        if len(self.players) < 2:
            raise InsufficientPlayers(len(self.players))
        player1_id, player2_id = self._fill_pair(player1_id, player2_id)

        session = RoundSession(
            registry=self.players,
            settings=self.settings,
            game=game,
            player1_id=player1_id,
            player2_id=player2_id,
            options=options,
            content=self.content,
            scheduler=self.scheduler,
            rng=self.rng,
            runtime=self.runtime,
            listener=self._listener_for(listener),
        )
        previous = self.round
        session.start()

        if previous is not None:
            previous.abandon()
        self.round = session
        self.last_result = None

        if game is GameKind.MATCHPAIRS and session.options.grid != self.settings.match_pairs.grid:
            # The chosen grid becomes the new default
            self.update_settings(match_pairs={"grid": session.options.grid})
        return session

    def rematch(self, result: Optional[SessionResult] = None, **kwargs: Any) -> RoundSession:
        """Play the same game again with the same two players."""
        result = result or self.last_result
        if result is None:
            raise ValueError("No finished round to replay")
        return self.start_round(result.game, result.player1_id, result.player2_id, **kwargs)

    def quit_round(self) -> bool:
        """Abandon the current round, if any."""
        session, self.round = self.round, None
        return session.abandon() if session is not None else False

    def tick(self) -> int:
        """Run pauses that have elapsed. Hosts call this from their event loop."""
        return self.scheduler.run_due()

    def _fill_pair(self, player1_id: Optional[str], player2_id: Optional[str]) -> tuple:
        if player1_id and player2_id:
            return player1_id, player2_id
        if not player1_id and not player2_id:
            return self.random_pair()
        chosen = player1_id or player2_id
        if chosen not in self.players:
            raise InvalidSelection(player1_id, player2_id, f"unknown player '{chosen}'")
        others = [pid for pid in self.players.ids() if pid != chosen]
        other = self.rng.choice(others)
        return (chosen, other) if player1_id else (other, chosen)

    def _listener_for(self, listener: Optional[Listener]) -> Callable[[str, Any], None]:
        def forward(event: str, payload: Any) -> None:
            if event == "result":
                self.last_result = payload
                self.round = None
            if listener is not None:
                listener(event, payload)
        return forward
