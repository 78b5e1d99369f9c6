"""
classroom_rounds — Two-player classroom mini-game rounds
========================================================

Short projector rounds (trivia quiz, XO board, memory pairs) between
two players, with cumulative scores across any number of players and
rounds.

Quick Start:
    from classroom_rounds import Classroom
    room = Classroom()
    a = room.players.add_player("Sara")
    b = room.players.add_player("Adam")
    session = room.start_round("turnboard", a.id, b.id)
    session.submit_input(a.id, 4)
    ...
    room.last_result      # SessionResult once the round is over

Pauses (quiz feedback, memory reveal) are scheduled callbacks: call
``room.tick()`` from the host's event loop, or
``room.scheduler.flush()`` to run them immediately.
"""

from .classroom import Classroom
from .settings import Settings, QuizOptions, MatchPairsOptions, TurnBoardOptions
from ._config import RuntimeConfig, load_runtime_config
from ._content import ContentSource, Question, MemoryItem
from ._registry import Player, PlayerRegistry
from ._store import StateStore, SQLiteStateStore, MemoryStore
from ._shared.logging_config import setup_logging
from ._engine import (
    GameKind,
    SessionState,
    RoundSession,
    SessionResult,
    Outcome,
    ScoringResolver,
    PauseScheduler,
)
from ._engine.games import Card, Mark
from .errors import (
    ClassroomRoundsError,
    InsufficientPlayers,
    InvalidSelection,
    DuplicateName,
    InvalidPlayerName,
    UnknownPlayer,
    InsufficientContent,
)
from .types import PlayerRow, StoredState, RoundSnapshot, SessionResultDict

__all__ = [
    # Main classes
    "Classroom",
    "RoundSession",
    "PlayerRegistry",
    "Player",
    "ScoringResolver",
    "PauseScheduler",
    "ContentSource",
    "Question",
    "MemoryItem",
    # Settings / config
    "Settings",
    "QuizOptions",
    "MatchPairsOptions",
    "TurnBoardOptions",
    "RuntimeConfig",
    "load_runtime_config",
    "setup_logging",
    # Stores
    "StateStore",
    "SQLiteStateStore",
    "MemoryStore",
    # Engine types
    "GameKind",
    "SessionState",
    "SessionResult",
    "Outcome",
    "Card",
    "Mark",
    # Errors
    "ClassroomRoundsError",
    "InsufficientPlayers",
    "InvalidSelection",
    "DuplicateName",
    "InvalidPlayerName",
    "UnknownPlayer",
    "InsufficientContent",
    # Dict shapes
    "PlayerRow",
    "StoredState",
    "RoundSnapshot",
    "SessionResultDict",
]
__version__ = "1.0.0"
