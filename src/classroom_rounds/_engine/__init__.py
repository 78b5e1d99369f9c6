# Area: Engine
"""
Round Session Engine - lifecycle, game modules and scoring.

This package handles:
- The round lifecycle state machine
- Dispatching input to the game modules
- Feedback / reveal pauses
- End-of-round awards and the session result
"""

from .enums import GameKind, SessionState, SessionEvent, MovePhase
from .state_machine import SessionStateMachine
from .scheduler import PauseScheduler, PauseHandle
from .result import Outcome, SessionResult
from .scoring import ScoringResolver, Awards, compute_awards
from .session import RoundSession, resolve_options

__all__ = [
    "GameKind",
    "SessionState",
    "SessionEvent",
    "MovePhase",
    "SessionStateMachine",
    "PauseScheduler",
    "PauseHandle",
    "Outcome",
    "SessionResult",
    "ScoringResolver",
    "Awards",
    "compute_awards",
    "RoundSession",
    "resolve_options",
]
