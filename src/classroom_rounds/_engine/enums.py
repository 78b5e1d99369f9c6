# Area: Engine
"""
classroom_rounds._engine.enums — Round lifecycle enums
======================================================

States and events of the round session state machine, plus the
game kinds and the two-phase move marker used by paused games.
"""

from enum import Enum


class GameKind(Enum):
    """The three mini-games a round can be played with."""
    QUIZ = "quiz"
    TURNBOARD = "turnboard"
    MATCHPAIRS = "matchpairs"


class SessionState(Enum):
    """
    States of a round session.

    State transitions:
    SETUP -> ACTIVE (on START)
    ACTIVE -> TERMINAL (on TERMINAL_REACHED)
    TERMINAL -> RESOLVED (on RESOLVE)
    SETUP or ACTIVE -> ABANDONED (on ABANDON)

    RESOLVED and ABANDONED are final.
    """
    SETUP = "setup"
    ACTIVE = "active"
    TERMINAL = "terminal"
    RESOLVED = "resolved"
    ABANDONED = "abandoned"


class SessionEvent(Enum):
    """
    Events that drive a round session.

    - START: both players validated, game module initialized
    - TERMINAL_REACHED: the game module signalled a winner or draw
    - RESOLVE: the scoring resolver applied the awards
    - ABANDON: the round was quit before finishing
    """
    START = "START"
    TERMINAL_REACHED = "TERMINAL_REACHED"
    RESOLVE = "RESOLVE"
    ABANDON = "ABANDON"


class MovePhase(Enum):
    """Where a game module stands between inputs."""
    READY = "ready"                              # Accepting input
    AWAITING_EVALUATION = "awaiting_evaluation"  # Pause running, input locked
