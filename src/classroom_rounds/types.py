"""
classroom_rounds.types — TypedDict shapes handed to the presentation layer
==========================================================================

The engine hands plain dicts to whatever renders the projector view.
These types document their exact structure:

    from classroom_rounds import RoundSnapshot, SessionResultDict

Use __annotations__ to inspect fields:

    >>> PlayerRow.__annotations__
    {'id': <class 'str'>, 'name': <class 'str'>, 'score': <class 'int'>}
"""

from typing import Any, Dict, List, Optional, TypedDict


class PlayerRow(TypedDict):
    """One player as stored and as shown on the scoreboard."""
    id: str                 # e.g. "3F2A9C01D4E5B677"
    name: str               # e.g. "Sara"
    score: int


class StoredState(TypedDict):
    """The document persisted after every registry or settings change."""
    players: List[PlayerRow]
    settings: Dict[str, Any]


class RoundSnapshot(TypedDict):
    """State of a round after an accepted input.

    Fields
    ------
    game : str
        "quiz", "turnboard" or "matchpairs".
    state : str
        Lifecycle state: "setup", "active", "terminal", "resolved", "abandoned".
    player1_id, player2_id : str
        The two contestants.
    whose_turn : str or None
        Player expected to move next; None when no move is possible.
    locked : bool
        True while a feedback or reveal pause is pending.
    view : dict
        Game-specific public view (never reveals face-down cards or the
        answer to an unanswered question).
    """
    game: str
    state: str
    player1_id: str
    player2_id: str
    whose_turn: Optional[str]
    locked: bool
    view: Dict[str, Any]


class SessionResultDict(TypedDict):
    """``SessionResult.to_dict()`` output."""
    game: str
    player1_id: str
    player2_id: str
    award_p1: int
    award_p2: int
    winner_id: Optional[str]
    is_draw: bool
    summary: Dict[str, Any]
    started_at: Optional[str]
    finished_at: Optional[str]
