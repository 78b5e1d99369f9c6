# Area: Shared
"""
classroom_rounds.errors — Custom exception classes
==================================================

Defines the exception hierarchy for setup and registry errors.
Each exception stores its context so the presentation layer can
offer a retry path. None of them is fatal to the process.

Rejected gameplay input (a processing lock, the wrong player's
turn, an occupied cell) is never an exception; ``submit_input``
simply returns False.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class ClassroomRoundsError(Exception):
    """Base exception for all classroom_rounds errors."""

    code = "CLASSROOM_ROUNDS_ERROR"

    def context(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            **self.context(),
        }


class InsufficientPlayers(ClassroomRoundsError):
    """Raised when a round is set up with fewer than two registered players."""

    code = "INSUFFICIENT_PLAYERS"

    def __init__(self, registered: int, required: int = 2):
        self.registered = registered
        self.required = required
        super().__init__(
            f"At least {required} players are required, {registered} registered"
        )

    def context(self) -> Dict[str, Any]:
        return {"registered": self.registered, "required": self.required}


class InvalidSelection(ClassroomRoundsError):
    """Raised when the two chosen players are equal or unknown."""

    code = "INVALID_SELECTION"

    def __init__(
        self,
        player1_id: Optional[str],
        player2_id: Optional[str],
        reason: str,
    ):
        self.player1_id = player1_id
        self.player2_id = player2_id
        self.reason = reason
        super().__init__(f"Invalid player selection: {reason}")

    def context(self) -> Dict[str, Any]:
        return {
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "reason": self.reason,
        }


class DuplicateName(ClassroomRoundsError):
    """Raised when adding or renaming to a name that is already taken."""

    code = "DUPLICATE_NAME"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A player named '{name}' already exists")

    def context(self) -> Dict[str, Any]:
        return {"name": self.name}


class InvalidPlayerName(ClassroomRoundsError):
    """Raised when a name is empty or too long after trimming."""

    code = "INVALID_PLAYER_NAME"

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid player name '{name}': {reason}")

    def context(self) -> Dict[str, Any]:
        return {"name": self.name, "reason": self.reason}


class UnknownPlayer(ClassroomRoundsError):
    """Raised when a registry operation names a player that does not exist.

    ``field`` says how the player was looked up, by ``id`` or by ``name``.
    """

    code = "UNKNOWN_PLAYER"

    def __init__(self, player_id: str, field: str = "id"):
        self.player_id = player_id
        self.field = field
        super().__init__(f"No player with {field} '{player_id}'")

    def context(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "field": self.field}


class InsufficientContent(ClassroomRoundsError):
    """Raised when the question bank or item catalog is too small for a round."""

    code = "INSUFFICIENT_CONTENT"

    def __init__(self, kind: str, required: int, available: int):
        self.kind = kind
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough {kind}: {required} required, {available} available"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "required": self.required,
            "available": self.available,
        }
