# Area: Registry
"""
classroom_rounds._registry.player_registry — Player Registry
============================================================

Owns every Player (id, display name, cumulative score). Mutations go
through the primitives below only; each one calls the ``on_change``
hook so the owner can persist (fire-and-forget).

Execution is single-threaded. A host that adds real parallelism must
serialize ``add_points`` per player id.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..errors import DuplicateName, InvalidPlayerName, UnknownPlayer

logger = logging.getLogger("classroom_rounds.registry")

MAX_NAME_LENGTH = 30
UNKNOWN_NAME = "—"

# Quick roster for trying the games out
DEMO_NAMES = ("Sara", "Adam", "Maryam", "Mohamed", "Rim", "Aymen")


@dataclass
class Player:
    """
    One registered participant.

    Attributes:
        id: Opaque identifier, never reused within a process
        name: Unique display name (1-30 characters)
        score: Cumulative, non-negative score
    """

    id: str
    name: str
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _new_id() -> str:
    return uuid.uuid4().hex[:16].upper()


class PlayerRegistry:
    """
    Mapping of player id -> Player, in registration order.

    Args:
        players: Players to start with (e.g. loaded from the store)
        on_change: Called with no arguments after every mutation
    """

    def __init__(
        self,
        players: Optional[Iterable[Player]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self._players: Dict[str, Player] = {}
        self._retired_ids: set = set()
        self.on_change = on_change
        for player in players or ():
            self._players[player.id] = player

    @classmethod
    def from_stored(
        cls,
        rows: Any,
        on_change: Optional[Callable[[], None]] = None,
    ) -> "PlayerRegistry":
        """Rebuild from stored rows, skipping malformed or duplicate entries."""
        players: List[Player] = []
        seen_ids: set = set()
        seen_names: set = set()
        for row in rows if isinstance(rows, list) else []:
            if not isinstance(row, dict):
                continue
            pid = str(row.get("id") or "")
            name = str(row.get("name") or "").strip()
            if not pid or not name or pid in seen_ids or name in seen_names:
                logger.warning(f"Skipping malformed stored player: {row!r}")
                continue
            try:
                score = max(0, int(row.get("score") or 0))
            except (TypeError, ValueError):
                score = 0
            seen_ids.add(pid)
            seen_names.add(name)
            players.append(Player(id=pid, name=name, score=score))
        return cls(players, on_change=on_change)

    # ── Reads ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self):
        return iter(list(self._players.values()))

    def get(self, player_id: str) -> Optional[Player]:
        return self._players.get(player_id)

    def name_of(self, player_id: Optional[str]) -> str:
        player = self._players.get(player_id) if player_id else None
        return player.name if player else UNKNOWN_NAME

    def score_of(self, player_id: str) -> int:
        return self._require(player_id).score

    def all(self) -> List[Player]:
        return list(self._players.values())

    def ids(self) -> List[str]:
        return list(self._players)

    def scoreboard(self) -> List[Player]:
        """Players sorted by score (highest first), then name."""
        return sorted(self._players.values(), key=lambda p: (-p.score, p.name))

    def to_rows(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self._players.values()]

    # ── Mutations ────────────────────────────────────────────

    def add_player(self, name: str) -> Player:
        """
        Register a new player with score 0.

        Raises:
            InvalidPlayerName: If the trimmed name is empty or too long
            DuplicateName: If the name is already taken (exact match)
        """
        clean = self._validate_name(name)
        if self._find_by_name(clean) is not None:
            raise DuplicateName(clean)
        player = Player(id=self._allocate_id(), name=clean)
        self._players[player.id] = player
        logger.info(f"Player added: {player.name} ({player.id})")
        self._changed()
        return player

    def add_many(self, names: Iterable[str]) -> List[Player]:
        """Add every new name, skipping blanks, duplicates and invalid names."""
        added: List[Player] = []
        for raw in names:
            clean = (raw or "").strip()
            if not clean or len(clean) > MAX_NAME_LENGTH:
                continue
            if self._find_by_name(clean) is not None:
                continue
            player = Player(id=self._allocate_id(), name=clean)
            self._players[player.id] = player
            added.append(player)
        if added:
            logger.info(f"Added {len(added)} player(s)")
            self._changed()
        return added

    def add_demo_players(self) -> List[Player]:
        return self.add_many(DEMO_NAMES)

    def remove_player(self, player_id: str) -> Player:
        """
        Remove a player. Its id is retired and never handed out again.

        Raises:
            UnknownPlayer: If no such player exists
        """
        player = self._require(player_id)
        del self._players[player_id]
        self._retired_ids.add(player_id)
        logger.info(f"Player removed: {player.name} ({player_id})")
        self._changed()
        return player

    def rename(self, player_id: str, new_name: str) -> Player:
        """
        Change a player's display name.

        Raises:
            UnknownPlayer: If no such player exists
            InvalidPlayerName: If the trimmed name is empty or too long
            DuplicateName: If another player already has the name
        """
        player = self._require(player_id)
        clean = self._validate_name(new_name)
        other = self._find_by_name(clean)
        if other is not None and other.id != player_id:
            raise DuplicateName(clean)
        old = player.name
        player.name = clean
        logger.info(f"Player renamed: {old} → {clean} ({player_id})")
        self._changed()
        return player

    def add_points(self, player_id: str, amount: int) -> int:
        """
        Add ``amount`` (zero or positive) to a player's score.

        Returns:
            The player's new score

        Raises:
            ValueError: If amount is negative
            UnknownPlayer: If no such player exists
        """
        if amount < 0:
            raise ValueError(f"Points must not be negative, got {amount}")
        player = self._require(player_id)
        player.score += amount
        logger.debug(f"+{amount} → {player.name} (score {player.score})")
        self._changed()
        return player.score

    def reset_all_scores(self) -> None:
        for player in self._players.values():
            player.score = 0
        logger.info("All scores reset")
        self._changed()

    # ── Helpers ──────────────────────────────────────────────

    def _require(self, player_id: str) -> Player:
        player = self._players.get(player_id)
        if player is None:
            raise UnknownPlayer(player_id)
        return player

    def _find_by_name(self, name: str) -> Optional[Player]:
        for player in self._players.values():
            if player.name == name:
                return player
        return None

    def _allocate_id(self) -> str:
        while True:
            pid = _new_id()
            if pid not in self._players and pid not in self._retired_ids:
                return pid

    @staticmethod
    def _validate_name(name: str) -> str:
        clean = (name or "").strip()
        if not clean:
            raise InvalidPlayerName(name, "name is empty")
        if len(clean) > MAX_NAME_LENGTH:
            raise InvalidPlayerName(
                name, f"longer than {MAX_NAME_LENGTH} characters"
            )
        return clean

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
