# Area: Games
"""
classroom_rounds._engine.games.match_pairs — Card-matching memory game
======================================================================

Cards lie face down; each picture appears on exactly two cards. The
player on turn flips one card, then a second. Two flipped cards lock
the table for the reveal pause, then:

- same picture: both cards are matched, the player scores a pair and
  keeps the turn;
- different pictures: both turn back over and the turn passes.

Once every card is matched the player with more pairs wins.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..._config import MATCH_REVEAL_SECONDS
from ..._content import ContentSource
from ..._shared.randomness import sample, shuffled
from ...errors import InsufficientContent
from ...settings import MatchPairsOptions
from ..enums import GameKind, MovePhase
from ..result import Outcome
from .base import GameModule, Step

logger = logging.getLogger("classroom_rounds.match_pairs")


@dataclass(frozen=True)
class Card:
    """One card. ``key`` is shared with exactly one other card in the deck."""
    id: str
    key: str
    label: str = ""
    icon: str = ""


@dataclass
class MatchPairsState:
    """Deck, what is face up, and the pair counts."""

    deck: List[Card]
    turn_player_id: str
    pairs: Dict[str, int]
    grid: str = "4x4"
    flipped: List[str] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)
    locked: bool = False
    phase: MovePhase = MovePhase.READY

    def card(self, card_id: str) -> Optional[Card]:
        for card in self.deck:
            if card.id == card_id:
                return card
        return None

    @property
    def all_matched(self) -> bool:
        return len(self.matched) == len(self.deck)


def _card_id() -> str:
    return uuid.uuid4().hex[:12].upper()


def validate_deck(deck: Sequence[Card]) -> None:
    """
    Check that ids are unique and every key appears exactly twice.

    Raises:
        ValueError: If the deck is malformed
    """
    if not deck:
        raise ValueError("Deck is empty")
    ids = [c.id for c in deck]
    if len(set(ids)) != len(ids):
        raise ValueError("Card ids must be unique")
    counts: Dict[str, int] = {}
    for card in deck:
        counts[card.key] = counts.get(card.key, 0) + 1
    odd = sorted(k for k, n in counts.items() if n != 2)
    if odd:
        raise ValueError(f"Every key must appear on exactly two cards: {odd}")


class MatchPairsModule(GameModule[MatchPairsState]):
    """
    Memory game.

    Args:
        deck: A fixed deck to play with instead of dealing from the catalog
    """

    kind = GameKind.MATCHPAIRS
    supports_restart = True

    def __init__(
        self,
        player1_id: str,
        player2_id: str,
        options: Optional[MatchPairsOptions] = None,
        content: Optional[ContentSource] = None,
        rng: Optional[random.Random] = None,
        reveal_seconds: float = MATCH_REVEAL_SECONDS,
        deck: Optional[Sequence[Card]] = None,
    ):
        super().__init__(player1_id, player2_id, options or MatchPairsOptions(), rng)
        self.content = content
        self.reveal_seconds = reveal_seconds
        self.fixed_deck = list(deck) if deck is not None else None
        if self.fixed_deck is not None:
            validate_deck(self.fixed_deck)

    def deal(self) -> List[Card]:
        """Pick ``pairs_needed`` random items, two cards each, shuffled."""
        content = self.content or ContentSource()
        items = content.memory_items()
        needed = self.options.pairs_needed
        if len(items) < needed:
            raise InsufficientContent("memory items", needed, len(items))
        cards: List[Card] = []
        for item in sample(items, needed, self.rng):
            for _ in range(2):
                cards.append(Card(id=_card_id(), key=item.key, label=item.label, icon=item.icon))
        return shuffled(cards, self.rng)

    def initial_state(self) -> MatchPairsState:
        deck = list(self.fixed_deck) if self.fixed_deck is not None else self.deal()
        return MatchPairsState(
            deck=deck,
            turn_player_id=self.player1_id,
            pairs={self.player1_id: 0, self.player2_id: 0},
            grid=self.options.grid,
        )

    def whose_turn(self, state: MatchPairsState) -> Optional[str]:
        if state.all_matched:
            return None
        return state.turn_player_id

    def apply_input(self, state: MatchPairsState, player_id: str, payload: Any) -> Step:
        if state.locked or state.all_matched:
            return Step.rejected()
        if player_id != state.turn_player_id:
            return Step.rejected()
        card_id = payload
        if not isinstance(card_id, str) or state.card(card_id) is None:
            logger.debug(f"Flip rejected, unknown card: {payload!r}")
            return Step.rejected()
        if card_id in state.matched or card_id in state.flipped:
            return Step.rejected()

        state.flipped.append(card_id)
        if len(state.flipped) < 2:
            return Step(accepted=True)

        state.locked = True
        state.phase = MovePhase.AWAITING_EVALUATION
        return Step(accepted=True, pause_seconds=self.reveal_seconds)

    def complete_pause(self, state: MatchPairsState) -> Step:
        if not state.locked or len(state.flipped) != 2:
            return Step.rejected()
        first, second = (state.card(cid) for cid in state.flipped)
        state.flipped = []
        state.locked = False
        state.phase = MovePhase.READY

        if first is not None and second is not None and first.key == second.key:
            state.matched.extend([first.id, second.id])
            state.pairs[state.turn_player_id] += 1
            logger.info(f"Pair '{first.key}' found by {state.turn_player_id}")
            if state.all_matched:
                return Step(
                    accepted=True,
                    terminal=Outcome.by_comparison(state.pairs, self.player1_id, self.player2_id),
                )
            return Step(accepted=True)

        state.turn_player_id = self.other_player(state.turn_player_id)
        return Step(accepted=True)

    def public_view(self, state: MatchPairsState) -> Dict[str, Any]:
        cards = []
        for card in state.deck:
            matched = card.id in state.matched
            face_up = matched or card.id in state.flipped
            cards.append({
                "id": card.id,
                "face_up": face_up,
                "matched": matched,
                "label": card.label if face_up else None,
                "icon": card.icon if face_up else None,
            })
        return {
            "grid": state.grid,
            "cards": cards,
            "pairs": dict(state.pairs),
            "locked": state.locked,
        }

    def summary(self, state: MatchPairsState) -> Dict[str, Any]:
        return {
            "p1_pairs": state.pairs.get(self.player1_id, 0),
            "p2_pairs": state.pairs.get(self.player2_id, 0),
            "grid": state.grid,
            "cards": len(state.deck),
        }
