# Area: Engine
"""
classroom_rounds._engine.snapshot — Round snapshot builder
==========================================================

Builds the serializable view of a round handed to the presentation
layer after every accepted input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import RoundSnapshot
from .enums import SessionState

if TYPE_CHECKING:
    from .session import RoundSession


def build_round_snapshot(session: "RoundSession") -> RoundSnapshot:
    """Build the snapshot for ``session``."""
    state = session.session_state
    module = session.module
    game_state = session.game_state

    if module is None or game_state is None:
        return RoundSnapshot(
            game=session.game.value,
            state=state.value,
            player1_id=session.player1_id,
            player2_id=session.player2_id,
            whose_turn=None,
            locked=False,
            view={},
        )

    active = state is SessionState.ACTIVE
    return RoundSnapshot(
        game=session.game.value,
        state=state.value,
        player1_id=session.player1_id,
        player2_id=session.player2_id,
        whose_turn=module.whose_turn(game_state) if active else None,
        locked=module.is_locked(game_state),
        view=module.public_view(game_state),
    )
