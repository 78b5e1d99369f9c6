# Area: Engine
"""
classroom_rounds._engine.state_machine — Round lifecycle state machine
======================================================================

Tracks one round session's lifecycle and rejects illegal transitions.
"""

import logging

from .enums import SessionState, SessionEvent

logger = logging.getLogger("classroom_rounds.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.SETUP: {
        SessionEvent.START: SessionState.ACTIVE,
        SessionEvent.ABANDON: SessionState.ABANDONED,
    },
    SessionState.ACTIVE: {
        SessionEvent.TERMINAL_REACHED: SessionState.TERMINAL,
        SessionEvent.ABANDON: SessionState.ABANDONED,
    },
    SessionState.TERMINAL: {
        SessionEvent.RESOLVE: SessionState.RESOLVED,
    },
    SessionState.RESOLVED: {},
    SessionState.ABANDONED: {},
}

FINAL_STATES = frozenset({SessionState.RESOLVED, SessionState.ABANDONED})


class SessionStateMachine:
    """
    State machine for a round session.

    Attributes:
        current_state: The current lifecycle state
    """

    def __init__(self, label: str = ""):
        self.current_state = SessionState.SETUP
        self.label = label

    def can_transition(self, event: SessionEvent) -> bool:
        """Check if ``event`` is valid from the current state."""
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: SessionEvent) -> SessionState:
        """
        Execute a state transition.

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )
        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.info(f"[{self.label}] {previous.value} → {self.current_state.value}")
        return self.current_state

    @property
    def is_final(self) -> bool:
        return self.current_state in FINAL_STATES
