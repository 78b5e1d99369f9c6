# Area: Engine Tests
"""Tests for the round session state machine."""

import pytest

from classroom_rounds._engine.enums import SessionEvent, SessionState
from classroom_rounds._engine.state_machine import (
    FINAL_STATES,
    TRANSITIONS,
    SessionStateMachine,
)


class TestSessionStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state_is_setup(self):
        sm = SessionStateMachine()
        assert sm.current_state == SessionState.SETUP
        assert sm.is_final is False

    def test_can_transition_returns_true_for_valid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.START) is True

    def test_can_transition_returns_false_for_invalid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.RESOLVE) is False

    def test_transition_raises_on_invalid(self):
        sm = SessionStateMachine()
        with pytest.raises(ValueError, match="Invalid transition"):
            sm.transition(SessionEvent.TERMINAL_REACHED)


class TestSessionStateMachineTransitions:
    """Tests for specific transitions."""

    def test_full_happy_path(self):
        sm = SessionStateMachine(label="turnboard:test")

        assert sm.transition(SessionEvent.START) == SessionState.ACTIVE
        assert sm.transition(SessionEvent.TERMINAL_REACHED) == SessionState.TERMINAL
        assert sm.transition(SessionEvent.RESOLVE) == SessionState.RESOLVED
        assert sm.is_final is True

    def test_abandon_from_setup(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.ABANDON)
        assert sm.current_state == SessionState.ABANDONED

    def test_abandon_from_active(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.START)
        sm.transition(SessionEvent.ABANDON)
        assert sm.current_state == SessionState.ABANDONED
        assert sm.is_final is True

    def test_cannot_abandon_once_terminal(self):
        """Awards are being resolved; quitting is no longer possible."""
        sm = SessionStateMachine()
        sm.transition(SessionEvent.START)
        sm.transition(SessionEvent.TERMINAL_REACHED)
        assert sm.can_transition(SessionEvent.ABANDON) is False

    def test_final_states_have_no_exits(self):
        for state in FINAL_STATES:
            assert TRANSITIONS[state] == {}

    def test_cannot_start_twice(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.START)
        with pytest.raises(ValueError):
            sm.transition(SessionEvent.START)
