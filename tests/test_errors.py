# Area: Shared Tests
"""Tests for the exception hierarchy."""

import pytest

from classroom_rounds.errors import (
    ClassroomRoundsError,
    DuplicateName,
    InsufficientContent,
    InsufficientPlayers,
    InvalidPlayerName,
    InvalidSelection,
    UnknownPlayer,
)


@pytest.mark.parametrize("error", [
    InsufficientPlayers(1),
    InvalidSelection("A", "A", "players must be different"),
    DuplicateName("Sara"),
    InvalidPlayerName("", "name is empty"),
    UnknownPlayer("X"),
    InsufficientContent("quiz questions", 10, 3),
])
def test_all_errors_share_base(error):
    assert isinstance(error, ClassroomRoundsError)
    data = error.to_dict()
    assert data["error"] == error.code
    assert data["message"] == str(error)


def test_insufficient_players_context():
    error = InsufficientPlayers(1)
    assert error.to_dict()["registered"] == 1
    assert error.to_dict()["required"] == 2
    assert "1 registered" in str(error)


def test_insufficient_content_context():
    error = InsufficientContent("memory items", 12, 8)
    assert error.context() == {"kind": "memory items", "required": 12, "available": 8}


def test_invalid_selection_context():
    error = InvalidSelection("A", None, "two players must be chosen")
    assert error.to_dict()["player2_id"] is None
    assert error.reason == "two players must be chosen"


def test_unknown_player_by_name():
    error = UnknownPlayer("Nobody", field="name")
    assert str(error) == "No player with name 'Nobody'"
    assert error.context() == {"player_id": "Nobody", "field": "name"}
