# Area: Games Tests
"""Tests for the 3×3 board game module."""

import pytest

from classroom_rounds._engine.games import Mark, TurnBoardModule, WIN_LINES, find_winner


P1, P2 = "P1", "P2"


@pytest.fixture
def module():
    return TurnBoardModule(P1, P2)


def play(module, state, moves):
    """Alternate moves starting with P1; return the last Step."""
    step = None
    for i, cell in enumerate(moves):
        player = P1 if i % 2 == 0 else P2
        step = module.apply_input(state, player, cell)
        assert step.accepted, f"move {i} ({player} → {cell}) rejected"
    return step


class TestFindWinner:
    """Tests for line detection."""

    @pytest.mark.parametrize("line", WIN_LINES)
    def test_every_line_wins(self, line):
        cells = [None] * 9
        for i in line:
            cells[i] = Mark.O
        assert find_winner(cells) == (Mark.O, line)

    def test_empty_board(self):
        assert find_winner([None] * 9) == (None, None)

    def test_mixed_line_does_not_win(self):
        cells = [Mark.X, Mark.O, Mark.X] + [None] * 6
        assert find_winner(cells) == (None, None)


class TestTurnBoardModule:
    """Tests for placement rules."""

    def test_player1_is_x_and_moves_first(self, module):
        state = module.initial_state()
        assert state.turn is Mark.X
        assert module.whose_turn(state) == P1
        assert module.mark_for(P1) is Mark.X
        assert module.mark_for(P2) is Mark.O

    def test_turn_alternates(self, module):
        state = module.initial_state()
        module.apply_input(state, P1, 4)
        assert module.whose_turn(state) == P2
        assert state.cells[4] is Mark.X

    def test_wrong_player_rejected(self, module):
        state = module.initial_state()
        assert module.apply_input(state, P2, 0).accepted is False
        assert state.cells == [None] * 9

    def test_occupied_cell_rejected(self, module):
        state = module.initial_state()
        module.apply_input(state, P1, 4)
        step = module.apply_input(state, P2, 4)
        assert step.accepted is False
        assert state.cells[4] is Mark.X
        assert module.whose_turn(state) == P2

    @pytest.mark.parametrize("payload", [-1, 9, "4", None, True, 2.0])
    def test_invalid_cell_ignored(self, module, payload):
        state = module.initial_state()
        assert module.apply_input(state, P1, payload).accepted is False
        assert module.whose_turn(state) == P1

    def test_row_win(self, module):
        state = module.initial_state()
        step = play(module, state, [0, 3, 1, 4, 2])
        assert step.terminal is not None
        assert step.terminal.winner_id == P1
        assert step.terminal.winner_symbol == "X"
        assert state.win_line == (0, 1, 2)
        assert module.whose_turn(state) is None

    def test_player2_can_win(self, module):
        state = module.initial_state()
        step = play(module, state, [0, 2, 1, 4, 8, 6])
        assert step.terminal.winner_id == P2
        assert step.terminal.winner_symbol == "O"

    def test_full_board_draw(self, module):
        state = module.initial_state()
        step = play(module, state, [0, 1, 2, 4, 3, 5, 7, 6, 8])
        assert step.terminal.is_draw is True
        assert state.is_draw is True
        assert state.winner is None

    def test_no_moves_after_finish(self, module):
        state = module.initial_state()
        play(module, state, [0, 3, 1, 4, 2])
        assert module.apply_input(state, P2, 5).accepted is False

    def test_win_on_last_cell_is_not_a_draw(self, module):
        state = module.initial_state()
        step = play(module, state, [0, 1, 2, 4, 3, 5, 7, 8, 6])
        assert step.terminal.winner_id == P1
        assert state.is_draw is False

    def test_public_view_and_summary(self, module):
        state = module.initial_state()
        play(module, state, [0, 3, 1, 4, 2])
        view = module.public_view(state)
        assert view["cells"][:3] == ["X", "X", "X"]
        assert view["winner"] == "X"
        summary = module.summary(state)
        assert summary["win_line"] == [0, 1, 2]
        assert summary["moves"] == 5
        assert summary["p1_symbol"] == "X"
