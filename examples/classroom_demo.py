"""
classroom_demo.py — Play a few rounds without a screen
======================================================

Registers the demo roster, plays one round of each game with scripted
moves and prints the scoreboard.

    python examples/classroom_demo.py

Pauses are flushed right after each move instead of waiting for the
host's tick, so the whole demo runs instantly.
"""

import logging
import random

from classroom_rounds import Classroom, GameKind, setup_logging

setup_logging(log_file_path=None, level=logging.INFO)

room = Classroom(rng=random.Random(2026))
room.players.add_demo_players()


def show(event, payload):
    if event == "result":
        winner = "draw" if payload.is_draw else room.players.name_of(payload.winner_id)
        print(f"  → {payload.game.value}: {winner} {dict(payload.summary)}")


# ── Board: player 1 takes the top row ──
board = room.start_round(GameKind.TURNBOARD, listener=show)
a, b = board.player1_id, board.player2_id
for player, cell in [(a, 0), (b, 3), (a, 1), (b, 4), (a, 2)]:
    board.submit_input(player, cell)

# ── Quiz: player 1 always right, player 2 always picks option 0 ──
quiz = room.start_round(GameKind.QUIZ, listener=show)
while quiz.status == "active":
    player = quiz.whose_turn
    question = quiz.game_state.current
    choice = question.correct_index if player == quiz.player1_id else 0
    quiz.submit_input(player, choice)
    room.scheduler.flush()

# ── Memory: player 1 remembers every card, player 2 never does ──
memory = room.start_round(GameKind.MATCHPAIRS, listener=show)
while memory.status == "active":
    player = memory.whose_turn
    state = memory.game_state
    hidden = [c["id"] for c in memory.get_current_state()["view"]["cards"] if not c["face_up"]]
    first = hidden[0]
    partner = next(c.id for c in state.deck if c.key == state.card(first).key and c.id != first)
    others = [cid for cid in hidden[1:] if cid != partner]
    second = partner if player == memory.player1_id or not others else others[0]
    memory.submit_input(player, first)
    memory.submit_input(player, second)
    room.scheduler.flush()

print("\nScoreboard")
for rank, player in enumerate(room.players.scoreboard(), 1):
    print(f"{rank:>2}. {player.name:<10} {player.score}")
