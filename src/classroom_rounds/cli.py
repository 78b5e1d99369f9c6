# Area: Shared
"""
classroom_rounds.cli — Command-line interface
=============================================

Manage the class roster and play rounds in a terminal.

Usage:
    classroom-rounds players add Sara Adam Maryam
    classroom-rounds players list
    classroom-rounds players reset-scores
    classroom-rounds settings show
    classroom-rounds play turnboard
    classroom-rounds play quiz --players Sara Adam

The database and log file locations come from the environment
(or a ``.env`` file): CLASSROOM_DB_PATH, CLASSROOM_LOG_FILE,
CLASSROOM_LOG_LEVEL.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional, TextIO

from ._config import load_runtime_config
from ._engine import GameKind, RoundSession
from ._shared.logging_config import setup_logging
from .classroom import Classroom
from .errors import ClassroomRoundsError, UnknownPlayer

QUIT_WORDS = {"q", "quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classroom-rounds",
        description="Two-player classroom mini-game rounds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  classroom-rounds players add Sara Adam
  classroom-rounds players demo
  classroom-rounds play turnboard
  classroom-rounds play matchpairs --grid 6x4
        """,
    )
    parser.add_argument("--db", type=str, help="SQLite file (overrides CLASSROOM_DB_PATH)")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings")
    sub = parser.add_subparsers(dest="command", required=True)

    players = sub.add_parser("players", help="Manage the roster")
    players_sub = players.add_subparsers(dest="action", required=True)
    add = players_sub.add_parser("add", help="Add players")
    add.add_argument("names", nargs="+")
    players_sub.add_parser("list", help="Show the scoreboard")
    players_sub.add_parser("demo", help="Add the demo roster")
    players_sub.add_parser("reset-scores", help="Set every score to 0")
    remove = players_sub.add_parser("remove", help="Remove a player by name")
    remove.add_argument("name")
    rename = players_sub.add_parser("rename", help="Rename a player")
    rename.add_argument("name")
    rename.add_argument("new_name")

    settings = sub.add_parser("settings", help="Show or change settings")
    settings_sub = settings.add_subparsers(dest="action", required=True)
    settings_sub.add_parser("show", help="Print current settings")
    settings_sub.add_parser("reset", help="Restore defaults")
    set_cmd = settings_sub.add_parser("set", help="Change win/draw points")
    set_cmd.add_argument("--win-points", type=int)
    set_cmd.add_argument("--draw-points", type=int)

    play = sub.add_parser("play", help="Play a round in the terminal")
    play.add_argument("game", choices=[k.value for k in GameKind])
    play.add_argument("--players", nargs=2, metavar="NAME", help="Player names (random when omitted)")
    play.add_argument("--grid", choices=["4x4", "6x4"], help="Memory grid")
    play.add_argument("--questions", type=int, help="Quiz question count")
    return parser


def main(
    argv: Optional[List[str]] = None,
    classroom: Optional[Classroom] = None,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if classroom is None:
        runtime = load_runtime_config()
        setup_logging(runtime.log_file, logging.WARNING if args.quiet else runtime.logging_level)
        if args.db:
            from ._store import SQLiteStateStore
            classroom = Classroom(store=SQLiteStateStore(args.db), runtime=runtime)
        else:
            classroom = Classroom.from_config(runtime)

    try:
        if args.command == "players":
            return _players(args, classroom, out)
        if args.command == "settings":
            return _settings(args, classroom, out)
        return _play(args, classroom, input_fn, out)
    except ClassroomRoundsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


# ── players / settings ───────────────────────────────────────

def _players(args: argparse.Namespace, room: Classroom, out: TextIO) -> int:
    if args.action == "add":
        for name in args.names:
            player = room.players.add_player(name)
            print(f"Added {player.name}", file=out)
    elif args.action == "demo":
        added = room.players.add_demo_players()
        print(f"Added {len(added)} player(s)", file=out)
    elif args.action == "reset-scores":
        room.players.reset_all_scores()
        print("Scores reset", file=out)
    elif args.action == "remove":
        room.players.remove_player(_id_for(room, args.name))
        print(f"Removed {args.name}", file=out)
    elif args.action == "rename":
        room.players.rename(_id_for(room, args.name), args.new_name)
        print(f"Renamed {args.name} → {args.new_name}", file=out)
    _print_scoreboard(room, out)
    return 0


def _settings(args: argparse.Namespace, room: Classroom, out: TextIO) -> int:
    if args.action == "reset":
        room.reset_settings()
    elif args.action == "set":
        changes = {}
        if args.win_points is not None:
            changes["win_points"] = args.win_points
        if args.draw_points is not None:
            changes["draw_points"] = args.draw_points
        if changes:
            room.update_settings(**changes)
    print(json.dumps(room.settings.model_dump(), indent=2), file=out)
    return 0


def _print_scoreboard(room: Classroom, out: TextIO) -> None:
    board = room.players.scoreboard()
    if not board:
        print("(no players)", file=out)
        return
    width = max(len(p.name) for p in board)
    for rank, player in enumerate(board, 1):
        print(f"{rank:>2}. {player.name:<{width}}  {player.score}", file=out)


def _id_for(room: Classroom, name: str) -> str:
    for player in room.players:
        if player.name == name.strip():
            return player.id
    raise UnknownPlayer(name.strip(), field="name")


# ── play ─────────────────────────────────────────────────────

def _play(args: argparse.Namespace, room: Classroom, input_fn, out: TextIO) -> int:
    p1 = p2 = None
    if args.players:
        p1, p2 = (_id_for(room, n) for n in args.players)

    options = {}
    if args.game == GameKind.MATCHPAIRS.value and args.grid:
        options["grid"] = args.grid
    if args.game == GameKind.QUIZ.value and args.questions:
        options["question_count"] = args.questions

    session = room.start_round(args.game, p1, p2, options=options or None)
    names = room.players.name_of
    print(f"{names(session.player1_id)} vs {names(session.player2_id)}", file=out)

    renderers = {
        GameKind.TURNBOARD: _turnboard_prompt,
        GameKind.QUIZ: _quiz_prompt,
        GameKind.MATCHPAIRS: _match_pairs_prompt,
    }
    render = renderers[session.game]

    while session.status == "active":
        player_id = session.whose_turn
        payload = render(session, names(player_id), input_fn, out)
        if payload is None:
            room.quit_round()
            print("Round abandoned", file=out)
            return 0
        if not session.submit_input(player_id, payload):
            print("Not allowed, try again", file=out)
            continue
        _show_feedback(session, out)
        room.scheduler.flush()

    result = session.result
    if result.is_draw:
        print(f"Draw! +{result.award_p1} each", file=out)
    else:
        award = result.award_p1 if result.winner_id == result.player1_id else result.award_p2
        print(f"Winner: {names(result.winner_id)} (+{award})", file=out)
    _print_scoreboard(room, out)
    return 0


def _ask(prompt: str, input_fn) -> Optional[str]:
    try:
        answer = input_fn(prompt).strip()
    except EOFError:
        return None
    return None if answer.lower() in QUIT_WORDS else answer


def _ask_number(prompt: str, input_fn) -> Optional[int]:
    while True:
        answer = _ask(prompt, input_fn)
        if answer is None:
            return None
        if answer.isdigit():
            return int(answer)


def _turnboard_prompt(session: RoundSession, name: str, input_fn, out: TextIO) -> Optional[int]:
    view = session.get_current_state()["view"]
    cells = [c or str(i + 1) for i, c in enumerate(view["cells"])]
    for row in range(3):
        print(" " + " | ".join(cells[row * 3:row * 3 + 3]), file=out)
    number = _ask_number(f"{name} ({view['turn']}), cell 1-9: ", input_fn)
    return None if number is None else number - 1


def _quiz_prompt(session: RoundSession, name: str, input_fn, out: TextIO) -> Optional[int]:
    view = session.get_current_state()["view"]
    question = view["question"]
    print(f"[{view['index'] + 1}/{view['total']}] {question['prompt']}", file=out)
    for i, option in enumerate(question["options"], 1):
        print(f"  {i}. {option}", file=out)
    number = _ask_number(f"{name}, your answer: ", input_fn)
    return None if number is None else number - 1


def _match_pairs_prompt(session: RoundSession, name: str, input_fn, out: TextIO) -> Optional[str]:
    view = session.get_current_state()["view"]
    cards = view["cards"]
    columns = 4
    for start in range(0, len(cards), columns):
        row = []
        for offset, card in enumerate(cards[start:start + columns]):
            label = card["label"] if card["face_up"] else f"#{start + offset + 1}"
            row.append(f"{label:<12}")
        print(" ".join(row), file=out)
    number = _ask_number(f"{name}, flip a card: ", input_fn)
    if number is None:
        return None
    if not 1 <= number <= len(cards):
        return ""
    return cards[number - 1]["id"]


def _show_feedback(session: RoundSession, out: TextIO) -> None:
    if not session.has_pending_pause:
        return
    view = session.get_current_state()["view"]
    feedback = view.get("feedback")
    if feedback:
        verdict = "Correct!" if feedback["is_correct"] else "Wrong."
        print(f"{verdict} (+{feedback['earned']}) {feedback['explanation']}", file=out)
    elif "cards" in view:
        shown = [c["label"] for c in view["cards"] if c["face_up"] and not c["matched"]]
        print("Revealed: " + " / ".join(shown), file=out)
