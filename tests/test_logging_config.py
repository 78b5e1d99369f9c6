# Area: Shared Tests
"""Tests for logging setup."""

import json
import logging
import sys

import pytest

from classroom_rounds._engine import GameKind, PauseScheduler, RoundSession
from classroom_rounds._registry import PlayerRegistry
from classroom_rounds._shared.logging_config import JSONFormatter, TerminalFormatter, setup_logging
from classroom_rounds.settings import Settings


@pytest.fixture
def pkg_logger():
    logger = logging.getLogger("classroom_rounds")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_file_handler_writes_json_lines(tmp_path, pkg_logger):
    log_file = tmp_path / "logs" / "rounds.log"
    setup_logging(str(log_file), logging.INFO)

    logging.getLogger("classroom_rounds.session").info("Round started")
    for handler in pkg_logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    data = json.loads(line)
    assert data["level"] == "INFO"
    assert data["logger"] == "classroom_rounds.session"
    assert data["message"] == "Round started"
    assert pkg_logger.propagate is False


def test_no_file_handler_when_disabled(pkg_logger):
    setup_logging(None, logging.WARNING)
    assert len(pkg_logger.handlers) == 1
    assert pkg_logger.level == logging.WARNING


def test_terminal_formatter_leaves_record_untouched():
    record = logging.LogRecord("classroom_rounds", logging.INFO, __file__, 1, "hi", None, None)
    output = TerminalFormatter("%(levelname)s %(message)s").format(record)
    assert "INFO" in output and output.endswith("hi")
    assert record.levelname == "INFO"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    data = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in data["exception"]


def test_json_formatter_carries_round_fields():
    record = logging.LogRecord("classroom_rounds.session", logging.INFO, __file__, 1, "Round abandoned", None, None)
    record.session_id = "ab12cd34"
    record.game = "quiz"
    data = json.loads(JSONFormatter().format(record))
    assert data["session_id"] == "ab12cd34"
    assert data["game"] == "quiz"
    assert "player_id" not in data


def test_terminal_formatter_tags_round():
    record = logging.LogRecord("classroom_rounds", logging.INFO, __file__, 1, "Round restarted", None, None)
    record.session_id = "ab12cd34"
    record.game = "turnboard"
    output = TerminalFormatter("%(message)s").format(record)
    assert output == "[turnboard:ab12cd34] Round restarted"
    assert record.getMessage() == "Round restarted"


def test_session_logs_reach_file_with_round_id(tmp_path, pkg_logger):
    log_file = tmp_path / "rounds.log"
    setup_logging(str(log_file), logging.INFO)

    registry = PlayerRegistry()
    a = registry.add_player("Sara").id
    b = registry.add_player("Adam").id
    session = RoundSession(
        registry=registry, settings=Settings(), game=GameKind.TURNBOARD,
        player1_id=a, player2_id=b, scheduler=PauseScheduler(),
    ).start()
    session.abandon()
    for handler in pkg_logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    tagged = [line for line in lines if line.get("session_id") == session.session_id]
    assert [line["message"] for line in tagged][-1] == "Round abandoned"
    assert all(line["game"] == "turnboard" for line in tagged)
