# Area: Shared
"""
classroom_rounds._shared.logging_config — Structured logging setup
==================================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Round code passes ``extra=session.log_extra`` so both outputs can
be filtered per round.
The library never calls this on import; the CLI and host
applications opt in.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

# Package logger
logger = logging.getLogger("classroom_rounds")


# Attributes a round attaches through ``extra=``; copied onto file records.
ROUND_FIELDS = ("session_id", "game", "player_id")


def round_tag(record: logging.LogRecord) -> str:
    """``game:session`` for records logged from inside a round, else ``""``."""
    game = getattr(record, "game", None)
    session_id = getattr(record, "session_id", None)
    if game and session_id:
        return f"{game}:{session_id}"
    return ""


class TerminalFormatter(logging.Formatter):
    """Colored level names, with the round tag ahead of the message."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        shown = logging.makeLogRecord(record.__dict__)
        shown.levelname = f"{color}{record.levelname}{self.RESET}"
        tag = round_tag(record)
        if tag:
            shown.msg = f"[{tag}] {record.getMessage()}"
            shown.args = None
        return super().format(shown)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, carrying the round fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in ROUND_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    log_file_path: str | None = "classroom_rounds.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the log file. ``None`` disables the file handler.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("classroom_rounds")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False
