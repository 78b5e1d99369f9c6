# Area: Store
"""
classroom_rounds._store.database — State persistence
====================================================

The core only needs two calls: ``load_state()`` at start-up and
``save_state(state)`` after every registry or settings mutation.
The state is one JSON document kept in a SQLite key-value table.
"""

from __future__ import annotations

import copy
import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger("classroom_rounds.store")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

STATE_KEY = "classroom_state_v1"


class StateStore(Protocol):
    """Anything that can load and save the classroom state document."""

    def load_state(self) -> Optional[Dict[str, Any]]:
        ...

    def save_state(self, state: Dict[str, Any]) -> None:
        ...


def get_connection(db_path: str) -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


class SQLiteStateStore:
    """
    SQLite-backed key-value store.

    Args:
        db_path: Path to the SQLite database file (created on first use)
        key: Key the state document is stored under
    """

    def __init__(self, db_path: str = "classroom_rounds.db", key: str = STATE_KEY):
        self.db_path = db_path
        self.key = key
        self._init_database()

    def _init_database(self) -> None:
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = get_connection(self.db_path)
        try:
            with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
                schema = f.read()
            conn.executescript(schema)
            conn.commit()
            logger.debug(f"Database initialized at {self.db_path}")
        finally:
            conn.close()

    def load_state(self) -> Optional[Dict[str, Any]]:
        """Return the stored document, or None when absent or unreadable."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (self.key,)
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        try:
            state = json.loads(row["value"])
        except json.JSONDecodeError:
            logger.warning(f"Stored state under '{self.key}' is not valid JSON, ignoring")
            return None
        return state if isinstance(state, dict) else None

    def save_state(self, state: Dict[str, Any]) -> None:
        payload = json.dumps(state, ensure_ascii=False)
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                """,
                (self.key, payload),
            )
            conn.commit()
        finally:
            conn.close()


class MemoryStore:
    """In-process store; keeps a deep copy of the last saved document."""

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self.state = copy.deepcopy(state) if state is not None else None
        self.saves = 0

    def load_state(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self.state) if self.state is not None else None

    def save_state(self, state: Dict[str, Any]) -> None:
        self.state = copy.deepcopy(state)
        self.saves += 1
