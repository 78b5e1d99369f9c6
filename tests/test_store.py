# Area: Store Tests
"""Tests for state persistence."""

import pytest

from classroom_rounds._store import STATE_KEY, MemoryStore, SQLiteStateStore
from classroom_rounds._store.database import get_connection


class TestSQLiteStateStore:
    """Tests for the SQLite store."""

    @pytest.fixture
    def db_path(self, tmp_path):
        return str(tmp_path / "data" / "classroom.db")

    def test_empty_database_loads_none(self, db_path):
        assert SQLiteStateStore(db_path).load_state() is None

    def test_save_and_load(self, db_path):
        state = {"players": [{"id": "A", "name": "Maryam", "score": 3}], "settings": {"win_points": 3}}
        SQLiteStateStore(db_path).save_state(state)

        assert SQLiteStateStore(db_path).load_state() == state

    def test_save_overwrites(self, db_path):
        store = SQLiteStateStore(db_path)
        store.save_state({"players": [], "settings": {"win_points": 1}})
        store.save_state({"players": [], "settings": {"win_points": 2}})
        assert store.load_state()["settings"]["win_points"] == 2

        conn = get_connection(db_path)
        try:
            count = conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0]
        finally:
            conn.close()
        assert count == 1

    def test_invalid_json_loads_none(self, db_path):
        store = SQLiteStateStore(db_path)
        conn = get_connection(db_path)
        try:
            conn.execute(
                "INSERT INTO kv_store (key, value) VALUES (?, ?)", (STATE_KEY, "{not json")
            )
            conn.commit()
        finally:
            conn.close()
        assert store.load_state() is None

    def test_separate_keys(self, db_path):
        SQLiteStateStore(db_path, key="one").save_state({"n": 1})
        assert SQLiteStateStore(db_path, key="two").load_state() is None


class TestMemoryStore:
    """Tests for the in-memory store."""

    def test_keeps_copies(self):
        store = MemoryStore()
        state = {"players": []}
        store.save_state(state)
        state["players"].append("x")
        assert store.load_state() == {"players": []}
        assert store.saves == 1

    def test_initial_state(self):
        assert MemoryStore({"a": 1}).load_state() == {"a": 1}
        assert MemoryStore().load_state() is None
