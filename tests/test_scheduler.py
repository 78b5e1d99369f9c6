# Area: Engine Tests
"""Tests for PauseScheduler — feedback and reveal pauses."""

from unittest.mock import patch

from classroom_rounds._engine.scheduler import PauseScheduler


MOCK_TIME = "classroom_rounds._engine.scheduler.time"


class TestPauseScheduler:
    """Unit tests for PauseScheduler."""

    def test_nothing_pending_initially(self):
        scheduler = PauseScheduler()
        assert scheduler.pending() == 0
        assert scheduler.run_due() == 0

    def test_callback_waits_for_delay(self):
        scheduler = PauseScheduler()
        fired = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            scheduler.schedule("quiz", 1.4, lambda: fired.append("quiz"))

            mock_time.monotonic.return_value = 101.0
            assert scheduler.run_due() == 0
            assert fired == []

            mock_time.monotonic.return_value = 101.5
            assert scheduler.run_due() == 1
            assert fired == ["quiz"]
            assert scheduler.pending() == 0

    def test_due_callbacks_fire_in_expiry_order(self):
        scheduler = PauseScheduler()
        fired = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            scheduler.schedule("late", 2.0, lambda: fired.append("late"))
            scheduler.schedule("early", 1.0, lambda: fired.append("early"))

            mock_time.monotonic.return_value = 5.0
            scheduler.run_due()

        assert fired == ["early", "late"]

    def test_cancelled_callback_never_fires(self):
        scheduler = PauseScheduler()
        fired = []
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 10.0
            handle = scheduler.schedule("reveal", 0.9, lambda: fired.append(1))
            assert scheduler.cancel(handle) is True

            mock_time.monotonic.return_value = 20.0
            assert scheduler.run_due() == 0

        assert fired == []
        assert handle.cancelled is True
        assert handle.active is False

    def test_cancel_twice_returns_false(self):
        scheduler = PauseScheduler()
        handle = scheduler.schedule("x", 1.0, lambda: None)
        scheduler.cancel(handle)
        assert scheduler.cancel(handle) is False

    def test_cancel_after_fire_returns_false(self):
        scheduler = PauseScheduler()
        handle = scheduler.schedule("x", 0.0, lambda: None)
        scheduler.flush()
        assert handle.fired is True
        assert scheduler.cancel(handle) is False

    def test_flush_runs_everything_now(self):
        scheduler = PauseScheduler()
        fired = []
        scheduler.schedule("a", 60.0, lambda: fired.append("a"))
        scheduler.schedule("b", 30.0, lambda: fired.append("b"))

        assert scheduler.flush() == 2
        assert fired == ["b", "a"]

    def test_flush_includes_callbacks_scheduled_while_flushing(self):
        scheduler = PauseScheduler()
        fired = []

        def first():
            fired.append("first")
            scheduler.schedule("second", 5.0, lambda: fired.append("second"))

        scheduler.schedule("first", 5.0, first)
        assert scheduler.flush() == 2
        assert fired == ["first", "second"]

    def test_clear_cancels_all(self):
        scheduler = PauseScheduler()
        handles = [scheduler.schedule(f"p{i}", 1.0, lambda: None) for i in range(3)]
        scheduler.clear()
        assert scheduler.pending() == 0
        assert all(h.cancelled for h in handles)

    def test_negative_delay_is_immediate(self):
        scheduler = PauseScheduler()
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 50.0
            handle = scheduler.schedule("x", -3.0, lambda: None)
            assert handle.expires_at == 50.0
            assert scheduler.run_due() == 1
