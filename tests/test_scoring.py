# Area: Engine Tests
"""Tests for end-of-round awards."""

import pytest

from classroom_rounds._engine.result import Outcome
from classroom_rounds._engine.scoring import Awards, ScoringResolver, compute_awards
from classroom_rounds._registry import PlayerRegistry
from classroom_rounds.settings import Settings


@pytest.fixture
def registry():
    return PlayerRegistry()


@pytest.fixture
def pair(registry):
    return registry.add_player("Sara").id, registry.add_player("Adam").id


class TestComputeAwards:
    """Pure award rule."""

    def test_player1_wins(self):
        assert compute_awards(Outcome.win("A"), "A", "B", 3, 1) == Awards(3, 0)

    def test_player2_wins(self):
        assert compute_awards(Outcome.win("B"), "A", "B", 3, 1) == Awards(0, 3)

    def test_draw(self):
        assert compute_awards(Outcome.draw(), "A", "B", 3, 1) == Awards(1, 1)

    def test_outsider_winner_rejected(self):
        with pytest.raises(ValueError):
            compute_awards(Outcome.win("C"), "A", "B", 3, 1)


class TestScoringResolver:
    """Applying awards to the registry."""

    def test_win_credits_winner_only(self, registry, pair):
        a, b = pair
        calls = []
        registry.on_change = lambda: calls.append(1)
        resolver = ScoringResolver(registry, win_points=3, draw_points=1)

        awards = resolver.resolve(Outcome.win(a), a, b)

        assert awards == Awards(3, 0)
        assert registry.score_of(a) == 3
        assert registry.score_of(b) == 0
        assert len(calls) == 1

    def test_draw_credits_both(self, registry, pair):
        a, b = pair
        ScoringResolver(registry, 3, 1).resolve(Outcome.draw(), a, b)
        assert registry.score_of(a) == 1
        assert registry.score_of(b) == 1

    def test_custom_points_from_settings(self, registry, pair):
        a, b = pair
        resolver = ScoringResolver.from_settings(registry, Settings(win_points=5, draw_points=2))
        resolver.resolve(Outcome.win(b), a, b)
        assert registry.score_of(b) == 5

    def test_zero_points_allowed(self, registry, pair):
        a, b = pair
        ScoringResolver(registry, 0, 0).resolve(Outcome.draw(), a, b)
        assert registry.score_of(a) == 0

    def test_removed_player_is_skipped(self, registry, pair):
        a, b = pair
        registry.remove_player(b)
        ScoringResolver(registry, 3, 1).resolve(Outcome.draw(), a, b)
        assert registry.score_of(a) == 1
