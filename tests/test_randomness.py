# Area: Shared Tests
"""Tests for shuffling helpers."""

import random
from collections import Counter

import pytest

from classroom_rounds._shared.randomness import pick_pair, sample, shuffled


class TestShuffled:
    """Tests for shuffled()."""

    def test_is_permutation(self):
        items = list(range(10))
        out = shuffled(items, random.Random(1))
        assert sorted(out) == items

    def test_does_not_mutate_input(self):
        items = [1, 2, 3]
        shuffled(items, random.Random(1))
        assert items == [1, 2, 3]

    def test_seeded_is_reproducible(self):
        assert shuffled(range(20), random.Random(42)) == shuffled(range(20), random.Random(42))

    def test_roughly_uniform(self):
        """Every permutation of three items shows up at a similar rate."""
        rng = random.Random(0)
        counts = Counter(tuple(shuffled("abc", rng)) for _ in range(6000))
        assert len(counts) == 6
        assert all(800 < n < 1200 for n in counts.values())

    def test_empty_and_single(self):
        assert shuffled([]) == []
        assert shuffled(["x"]) == ["x"]


class TestSampleAndPair:
    """Tests for sample() and pick_pair()."""

    def test_sample_distinct(self):
        out = sample(range(14), 10, random.Random(3))
        assert len(out) == 10
        assert len(set(out)) == 10

    def test_sample_more_than_available(self):
        assert sorted(sample([1, 2], 5, random.Random(3))) == [1, 2]

    def test_pick_pair_distinct(self):
        rng = random.Random(5)
        for _ in range(50):
            a, b = pick_pair(["p1", "p2", "p3"], rng)
            assert a != b

    def test_pick_pair_needs_two(self):
        with pytest.raises(ValueError):
            pick_pair(["only"])
