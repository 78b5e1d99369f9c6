# Area: Shared
"""
classroom_rounds._shared.randomness — Shuffling helpers
=======================================================

Uniform random permutations (Fisher–Yates) and pair picking.
Every helper takes an optional ``random.Random`` so callers and
tests can seed it.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a new list holding a uniformly random permutation of ``items``."""
    rng = rng or random
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out


def sample(items: Sequence[T], count: int, rng: Optional[random.Random] = None) -> List[T]:
    """Return ``count`` distinct items (or all of them, if fewer) in random order."""
    return shuffled(items, rng)[:max(0, count)]


def pick_pair(items: Sequence[T], rng: Optional[random.Random] = None) -> Tuple[T, T]:
    """Pick two distinct entries uniformly at random.

    Raises:
        ValueError: If fewer than two items are given
    """
    if len(items) < 2:
        raise ValueError("Need at least two items to pick a pair")
    first, second = shuffled(items, rng)[:2]
    return first, second
