# cards/sampling.py
from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> random.Random:
    """A private generator; pass a seed for repeatable draws."""
    return random.Random(seed)


def sample(pool: Sequence[T], k: int, rng: Optional[random.Random] = None) -> List[T]:
    """
    Pick `k` items uniformly at random without replacement.

    A pool smaller than `k` is returned whole (shuffled), never an error.
    """
    rng = rng or make_rng()
    if k <= 0 or not pool:
        return []
    return rng.sample(list(pool), min(k, len(pool)))
