from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def pick_one(pool: Sequence[T], rng: random.Random | None = None) -> T:
    """Return one element of a non-empty pool, chosen uniformly."""

    if not pool:
        raise ValueError("Cannot pick from an empty pool")
    source = rng or random
    return pool[source.randrange(len(pool))]


def sample_without_replacement(
    pool: Sequence[T],
    k: int,
    rng: random.Random | None = None,
) -> list[T]:
    """
    Draw up to ``k`` distinct positions from ``pool`` and return their items.

    ``k`` is clamped to ``[0, len(pool)]``, so asking for more items than the
    pool holds returns a shuffled copy of the whole pool. Duplicate strings in
    the pool are still distinct positions.
    """
    count = max(0, min(k, len(pool)))
    if count == 0:
        return []
    source = rng or random
    indices = source.sample(range(len(pool)), count)
    return [pool[i] for i in indices]


__all__ = ["pick_one", "sample_without_replacement"]
