"""Random selection of categories and clues."""

from __future__ import annotations

import random
from collections.abc import Hashable, Sequence
from typing import Optional, TypeVar

from jeopardy.backend.errors import InsufficientPoolError

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def sample_without_replacement(
    items: Sequence[T], count: int, rng: Optional[random.Random] = None
) -> list[T]:
    """Return *count* items drawn uniformly from *items*, no repeats.

    Partial Fisher–Yates: only the first *count* slots of a copy are
    shuffled, so the cost is O(len(items)) for the copy plus O(count).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}.")
    if len(items) < count:
        raise InsufficientPoolError(required=count, available=len(items))

    rng = rng or random
    pool = list(items)
    n = len(pool)
    for i in range(count):
        j = rng.randrange(i, n)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:count]


class CategorySelector:
    """Picks which categories go on the board and which clues they show."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose_category_ids(self, pool: Sequence[K], count: int) -> list[K]:
        """Pick *count* distinct ids from *pool*.

        Duplicate ids in *pool* count once. The returned order is random
        and becomes the board's column order.
        """
        distinct = list(dict.fromkeys(pool))
        return sample_without_replacement(distinct, count, self.rng)

    def choose_clues(self, all_clues: Sequence[T], count: int) -> list[T]:
        return sample_without_replacement(all_clues, count, self.rng)
