from __future__ import annotations
from itertools import combinations as _combinations
from math import comb
from typing import Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


def count_combinations(n: int, k: int) -> int:
    return comb(n, k)


def combinations(cards: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """
    Lazily yield every k-subset of `cards` once, as a tuple in input order.

    Iterative, so drawing 5 from 47 (1,533,939 subsets) never recurses or
    materializes the full list. Each call starts a fresh enumeration; k == 0
    yields a single empty tuple.
    """
    pool = tuple(cards)
    if not (0 <= k <= len(pool)):
        raise ValueError(f"cannot choose {k} from {len(pool)} cards")
    return _combinations(pool, k)
