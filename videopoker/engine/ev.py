from __future__ import annotations

import logging
import numbers
import time
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from videopoker.helpers.cache import ClassificationMemo, LRUCache
from videopoker.helpers.cards import (
    HAND_SIZE,
    Card,
    card_name,
    held_indices,
    parse_hand,
    remaining_deck,
)
from videopoker.helpers.combos import combinations
from videopoker.helpers.errors import InvalidHoldPattern
from videopoker.helpers.evaluator import (
    SUIT_MASK,
    Category,
    card_code,
    category_of_key,
    classify,
)
from .paytables import DEFAULT_PAY_TABLE, PayTable, coerce_pay_table

logger = logging.getLogger(__name__)

N_PATTERNS = 1 << HAND_SIZE
HOLD_PATTERNS = range(N_PATTERNS)
HOLD_ALL = N_PATTERNS - 1

DEFAULT_TALLY_CAPACITY = 4096

HandLike = Union[str, Iterable[Union[str, Card]]]
TallyKey = Tuple[FrozenSet[Card], FrozenSet[Card]]


@dataclass(frozen=True)
class DrawTally:
    """How many of the possible draws end in each category."""
    counts: Tuple[int, ...]  # indexed by Category value
    draws: int


@dataclass(frozen=True, eq=False)
class HoldResult:
    hold_pattern: int
    expected_value: float
    category_probabilities: Dict[Category, float]
    draws: int
    held: Tuple[Card, ...]
    description: str

    @property
    def cards_drawn(self) -> int:
        return HAND_SIZE - len(self.held)

    def to_dict(self) -> Dict[str, object]:
        return {
            "hold_pattern": self.hold_pattern,
            "held": [str(c) for c in self.held],
            "description": self.description,
            "expected_value": self.expected_value,
            "draws": self.draws,
            "category_probabilities": {
                c.label: p for c, p in self.category_probabilities.items()
            },
        }


def validate_hold_pattern(hold_pattern: object) -> int:
    if isinstance(hold_pattern, bool) or not isinstance(hold_pattern, numbers.Integral):
        raise InvalidHoldPattern(f"Hold pattern must be an integer, got {hold_pattern!r}")
    pattern = int(hold_pattern)
    if not (0 <= pattern < N_PATTERNS):
        raise InvalidHoldPattern(f"Hold pattern must be in [0, {N_PATTERNS - 1}], got {pattern}")
    return pattern


def describe_hold(hold_pattern: int, hand: Sequence[Card]) -> str:
    held = [hand[i] for i in held_indices(hold_pattern)]
    if not held:
        return "Discard all cards"
    if len(held) == HAND_SIZE:
        return "Hold all cards"
    return "Hold " + ", ".join(card_name(c) for c in held)


class Evaluator:
    """
    Exact EV of one hold pattern by enumerating every replacement draw.

    Owns two caches, both safe to share across threads and to clear at any
    time without changing results:
      - categories: canonical hand key -> Category (a few thousand keys total)
      - tallies: (held cards, discarded cards) -> DrawTally, LRU bounded.
        Tallies don't depend on the pay table, so switching tables only
        re-weights counts.

    use_cache=False skips both and classifies every outcome with `classify`.
    """
    def __init__(self, tally_capacity: int = DEFAULT_TALLY_CAPACITY, use_cache: bool = True):
        self.use_cache = use_cache
        self.categories: ClassificationMemo[int, Category] = ClassificationMemo(category_of_key)
        self.tallies: LRUCache[TallyKey, DrawTally] = LRUCache(tally_capacity)

    def clear(self) -> None:
        self.categories.clear()
        self.tallies.clear()

    def evaluate(
        self,
        hand: HandLike,
        hold_pattern: int,
        pay_table: Union[PayTable, Dict] = DEFAULT_PAY_TABLE,
    ) -> HoldResult:
        cards = parse_hand(hand)
        pattern = validate_hold_pattern(hold_pattern)
        table = coerce_pay_table(pay_table)

        held = tuple(cards[i] for i in held_indices(pattern))
        tally = self.tally(cards, pattern)

        counts = np.asarray(tally.counts, dtype=np.int64)
        ev = float(counts @ table.as_array()) / tally.draws
        probs = counts / tally.draws

        return HoldResult(
            hold_pattern=pattern,
            expected_value=ev,
            category_probabilities={c: float(probs[c]) for c in Category},
            draws=tally.draws,
            held=held,
            description=describe_hold(pattern, cards),
        )

    def tally(self, hand: Sequence[Card], hold_pattern: int) -> DrawTally:
        keep = set(held_indices(hold_pattern))
        held = tuple(c for i, c in enumerate(hand) if i in keep)
        discarded = tuple(c for i, c in enumerate(hand) if i not in keep)

        if not self.use_cache:
            return self._enumerate(hand, held)

        key = (frozenset(held), frozenset(discarded))
        cached = self.tallies.get(key)
        if cached is not None:
            logger.debug("tally cache hit for pattern %d", hold_pattern)
            return cached

        t0 = time.perf_counter()
        tally = self._enumerate(hand, held)
        logger.debug(
            "pattern %d: %d draws in %.3fs",
            hold_pattern, tally.draws, time.perf_counter() - t0,
        )
        self.tallies.put(key, tally)
        return tally

    def _enumerate(self, hand: Sequence[Card], held: Tuple[Card, ...]) -> DrawTally:
        discard_count = HAND_SIZE - len(held)
        counts = [0] * len(Category)

        if discard_count == 0:
            counts[classify(hand).category] = 1
            return DrawTally(tuple(counts), 1)

        pool = remaining_deck(hand)

        if not self.use_cache:
            for draw in combinations(pool, discard_count):
                counts[classify(held + draw).category] += 1
            return DrawTally(tuple(counts), sum(counts))

        base_product = 1
        base_suits = SUIT_MASK
        for c in held:
            code = card_code(c)
            base_product *= code >> 4
            base_suits &= code

        memo = self.categories
        table = memo.table
        for draw in combinations([card_code(c) for c in pool], discard_count):
            product = base_product
            suits = base_suits
            for code in draw:
                product *= code >> 4
                suits &= code
            key = -product if suits & SUIT_MASK else product
            cat = table.get(key)
            if cat is None:
                cat = memo[key]
            counts[cat] += 1

        return DrawTally(tuple(counts), sum(counts))


def evaluate(
    hand: HandLike,
    hold_pattern: int,
    pay_table: Union[PayTable, Dict] = DEFAULT_PAY_TABLE,
    evaluator: Optional[Evaluator] = None,
) -> HoldResult:
    return (evaluator or Evaluator()).evaluate(hand, hold_pattern, pay_table)


def evaluate_all(
    hand: HandLike,
    pay_table: Union[PayTable, Dict] = DEFAULT_PAY_TABLE,
    evaluator: Optional[Evaluator] = None,
) -> List[HoldResult]:
    """All 32 hold patterns in pattern order (unsorted)."""
    ev = evaluator or Evaluator()
    return [ev.evaluate(hand, p, pay_table) for p in HOLD_PATTERNS]
