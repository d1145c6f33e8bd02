from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from .cards import HAND_SIZE, SUITS, Card, check_distinct, parse_cards
from .errors import InvalidHand


class Category(IntEnum):
    HIGH_CARD = 0
    JACKS_OR_BETTER = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Category.HIGH_CARD: "High Card",
    Category.JACKS_OR_BETTER: "Jacks or Better",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.ROYAL_FLUSH: "Royal Flush",
}

# lowest paying pair
MIN_PAYING_PAIR = 11


class HandRank(NamedTuple):
    """
    category: what the pay table indexes.
    kickers: ranks for display/tie-breaking; for quads the first one is the
      quad rank, which is what bonus pay tables would key on.
    name: like category but keeps a non-paying "pair" apart from "high_card".
    """
    category: Category
    kickers: Tuple[int, ...]
    name: str


def _rank_counts(vals: Iterable[int]) -> Dict[int, int]:
    d: Dict[int, int] = {}
    for v in vals:
        d[v] = d.get(v, 0) + 1
    return d


def straight_high(values: List[int]) -> Optional[int]:
    uniq = sorted(set(values), reverse=True)
    if 14 in uniq:
        uniq.append(1)  # ace low
    run = 1
    best = None
    for i in range(len(uniq) - 1):
        if uniq[i] - 1 == uniq[i + 1]:
            run += 1
            if run >= 5:
                high = uniq[i - (run - 2)]
                best = max(best or 0, high)
        else:
            run = 1
    return best


def _rank_values(vals: Sequence[int], is_flush: bool) -> HandRank:
    vals = sorted(vals, reverse=True)
    counts = _rank_counts(vals)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    count_pattern = sorted(counts.values(), reverse=True)

    sh = straight_high(vals) if len(counts) == HAND_SIZE else None
    is_straight = sh is not None

    if is_straight and is_flush:
        if sh == 14:
            return HandRank(Category.ROYAL_FLUSH, (14,), "royal_flush")
        return HandRank(Category.STRAIGHT_FLUSH, (sh,), "straight_flush")
    if count_pattern == [4, 1]:
        quad = groups[0][0]
        return HandRank(Category.FOUR_OF_A_KIND, (quad, groups[1][0]), "quads")
    if count_pattern == [3, 2]:
        return HandRank(Category.FULL_HOUSE, (groups[0][0], groups[1][0]), "full_house")
    if is_flush:
        return HandRank(Category.FLUSH, tuple(vals), "flush")
    if is_straight:
        return HandRank(Category.STRAIGHT, (sh,), "straight")
    if count_pattern == [3, 1, 1]:
        trips = groups[0][0]
        kickers = [v for v in vals if v != trips]
        return HandRank(Category.THREE_OF_A_KIND, (trips, *kickers), "trips")
    if count_pattern == [2, 2, 1]:
        pair_hi = groups[0][0]
        pair_lo = groups[1][0]
        kicker = groups[2][0]
        return HandRank(Category.TWO_PAIR, (pair_hi, pair_lo, kicker), "two_pair")
    if count_pattern == [2, 1, 1, 1]:
        pair = groups[0][0]
        kickers = [v for v in vals if v != pair]
        if pair >= MIN_PAYING_PAIR:
            return HandRank(Category.JACKS_OR_BETTER, (pair, *kickers), "jacks_or_better")
        # visually a pair, pays nothing
        return HandRank(Category.HIGH_CARD, (pair, *kickers), "pair")
    return HandRank(Category.HIGH_CARD, tuple(vals), "high_card")


def category_of(vals: Sequence[int], is_flush: bool) -> Category:
    """Category from 5 rank values and a flush flag. No validation."""
    return _rank_values(vals, is_flush).category


def classify(cards: Iterable[Union[str, Card]]) -> HandRank:
    cards5 = parse_cards(cards)
    if len(cards5) != HAND_SIZE:
        raise InvalidHand(f"classify expects exactly {HAND_SIZE} cards, got {len(cards5)}")
    check_distinct(cards5)
    is_flush = len({c.suit for c in cards5}) == 1
    return _rank_values([c.val for c in cards5], is_flush)


# ------------------------------------------------------------
# Canonical encoding for the enumeration hot loop.
# code = prime(rank) << 4 | suit bit. The product of the primes identifies the
# rank multiset of a hand independent of order; AND of the codes keeps a suit
# bit only when all cards share it.
# ------------------------------------------------------------

PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)  # ranks 2..A
PRIME_TO_VAL = {p: v + 2 for v, p in enumerate(PRIMES)}
SUIT_BITS = {s: 1 << i for i, s in enumerate(SUITS)}
SUIT_MASK = 0xF


def card_code(card: Card) -> int:
    return PRIMES[card.val - 2] << 4 | SUIT_BITS[card.suit]


def canonical_key(codes: Iterable[int]) -> int:
    """
    Order-independent key of a card set: prime product, negated for a flush.
    Every 5-card set maps to one key and its category is a function of it.
    """
    product = 1
    suits = SUIT_MASK
    for code in codes:
        product *= code >> 4
        suits &= code
    return -product if suits & SUIT_MASK else product


def category_of_key(key: int) -> Category:
    is_flush = key < 0
    product = -key if is_flush else key
    vals: List[int] = []
    for p in PRIMES:
        while product % p == 0:
            vals.append(PRIME_TO_VAL[p])
            product //= p
    return category_of(vals, is_flush)
