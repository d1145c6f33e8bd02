from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .errors import InvalidHand

RANKS = "23456789TJQKA"
SUITS = "shdc"
RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}

HAND_SIZE = 5

SUIT_SYMBOLS = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SUIT_NAMES = {"s": "Spades", "h": "Hearts", "d": "Diamonds", "c": "Clubs"}
RANK_NAMES = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
    8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King",
    14: "Ace",
}


@dataclass(frozen=True, order=True)
class Card:
    val: int
    suit: str

    def __str__(self) -> str:
        return f"{VAL_TO_RANK[self.val]}{self.suit}"

    def symbol(self) -> str:
        r = "10" if self.val == 10 else VAL_TO_RANK[self.val]
        return f"{r}{SUIT_SYMBOLS[self.suit]}"

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if len(s) == 3 and s.startswith("10"):
            s = "T" + s[2:]
        if len(s) != 2:
            raise ValueError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), SYMBOL_TO_SUIT.get(s[1], s[1].lower())
        if r not in RANK_TO_VAL or su not in SUITS:
            raise ValueError(f"Bad card string: {s!r}")
        return Card(RANK_TO_VAL[r], su)


def card_name(card: Card) -> str:
    return f"{RANK_NAMES[card.val]} of {SUIT_NAMES[card.suit]}"


def parse_cards(cards: Iterable[Union[str, Card]]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        out.append(x if isinstance(x, Card) else Card.from_str(x))
    return out


def check_distinct(cards: Sequence[Card]) -> None:
    if len(set(cards)) != len(cards):
        raise InvalidHand("Duplicate cards detected: " + " ".join(str(c) for c in cards))


def parse_hand(cards: Union[str, Iterable[Union[str, Card]]]) -> Tuple[Card, ...]:
    """
    Parse a dealt hand, either "As Ks Qs Js 9h" or a list of strings/Cards.
    Always returns 5 distinct cards in dealt order.
    """
    if isinstance(cards, str):
        cards = cards.replace(",", " ").split()
    try:
        hand = tuple(parse_cards(cards))
    except ValueError as e:
        raise InvalidHand(str(e)) from e
    if len(hand) != HAND_SIZE:
        raise InvalidHand(f"Hand must be exactly {HAND_SIZE} cards, got {len(hand)}")
    check_distinct(hand)
    return hand


def make_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    dead = set(exclude)
    deck = [Card(RANK_TO_VAL[r], s) for r in RANKS for s in SUITS]
    return [c for c in deck if c not in dead]


def full_deck() -> List[Card]:
    return make_deck()


def remaining_deck(hand: Sequence[Card]) -> List[Card]:
    """Cards of the full deck not in `hand`. `hand` may be partial."""
    check_distinct(hand)
    return make_deck(exclude=hand)


def held_indices(hold_pattern: int) -> Tuple[int, ...]:
    return tuple(i for i in range(HAND_SIZE) if (hold_pattern >> i) & 1)


def hold_mask(indices: Iterable[int]) -> int:
    mask = 0
    for i in indices:
        if not (0 <= i < HAND_SIZE):
            raise ValueError(f"Card position out of range: {i}")
        mask |= 1 << i
    return mask
