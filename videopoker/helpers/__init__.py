# cards
from .cards import (
    Card,
    parse_cards,
    parse_hand,
    make_deck,
    full_deck,
    remaining_deck,
    card_name,
    hold_mask,
    held_indices,
)

# errors
from .errors import VideoPokerError, InvalidHand, InvalidHoldPattern, InvalidPayTable

# evaluation
from .evaluator import Category, HandRank, classify, category_of, straight_high

# enumeration + caching
from .combos import combinations, count_combinations
from .cache import LRUCache, ClassificationMemo

__all__ = [
    # cards
    "Card", "parse_cards", "parse_hand", "make_deck", "full_deck",
    "remaining_deck", "card_name", "hold_mask", "held_indices",

    # errors
    "VideoPokerError", "InvalidHand", "InvalidHoldPattern", "InvalidPayTable",

    # evaluation
    "Category", "HandRank", "classify", "category_of", "straight_high",

    # enumeration / cache
    "combinations", "count_combinations", "LRUCache", "ClassificationMemo",
]
