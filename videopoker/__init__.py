from .helpers import Card, Category, classify, parse_hand
from .helpers.errors import VideoPokerError, InvalidHand, InvalidHoldPattern, InvalidPayTable
from .engine import (
    PayTable,
    PRESETS,
    DEFAULT_PAY_TABLE,
    Evaluator,
    HoldResult,
    PlayResult,
    evaluate,
    get_pay_table,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    "Card", "Category", "classify", "parse_hand",
    "VideoPokerError", "InvalidHand", "InvalidHoldPattern", "InvalidPayTable",
    "PayTable", "PRESETS", "DEFAULT_PAY_TABLE", "get_pay_table",
    "Evaluator", "HoldResult", "PlayResult", "evaluate", "solve",
]
