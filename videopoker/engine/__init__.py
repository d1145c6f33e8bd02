from .paytables import (
    PayTable,
    PRESETS,
    DEFAULT_PAY_TABLE,
    JACKS_OR_BETTER_9_6,
    JACKS_OR_BETTER_8_5,
    JACKS_OR_BETTER_7_5,
    JACKS_OR_BETTER_6_5,
    get_pay_table,
)
from .ev import Evaluator, HoldResult, evaluate, evaluate_all, describe_hold
from .solver import PlayResult, solve, rank_results

__all__ = [
    "PayTable",
    "PRESETS",
    "DEFAULT_PAY_TABLE",
    "JACKS_OR_BETTER_9_6",
    "JACKS_OR_BETTER_8_5",
    "JACKS_OR_BETTER_7_5",
    "JACKS_OR_BETTER_6_5",
    "get_pay_table",
    "Evaluator",
    "HoldResult",
    "evaluate",
    "evaluate_all",
    "describe_hold",
    "PlayResult",
    "solve",
    "rank_results",
]
