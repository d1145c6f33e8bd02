from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from videopoker.helpers.cards import Card, parse_hand
from .ev import HOLD_PATTERNS, Evaluator, HandLike, HoldResult, evaluate_all
from .paytables import DEFAULT_PAY_TABLE, PayTable, coerce_pay_table

logger = logging.getLogger(__name__)

# EVs equal to this many decimals count as tied
TIE_DECIMALS = 9


@dataclass(frozen=True, eq=False)
class PlayResult:
    optimal: HoldResult
    alternatives: Tuple[HoldResult, ...]
    hand: Tuple[Card, ...]
    pay_table: PayTable

    @property
    def ranked(self) -> Tuple[HoldResult, ...]:
        return (self.optimal, *self.alternatives)

    def result_for(self, hold_pattern: int) -> HoldResult:
        for r in self.ranked:
            if r.hold_pattern == hold_pattern:
                return r
        raise KeyError(hold_pattern)


def rank_results(results: Iterable[HoldResult]) -> List[HoldResult]:
    """
    EV descending. Ties at TIE_DECIMALS go to the lower pattern number, so
    the order is the same every time the hand is solved.
    """
    return sorted(results, key=lambda r: (-round(r.expected_value, TIE_DECIMALS), r.hold_pattern))


def solve(
    hand: HandLike,
    pay_table: Union[PayTable, Dict] = DEFAULT_PAY_TABLE,
    *,
    evaluator: Optional[Evaluator] = None,
    workers: Optional[int] = None,
) -> PlayResult:
    """
    Exact EV for all 32 hold patterns, best first.

    workers > 1 runs the patterns on a thread pool; every pattern is still
    evaluated and all of them are joined before ranking.
    """
    cards = parse_hand(hand)
    table = coerce_pay_table(pay_table)
    ev = evaluator or Evaluator()

    t0 = time.perf_counter()
    if workers is not None and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda p: ev.evaluate(cards, p, table), HOLD_PATTERNS))
    else:
        results = evaluate_all(cards, table, evaluator=ev)

    ranked = rank_results(results)
    best = ranked[0]
    logger.info(
        "solved %s on %s in %.2fs: hold %s (EV %.4f)",
        " ".join(str(c) for c in cards), table.short_name, time.perf_counter() - t0,
        " ".join(str(c) for c in best.held) or "nothing", best.expected_value,
    )
    return PlayResult(optimal=best, alternatives=tuple(ranked[1:]), hand=cards, pay_table=table)
