from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from videopoker.helpers.errors import InvalidPayTable
from videopoker.helpers.evaluator import Category

PayKey = Union[Category, int, str]


@dataclass(frozen=True)
class PayTable:
    """
    Payout multiplier per Category, stored as a 10-tuple indexed by category
    value. Build with `PayTable.from_mapping` to get validation.
    """
    name: str
    short_name: str
    payouts: Tuple[float, ...]

    def __getitem__(self, category: PayKey) -> float:
        return self.payouts[_to_category(category)]

    def as_array(self) -> np.ndarray:
        return np.asarray(self.payouts, dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        return {c.label: self.payouts[c] for c in Category}

    @staticmethod
    def from_mapping(
        payouts: Mapping[PayKey, float],
        name: str = "Custom",
        short_name: str = "custom",
    ) -> "PayTable":
        table: Dict[Category, float] = {}
        for k, v in payouts.items():
            try:
                cat = _to_category(k)
            except (KeyError, ValueError) as e:
                raise InvalidPayTable(f"Unknown pay table category: {k!r}") from e
            table[cat] = v

        missing = [c.label for c in Category if c not in table]
        if missing:
            raise InvalidPayTable("Pay table missing: " + ", ".join(missing))

        values = _validate_payouts([table[c] for c in Category])
        return PayTable(name=name, short_name=short_name, payouts=values)


def _validate_payouts(values) -> Tuple[float, ...]:
    out = []
    for c, v in zip(Category, values):
        if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v) or v < 0:
            raise InvalidPayTable(f"{c.label} payout must be a non-negative number, got {v!r}")
        out.append(float(v))
    return tuple(out)


def _to_category(key: PayKey) -> Category:
    if isinstance(key, str):
        norm = key.strip().upper().replace(" ", "_").replace("-", "_")
        return Category[norm]
    return Category(key)


def coerce_pay_table(pay_table: Union[PayTable, Mapping[PayKey, float]]) -> PayTable:
    if isinstance(pay_table, PayTable):
        if len(pay_table.payouts) != len(Category):
            raise InvalidPayTable(f"Pay table needs {len(Category)} entries, got {len(pay_table.payouts)}")
        _validate_payouts(pay_table.payouts)
        return pay_table
    if isinstance(pay_table, Mapping):
        return PayTable.from_mapping(pay_table)
    raise InvalidPayTable(f"Not a pay table: {type(pay_table).__name__}")


def _jacks_or_better(full_house: int, flush: int) -> PayTable:
    return PayTable.from_mapping(
        {
            Category.ROYAL_FLUSH: 800,
            Category.STRAIGHT_FLUSH: 50,
            Category.FOUR_OF_A_KIND: 25,
            Category.FULL_HOUSE: full_house,
            Category.FLUSH: flush,
            Category.STRAIGHT: 4,
            Category.THREE_OF_A_KIND: 3,
            Category.TWO_PAIR: 2,
            Category.JACKS_OR_BETTER: 1,
            Category.HIGH_CARD: 0,
        },
        name=f"Jacks or Better ({full_house}/{flush})",
        short_name=f"{full_house}/{flush}",
    )


# full pay, ~99.54% return
JACKS_OR_BETTER_9_6 = _jacks_or_better(9, 6)
JACKS_OR_BETTER_8_5 = _jacks_or_better(8, 5)
JACKS_OR_BETTER_7_5 = _jacks_or_better(7, 5)
JACKS_OR_BETTER_6_5 = _jacks_or_better(6, 5)

PRESETS: Dict[str, PayTable] = {
    t.short_name: t
    for t in (JACKS_OR_BETTER_9_6, JACKS_OR_BETTER_8_5, JACKS_OR_BETTER_7_5, JACKS_OR_BETTER_6_5)
}

DEFAULT_PAY_TABLE = JACKS_OR_BETTER_9_6


def get_pay_table(short_name: str) -> PayTable:
    try:
        return PRESETS[short_name.strip()]
    except KeyError:
        raise InvalidPayTable(
            f"Unknown pay table {short_name!r}; choose from {', '.join(PRESETS)}"
        ) from None
