from __future__ import annotations
from typing import Any, Dict, List

from .solver import PlayResult


def _fmt_held(result) -> str:
    return " ".join(c.symbol() for c in result.held) or "(draw five)"


def format_play(play: PlayResult, top: int = 5) -> str:
    lines: List[str] = []
    lines.append(f"Hand: {' '.join(c.symbol() for c in play.hand)}   Pay table: {play.pay_table.name}")
    lines.append(f"{'#':>2}  {'hold':<18} {'EV':>9}  draws")
    for i, r in enumerate(play.ranked[:top], start=1):
        lines.append(f"{i:>2}  {_fmt_held(r):<18} {r.expected_value:>9.5f}  {r.draws}")

    best = play.optimal
    lines.append("")
    lines.append(f"Best: {best.description}")
    for cat, p in sorted(best.category_probabilities.items(), reverse=True):
        if p > 0:
            lines.append(f"  {cat.label:<16} {p:8.4%}")
    return "\n".join(lines)


def play_to_dict(play: PlayResult) -> Dict[str, Any]:
    return {
        "hand": [str(c) for c in play.hand],
        "pay_table": {"name": play.pay_table.name, "payouts": play.pay_table.to_dict()},
        "optimal": play.optimal.to_dict(),
        "alternatives": [r.to_dict() for r in play.alternatives],
    }
