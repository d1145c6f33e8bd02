# scripts/solve_hand.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from videopoker.engine import Evaluator, get_pay_table, PRESETS, solve
from videopoker.engine.report import format_play, play_to_dict
from videopoker.helpers.errors import VideoPokerError

logger = logging.getLogger("solve_hand")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Exact hold/draw EVs for a Jacks or Better hand.")
    ap.add_argument("cards", nargs="+", help="five cards, e.g. As Ks Qs Js 9h (10s / T♠ also accepted)")
    ap.add_argument("--paytable", default="9/6", choices=sorted(PRESETS))
    ap.add_argument("--top", type=int, default=5, help="how many ranked holds to print")
    ap.add_argument("--workers", type=int, default=1, help="threads for the 32 hold patterns")
    ap.add_argument("--json", dest="json_out", type=str, default=None, help="also write the full result here")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        play = solve(
            " ".join(args.cards),
            get_pay_table(args.paytable),
            evaluator=Evaluator(),
            workers=args.workers,
        )
    except VideoPokerError as e:
        logger.error("%s", e)
        return 2

    print(format_play(play, top=args.top))

    if args.json_out:
        with open(args.json_out, "w", encoding="utf-8") as f:
            json.dump(play_to_dict(play), f, indent=2)
        print(f"Wrote {args.json_out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
