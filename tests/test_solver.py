import json

import pytest

from videopoker.engine.ev import Evaluator, HoldResult
from videopoker.engine.paytables import JACKS_OR_BETTER_9_6
from videopoker.engine.report import format_play, play_to_dict
from videopoker.engine.solver import rank_results, solve
from videopoker.helpers.cards import hold_mask
from videopoker.helpers.combos import count_combinations
from videopoker.helpers.errors import InvalidHand, InvalidPayTable
from videopoker.helpers.evaluator import Category


@pytest.fixture(scope="module")
def evaluator():
    return Evaluator()


@pytest.fixture(scope="module")
def low_pair(evaluator):
    return solve("7s 7h Ac Kd Qs", JACKS_OR_BETTER_9_6, evaluator=evaluator)


@pytest.fixture(scope="module")
def four_royal(evaluator):
    return solve("Ks Qs Js Ts 9h", JACKS_OR_BETTER_9_6, evaluator=evaluator)


@pytest.fixture(scope="module")
def pat_straight_flush(evaluator):
    return solve("9s Ts Js Qs Ks", JACKS_OR_BETTER_9_6, evaluator=evaluator)


def test_low_pair_holds_the_pair(low_pair):
    assert low_pair.optimal.hold_pattern == hold_mask([0, 1])
    assert [str(c) for c in low_pair.optimal.held] == ["7s", "7h"]
    assert 0.78 < low_pair.optimal.expected_value < 0.86

def test_four_to_royal_beats_made_straight(four_royal):
    assert four_royal.optimal.hold_pattern == hold_mask([0, 1, 2, 3])
    assert four_royal.optimal.expected_value == pytest.approx(921 / 47)
    assert four_royal.result_for(31).expected_value == 4.0

def test_pat_straight_flush_is_kept(pat_straight_flush):
    assert pat_straight_flush.optimal.hold_pattern == 31
    assert pat_straight_flush.optimal.expected_value == 50.0
    royal_draw = pat_straight_flush.result_for(hold_mask([1, 2, 3, 4]))
    assert royal_draw.expected_value == pytest.approx(875 / 47)
    assert royal_draw.expected_value < 50.0

def test_all_32_patterns_ranked(low_pair, four_royal, pat_straight_flush):
    for play in (low_pair, four_royal, pat_straight_flush):
        assert len(play.alternatives) == 31
        assert sorted(r.hold_pattern for r in play.ranked) == list(range(32))
        assert all(play.optimal.expected_value >= r.expected_value for r in play.alternatives)
        evs = [r.expected_value for r in play.ranked]
        assert evs == sorted(evs, reverse=True)

def test_every_pattern_draws_the_full_space(low_pair):
    for r in low_pair.ranked:
        k = 5 - len(r.held)
        assert r.draws == count_combinations(47, k)
        assert abs(sum(r.category_probabilities.values()) - 1.0) < 1e-9
    assert low_pair.result_for(0).draws == 1_533_939

def test_threaded_solve_matches(evaluator, four_royal):
    threaded = solve("Ks Qs Js Ts 9h", JACKS_OR_BETTER_9_6, evaluator=evaluator, workers=4)
    assert [r.hold_pattern for r in threaded.ranked] == [r.hold_pattern for r in four_royal.ranked]
    assert [r.expected_value for r in threaded.ranked] == [r.expected_value for r in four_royal.ranked]

def test_resolve_is_stable(evaluator, low_pair):
    again = solve("7s 7h Ac Kd Qs", JACKS_OR_BETTER_9_6, evaluator=evaluator)
    assert [r.hold_pattern for r in again.ranked] == [r.hold_pattern for r in low_pair.ranked]

def _result(pattern, ev):
    return HoldResult(pattern, ev, {c: 0.0 for c in Category}, 1, (), "")

def test_ties_go_to_lower_pattern():
    ranked = rank_results([_result(9, 1.0), _result(3, 1.0 + 1e-12), _result(5, 2.0), _result(1, 0.5)])
    assert [r.hold_pattern for r in ranked] == [5, 3, 9, 1]

def test_bad_inputs_fail_before_enumeration():
    with pytest.raises(InvalidHand):
        solve("7s 7h Ac Kd")
    with pytest.raises(InvalidPayTable):
        solve("7s 7h Ac Kd Qs", {Category.FLUSH: 6})

def test_report_outputs(four_royal):
    text = format_play(four_royal, top=3)
    assert "K♠ Q♠ J♠ 10♠" in text
    assert "Royal Flush" in text
    d = play_to_dict(four_royal)
    assert d["hand"] == ["Ks", "Qs", "Js", "Ts", "9h"]
    assert len(d["alternatives"]) == 31
    assert d["optimal"]["held"] == ["Ks", "Qs", "Js", "Ts"]
    json.dumps(d)
