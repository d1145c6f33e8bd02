import pytest

from videopoker.engine.ev import Evaluator, evaluate, validate_hold_pattern
from videopoker.engine.paytables import JACKS_OR_BETTER_6_5, JACKS_OR_BETTER_9_6, PayTable
from videopoker.helpers.cards import hold_mask, parse_hand
from videopoker.helpers.combos import count_combinations
from videopoker.helpers.errors import InvalidHand, InvalidHoldPattern, InvalidPayTable
from videopoker.helpers.evaluator import Category, classify

HANDS = [
    "7s 7h Ac Kd Qs",
    "Ks Qs Js Ts 9h",
    "9s Ts Js Qs Ks",
    "2c 7d 9h Js 4s",
]


def test_probabilities_sum_to_one():
    ev = Evaluator()
    for hand in HANDS:
        for pattern in (1, 6, 15, 27, 31):
            r = ev.evaluate(hand, pattern)
            assert abs(sum(r.category_probabilities.values()) - 1.0) < 1e-9
            assert set(r.category_probabilities) == set(Category)
            assert all(0.0 <= p <= 1.0 for p in r.category_probabilities.values())

def test_hold_all_is_the_hand_itself():
    for hand in HANDS:
        r = evaluate(hand, 31, JACKS_OR_BETTER_9_6)
        category = classify(parse_hand(hand)).category
        assert r.expected_value == JACKS_OR_BETTER_9_6[category]
        assert r.category_probabilities[category] == 1.0
        assert sum(1 for p in r.category_probabilities.values() if p) == 1
        assert r.draws == 1
        assert r.description == "Hold all cards"

@pytest.mark.parametrize("held,k", [([0, 1, 2, 3], 1), ([0, 1, 2], 2), ([0, 1], 3)])
def test_draw_count_is_binomial(held, k):
    r = evaluate("2c 7d 9h Js 4s", hold_mask(held))
    assert r.draws == count_combinations(47, k)
    assert r.cards_drawn == k

def test_four_to_a_royal_exact():
    r = evaluate("Ks Qs Js Ts 9h", hold_mask([0, 1, 2, 3]), JACKS_OR_BETTER_9_6)
    assert r.draws == 47
    # A♠ royal, 9♠ straight flush, 7 flushes, 5 straights, 9 high pairs
    assert r.expected_value == pytest.approx((800 + 50 + 7 * 6 + 5 * 4 + 9) / 47)
    p = r.category_probabilities
    assert p[Category.ROYAL_FLUSH] == pytest.approx(1 / 47)
    assert p[Category.STRAIGHT_FLUSH] == pytest.approx(1 / 47)
    assert p[Category.FLUSH] == pytest.approx(7 / 47)
    assert p[Category.STRAIGHT] == pytest.approx(5 / 47)
    assert p[Category.JACKS_OR_BETTER] == pytest.approx(9 / 47)
    assert p[Category.HIGH_CARD] == pytest.approx(24 / 47)
    assert [str(c) for c in r.held] == ["Ks", "Qs", "Js", "Ts"]

def test_pay_table_changes_ev_not_distribution():
    ev = Evaluator()
    a = ev.evaluate("Ks Qs Js Ts 9h", 15, JACKS_OR_BETTER_9_6)
    b = ev.evaluate("Ks Qs Js Ts 9h", 15, JACKS_OR_BETTER_6_5)
    assert a.category_probabilities == b.category_probabilities
    assert b.expected_value == pytest.approx(a.expected_value - 7 / 47)
    assert ev.tallies.hits >= 1

def test_cache_bypass_gives_same_numbers():
    hand = "7s 7h Ac Kd Qs"
    fast = Evaluator()
    slow = Evaluator(use_cache=False)
    for pattern in (hold_mask([0, 1, 2]), hold_mask([0, 1, 4]), hold_mask([0, 2, 3, 4]), 31):
        a = fast.evaluate(hand, pattern)
        b = slow.evaluate(hand, pattern)
        assert a.expected_value == pytest.approx(b.expected_value, abs=1e-12)
        assert a.category_probabilities == pytest.approx(b.category_probabilities)
        assert a.draws == b.draws
    assert len(slow.tallies) == 0

def test_clear_does_not_change_results():
    ev = Evaluator()
    before = ev.evaluate("2c 7d 9h Js 4s", hold_mask([3])).expected_value
    assert len(ev.tallies) == 1 and len(ev.categories) > 0
    ev.clear()
    assert len(ev.tallies) == 0 and len(ev.categories) == 0
    assert ev.evaluate("2c 7d 9h Js 4s", hold_mask([3])).expected_value == before

def test_same_cards_in_another_order_reuse_the_tally():
    ev = Evaluator()
    a = ev.evaluate("Ks Qs Js Ts 9h", hold_mask([0, 1, 2, 3]))
    b = ev.evaluate("9h Ts Js Qs Ks", hold_mask([1, 2, 3, 4]))
    assert ev.tallies.hits == 1
    assert a.expected_value == b.expected_value

def test_invalid_hold_patterns():
    for bad in (-1, 32, 1.5, "3", True):
        with pytest.raises(InvalidHoldPattern):
            evaluate("2c 7d 9h Js 4s", bad)
    assert validate_hold_pattern(31) == 31

def test_invalid_pay_table():
    with pytest.raises(InvalidPayTable):
        evaluate("2c 7d 9h Js 4s", 0, {Category.ROYAL_FLUSH: 800})

def test_invalid_hand():
    with pytest.raises(InvalidHand):
        evaluate("2c 7d 9h Js", 0)
    with pytest.raises(InvalidHand):
        evaluate("2c 7d 9h Js Js", 0)

def test_nan_payout_rejected_before_enumeration():
    table = PayTable("bad", "bad", (0, 1, 2, 3, 4, float("nan"), 9, 25, 50, 800))
    with pytest.raises(InvalidPayTable):
        evaluate("2c 7d 9h Js 4s", 31, table)
