import pytest

from nitpoker.errors import InvalidArgument
from nitpoker.poker_evaluation import PokerEvaluation
from nitpoker.poker_hand_evaluation import PokerHandEvaluation
from nitpoker.poker_hand_evaluator import EquityResult, PokerHandEvaluator


class CodeEvaluator(PokerHandEvaluator):
    """Hands are (high, low) code pairs; the board is ignored."""

    def evaluate_hand(self, hand, board=None):
        high, low = hand
        return PokerHandEvaluation(PokerEvaluation(high), PokerEvaluation(low))

    def hand_size(self):
        return 1

    def board_size(self):
        return 0

    def evaluation_size(self):
        return 2


def total(results):
    return sum(r.win_shares + r.tie_shares for r in results)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        PokerHandEvaluator()


def test_default_behaviour():
    ev = CodeEvaluator()
    assert ev.uses_suits() is True
    assert ev.num_draws() == 0
    ev.set_num_draws(3)
    assert ev.num_draws() == 0
    ev.use_suits(False)
    assert ev.uses_suits() is False
    assert ev.evaluate((40, 7)).high == PokerEvaluation(40)
    assert ev.evaluate((40, 7)).low == PokerEvaluation(7)


def test_evaluate_helpers_delegate():
    ev = CodeEvaluator()
    hand = (40, 7)
    assert ev.evaluate(hand) == ev.evaluate_hand(hand)
    assert ev.eval(hand) == PokerEvaluation(40)
    assert ev.evaluate_ranks(hand) == PokerEvaluation(40)
    assert ev.evaluate_suits(hand) == PokerEvaluation(40)


def test_equity_result_add_and_str():
    a = EquityResult(win_shares=1.0, tie_shares=0.5, equity=3.0)
    a += EquityResult(win_shares=2.0, tie_shares=0.25, equity=9.0)
    assert a.win_shares == 3.0
    assert a.tie_shares == 0.75
    assert a.equity == 3.0
    assert str(EquityResult(win_shares=1.0)) == "1.000000 0.000000 0.000000 0.000000"


def test_single_winner_takes_the_pot():
    ev = CodeEvaluator()
    results = [EquityResult() for _ in range(3)]
    evals = ev.evaluate_showdown([(5, 0), (9, 0), (3, 0)], None, results)
    assert [e.high for e in evals] == [PokerEvaluation(5), PokerEvaluation(9), PokerEvaluation(3)]
    assert results[1].win_shares == 1.0
    assert results[0].win_shares == results[2].win_shares == 0.0
    assert total(results) == 1.0


def test_tie_splits_evenly():
    ev = CodeEvaluator()
    results = [EquityResult() for _ in range(3)]
    ev.evaluate_showdown([(9, 0), (9, 0), (3, 0)], None, results)
    assert results[0].tie_shares == results[1].tie_shares
    assert results[2].tie_shares == 0.0
    assert all(r.win_shares == 0.0 for r in results)
    assert total(results) == pytest.approx(1.0)


def test_high_low_split_and_weight():
    ev = CodeEvaluator()
    results = [EquityResult() for _ in range(2)]
    ev.evaluate_showdown([(9, 1), (3, 8)], None, results, weight=2.0)
    assert results[0].win_shares == results[1].win_shares
    assert total(results) == pytest.approx(2.0)


def test_results_accumulate_across_calls():
    ev = CodeEvaluator()
    results = [EquityResult() for _ in range(2)]
    for _ in range(4):
        ev.evaluate_showdown([(9, 0), (3, 0)], None, results)
    assert results[0].win_shares == 4.0
    assert results[1].win_shares == 0.0


def test_extra_hands_are_ignored():
    ev = CodeEvaluator()
    results = [EquityResult() for _ in range(2)]
    evals = ev.evaluate_showdown([(2, 0), (4, 0), (99, 0)], None, results)
    assert len(evals) == 2
    assert results[1].win_shares == 1.0


def test_bad_arguments_raise():
    ev = CodeEvaluator()
    with pytest.raises(InvalidArgument):
        ev.evaluate_showdown([], None, [])
    with pytest.raises(InvalidArgument):
        ev.evaluate_showdown([(1, 0)], None, [EquityResult(), EquityResult()])