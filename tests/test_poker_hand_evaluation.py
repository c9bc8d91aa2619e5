from nitpoker.poker_evaluation import PokerEvaluation
from nitpoker.poker_hand_evaluation import PokerHandEvaluation, shares


def ev(high, low=0):
    return PokerHandEvaluation(PokerEvaluation(high), PokerEvaluation(low))


def test_defaults_are_empty():
    e = PokerHandEvaluation()
    assert e.empty
    assert not e.highlow
    assert e.high == PokerEvaluation()


def test_eval_selects_high_or_low():
    e = ev(100, 50)
    assert e.eval() == PokerEvaluation(100)
    assert e.eval(0) == PokerEvaluation(100)
    assert e.eval(1) == PokerEvaluation(50)
    assert e.highlow
    assert not e.empty


def test_str_joins_high_and_low():
    high = PokerEvaluation(5 << 24)
    low = PokerEvaluation(1 << 24)
    assert str(PokerHandEvaluation(high, low)) == f"{high}\n{low}"
    assert str(PokerHandEvaluation(high)) == str(high)


def test_shares_high_only():
    assert shares(ev(10), ev(5)) == 1.0
    assert shares(ev(5), ev(10)) == 0.0
    assert shares(ev(7), ev(7)) == 0.5


def test_shares_high_low_scoop_and_split():
    assert shares(ev(10, 10), ev(5, 5)) == 1.0
    assert shares(ev(5, 5), ev(10, 10)) == 0.0
    assert shares(ev(10, 5), ev(5, 10)) == 0.5
    assert shares(ev(10, 10), ev(10, 10)) == 0.5


def test_shares_quarters():
    assert shares(ev(10, 10), ev(10, 5)) == 0.75
    assert shares(ev(10, 5), ev(10, 10)) == 0.25
    assert shares(ev(10, 7), ev(5, 7)) == 0.75


def test_shares_symmetry():
    pairs = [(ev(10, 3), ev(10, 8)), (ev(4, 6), ev(9, 6)), (ev(2), ev(3))]
    for a, b in pairs:
        assert shares(a, b) + shares(b, a) == 1.0