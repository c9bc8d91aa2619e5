# nitpoker

Building blocks for poker hand evaluation.

- `nitpoker.rank`: `Rank`, a card rank from 2 up to A, with the ace always high. It has the properties `code` (0 for the deuce up to 12 for the ace) and `bit` (the rank as a single bit of a rank mask). The module also has the helpers `rank_code(c)` and `is_rank_char(c)`.
- `nitpoker.suit`: `Suit`, ordered clubs < diamonds < hearts < spades. It has the properties `code` and `bit`, and `render(display)` draws it in any `SuitDisplay` style (ASCII, extended ASCII, HTML, two- or four-colour HTML, ANSI colour). `set_suit_display` and `get_suit_display` choose the style that `str()` uses. The module also has `suit_code(c)` and `is_suit_char(c)`.
- `nitpoker.poker_evaluation`: `PokerEvaluation`, an integer code for an evaluated hand. Comparing two codes gives the same order as comparing the hands. Lowball codes are stored "flipped" so that a larger code is still the better hand. The code can be read back through the properties `type`, `major_rank`, `minor_rank`, `kicker_bits`, `ace_plays_low` and `code`. The methods are `showdown_code()`, `reduced_code()`, `reduced_code_2to7()`, `fix_wheel_2to7(rank_mask)`, `play_ace_low()`, `play_ace_high()`, `to_string_cannon()` and `bitstr()`. `HandType` names the hand categories, from `NO_PAIR` up to `STRAIGHT_FLUSH`.
- `nitpoker.poker_hand_evaluation`: `PokerHandEvaluation` bundles a `high` evaluation with an optional `low` one. It has the properties `highlow` and `empty` and the method `eval(n)`. `shares(hero, villain)` returns the hero's fraction of the pot: 1.0, 0.75, 0.5, 0.25 or 0.0, and -1.0 if the outcome cannot be decided.
- `nitpoker.poker_hand_evaluator`: `PokerHandEvaluator` is the abstract base class for game-specific evaluators. `evaluate_showdown(hands, board, result, weight=1.0)` awards win and tie shares into a list of `EquityResult` objects and returns the evaluations. The module also defines the hold'em constants (`BOARD_SIZE`, `NUM_HOLDEM_POCKET`, `PREFLOP` … `RIVER`, and so on).
- `nitpoker.combinations`: `Combinations` steps through every k-subset of `range(n)` in lexicographic order.
- `nitpoker.bits`: the bit helpers `lastbit`, `lastbit64`, `bottom_ranks`, `flip_ace` and `unflip_ace`.
- `nitpoker.errors`: `Error`, `ParseError`, `InvalidArgument`, `DomainError` and `LogicError`.

## What it does not do

The package has no card or card-set type, and it does not turn cards into evaluation codes. It has no ready-made evaluators for particular games such as hold'em, Omaha or stud, and no command-line tool. To evaluate hands, subclass `PokerHandEvaluator` and implement `evaluate_hand`, `hand_size`, `board_size` and `evaluation_size`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Examples

Ranks and suits:

```python
from nitpoker.rank import Rank
from nitpoker.suit import Suit

print(Rank("T"), Rank(12))             # T A
print(Rank("3") > Rank("2"))           # True
print(Suit("h"), Suit(3))              # h s
```

Evaluation codes and pot shares:

```python
from nitpoker.poker_evaluation import HandType, PokerEvaluation
from nitpoker.poker_hand_evaluation import PokerHandEvaluation, shares

pair_of_aces = PokerEvaluation((HandType.ONE_PAIR << 24) | (12 << 20) | 0xE00)
print(pair_of_aces.major_rank, HandType(pair_of_aces.type).name)   # A ONE_PAIR

a = PokerHandEvaluation(PokerEvaluation(0x1000000))
b = PokerHandEvaluation(PokerEvaluation(0x0000001))
print(shares(a, b))                    # 1.0
```

A minimal evaluator and a showdown:

```python
from nitpoker.poker_evaluation import PokerEvaluation
from nitpoker.poker_hand_evaluation import PokerHandEvaluation
from nitpoker.poker_hand_evaluator import EquityResult, PokerHandEvaluator

class ScoreEvaluator(PokerHandEvaluator):
    def evaluate_hand(self, hand, board=None):
        return PokerHandEvaluation(PokerEvaluation(hand))
    def hand_size(self):
        return 1
    def board_size(self):
        return 0
    def evaluation_size(self):
        return 1

results = [EquityResult(), EquityResult(), EquityResult()]
ScoreEvaluator().evaluate_showdown([5, 9, 9], None, results)
print([r.tie_shares for r in results])  # [0.0, 0.5, 0.5]
```

Combinations:

```python
from nitpoker.combinations import Combinations

combos = Combinations(5, 3)
while True:
    print(list(combos))
    if not combos.advance():
        break
```

## Running the tests

```
pytest
```