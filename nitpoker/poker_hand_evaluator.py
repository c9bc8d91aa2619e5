"""Abstract hand evaluator and showdown share accounting."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence

from .errors import InvalidArgument
from .poker_evaluation import PokerEvaluation
from .poker_hand_evaluation import PokerHandEvaluation

PREFLOP = 0
FLOP = 1
TURN = 2
RIVER = 3
BOARD_SIZE = 5
NUM_FLOP_CARDS = 3
NUM_TURN_CARDS = 4
NUM_RIVER_CARDS = 5
NUM_HOLDEM_POCKET = 2
NUM_HOLDEM_ROUNDS = 4


@dataclass
class EquityResult:
    """Accumulated pot shares for one player."""

    win_shares: float = 0.0
    tie_shares: float = 0.0
    equity: float = 0.0
    equity2: float = 0.0

    def __iadd__(self, other: "EquityResult") -> "EquityResult":
        self.win_shares += other.win_shares
        self.tie_shares += other.tie_shares
        return self

    def __str__(self) -> str:
        return (
            f"{self.win_shares:f} {self.tie_shares:f} "
            f"{self.equity:f} {self.equity2:f}"
        )


class PokerHandEvaluator(ABC):
    """Base class of the game-specific hand evaluators."""

    def __init__(self) -> None:
        self._use_suits = True

    @abstractmethod
    def evaluate_hand(self, hand: Any, board: Any = None) -> PokerHandEvaluation:
        """Evaluate a hand against an optional board."""

    def evaluate(self, hand: Any, board: Any = None) -> PokerHandEvaluation:
        """Same as :meth:`evaluate_hand`."""
        return self.evaluate_hand(hand, board)

    def eval(self, hand: Any, board: Any = None) -> PokerEvaluation:
        """The high evaluation only, for games without a split pot."""
        return self.evaluate_hand(hand, board).high

    @abstractmethod
    def hand_size(self) -> int:
        """The largest number of cards in a player's hand."""

    @abstractmethod
    def board_size(self) -> int:
        """The largest number of board cards."""

    @abstractmethod
    def evaluation_size(self) -> int:
        """1 for high-only games, 2 for high-low games."""

    def num_draws(self) -> int:
        """Number of draws in draw games."""
        return 0

    def set_num_draws(self, n: int) -> None:
        """Set the number of draws; games without draws ignore it."""

    def evaluate_ranks(self, hand: Any, board: Any = None) -> PokerEvaluation:
        """Evaluation of the ranks alone."""
        return self.evaluate_hand(hand, board).eval(0)

    def evaluate_suits(self, hand: Any, board: Any = None) -> PokerEvaluation:
        """Evaluation of the suits alone."""
        return self.evaluate_hand(hand, board).eval(0)

    def uses_suits(self) -> bool:
        """Whether suits take part in the evaluation."""
        return self._use_suits

    def use_suits(self, use: bool) -> None:
        """Turn suit evaluation on or off."""
        self._use_suits = bool(use)

    def evaluate_showdown(
        self,
        hands: Sequence[Any],
        board: Any,
        result: Sequence[EquityResult],
        weight: float = 1.0,
    ) -> list[PokerHandEvaluation]:
        """Award pot shares for one showdown, accumulating into ``result``.

        The number of players is ``len(result)``; ``hands`` may hold more
        entries than that.  Returns the evaluation of each player's hand.
        """
        nplayers = len(result)
        if nplayers == 0:
            raise InvalidArgument("a showdown needs at least one player")
        if len(hands) < nplayers:
            raise InvalidArgument(
                f"{len(hands)} hands given for {nplayers} players"
            )

        evals = [self.evaluate_hand(hand, board) for hand in hands[:nplayers]]
        nevals = 2 if any(e.eval(1) > PokerEvaluation(0) for e in evals) else 1

        for n in range(nevals):
            scores = [e.eval(n) for e in evals]
            best = max(scores)
            winners = [i for i, s in enumerate(scores) if s == best]
            if len(winners) == 1:
                result[winners[0]].win_shares += weight / nevals
            else:
                for i in winners:
                    result[i].tie_shares += weight / (len(winners) * nevals)
        return evals