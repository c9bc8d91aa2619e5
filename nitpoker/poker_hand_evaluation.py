"""A bundle of one or two evaluations for a hand, and pot sharing between two."""

from dataclasses import dataclass, field

from .poker_evaluation import PokerEvaluation


@dataclass(frozen=True)
class PokerHandEvaluation:
    """The high evaluation of a hand and, in split-pot games, the low one."""

    high: PokerEvaluation = field(default_factory=PokerEvaluation)
    low: PokerEvaluation = field(default_factory=PokerEvaluation)

    @property
    def highlow(self) -> bool:
        """Whether a low evaluation is present."""
        return self.low != PokerEvaluation()

    @property
    def empty(self) -> bool:
        """Whether the high evaluation is the empty code."""
        return self.high == PokerEvaluation(0)

    def eval(self, n: int = 0) -> PokerEvaluation:
        """Return the high evaluation for ``n == 0``, otherwise the low one."""
        return self.high if n == 0 else self.low

    def __str__(self) -> str:
        if self.highlow:
            return f"{self.high}\n{self.low}"
        return str(self.high)


def shares(hero: PokerHandEvaluation, villain: PokerHandEvaluation) -> float:
    """Fraction of the pot hero wins against villain; -1.0 if undecidable."""
    hh, vh = hero.high, villain.high
    if not hero.highlow and not villain.highlow:
        if hh > vh:
            return 1.0
        if hh < vh:
            return 0.0
        return 0.5

    hl, vl = hero.low, villain.low
    if hh > vh and hl > vl:
        return 1.0
    if hh < vh and hl < vl:
        return 0.0
    if (hh > vh and hl < vl) or (hh < vh and hl > vl) or (hh == vh and hl == vl):
        return 0.5
    if (hh == vh and hl > vl) or (hh > vh and hl == vl):
        return 0.75
    if (hh == vh and hl < vl) or (hh < vh and hl == vl):
        return 0.25
    return -1.0