"""Order-preserving integer encoding of poker hand evaluations.

The code is laid out bitwise as::

    .... TTTT MMMMmmmm BBAkkkkk kkkkkkkk

with T the hand type, M the major rank, m the minor rank, A the
ace-plays-low bit, k the kicker set and B the badugi bits.  Lowball
evaluations are flipped (subtracted from the largest 32-bit signed
integer) so that better hands still compare greater.
"""

from enum import IntEnum
from functools import total_ordering

from .bits import lastbit
from .rank import NUM_RANK, Rank


class HandType(IntEnum):
    """Hand categories, in increasing order of strength."""

    NO_PAIR = 0
    ONE_PAIR = 1
    THREE_FLUSH = 2
    THREE_STRAIGHT = 3
    TWO_PAIR = 4
    THREE_OF_A_KIND = 5
    THREE_STRAIGHT_FLUSH = 6
    STRAIGHT = 7
    FLUSH = 8
    FULL_HOUSE = 9
    FOUR_OF_A_KIND = 10
    STRAIGHT_FLUSH = 11


NUM_EVAL_TYPES = 12
FULL_HAND_SIZE = 5
MAX_EVAL_HAND_SIZE = 7

VSHIFT = 24
MAJOR_SHIFT = 20
MINOR_SHIFT = 16
ACE_LOW_BIT = 1 << NUM_RANK
KICKER_MASK = 0x1FFF

_MAJOR_MASK = 0xF << MAJOR_SHIFT
_MINOR_MASK = 0xF << MINOR_SHIFT
_INT_MAX = 0x7FFFFFFF

_CANNON = {
    HandType.NO_PAIR: ("high card:    ", ("kickers",)),
    HandType.ONE_PAIR: ("one pair:     ", ("top", "kickers")),
    HandType.THREE_FLUSH: ("three flush:  ", ("kickers",)),
    HandType.THREE_STRAIGHT: ("three str8:   ", ("top",)),
    HandType.TWO_PAIR: ("two pair:     ", ("top", "bot", "kickers")),
    HandType.THREE_OF_A_KIND: ("trips:        ", ("top", "kickers")),
    HandType.THREE_STRAIGHT_FLUSH: ("3 str8 flush: ", ("top",)),
    HandType.STRAIGHT: ("straight:     ", ("top",)),
    HandType.FLUSH: ("flush:        ", ("kickers",)),
    HandType.FULL_HOUSE: ("full house:   ", ("top", "bot")),
    HandType.FOUR_OF_A_KIND: ("quads:        ", ("top", "kickers")),
    HandType.STRAIGHT_FLUSH: ("str8 flush:   ", ("top",)),
}


def _top_rank(mask: int) -> int:
    """Index of the highest set bit, 0 for an empty mask."""
    return mask.bit_length() - 1 if mask else 0


def _bottom_rank(mask: int) -> int:
    """Index of the lowest set bit, 0 for an empty mask."""
    return lastbit(mask) if mask else 0


@total_ordering
class PokerEvaluation:
    """A hand evaluation whose integer code orders hands from worst to best."""

    __slots__ = ("_code",)

    def __init__(self, code: int = 0) -> None:
        self._code = int(code)

    @property
    def code(self) -> int:
        """The raw integer code."""
        return self._code

    @property
    def type(self) -> int:
        """The hand type, one of :class:`HandType` for unflipped codes."""
        return self._code >> VSHIFT

    @property
    def kicker_bits(self) -> int:
        """Bit mask of the kickers."""
        return self._code & KICKER_MASK

    @property
    def major_rank(self) -> Rank:
        """The primary rank, e.g. the trips of a full house."""
        return Rank((self._code >> MAJOR_SHIFT) & 0x0F)

    @property
    def minor_rank(self) -> Rank:
        """The secondary rank, e.g. the pair of a full house."""
        return Rank((self._code >> MINOR_SHIFT) & 0x0F)

    @property
    def ace_plays_low(self) -> bool:
        """Whether the ace is encoded below the deuce."""
        return bool(self._code & ACE_LOW_BIT)

    def _set_kicker_bits(self, k: int) -> None:
        self._code = (self._code & ~KICKER_MASK) | k

    def _set_major_rank(self, r: int) -> None:
        self._code = (self._code & ~_MAJOR_MASK) | (r << MAJOR_SHIFT)

    def _set_minor_rank(self, r: int) -> None:
        self._code = (self._code & ~_MINOR_MASK) | (r << MINOR_SHIFT)

    def _flip(self) -> None:
        self._code = _INT_MAX - self._code

    def _flipped(self) -> "PokerEvaluation":
        return PokerEvaluation(_INT_MAX - self._code)

    @property
    def _is_flipped(self) -> bool:
        return self._code > _INT_MAX >> 1

    def showdown_code(self) -> int:
        """Code with kickers of sets and the minor rank of full houses stripped."""
        if self._code == 0:
            return 0
        t = self.type
        if t in (HandType.FULL_HOUSE, HandType.THREE_OF_A_KIND, HandType.FOUR_OF_A_KIND):
            minor = 1 if t == HandType.FULL_HOUSE and self.major_rank == Rank(0) else 0
            e = PokerEvaluation(self._code)
            e._set_minor_rank(minor)
            e._set_kicker_bits(0)
            return e.code
        return self._code

    def reduced_code(self) -> int:
        """Showdown code keeping only the two most significant kickers."""
        if self._is_flipped:
            return self._flipped().reduced_code_2to7()
        if self._code == 0:
            return 0
        t = self.type
        if t in (HandType.NO_PAIR, HandType.ONE_PAIR, HandType.THREE_FLUSH, HandType.FLUSH):
            kickers = self.kicker_bits
            kick1 = _top_rank(kickers)
            kick2 = _top_rank(kickers ^ (1 << kick1))
            e = PokerEvaluation(self._code)
            e._set_kicker_bits((1 << kick1) | (1 << kick2))
            return e.code
        if t in (HandType.FULL_HOUSE, HandType.THREE_OF_A_KIND, HandType.FOUR_OF_A_KIND):
            return self.showdown_code()
        return self._code

    def reduced_code_2to7(self) -> int:
        """Reduced, flipped code for deuce-to-seven lowball comparisons."""
        if self._code == 0:
            return 0
        t = self.type
        kickers = self.kicker_bits
        if t == HandType.NO_PAIR:
            kick1 = _top_rank(kickers)
            kick2 = _top_rank(kickers ^ (1 << kick1))
            kick3 = _top_rank(kickers ^ (1 << kick1) ^ (1 << kick2))
            kbits = (1 << kick1) | (1 << kick2)
            if kick1 < 10:
                kbits |= 1 << kick3
            e = PokerEvaluation(self._code)
            e._set_kicker_bits(kbits)
        elif t == HandType.THREE_OF_A_KIND:
            first = _bottom_rank(kickers)
            second = _bottom_rank(kickers ^ (1 << first))
            r0, r1, r2 = sorted((first, second, self.major_rank.code))
            e = PokerEvaluation(
                (HandType.TWO_PAIR << VSHIFT)
                ^ (r2 << MAJOR_SHIFT)
                ^ (r1 << MINOR_SHIFT)
                ^ (1 << r0)
            )
        elif t == HandType.ONE_PAIR:
            low = []
            for _ in range(3):
                bit = lastbit(kickers)
                low.append(bit)
                kickers ^= 1 << bit
            r0, r1, r2, _r3 = sorted(low + [self.major_rank.code])
            e = PokerEvaluation(
                (HandType.ONE_PAIR << VSHIFT) ^ (r2 << MAJOR_SHIFT) ^ (1 << r0) ^ (1 << r1)
            )
        elif t == HandType.TWO_PAIR:
            r0, r1, r2 = sorted(
                (lastbit(kickers), self.minor_rank.code, self.major_rank.code)
            )
            e = PokerEvaluation(
                (HandType.TWO_PAIR << VSHIFT)
                ^ (r2 << MAJOR_SHIFT)
                ^ (r1 << MINOR_SHIFT)
                ^ (1 << r0)
            )
        elif t == HandType.FLUSH:
            e = PokerEvaluation(self._code)
            e._set_kicker_bits(1 << _top_rank(kickers))
        elif t == HandType.FULL_HOUSE:
            r0, r1 = sorted((self.minor_rank.code, self.major_rank.code))
            e = PokerEvaluation(
                (HandType.FULL_HOUSE << VSHIFT) ^ (r1 << MAJOR_SHIFT) ^ (r0 << MINOR_SHIFT)
            )
        elif t == HandType.FOUR_OF_A_KIND:
            e = PokerEvaluation(
                (HandType.FOUR_OF_A_KIND << VSHIFT)
                ^ (self.major_rank.code << MAJOR_SHIFT)
                ^ (1 << lastbit(kickers))
            )
        else:
            return self._code
        e._flip()
        return e.code

    def fix_wheel_2to7(self, rank_mask: int) -> None:
        """Turn a five-high straight (flush) into a no-pair (flush) hand."""
        if self.major_rank == Rank(3):
            if self.type == HandType.STRAIGHT:
                self._code = (HandType.NO_PAIR << VSHIFT) ^ rank_mask
            elif self.type == HandType.STRAIGHT_FLUSH:
                self._code = (HandType.FLUSH << VSHIFT) ^ rank_mask

    def play_ace_low(self) -> None:
        """Re-encode the evaluation with the ace ranked below the deuce."""
        if self.ace_plays_low:
            return
        self._code |= ACE_LOW_BIT
        kickers = self.kicker_bits << 1
        if kickers & ACE_LOW_BIT:
            kickers += 1
        self._set_kicker_bits(kickers)

        t = self.type
        if t in (HandType.TWO_PAIR, HandType.FULL_HOUSE):
            self._set_minor_rank((self.minor_rank.code + 1) % NUM_RANK)
        if t in (
            HandType.TWO_PAIR,
            HandType.FULL_HOUSE,
            HandType.ONE_PAIR,
            HandType.THREE_OF_A_KIND,
            HandType.STRAIGHT,
            HandType.FOUR_OF_A_KIND,
            HandType.STRAIGHT_FLUSH,
        ):
            self._set_major_rank((self.major_rank.code + 1) % NUM_RANK)

    def play_ace_high(self) -> None:
        """Move an ace-low kicker set back to ace high."""
        if not self.ace_plays_low:
            return
        self._code ^= ACE_LOW_BIT
        kickers = self.kicker_bits
        if kickers & 0x01:
            kickers |= ACE_LOW_BIT
        self._set_kicker_bits(kickers >> 1)

    def _rank_string(self, r: int) -> str:
        if self.ace_plays_low:
            r = NUM_RANK - 1 if r == 0 else r - 1
        return str(Rank(r))

    def _part(self, part: str) -> str:
        n = self._code
        if part == "top":
            return self._rank_string((n >> MAJOR_SHIFT) & 0x0F)
        if part == "bot":
            return self._rank_string((n >> MINOR_SHIFT) & 0x0F)
        return "".join(
            self._rank_string(i) for i in reversed(range(NUM_RANK)) if n & (1 << i)
        )

    def to_string_cannon(self) -> str:
        """Fixed-width description: hand label followed by the ranks."""
        if self._is_flipped:
            return self._flipped().to_string_cannon()
        label, parts = _CANNON.get(self._code >> VSHIFT, ("", ()))
        ranks = "".join(self._part(p) for p in parts)
        return f"{label} {ranks:<5}"

    def bitstr(self) -> str:
        """The 32-bit code as bits, a space after every byte."""
        return "".join(
            ("1" if (self._code >> i) & 1 else "0") + (" " if i % 8 == 0 else "")
            for i in reversed(range(32))
        )

    def __str__(self) -> str:
        if self._code == 0:
            return ""
        if self._is_flipped:
            return str(self._flipped())
        return self.to_string_cannon()

    def __repr__(self) -> str:
        return f"PokerEvaluation({self._code:#x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PokerEvaluation):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other: "PokerEvaluation") -> bool:
        if not isinstance(other, PokerEvaluation):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)