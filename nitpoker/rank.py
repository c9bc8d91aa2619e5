"""Card ranks, deuce through ace."""

from functools import total_ordering

from .errors import InvalidArgument, ParseError

NUM_RANK = 13
RANK_CHARS = "23456789TJQKA"
_INVALID_CODE = 0xFF


def rank_code(c: str) -> int | None:
    """Return the rank code (0 for deuce .. 12 for ace) of a rank character, or None."""
    if len(c) != 1:
        return None
    code = RANK_CHARS.find(c.upper())
    if code < 0 or not (c.isdigit() or c.upper() in "TJQKA"):
        return None
    return code


def is_rank_char(c: str) -> bool:
    """Tell whether ``c`` is a valid rank character."""
    return rank_code(c) is not None


@total_ordering
class Rank:
    """A card rank ordered 2 < 3 < ... < K < A, with the ace always high.

    Built from a string, only its first character is read and must be one
    of ``23456789TJQKAtjqka``.  Built from an integer, values 0..12 are
    rank codes and the character codes of rank characters are read as
    those characters; any other byte gives a rank that shows as ``?``.
    """

    __slots__ = ("_code",)

    def __init__(self, value: "str | int | Rank" = 0) -> None:
        if isinstance(value, Rank):
            self._code = value._code
        elif isinstance(value, str):
            if not value:
                raise ParseError("empty rank string")
            code = rank_code(value[0])
            if code is None:
                raise ParseError(f"invalid rank character: {value[0]!r}")
            self._code = code
        elif isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= 0xFF:
                raise InvalidArgument(f"rank code out of range: {value}")
            if value < NUM_RANK:
                self._code = value
            else:
                code = rank_code(chr(value))
                self._code = _INVALID_CODE if code is None else code
        else:
            raise InvalidArgument(f"cannot make a rank from {value!r}")

    @property
    def code(self) -> int:
        """The internal rank code, 0 for deuce through 12 for ace."""
        return self._code

    @property
    def bit(self) -> int:
        """The rank as a single bit of a rank mask."""
        return 1 << self._code

    def __str__(self) -> str:
        if 0 <= self._code < NUM_RANK:
            return RANK_CHARS[self._code]
        return "?"

    def __repr__(self) -> str:
        return f"Rank({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other: "Rank") -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)