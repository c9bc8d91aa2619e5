"""Card suits and the ways of displaying them."""

from enum import IntEnum
from functools import total_ordering

from .errors import InvalidArgument, ParseError

NUM_SUIT = 4
SUIT_CHARS = "cdhs"


class SuitDisplay(IntEnum):
    """How suits are turned into text."""

    ASCII = 1
    ASCII_EXTENDED = 2
    HTML = 3
    HTML_2COLOR = 4
    HTML_4COLOR = 5
    PREFLOP_CANNON = 6
    ANSI_EXT_COLOR = 7
    UNICODE = 8


_display = SuitDisplay.ASCII

_ASCII = ("c", "d", "h", "s")
_ASCII_EXTENDED = ("\x05", "\x04", "\x03", "\x06")
_ANSI_EXT = (
    "\033[32m\x05\033[0m",
    "\033[36m\x04\033[0m",
    "\033[31m\x03\033[0m",
    "\033[33m\x06\033[0m",
)
_UNICODE = (
    "\033[32mc\033[0m",
    "\033[36md\033[0m",
    "\033[31mh\033[0m",
    "\033[33ms\033[0m",
)
_HTML = ("&clubs;", "&diams;", "&hearts;", "&spades;")
_HTML_4COLOR = ("#008000", "#3333FF", "#FF0000", "#000000")
_HTML_2COLOR = ("#000000", "#FF0000", "#FF0000", "#000000")


def set_suit_display(display: SuitDisplay) -> None:
    """Set the display used when suits are converted with ``str``."""
    global _display
    _display = SuitDisplay(display)


def get_suit_display() -> SuitDisplay:
    """Return the display currently used by ``str`` on suits."""
    return _display


def suit_code(c: str) -> int | None:
    """Return the suit code (0 clubs .. 3 spades) of a suit character, or None."""
    if len(c) != 1:
        return None
    code = SUIT_CHARS.find(c.lower())
    return code if code >= 0 else None


def is_suit_char(c: str) -> bool:
    """Tell whether ``c`` is one of ``cdhsCDHS``."""
    return suit_code(c) is not None


def _font(color: str, code: int) -> str:
    return f"<font color={color}>{_HTML[code]}</font>"


@total_ordering
class Suit:
    """A card suit, ordered clubs < diamonds < hearts < spades.

    Built from a string, only its first character is read and must be one
    of ``cdhsCDHS``.  Built from an integer, the character codes of suit
    characters are read as those characters and any other byte is kept
    as the code itself; codes beyond spades show as ``?``.
    """

    __slots__ = ("_code",)

    def __init__(self, value: "str | int | Suit" = 0) -> None:
        if isinstance(value, Suit):
            self._code = value._code
        elif isinstance(value, str):
            if not value:
                raise ParseError("empty suit string")
            code = suit_code(value[0])
            if code is None:
                raise ParseError(f"invalid suit character: {value[0]!r}")
            self._code = code
        elif isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= 0xFF:
                raise InvalidArgument(f"suit code out of range: {value}")
            code = suit_code(chr(value))
            self._code = value if code is None else code
        else:
            raise InvalidArgument(f"cannot make a suit from {value!r}")

    @property
    def code(self) -> int:
        """The internal suit code, 0 for clubs through 3 for spades."""
        return self._code

    @property
    def bit(self) -> int:
        """The suit as a bit, three bit positions apart per suit."""
        return 1 << (self._code * 3)

    def render(self, display: SuitDisplay) -> str:
        """Return the suit as text in the given display."""
        c = self._code
        valid = 0 <= c < NUM_SUIT
        display = SuitDisplay(display)
        if display == SuitDisplay.ASCII:
            return _ASCII[c] if valid else "?"
        if display == SuitDisplay.ASCII_EXTENDED:
            return _ASCII_EXTENDED[c] if valid else "?"
        if display == SuitDisplay.HTML:
            return _HTML[c] if valid else "?"
        if display == SuitDisplay.HTML_2COLOR:
            return _font(_HTML_2COLOR[c], c) if valid else "?"
        if display == SuitDisplay.HTML_4COLOR:
            return _font(_HTML_4COLOR[c], c) if valid else "?"
        if display == SuitDisplay.ANSI_EXT_COLOR:
            return _ANSI_EXT[c] if valid else "#"
        if display == SuitDisplay.UNICODE:
            return _UNICODE[c] if valid else "#"
        return "?"

    def __str__(self) -> str:
        return self.render(_display)

    def __repr__(self) -> str:
        return f"Suit({self._code})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other: "Suit") -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)


CLUBS = Suit(0)
DIAMONDS = Suit(1)
HEARTS = Suit(2)
SPADES = Suit(3)