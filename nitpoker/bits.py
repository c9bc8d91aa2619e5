"""Bit tricks on integer masks, including rank masks with a swinging ace."""

from .errors import DomainError

_ACE_BIT = 1 << 12


def lastbit(v: int) -> int:
    """Return the index of the lowest set bit of a positive integer."""
    if v <= 0:
        raise DomainError(f"lastbit needs a positive value, got {v}")
    return (v & -v).bit_length() - 1


def lastbit64(v: int) -> int:
    """Return the index of the lowest set bit of a 64-bit value."""
    return lastbit(v)


def bottom_ranks(x: int, n: int) -> int:
    """Keep at most the ``n`` lowest set bits of ``x``."""
    result = 0
    for _ in range(n):
        if x == 0:
            break
        low = x & -x
        result |= low
        x ^= low
    return result


def flip_ace(ranks: int) -> int:
    """Move the ace bit of a 13-bit rank mask from the top to the bottom."""
    return ((ranks & ~_ACE_BIT) << 1) | ((ranks >> 12) & 0x01)


def unflip_ace(ranks: int) -> int:
    """Undo :func:`flip_ace`, moving the ace bit back to the top."""
    return (ranks >> 1) | ((ranks & 0x01) << 12)