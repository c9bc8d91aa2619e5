"""Stepping through all k-subsets of the indices below n."""

from typing import Iterator


class Combinations:
    """The current k-combination of ``range(n)``, advanced in lexicographic order.

    The object starts at ``0, 1, ..., k-1``; :meth:`advance` moves to the next
    combination and returns False once there is none left.
    """

    def __init__(self, n: int, k: int) -> None:
        self._n = n
        self._k = k
        self._indices = list(range(k))
        self._did_null = True

    def reset(self, n: int, k: int) -> None:
        """Switch to choosing ``k`` of ``n`` and restart at the first combination."""
        self._n = n
        self._k = k
        self._indices = list(range(k))

    def rewind(self) -> None:
        """Restart at the first combination with the same ``n`` and ``k``."""
        self._indices = list(range(self._k))
        self._did_null = True

    def advance(self) -> bool:
        """Move to the next combination; return False when exhausted."""
        if self._k == 0:
            self._did_null = not self._did_null
            return self._did_null

        n, k, idx = self._n, self._k, self._indices
        pos = next((i for i in reversed(range(k)) if idx[i] < n - k + i), None)
        if pos is None:
            return False
        idx[pos] += 1
        for j in range(pos + 1, k):
            idx[j] = idx[j - 1] + 1
        return True

    def mask(self) -> int:
        """Bit mask with the bits of the current indices set."""
        result = 0
        for i in self._indices:
            result |= 1 << i
        return result

    def __getitem__(self, i: int) -> int:
        return self._indices[i]

    def __len__(self) -> int:
        return self._k

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._indices))

    def __str__(self) -> str:
        return "".join(f"{i} " for i in self._indices)

    def __repr__(self) -> str:
        return f"Combinations(n={self._n}, k={self._k}, indices={self._indices})"