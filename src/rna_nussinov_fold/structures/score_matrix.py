from __future__ import annotations
from typing import Iterator, Tuple

import numpy as np


class NussinovScoreMatrix:
    """
    The n x n maximum-pairing score table of a single fold.

    Cell `(i, j)` with `i <= j` holds the maximum number of base pairs that
    the subsequence `i..j` (inclusive) can form. Cells below the diagonal are
    never read or written; accessing them raises `IndexError`. All cells
    start at 0, which is also the correct value for every interval too short
    to enclose a pair.
    """
    __slots__ = ("_seq_len", "_cells")

    def __init__(self, seq_len: int):
        if seq_len < 0:
            raise ValueError(f"Sequence length must be non-negative, got {seq_len}")
        self._seq_len = seq_len
        self._cells = np.zeros((seq_len, seq_len), dtype=np.int64)

    @property
    def size(self) -> int:
        """Returns the sequence length N that defines the matrix dimensions."""
        return self._seq_len

    @property
    def shape(self) -> Tuple[int, int]:
        return self._seq_len, self._seq_len

    @property
    def score(self) -> int:
        """Optimal pair count of the whole sequence, `(0, N-1)`; 0 for an empty sequence."""
        if self._seq_len == 0:
            return 0
        return int(self._cells[0, self._seq_len - 1])

    def _check(self, base_i: int, base_j: int) -> None:
        if base_i < 0 or base_j < 0 or base_i >= self._seq_len or base_j >= self._seq_len or base_j < base_i:
            raise IndexError(f"ScoreMatrix invalid index: (i={base_i}, j={base_j}) for N={self._seq_len}")

    def get(self, base_i: int, base_j: int) -> int:
        """
        Retrieves the score at cell `(i, j)`.

        Parameters
        ----------
        base_i : int
            The row index (0-based).
        base_j : int
            The column index (0-based), `base_j >= base_i`.

        Returns
        -------
        int
            The stored pair count.
        """
        self._check(base_i, base_j)
        return int(self._cells[base_i, base_j])

    def get_interval(self, base_i: int, base_j: int) -> int:
        """
        Like `get`, but returns 0 for the empty interval `i == j + 1`.

        The recurrence reads the interior of a pair or the remainder after a
        pair, either of which may be empty.
        """
        if base_i == base_j + 1:
            return 0
        return self.get(base_i, base_j)

    def set(self, base_i: int, base_j: int, value: int) -> None:
        """Stores `value` at cell `(i, j)`."""
        self._check(base_i, base_j)
        self._cells[base_i, base_j] = value

    def as_array(self) -> np.ndarray:
        """Returns a read-only copy of the full square table."""
        view = self._cells.copy()
        view.setflags(write=False)
        return view

    def iter_upper_indices(self) -> Iterator[Tuple[int, int]]:
        """Yields all valid `(i, j)` with `j >= i` in row-major order."""
        n = self._seq_len
        for i in range(n):
            for j in range(i, n):
                yield i, j
