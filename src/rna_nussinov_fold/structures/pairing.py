from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pair:
    """
    Immutable (i, j) index pair of a base pair in a folded structure.

    Parameters
    ----------
    base_i : int
        Left index (0-based), the '(' position.
    base_j : int
        Right index (0-based), the ')' position; `base_j > base_i`.
    """
    base_i: int
    base_j: int

    @property
    def span(self) -> int:
        """Inclusive number of positions covered by the pair, `j - i + 1`."""
        return self.base_j - self.base_i + 1

    @property
    def loop_len(self) -> int:
        """Number of nucleotides enclosed by the pair, `j - i - 1`."""
        return self.base_j - self.base_i - 1

    def as_tuple(self) -> tuple[int, int]:
        return self.base_i, self.base_j

    def crosses(self, other: Pair) -> bool:
        """
        Return True if the two pairs cross (form a pseudoknot).

        Pairs (i, j) and (k, l) cross when exactly one endpoint of one pair
        lies strictly inside the other: `i < k < j < l` or `k < i < l < j`.
        """
        i, j = self.base_i, self.base_j
        k, l = other.base_i, other.base_j
        return (i < k < j < l) or (k < i < l < j)
