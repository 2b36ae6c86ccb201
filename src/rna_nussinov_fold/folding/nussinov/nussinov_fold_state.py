from __future__ import annotations
from dataclasses import dataclass

from rna_nussinov_fold.rules import CANONICAL_RULE, MIN_HAIRPIN_UNPAIRED, BasePairRule
from rna_nussinov_fold.structures import NussinovScoreMatrix


@dataclass(frozen=True, slots=True)
class NussinovFoldState:
    """
    Holds the score matrix of one fold together with the rules it was filled under.

    The traceback must replay the recurrence with the same pairing rule and
    minimum loop size that filled the matrix, so they travel together. The
    matrix itself is mutable and owned exclusively by this fold.

    Attributes
    ----------
    score_matrix : NussinovScoreMatrix
        Maximum pair counts for every interval `(i, j)`, `i <= j`.
    rule : BasePairRule
        The pairing rule used to fill the matrix.
    min_hairpin_unpaired : int
        Minimum number of nucleotides a pair must enclose.
    """
    score_matrix: NussinovScoreMatrix
    rule: BasePairRule = CANONICAL_RULE
    min_hairpin_unpaired: int = MIN_HAIRPIN_UNPAIRED

    @property
    def seq_len(self) -> int:
        return self.score_matrix.size

    @property
    def score(self) -> int:
        return self.score_matrix.score


def make_fold_state(
    seq_len: int,
    rule: BasePairRule = CANONICAL_RULE,
    min_hairpin_unpaired: int = MIN_HAIRPIN_UNPAIRED,
) -> NussinovFoldState:
    """
    Allocates a zero-filled score matrix for a sequence of length `seq_len`.

    Zero is the base case for every interval too short to enclose a pair
    (single nucleotides and adjacent pairs with the default loop size), so
    no further initialization is needed.

    Parameters
    ----------
    seq_len : int
        The length of the RNA sequence (N).
    rule : BasePairRule, optional
        The pairing rule the matrix will be filled with.
    min_hairpin_unpaired : int, optional
        Minimum number of nucleotides enclosed by any pair. Must be >= 0.

    Returns
    -------
    NussinovFoldState
        A new state object with an N x N zero matrix.
    """
    if min_hairpin_unpaired < 0:
        raise ValueError(f"min_hairpin_unpaired must be >= 0, got {min_hairpin_unpaired}")

    return NussinovFoldState(
        score_matrix=NussinovScoreMatrix(seq_len),
        rule=rule,
        min_hairpin_unpaired=min_hairpin_unpaired,
    )
