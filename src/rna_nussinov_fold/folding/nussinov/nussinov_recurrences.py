from __future__ import annotations
from dataclasses import dataclass
import time
import logging

from tqdm import tqdm

from rna_nussinov_fold.folding.nussinov.nussinov_fold_state import NussinovFoldState, make_fold_state
from rna_nussinov_fold.rules import CANONICAL_RULE, MIN_HAIRPIN_UNPAIRED, BasePairRule
from rna_nussinov_fold.structures import NussinovScoreMatrix
from rna_nussinov_fold.utils.iter_utils import iter_spans
from rna_nussinov_fold.utils.nucleotide_utils import ensure_rna_alphabet

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NussinovFoldingConfig:
    """
    Configuration settings for the maximum-pairing folding algorithm.

    Attributes
    ----------
    allow_wobble : bool
        If True, G-U wobble pairs count alongside the Watson-Crick pairs.
    min_hairpin_unpaired : int
        Minimum number of nucleotides enclosed by any pair. The default of 1
        forbids pairing a base with its immediate neighbour.
    verbose : bool
        If True, shows a progress bar over the matrix cells.
    """
    allow_wobble: bool = False
    min_hairpin_unpaired: int = MIN_HAIRPIN_UNPAIRED
    verbose: bool = False

    @property
    def rule(self) -> BasePairRule:
        return BasePairRule(allow_wobble=self.allow_wobble)


@dataclass(slots=True)
class NussinovFoldingEngine:
    """
    Fills the maximum base-pairing score matrix of an RNA sequence.

    Attributes
    ----------
    config : NussinovFoldingConfig
        Pairing rule, loop size and verbosity for the fill.
    """
    config: NussinovFoldingConfig

    def make_state(self, seq_len: int) -> NussinovFoldState:
        """Allocates a fold state matching this engine's configuration."""
        return make_fold_state(seq_len, self.config.rule, self.config.min_hairpin_unpaired)

    def fill_score_matrix(self, seq: str, state: NussinovFoldState) -> None:
        """
        Executes the maximum-pairing dynamic programming algorithm.

        Cells are filled by strictly increasing interval length so that every
        cell's dependencies are resolved before it is computed. Intervals too
        short to enclose a pair keep their initial score of 0.

        Parameters
        ----------
        seq : str
            The RNA sequence to fold, uppercase over {A, C, G, U}.
        state : NussinovFoldState
            The state object whose score matrix is filled in place.

        Raises
        ------
        SequenceValidationError
            If `seq` contains any symbol outside {A, C, G, U}.
        ValueError
            If the state was allocated for a different sequence length.
        """
        ensure_rna_alphabet(seq)

        n = len(seq)
        if state.seq_len != n:
            raise ValueError(f"Fold state is sized for N={state.seq_len}, sequence has N={n}")

        if n == 0:
            logger.info("Nussinov DP: empty sequence; nothing to fill.")
            return

        start_time = time.perf_counter()
        # Shortest j - i that can enclose a pair.
        min_span = state.min_hairpin_unpaired + 1
        total_cells = sum(n - span for span in range(min_span, n))

        logger.info(f"Nussinov DP for sequence length N={n} (wobble={state.rule.allow_wobble}, "
                    f"min loop={state.min_hairpin_unpaired})")
        logger.debug(f"Expected complexity: O(N³) ≈ {n ** 3:,} operations")

        show_progress = self.config.verbose
        cells = tqdm(iter_spans(n, min_span), total=total_cells, desc="Nussinov DP",
                     leave=False, disable=not show_progress)

        matrix = state.score_matrix
        for i, j in cells:
            matrix.set(i, j, self._best_score(seq, i, j, state))

        elapsed = time.perf_counter() - start_time
        logger.info(f"Nussinov DP completed in {elapsed:.2f}s ({elapsed * 1000:.0f}ms)")
        logger.info(f"Final score[0,{n - 1}] = {matrix.score} base pairs")

    @staticmethod
    def _best_score(seq: str, i: int, j: int, state: NussinovFoldState) -> int:
        """
        Computes score[i, j] as the maximum over the four recurrence cases.

        Notes
        -----
        1.  `score[i+1, j]`: base `i` unpaired.
        2.  `score[i, j-1]`: base `j` unpaired.
        3.  `score[i+1, j-1] + 1`: `i` pairs with `j`.
        4.  `score[i+1, k-1] + score[k+1, j] + 1` for `i < k < j`: `i` pairs
            with an interior `k`, the remainder `[k+1, j]` folds independently.
        """
        matrix = state.score_matrix
        rule = state.rule
        min_loop = state.min_hairpin_unpaired
        base_i = seq[i]

        best = max(matrix.get(i + 1, j), matrix.get(i, j - 1))

        if rule.is_pair(base_i, seq[j]):
            best = max(best, matrix.get_interval(i + 1, j - 1) + 1)

        for k in range(i + min_loop + 1, j):
            if not rule.is_pair(base_i, seq[k]):
                continue
            best = max(best, matrix.get_interval(i + 1, k - 1) + matrix.get(k + 1, j) + 1)

        return best


def fold_score(
    seq: str,
    rule: BasePairRule = CANONICAL_RULE,
    *,
    min_hairpin_unpaired: int = MIN_HAIRPIN_UNPAIRED,
) -> NussinovScoreMatrix:
    """
    Builds the filled score matrix of `seq` under `rule`.

    Parameters
    ----------
    seq : str
        Uppercase RNA sequence over {A, C, G, U}.
    rule : BasePairRule, optional
        Pairing rule; canonical Watson-Crick by default.
    min_hairpin_unpaired : int, optional
        Minimum number of nucleotides enclosed by any pair.

    Returns
    -------
    NussinovScoreMatrix
        The filled matrix; `.score` is the optimal pair count.
    """
    config = NussinovFoldingConfig(allow_wobble=rule.allow_wobble, min_hairpin_unpaired=min_hairpin_unpaired)
    engine = NussinovFoldingEngine(config=config)
    state = engine.make_state(len(seq))
    engine.fill_score_matrix(seq, state)
    return state.score_matrix
