from __future__ import annotations
import logging
from typing import List, Set, Tuple

from rna_nussinov_fold.errors import TracebackInconsistencyError
from rna_nussinov_fold.folding.common_traceback import TraceResult, pairs_to_dotbracket
from rna_nussinov_fold.folding.nussinov.nussinov_back_pointer import NussinovBacktrackOp, NussinovBackPointer
from rna_nussinov_fold.folding.nussinov.nussinov_fold_state import NussinovFoldState
from rna_nussinov_fold.rules import MIN_HAIRPIN_UNPAIRED, BasePairRule
from rna_nussinov_fold.structures import NussinovScoreMatrix, Pair

logger = logging.getLogger(__name__)


def resolve_back_pointer(seq: str, state: NussinovFoldState, i: int, j: int) -> NussinovBackPointer:
    """
    Re-derives which recurrence case produced `score[i, j]`.

    Cases are tried in the fixed priority order unpaired-i, unpaired-j,
    direct pair (i, j), interior pair (i, k) by ascending `k`; the first one
    that reproduces the stored score wins. The order makes the traceback
    deterministic.

    A cell scoring 0 returns `NONE` before any case is tried: no structure of
    the interval holds a pair, so the unpaired-i chain that the case order
    would otherwise walk adds nothing to the result.

    Parameters
    ----------
    seq : str
        The folded RNA sequence.
    state : NussinovFoldState
        The filled fold state.
    i, j : int
        The interval, `i < j`.

    Returns
    -------
    NussinovBackPointer
        The winning case, with the partner `k` for an interior pair.

    Raises
    ------
    TracebackInconsistencyError
        If no case reproduces the stored score.
    """
    matrix = state.score_matrix
    rule = state.rule
    min_loop = state.min_hairpin_unpaired
    target = matrix.get(i, j)

    if target == 0:
        return NussinovBackPointer(operation=NussinovBacktrackOp.NONE)

    if target == matrix.get(i + 1, j):
        return NussinovBackPointer(operation=NussinovBacktrackOp.UNPAIRED_LEFT)

    if target == matrix.get(i, j - 1):
        return NussinovBackPointer(operation=NussinovBacktrackOp.UNPAIRED_RIGHT)

    if (j - i - 1 >= min_loop and rule.is_pair(seq[i], seq[j])
            and target == matrix.get_interval(i + 1, j - 1) + 1):
        return NussinovBackPointer(operation=NussinovBacktrackOp.PAIR)

    for k in range(i + min_loop + 1, j):
        if not rule.is_pair(seq[i], seq[k]):
            continue
        if target == matrix.get_interval(i + 1, k - 1) + matrix.get(k + 1, j) + 1:
            return NussinovBackPointer(operation=NussinovBacktrackOp.INTERIOR_PAIR, partner_k=k)

    raise TracebackInconsistencyError((i, j), target)


def traceback_nested(seq: str, state: NussinovFoldState) -> TraceResult:
    """
    Reconstructs an optimal nested structure for the entire sequence.

    Parameters
    ----------
    seq : str
        The RNA sequence that was folded.
    state : NussinovFoldState
        The filled fold state.

    Returns
    -------
    TraceResult
        The base pairs and the dot-bracket string. The number of pairs
        equals `state.score`.
    """
    if len(seq) == 0:
        return TraceResult(pairs=[], dot_bracket="")
    return _traceback_core(seq, state, seed=(0, len(seq) - 1))


def traceback_nested_interval(seq: str, state: NussinovFoldState, i: int, j: int) -> TraceResult:
    """
    Reconstructs an optimal nested structure for the subsequence `[i, j]` only.

    The dot-bracket string still spans the full sequence; positions outside
    `[i, j]` are left unpaired.
    """
    if not (0 <= i <= j < len(seq)):
        raise IndexError(f"Interval ({i}, {j}) outside sequence of length {len(seq)}")
    return _traceback_core(seq, state, seed=(i, j))


def _traceback_core(seq: str, state: NussinovFoldState, seed: Tuple[int, int]) -> TraceResult:
    """
    Stack-based traceback over shrinking intervals.

    An explicit stack of pending `(i, j)` intervals replaces recursion, so
    sequence length is not bounded by the interpreter's recursion limit.
    """
    seq_len = len(seq)
    if state.seq_len != seq_len:
        raise ValueError(f"Fold state is sized for N={state.seq_len}, sequence has N={seq_len}")

    pairs: Set[Pair] = set()
    stack: List[Tuple[int, int]] = [seed]

    while stack:
        i, j = stack.pop()
        if i >= j:
            continue

        back_ptr = resolve_back_pointer(seq, state, i, j)
        op = back_ptr.operation

        if op is NussinovBacktrackOp.PAIR:
            pairs.add(Pair(i, j))
        elif op is NussinovBacktrackOp.INTERIOR_PAIR:
            pairs.add(Pair(i, back_ptr.partner_k))

        stack.extend(back_ptr.children(i, j))

    ordered = sorted(pairs, key=lambda pr: (pr.base_i, pr.base_j))
    logger.debug(f"Traceback recovered {len(ordered)} pairs from interval {seed}")

    return TraceResult(pairs=ordered, dot_bracket=pairs_to_dotbracket(seq_len, ordered))


def reconstruct(
    seq: str,
    matrix: NussinovScoreMatrix,
    rule: BasePairRule,
    *,
    min_hairpin_unpaired: int = MIN_HAIRPIN_UNPAIRED,
) -> str:
    """
    Dot-bracket structure for a score matrix filled by `fold_score` with the same `rule`.

    Parameters
    ----------
    seq : str
        The folded RNA sequence.
    matrix : NussinovScoreMatrix
        The filled score matrix.
    rule : BasePairRule
        The pairing rule the matrix was filled with.
    min_hairpin_unpaired : int, optional
        The minimum loop size the matrix was filled with.

    Returns
    -------
    str
        The folding structure in dot-bracket notation.
    """
    state = NussinovFoldState(score_matrix=matrix, rule=rule, min_hairpin_unpaired=min_hairpin_unpaired)
    return traceback_nested(seq, state).dot_bracket
