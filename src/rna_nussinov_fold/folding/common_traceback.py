from __future__ import annotations
from dataclasses import dataclass
from typing import List, Set, Tuple

from rna_nussinov_fold.structures import Pair


@dataclass(frozen=True, slots=True)
class TraceResult:
    """
    The outcome of a traceback: base pairs and their dot-bracket rendering.

    Attributes
    ----------
    pairs : List[Pair]
        Base pairs `(i, j)` with `i < j`, sorted by the 5' index.
    dot_bracket : str
        The dot-bracket string, one symbol per sequence position.
    """
    pairs: List[Pair]
    dot_bracket: str


def pairs_to_dotbracket(seq_len: int, pairs: List[Pair]) -> str:
    """
    Converts a list of nested base pairs into a dot-bracket string.

    Parameters
    ----------
    seq_len : int
        The total length of the RNA sequence.
    pairs : List[Pair]
        The base pairs of the structure.

    Returns
    -------
    str
        '(' and ')' at paired positions, '.' elsewhere.
    """
    chars = ['.'] * seq_len
    for pr in pairs:
        i, j = pr.base_i, pr.base_j
        if 0 <= i < j < seq_len:
            chars[i] = '('
            chars[j] = ')'
    return ''.join(chars)


def dotbracket_to_pairs(db: str) -> Set[Tuple[int, int]]:
    """
    Parses a dot-bracket string into a set of `(i, j)` base pairs.

    Unmatched closing brackets are ignored, as are unclosed opening ones.
    """
    stack: List[int] = []
    out: Set[Tuple[int, int]] = set()
    for idx, ch in enumerate(db):
        if ch == '(':
            stack.append(idx)
        elif ch == ')':
            if stack:
                i = stack.pop()
                out.add((i, idx))
    return out


def is_well_nested(db: str) -> bool:
    """
    Return True if every '(' has exactly one matching ')' to its right.

    Reading left to right, the running count of open brackets must never go
    negative and must end at zero.
    """
    open_count = 0
    for ch in db:
        if ch == '(':
            open_count += 1
        elif ch == ')':
            open_count -= 1
            if open_count < 0:
                return False
    return open_count == 0
