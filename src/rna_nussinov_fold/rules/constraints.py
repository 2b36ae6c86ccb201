from __future__ import annotations
from dataclasses import dataclass
from typing import Final

# Minimum number of unpaired nucleotides enclosed by a base pair.
# With 1, a base can pair with neither itself nor its immediate neighbour.
MIN_HAIRPIN_UNPAIRED: Final[int] = 1

# ---- Pairing rules (RNA) -----------------------------------------------------

# Watson-Crick pairs, both orientations for quick membership checks.
WATSON_CRICK_PAIRS: Final[frozenset[str]] = frozenset({"AU", "UA", "GC", "CG"})

# G-U wobble pairs, only accepted when the rule enables them.
WOBBLE_PAIRS: Final[frozenset[str]] = frozenset({"GU", "UG"})


@dataclass(frozen=True, slots=True)
class BasePairRule:
    """
    Decides whether two nucleotides may form a base pair.

    The canonical rule accepts the Watson-Crick pairs A-U and G-C. With
    `allow_wobble` the G-U wobble pair is accepted as well, which can only
    raise (never lower) the optimal pair count of a sequence.

    Attributes
    ----------
    allow_wobble : bool
        If True, G-U and U-G are accepted in addition to the Watson-Crick pairs.
    """
    allow_wobble: bool = False

    @property
    def allowed_pairs(self) -> frozenset[str]:
        """Two-letter keys of every accepted pair, both orientations."""
        if self.allow_wobble:
            return WATSON_CRICK_PAIRS | WOBBLE_PAIRS
        return WATSON_CRICK_PAIRS

    def is_pair(self, base_i: str, base_j: str) -> bool:
        """
        Return True if `base_i` and `base_j` can base pair under this rule.

        Parameters
        ----------
        base_i, base_j : str
            Single uppercase nucleotides, expected in {A, C, G, U}.

        Returns
        -------
        bool
            False for any non-string, multi-character or unknown symbol.
        """
        if not isinstance(base_i, str) or not isinstance(base_j, str):
            return False

        if len(base_i) != 1 or len(base_j) != 1:
            return False

        return (base_i + base_j) in self.allowed_pairs


CANONICAL_RULE: Final[BasePairRule] = BasePairRule(allow_wobble=False)
WOBBLE_RULE: Final[BasePairRule] = BasePairRule(allow_wobble=True)


def can_pair(base_i: str, base_j: str, allow_wobble: bool = False) -> bool:
    """Shortcut for `BasePairRule(allow_wobble).is_pair(base_i, base_j)`."""
    rule = WOBBLE_RULE if allow_wobble else CANONICAL_RULE
    return rule.is_pair(base_i, base_j)


def hairpin_size(i: int, j: int) -> int:
    """
    Number of nucleotides enclosed by a candidate pair (i, j), i.e. `j - i - 1`.
    """
    return j - i - 1


def is_min_hairpin_size(i: int, j: int, min_unpaired: int = MIN_HAIRPIN_UNPAIRED) -> bool:
    """
    Check whether a candidate pair (i, j) encloses at least `min_unpaired` nucleotides.

    Parameters
    ----------
    i, j : int
        Zero-based indices with i < j.
    min_unpaired : int, optional
        Minimum enclosed nucleotides. Defaults to 1.

    Returns
    -------
    bool
        True if `j - i - 1 >= min_unpaired`, else False.
    """
    return hairpin_size(i, j) >= min_unpaired
