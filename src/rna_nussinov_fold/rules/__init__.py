from rna_nussinov_fold.rules.constraints import (
    CANONICAL_RULE,
    MIN_HAIRPIN_UNPAIRED,
    WOBBLE_RULE,
    BasePairRule,
    can_pair,
    hairpin_size,
    is_min_hairpin_size,
)

__all__ = [
    "CANONICAL_RULE",
    "MIN_HAIRPIN_UNPAIRED",
    "WOBBLE_RULE",
    "BasePairRule",
    "can_pair",
    "hairpin_size",
    "is_min_hairpin_size",
]
