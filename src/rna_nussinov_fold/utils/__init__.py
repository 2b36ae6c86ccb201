from rna_nussinov_fold.utils.iter_utils import iter_spans
from rna_nussinov_fold.utils.nucleotide_utils import ensure_rna_alphabet, normalize_base, validate_and_normalize_seq

__all__ = [
    "iter_spans",
    "ensure_rna_alphabet",
    "normalize_base",
    "validate_and_normalize_seq",
]
