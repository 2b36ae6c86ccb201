from rna_nussinov_fold.structures.pairing import Pair
from rna_nussinov_fold.structures.score_matrix import NussinovScoreMatrix

__all__ = [
    "Pair",
    "NussinovScoreMatrix",
]
