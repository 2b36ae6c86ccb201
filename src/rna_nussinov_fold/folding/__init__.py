from rna_nussinov_fold.folding.common_traceback import TraceResult
from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import (
    NussinovFoldingConfig,
    NussinovFoldingEngine,
    fold_score,
)
from rna_nussinov_fold.folding.nussinov.nussinov_traceback import reconstruct, traceback_nested

__all__ = [
    "TraceResult",
    "NussinovFoldingConfig",
    "NussinovFoldingEngine",
    "fold_score",
    "reconstruct",
    "traceback_nested",
]
