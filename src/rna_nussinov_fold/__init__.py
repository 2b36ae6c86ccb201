from rna_nussinov_fold.analysis import AnalysisReport, analyze_structure
from rna_nussinov_fold.folding import NussinovFoldingConfig, fold_score, reconstruct
from rna_nussinov_fold.folding.predict import FoldResult, predict_structure
from rna_nussinov_fold.rules import CANONICAL_RULE, WOBBLE_RULE, BasePairRule

__version__ = "0.1.0"

__all__ = [
    "AnalysisReport",
    "analyze_structure",
    "NussinovFoldingConfig",
    "fold_score",
    "reconstruct",
    "FoldResult",
    "predict_structure",
    "CANONICAL_RULE",
    "WOBBLE_RULE",
    "BasePairRule",
]
