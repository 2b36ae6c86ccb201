from rna_nussinov_fold.analysis.structure_analyzer import (
    STABLE_VERDICT,
    UNSTABLE_VERDICT,
    AnalysisReport,
    analyze_structure,
)

__all__ = [
    "STABLE_VERDICT",
    "UNSTABLE_VERDICT",
    "AnalysisReport",
    "analyze_structure",
]
