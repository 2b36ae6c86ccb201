from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional

from rna_nussinov_fold.analysis import AnalysisReport, analyze_structure
from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig, NussinovFoldingEngine
from rna_nussinov_fold.folding.nussinov.nussinov_traceback import traceback_nested
from rna_nussinov_fold.structures import Pair
from rna_nussinov_fold.utils.nucleotide_utils import validate_and_normalize_seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FoldResult:
    """
    Everything a presentation or export layer needs about one folded sequence.

    Attributes
    ----------
    name : Optional[str]
        Label of the sequence, if it came from a named collection.
    sequence : str
        The validated, uppercase sequence.
    score : int
        Maximum number of base pairs.
    dot_bracket : str
        The reconstructed folding structure.
    pairs : List[Pair]
        Base pairs of the structure, sorted by 5' index.
    report : AnalysisReport
        Summary statistics of the structure.
    """
    name: Optional[str]
    sequence: str
    score: int
    dot_bracket: str
    pairs: List[Pair]
    report: AnalysisReport

    @property
    def length(self) -> int:
        return len(self.sequence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sequence": self.sequence,
            "length": self.length,
            "score": self.score,
            "dot_bracket": self.dot_bracket,
            "pairs": [pr.as_tuple() for pr in self.pairs],
            "analysis": self.report.to_dict(),
        }


def predict_structure(
    raw_sequence: str,
    config: Optional[NussinovFoldingConfig] = None,
    name: Optional[str] = None,
    convert_dna: bool = False,
) -> FoldResult:
    """
    Validates, folds, traces back and analyzes one sequence.

    Parameters
    ----------
    raw_sequence : str
        The input sequence; surrounding whitespace and case are normalized.
    config : NussinovFoldingConfig, optional
        Folding settings. Defaults to the canonical rule with minimum loop 1.
    name : str, optional
        Label carried into the result.
    convert_dna : bool, optional
        If True, 'T' is read as 'U'.

    Returns
    -------
    FoldResult

    Raises
    ------
    SequenceValidationError
        If the sequence holds a symbol outside {A, C, G, U}.
    """
    config = config if config is not None else NussinovFoldingConfig()
    seq = validate_and_normalize_seq(raw_sequence, convert_dna=convert_dna)

    engine = NussinovFoldingEngine(config=config)
    state = engine.make_state(len(seq))
    engine.fill_score_matrix(seq, state)

    trace_result = traceback_nested(seq, state)
    report = analyze_structure(trace_result.dot_bracket)

    logger.debug(f"Folded {name or 'sequence'}: score={state.score} structure={trace_result.dot_bracket}")

    return FoldResult(
        name=name,
        sequence=seq,
        score=state.score,
        dot_bracket=trace_result.dot_bracket,
        pairs=trace_result.pairs,
        report=report,
    )
