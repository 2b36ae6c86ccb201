from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Final

STABLE_VERDICT: Final[str] = (
    "This RNA has a stable structure with strong pairing. It is likely functional for binding or catalysis."
)
UNSTABLE_VERDICT: Final[str] = (
    "The structure contains long unpaired regions, which may affect stability. Further validation is needed."
)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """
    Descriptive statistics of a dot-bracket folding structure.

    The verdict is a coarse heuristic (more paired than unpaired bases), not a
    thermodynamic stability estimate.

    Attributes
    ----------
    paired_bases : int
        Number of '(' and ')' symbols.
    unpaired_bases : int
        Number of '.' symbols.
    longest_unpaired_run : int
        Length of the longest run of consecutive '.' symbols.
    verdict : str
        `STABLE_VERDICT` or `UNSTABLE_VERDICT`.
    """
    paired_bases: int
    unpaired_bases: int
    longest_unpaired_run: int
    verdict: str

    @property
    def is_stable(self) -> bool:
        return self.paired_bases > self.unpaired_bases

    def as_text(self) -> str:
        """Multi-line, human-readable rendering used by the CLI and the spreadsheet export."""
        number = 1 if self.is_stable else 2
        return (
            f"{number}. {self.verdict}\n"
            "\n"
            "Analysis Details:\n"
            f"- Total paired bases: {self.paired_bases}\n"
            f"- Total unpaired bases: {self.unpaired_bases}\n"
            f"- Longest unpaired region: {self.longest_unpaired_run} bases\n"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "paired_bases": self.paired_bases,
            "unpaired_bases": self.unpaired_bases,
            "longest_unpaired_run": self.longest_unpaired_run,
            "verdict": self.verdict,
        }


def analyze_structure(dot_bracket: str) -> AnalysisReport:
    """
    Summarizes a folding structure in a single left-to-right pass.

    Parameters
    ----------
    dot_bracket : str
        The structure; symbols other than '(', ')' and '.' are ignored.

    Returns
    -------
    AnalysisReport
        Counts and verdict. The empty structure yields all zeros and the
        unstable verdict, since 0 is not greater than 0.
    """
    paired = 0
    unpaired = 0
    longest_run = 0
    current_run = 0

    for ch in dot_bracket:
        if ch == '(' or ch == ')':
            paired += 1
            longest_run = max(longest_run, current_run)
            current_run = 0
        elif ch == '.':
            unpaired += 1
            current_run += 1

    # Trailing run of unpaired bases.
    longest_run = max(longest_run, current_run)

    verdict = STABLE_VERDICT if paired > unpaired else UNSTABLE_VERDICT
    return AnalysisReport(
        paired_bases=paired,
        unpaired_bases=unpaired,
        longest_unpaired_run=longest_run,
        verdict=verdict,
    )
