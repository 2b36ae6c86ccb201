from __future__ import annotations
import logging
from pathlib import Path
from typing import Final

import xlsxwriter

from rna_nussinov_fold.analysis import AnalysisReport

logger = logging.getLogger(__name__)

SHEET_NAME: Final[str] = "RNA Folding Results"
HEADER_TEXT: Final[str] = "RNA Sequence and Folding Structure"
PAIRED_COLOR: Final[str] = "#90EE90"    # light green
UNPAIRED_COLOR: Final[str] = "#FFB6C1"  # light red

SEQUENCE_ROW: Final[int] = 1
STRUCTURE_ROW: Final[int] = 2
ANALYSIS_ROW: Final[int] = 4


def export_to_excel(path: str | Path, sequence: str, dot_bracket: str, report: AnalysisReport) -> Path:
    """
    Writes a sequence and its structure to an xlsx workbook, one position per column.

    Paired positions are filled light green and unpaired positions light red
    in both the sequence row and the structure row. The analysis text goes
    below them.

    Parameters
    ----------
    path : str | Path
        Destination `.xlsx` file; parent directories are created.
    sequence : str
        The folded sequence.
    dot_bracket : str
        Its folding structure, same length as `sequence`.
    report : AnalysisReport
        The structure analysis.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ValueError
        If `sequence` and `dot_bracket` differ in length.
    """
    if len(sequence) != len(dot_bracket):
        raise ValueError(f"Sequence length {len(sequence)} does not match structure length {len(dot_bracket)}")

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    workbook = xlsxwriter.Workbook(str(out_path))
    try:
        sheet = workbook.add_worksheet(SHEET_NAME)
        paired_fmt = workbook.add_format({"bg_color": PAIRED_COLOR, "pattern": 1, "align": "center"})
        unpaired_fmt = workbook.add_format({"bg_color": UNPAIRED_COLOR, "pattern": 1, "align": "center"})
        wrap_fmt = workbook.add_format({"text_wrap": True, "valign": "top"})

        sheet.write_string(0, 0, HEADER_TEXT)

        for col, (base, symbol) in enumerate(zip(sequence, dot_bracket)):
            cell_fmt = unpaired_fmt if symbol == "." else paired_fmt
            sheet.write_string(SEQUENCE_ROW, col, base, cell_fmt)
            sheet.write_string(STRUCTURE_ROW, col, symbol, cell_fmt)

        if sequence:
            sheet.set_column(0, len(sequence) - 1, 3)

        sheet.write_string(ANALYSIS_ROW, 0, report.as_text(), wrap_fmt)
    finally:
        workbook.close()

    logger.info(f"Results exported to {out_path.resolve()}")
    return out_path
