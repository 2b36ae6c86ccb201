from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict

from rna_nussinov_fold.errors import SequenceFileError

logger = logging.getLogger(__name__)


def parse_named_sequences(text: str, *, strict: bool = False, source: str = "<string>") -> Dict[str, str]:
    """
    Parses `name=sequence` lines.

    Each line is split on its first '='; name and sequence are stripped.
    Blank lines and lines starting with '#' are skipped. Sequences are
    returned as written; validation happens when they are folded.

    Parameters
    ----------
    text : str
        The file content.
    strict : bool, optional
        If True, a malformed line raises instead of being skipped.
    source : str, optional
        Name used in log and error messages.

    Returns
    -------
    Dict[str, str]
        Name -> sequence, in file order. A repeated name keeps the last value.

    Raises
    ------
    SequenceFileError
        In strict mode, on a line without '=' or with an empty name or sequence.
    """
    sequences: Dict[str, str] = {}

    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        name, sep, value = stripped.partition("=")
        name, value = name.strip(), value.strip()
        if not sep or not name or not value:
            if strict:
                raise SequenceFileError(f"{source}:{line_no}: expected 'name=sequence', got {stripped!r}",
                                        path=source, line_no=line_no)
            logger.warning(f"{source}:{line_no}: skipping malformed line {stripped!r}")
            continue

        if name in sequences:
            logger.warning(f"{source}:{line_no}: duplicate name '{name}' replaces earlier entry")
        sequences[name] = value

    logger.info(f"Loaded {len(sequences)} sequence(s) from {source}")
    return sequences


def load_named_sequences(path: str | Path, *, strict: bool = False) -> Dict[str, str]:
    """
    Reads a `name=sequence` text file.

    Raises
    ------
    SequenceFileError
        If the file cannot be read, or (in strict mode) holds a malformed line.
    """
    path_obj = Path(path)
    try:
        text = path_obj.read_text(encoding="utf-8")
    except OSError as e:
        raise SequenceFileError(f"Error reading RNA sequences file {path_obj}: {e}", path=str(path_obj)) from e

    return parse_named_sequences(text, strict=strict, source=str(path_obj))
