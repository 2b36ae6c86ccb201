from __future__ import annotations
import logging
from typing import Final

from rna_nussinov_fold.errors import SequenceValidationError

logger = logging.getLogger(__name__)

RNA_ALPHABET: Final[frozenset[str]] = frozenset("ACGU")


def normalize_base(base_raw: str, convert_dna: bool = False) -> str:
    """
    Upper-case a nucleotide base, optionally mapping T->U.

    Parameters
    ----------
    base_raw : str
        Raw single-character nucleotide base.
    convert_dna : bool, optional
        If True, thymine is read as uracil.

    Returns
    -------
    str
        The normalized base. Inputs that are not single characters are returned unchanged.
    """
    if not isinstance(base_raw, str):
        return base_raw

    if len(base_raw) != 1:
        return base_raw

    base_norm = base_raw.upper()

    if convert_dna and base_norm == "T":
        return "U"
    return base_norm


def validate_and_normalize_seq(raw_sequence: str, convert_dna: bool = False) -> str:
    """
    Validates and normalizes an RNA sequence.

    Strips surrounding whitespace, converts to uppercase and checks every
    symbol against {A, C, G, U}. An empty sequence is valid.

    Parameters
    ----------
    raw_sequence : str
        The input RNA sequence string.
    convert_dna : bool, optional
        If True, 'T' is replaced with 'U' before validation.

    Returns
    -------
    str
        The validated, uppercase RNA sequence.

    Raises
    ------
    SequenceValidationError
        If the sequence contains a symbol outside the RNA alphabet. The error
        carries the position of the first offending symbol.
    """
    logger.debug(f"Validating sequence: {raw_sequence[:50]}{'...' if len(raw_sequence) > 50 else ''}")
    normalized_sequence = raw_sequence.strip().upper()
    if convert_dna:
        normalized_sequence = normalized_sequence.replace("T", "U")

    try:
        ensure_rna_alphabet(normalized_sequence)
    except SequenceValidationError as e:
        logger.error(f"Invalid character at position {e.position}: '{e.symbol}'")
        raise

    logger.debug(f"Sequence validated: length={len(normalized_sequence)}")
    return normalized_sequence


def ensure_rna_alphabet(seq: str) -> None:
    """
    Raise `SequenceValidationError` at the first symbol of `seq` outside {A, C, G, U}.

    Unlike `validate_and_normalize_seq`, nothing is normalized: lowercase
    symbols are rejected too.
    """
    for pos, char in enumerate(seq):
        if char not in RNA_ALPHABET:
            raise SequenceValidationError(pos, char)
