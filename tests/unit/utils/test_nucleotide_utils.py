"""
Unit tests for sequence normalization and alphabet validation.
"""
import pytest

from rna_nussinov_fold.errors import SequenceValidationError
from rna_nussinov_fold.utils.nucleotide_utils import (
    ensure_rna_alphabet,
    normalize_base,
    validate_and_normalize_seq,
)


def test_normalize_base_uppercases_and_optionally_converts_t():
    assert normalize_base("a") == "A"
    assert normalize_base("t") == "T"
    assert normalize_base("t", convert_dna=True) == "U"
    # Non single-character inputs pass through untouched.
    assert normalize_base("AU") == "AU"
    assert normalize_base(None) is None


def test_validate_uppercases_and_strips():
    assert validate_and_normalize_seq("  gcAcg \n") == "GCACG"


def test_empty_sequence_is_valid():
    assert validate_and_normalize_seq("") == ""
    assert validate_and_normalize_seq("   ") == ""


def test_invalid_symbol_reports_first_position():
    """
    The error carries the position and symbol of the first offending character.
    """
    with pytest.raises(SequenceValidationError) as exc_info:
        validate_and_normalize_seq("ACGXUN")

    err = exc_info.value
    assert err.position == 3
    assert err.symbol == "X"
    assert "position 3" in str(err)
    # Validation errors are ValueErrors for callers that do not know the package.
    assert isinstance(err, ValueError)


def test_thymine_rejected_unless_converting():
    with pytest.raises(SequenceValidationError) as exc_info:
        validate_and_normalize_seq("ACGT")
    assert exc_info.value.position == 3

    assert validate_and_normalize_seq("acgt", convert_dna=True) == "ACGU"


def test_ensure_rna_alphabet_does_not_normalize():
    ensure_rna_alphabet("ACGU")
    ensure_rna_alphabet("")
    with pytest.raises(SequenceValidationError) as exc_info:
        ensure_rna_alphabet("ACgU")
    assert exc_info.value.position == 2
