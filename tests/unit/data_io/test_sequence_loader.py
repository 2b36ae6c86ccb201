"""
Unit tests for the `name=sequence` loader.
"""
import logging
from importlib.resources import files as importlib_files

import pytest

from rna_nussinov_fold.data_io import load_named_sequences, parse_named_sequences
from rna_nussinov_fold.errors import SequenceFileError


def test_parse_basic_lines():
    text = "hairpin=GGGGAAAACCCC\nshort stem = GCACG \n"
    assert parse_named_sequences(text) == {"hairpin": "GGGGAAAACCCC", "short stem": "GCACG"}


def test_parse_splits_on_first_equals():
    assert parse_named_sequences("odd=AC=GU") == {"odd": "AC=GU"}


def test_parse_skips_blank_and_comment_lines():
    text = "# header\n\n   \nx=ACGU\n  # indented comment\n"
    assert parse_named_sequences(text) == {"x": "ACGU"}


def test_parse_skips_malformed_lines_with_warning(caplog):
    text = "no separator\n=GGCC\nempty=\ngood=AUGC\n"
    with caplog.at_level(logging.WARNING, logger="rna_nussinov_fold.data_io.sequence_loader"):
        result = parse_named_sequences(text)

    assert result == {"good": "AUGC"}
    assert sum("skipping malformed line" in rec.message for rec in caplog.records) == 3


def test_parse_strict_raises_with_line_number():
    with pytest.raises(SequenceFileError) as exc_info:
        parse_named_sequences("good=AUGC\n\nbroken line\n", strict=True, source="seqs.txt")
    assert exc_info.value.line_no == 3
    assert exc_info.value.path == "seqs.txt"


def test_parse_duplicate_name_keeps_last(caplog):
    with caplog.at_level(logging.WARNING, logger="rna_nussinov_fold.data_io.sequence_loader"):
        result = parse_named_sequences("a=AAAA\nb=CCCC\na=GGGG\n")

    assert result == {"a": "GGGG", "b": "CCCC"}
    assert list(result) == ["a", "b"]
    assert any("duplicate name 'a'" in rec.message for rec in caplog.records)


def test_parse_keeps_sequences_unvalidated():
    assert parse_named_sequences("dna=acgt") == {"dna": "acgt"}


def test_load_named_sequences(tmp_path):
    path = tmp_path / "rna_sequences.txt"
    path.write_text("first=GCAU\nsecond=GGGAAACCC\n", encoding="utf-8")

    assert load_named_sequences(path) == {"first": "GCAU", "second": "GGGAAACCC"}
    assert load_named_sequences(str(path)) == {"first": "GCAU", "second": "GGGAAACCC"}


def test_load_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(SequenceFileError) as exc_info:
        load_named_sequences(missing)
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value, OSError)


def test_load_bundled_sequences():
    bundled = importlib_files("rna_nussinov_fold") / "data" / "rna_sequences.txt"
    sequences = load_named_sequences(str(bundled))

    assert list(sequences) == ["tRNA-Phe fragment", "hairpin", "short stem", "poly-A"]
    assert sequences["hairpin"] == "GGGGAAAACCCC"
