"""
Unit tests for dot-bracket helpers shared by the traceback and analysis code.
"""
import pytest

from rna_nussinov_fold.folding.common_traceback import (
    TraceResult,
    dotbracket_to_pairs,
    is_well_nested,
    pairs_to_dotbracket,
)
from rna_nussinov_fold.structures import Pair


def test_pairs_to_dotbracket():
    assert pairs_to_dotbracket(8, [Pair(0, 3), Pair(4, 7)]) == "(..)(..)"
    assert pairs_to_dotbracket(3, []) == "..."
    assert pairs_to_dotbracket(0, []) == ""
    # Pairs outside the sequence are ignored.
    assert pairs_to_dotbracket(4, [Pair(1, 9)]) == "...."


def test_dotbracket_to_pairs():
    assert dotbracket_to_pairs("((..))(.)") == {(0, 5), (1, 4), (6, 8)}
    assert dotbracket_to_pairs("....") == set()


@pytest.mark.parametrize("db, expected", [
    ("", True),
    ("...", True),
    ("((..)).()", True),
    (")(", False),
    ("(()", False),
    ("())(", False),
])
def test_is_well_nested(db, expected):
    assert is_well_nested(db) is expected


def test_trace_result_is_frozen():
    result = TraceResult(pairs=[Pair(0, 2)], dot_bracket="(.)")
    with pytest.raises(AttributeError):
        result.dot_bracket = "..."  # type: ignore[misc]
