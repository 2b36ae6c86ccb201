"""
Tests for the command-line entry point.

`main` is called in-process with an argument list; output is captured with
`capsys` and the exit code is the return value.
"""
import json
import logging
import os
import time
import zipfile

import pytest

from rna_nussinov_fold.scripts.predict_rna import build_parser, main


@pytest.fixture
def sequences_file(tmp_path):
    path = tmp_path / "rna_sequences.txt"
    path.write_text(
        "# test sequences\n"
        "hairpin=GGGGAAAACCCC\n"
        "short stem=GCACG\n"
        "wobble=GGGAAAUUU\n",
        encoding="utf-8",
    )
    return path


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.sequence is None
    assert args.wobble is None
    assert args.min_loop is None
    assert args.verbose == 0


def test_single_sequence_text_output(capsys):
    assert main(["ggggaaaacccc"]) == 0
    out = capsys.readouterr().out

    assert "GGGGAAAACCCC" in out
    assert "((((....))))" in out
    assert "Length: 12 nucleotides" in out
    assert "Maximum base pairs: 4" in out
    assert "- Total paired bases: 8" in out


def test_invalid_sequence_exit_code(capsys):
    assert main(["ACGX"]) == 2
    assert "Invalid character at position 3 ('X')" in capsys.readouterr().err


def test_no_input_exit_code(capsys):
    assert main([]) == 2
    assert "Error:" in capsys.readouterr().err


def test_json_output(capsys):
    assert main(["--json", "--name", "stem", "GCACG"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["name"] == "stem"
    assert payload["score"] == 1
    assert payload["dot_bracket"] == ".(..)"


def test_wobble_and_min_loop_flags(capsys):
    assert main(["--json", "GGGAAAUUU"]) == 0
    assert json.loads(capsys.readouterr().out)["score"] == 2

    assert main(["--json", "--wobble", "GGGAAAUUU"]) == 0
    assert json.loads(capsys.readouterr().out)["score"] == 3

    assert main(["--json", "--min-loop", "7", "GGGGAAAACCCC"]) == 0
    assert json.loads(capsys.readouterr().out)["score"] == 1


def test_negative_min_loop_exit_code(capsys):
    assert main(["--min-loop", "-1", "GCAU"]) == 2


def test_dna_flag(capsys):
    assert main(["--json", "--dna", "GGGGAAAATTTT"]) == 0
    assert json.loads(capsys.readouterr().out)["sequence"] == "GGGGAAAAUUUU"


def test_config_file(tmp_path, capsys):
    config_path = tmp_path / "folding.yaml"
    config_path.write_text("folding:\n  allow_wobble: true\n", encoding="utf-8")

    assert main(["--json", "--config", str(config_path), "GGGAAAUUU"]) == 0
    assert json.loads(capsys.readouterr().out)["score"] == 3

    bad_path = tmp_path / "bad.yaml"
    bad_path.write_text("folding:\n  pseudoknots: true\n", encoding="utf-8")
    assert main(["--config", str(bad_path), "GCAU"]) == 2


def test_list_names(sequences_file, capsys):
    assert main(["--sequences-file", str(sequences_file), "--list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hairpin", "short stem", "wobble"]


def test_select_named_sequence(sequences_file, capsys):
    assert main(["--sequences-file", str(sequences_file), "--name", "hairpin"]) == 0
    out = capsys.readouterr().out
    assert "Selected RNA: hairpin" in out
    assert "((((....))))" in out


def test_unknown_name_exit_code(sequences_file, capsys):
    assert main(["--sequences-file", str(sequences_file), "--name", "missing"]) == 2
    assert "No sequence named 'missing'" in capsys.readouterr().err


def test_fold_whole_file_sequentially(sequences_file, capsys):
    assert main(["--sequences-file", str(sequences_file), "--workers", "1", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert [entry["name"] for entry in payload] == ["hairpin", "short stem", "wobble"]
    assert [entry["score"] for entry in payload] == [4, 1, 2]


def test_missing_sequences_file(tmp_path, capsys):
    assert main(["--sequences-file", str(tmp_path / "nope.txt")]) == 2


def test_export(tmp_path, capsys):
    out_path = tmp_path / "hairpin.xlsx"
    assert main(["--export", str(out_path), "GGGGAAAACCCC"]) == 0

    assert "Results exported to" in capsys.readouterr().out
    assert zipfile.is_zipfile(out_path)


def test_export_needs_single_sequence(sequences_file, tmp_path, capsys):
    out_path = tmp_path / "many.xlsx"
    assert main(["--sequences-file", str(sequences_file), "--export", str(out_path)]) == 2
    assert not out_path.exists()


def test_invalid_entry_in_file_on_worker_pool(tmp_path, capsys):
    """
    Several sequences fold on the default process pool; a bad entry still
    exits 2 and reports the offending position.
    """
    path = tmp_path / "mixed.txt"
    path.write_text("a=GGGAAACCC\nb=GGXAAACCC\n", encoding="utf-8")

    assert main(["--sequences-file", str(path)]) == 2
    assert "Invalid character at position 2 ('X')" in capsys.readouterr().err


def test_quiet_raises_package_log_level(capsys):
    assert main(["--quiet", "GCACG"]) == 0
    package_logger = logging.getLogger("rna_nussinov_fold")
    assert package_logger.level == logging.ERROR
    assert all(handler.level == logging.ERROR for handler in package_logger.handlers)


def test_cleanup_logs_only(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    log_dir = tmp_path / "var" / "log"
    log_dir.mkdir(parents=True)
    stale = log_dir / "rna_nussinov_fold_20200101_000000.log"
    fresh = log_dir / "rna_nussinov_fold_today.log"
    for path in (stale, fresh):
        path.write_text("x", encoding="utf-8")
    long_ago = time.time() - 30 * 86400
    os.utime(stale, (long_ago, long_ago))

    assert main(["--cleanup-logs", "7"]) == 0
    assert not stale.exists()
    assert fresh.exists()


def test_cleanup_logs_then_fold(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--cleanup-logs", "7", "GGGGAAAACCCC"]) == 0
    assert "((((....))))" in capsys.readouterr().out


def test_cleanup_logs_rejects_negative(capsys):
    assert main(["--cleanup-logs", "-1"]) == 2
