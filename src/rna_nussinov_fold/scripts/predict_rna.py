#!/usr/bin/env python3
"""
Predict RNA secondary structure by maximum base pairing from the command line.

Folds one sequence given on the command line, or one or all entries of a
`name=sequence` file, prints the dot-bracket structure with a short
analysis, and optionally exports a colour-coded spreadsheet.

Examples:
  - python -m rna_nussinov_fold "GGGAAACCCAAAGGGUUUCCC"
  - python -m rna_nussinov_fold --wobble --json "GGGAAAUCC"
  - python -m rna_nussinov_fold --sequences-file rna_sequences.txt --name hairpin --export out.xlsx
  - python -m rna_nussinov_fold --sequences-file rna_sequences.txt --workers 4 -v
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

# --- Local Application Imports ---
from rna_nussinov_fold.config import apply_overrides, load_folding_config
from rna_nussinov_fold.data_io import export_to_excel, load_named_sequences
from rna_nussinov_fold.errors import ConfigError, RnaFoldError, SequenceFileError, SequenceValidationError
from rna_nussinov_fold.folding.batch import fold_many
from rna_nussinov_fold.folding.predict import FoldResult, predict_structure
from rna_nussinov_fold.utils.logging_utils import DEFAULT_LOG_DIR, cleanup_old_logs, set_log_level, setup_logger

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "rna_nussinov_fold"
DEFAULT_NAME = "input"


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None, quiet: bool = False) -> None:
    """
    Configures package logging from the command-line verbosity.

    Parameters
    ----------
    verbose_level : int
        0 for WARNING, 1 for INFO, 2 for DEBUG.
    log_file : Optional[str]
        Explicit log file. Without it, a timestamped file under `var/log/`
        is written whenever verbosity is above 0.
    quiet : bool
        Raise every configured logger and handler to ERROR, overriding `verbose_level`.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(verbose_level, logging.DEBUG)
    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    # Module loggers propagate to the package logger; only `__main__` needs its own.
    loggers_to_configure = [PACKAGE_LOGGER]
    if not __name__.startswith(PACKAGE_LOGGER):
        loggers_to_configure.append(__name__)

    for logger_name in loggers_to_configure:
        configured = setup_logger(
            logger_name,
            level=log_level,
            log_file=log_file,
            enable_file_logging=should_log_to_file,
        )
        if quiet:
            set_log_level(configured, logging.ERROR)

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


# --------------------------
# Helpers
# --------------------------
def format_result_text(result: FoldResult) -> str:
    """Renders one fold result the way the interactive display shows it."""
    return (
        f"Selected RNA: {result.name}\n"
        "\n"
        f"RNA Sequence:\n{result.sequence}\n"
        "\n"
        f"Predicted Folding Structure:\n{result.dot_bracket}\n"
        "\n"
        f"Length: {result.length} nucleotides\n"
        f"Maximum base pairs: {result.score}\n"
        "\n"
        f"Analysis:\n{result.report.as_text()}"
    )


def collect_sequences(cli_args: argparse.Namespace) -> Dict[str, str]:
    """
    Gathers the sequences to fold from the positional argument or the sequences file.

    Raises
    ------
    SequenceFileError
        If the file cannot be read or `--name` is not in it.
    ValueError
        If neither a sequence nor a file was given.
    """
    if cli_args.sequence is not None:
        return {cli_args.name or DEFAULT_NAME: cli_args.sequence}

    if cli_args.sequences_file is None:
        raise ValueError("Provide a sequence or --sequences-file.")

    named_sequences = load_named_sequences(cli_args.sequences_file, strict=cli_args.strict)
    if cli_args.name is None:
        return named_sequences

    if cli_args.name not in named_sequences:
        raise SequenceFileError(f"No sequence named '{cli_args.name}' in {cli_args.sequences_file}",
                                path=cli_args.sequences_file)
    return {cli_args.name: named_sequences[cli_args.name]}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Predict RNA secondary structure (dot-bracket) by maximum base pairing.")
    parser.add_argument("sequence", nargs="?", default=None,
                        help="RNA sequence (A,C,G,U; case-insensitive).")
    parser.add_argument("--sequences-file", default=None,
                        help="Text file of 'name=sequence' lines.")
    parser.add_argument("--name", default=None,
                        help="Entry of --sequences-file to fold (default: all), or label for a positional sequence.")
    parser.add_argument("--list", action="store_true",
                        help="List the names in --sequences-file and exit.")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on malformed lines in --sequences-file instead of skipping them.")

    # Folding settings
    parser.add_argument("--config", default=None,
                        help="Folding settings YAML (defaults to package data).")
    parser.add_argument("--wobble", action="store_true", default=None,
                        help="Also accept G-U wobble pairs.")
    parser.add_argument("--min-loop", type=int, default=None,
                        help="Minimum nucleotides enclosed by a pair (default: 1).")
    parser.add_argument("--dna", action="store_true",
                        help="Read T as U.")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker processes for folding several sequences (1 = sequential).")

    # Output
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")
    parser.add_argument("--export", default=None,
                        help="Write a colour-coded .xlsx file (single sequence only).")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/rna_nussinov_fold_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log errors; results are still printed.")
    parser.add_argument("--cleanup-logs", type=int, default=None, metavar="DAYS",
                        help="Delete logs in var/log/ older than DAYS days before running.")
    return parser


# --------------------------
# Command-Line Interface
# --------------------------
def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses command-line arguments and runs the prediction.

    Returns
    -------
    int
        0 on success, 2 on invalid input or configuration, 1 if folding or export fails.
    """
    cli_args = build_parser().parse_args(argv)

    verbose_level = 0 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file, quiet=cli_args.quiet)

    if cli_args.cleanup_logs is not None:
        if cli_args.cleanup_logs < 0:
            print("Error: --cleanup-logs must be >= 0", file=sys.stderr)
            return 2
        removed = cleanup_old_logs(DEFAULT_LOG_DIR, max_age_days=cli_args.cleanup_logs)
        logger.info(f"Removed {len(removed)} old log file(s) from {DEFAULT_LOG_DIR}")
        if cli_args.sequence is None and cli_args.sequences_file is None:
            return 0

    # --- Inputs ---
    try:
        config = apply_overrides(
            load_folding_config(cli_args.config),
            allow_wobble=cli_args.wobble,
            min_hairpin_unpaired=cli_args.min_loop,
            verbose=verbose_level > 0,
        )
        if config.min_hairpin_unpaired < 0:
            raise ConfigError("--min-loop must be >= 0")
    except ConfigError as e:
        logger.error(f"Configuration failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        if cli_args.list:
            if cli_args.sequences_file is None:
                raise ValueError("--list requires --sequences-file.")
            for name in load_named_sequences(cli_args.sequences_file, strict=cli_args.strict):
                print(name)
            return 0
        named_sequences = collect_sequences(cli_args)
    except (SequenceFileError, ValueError) as e:
        logger.error(f"Loading sequences failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if cli_args.export is not None and len(named_sequences) != 1:
        print("Error: --export needs exactly one sequence (use --name).", file=sys.stderr)
        return 2

    # --- Folding ---
    try:
        if len(named_sequences) == 1:
            (name, raw_seq), = named_sequences.items()
            results = [predict_structure(raw_seq, config, name=name, convert_dna=cli_args.dna)]
        else:
            results = list(fold_many(named_sequences, config, max_workers=cli_args.workers,
                                     convert_dna=cli_args.dna, show_progress=verbose_level > 0).values())
    except SequenceValidationError as e:
        logger.error(f"Sequence validation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except RnaFoldError as e:
        logger.error(f"Prediction failed: {e}", exc_info=True)
        print(f"Prediction failed: {e}", file=sys.stderr)
        return 1

    # --- Output ---
    if cli_args.json:
        payload = [result.to_dict() for result in results]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
    else:
        print("\n".join(format_result_text(result) for result in results))

    if cli_args.export is not None:
        result = results[0]
        try:
            out_path = export_to_excel(cli_args.export, result.sequence, result.dot_bracket, result.report)
        except OSError as e:
            logger.error(f"Export failed: {e}")
            print(f"Error exporting to Excel: {e}", file=sys.stderr)
            return 1
        if not cli_args.json:
            print(f"Results exported to {out_path.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
