from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "RnaFoldError",
    "SequenceValidationError",
    "TracebackInconsistencyError",
    "SequenceFileError",
    "FoldingCancelledError",
    "ConfigError",
]


class RnaFoldError(Exception):
    """Base class for all errors raised by `rna_nussinov_fold`."""


class SequenceValidationError(RnaFoldError, ValueError):
    """
    Raised when an input sequence contains a symbol outside {A, C, G, U}.

    Attributes
    ----------
    position : int
        Zero-based index of the first offending symbol.
    symbol : str
        The offending symbol itself.
    """
    def __init__(self, position: int, symbol: str):
        self.position = position
        self.symbol = symbol
        super().__init__(
            f"Invalid character at position {position} ('{symbol}'). Only A,C,G,U are allowed."
        )

    def __reduce__(self):
        # Rebuild from the fields; pickle would otherwise call __init__ with the message.
        return type(self), (self.position, self.symbol)


class TracebackInconsistencyError(RnaFoldError, RuntimeError):
    """
    Raised when no recurrence case reproduces a score matrix cell during traceback.

    This is an internal invariant violation: the matrix and the recurrence
    disagree, so the matrix was not filled by the same rule set.
    """
    def __init__(self, interval: Tuple[int, int], score: int):
        self.interval = interval
        self.score = score
        i, j = interval
        super().__init__(f"No recurrence case reproduces score[{i}][{j}] = {score}")

    def __reduce__(self):
        return type(self), (self.interval, self.score)


class SequenceFileError(RnaFoldError, OSError):
    """Raised when a `name=sequence` file is missing or malformed."""
    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None):
        self.path = path
        self.line_no = line_no
        super().__init__(message)

    def __reduce__(self):
        return type(self), (str(self), self.path, self.line_no)


class FoldingCancelledError(RnaFoldError):
    """
    Raised by batch folding when the caller sets the cancellation event.

    Attributes
    ----------
    completed : Dict[str, Any]
        Results of the folds that finished before cancellation, keyed by name.
    """
    def __init__(self, completed: Dict[str, Any]):
        self.completed = completed
        super().__init__(f"Batch folding cancelled after {len(completed)} completed fold(s)")

    def __reduce__(self):
        return type(self), (self.completed,)


class ConfigError(RnaFoldError, ValueError):
    """Raised when a folding configuration file has unknown keys or invalid values."""
