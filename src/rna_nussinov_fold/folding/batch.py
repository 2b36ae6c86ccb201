from __future__ import annotations
import logging
import threading
from concurrent.futures import FIRST_COMPLETED, Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import Dict, Mapping, Optional

from tqdm import tqdm

from rna_nussinov_fold.errors import FoldingCancelledError
from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig
from rna_nussinov_fold.folding.predict import FoldResult, predict_structure

logger = logging.getLogger(__name__)

# Seconds between cancellation checks while every worker is busy.
CANCEL_POLL_INTERVAL_S = 0.1


def _in_input_order(names: Mapping[str, str], results: Dict[str, FoldResult]) -> Dict[str, FoldResult]:
    return {name: results[name] for name in names if name in results}


def fold_many(
    named_sequences: Mapping[str, str],
    config: Optional[NussinovFoldingConfig] = None,
    *,
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
    use_processes: bool = True,
    convert_dna: bool = False,
    show_progress: bool = False,
) -> Dict[str, FoldResult]:
    """
    Folds many sequences independently, one fold per worker task.

    Each fold owns its own score matrix, so folds share no state and need no
    synchronization beyond collecting results.

    Parameters
    ----------
    named_sequences : Mapping[str, str]
        Label -> raw sequence.
    config : NussinovFoldingConfig, optional
        Folding settings shared by every fold.
    max_workers : int, optional
        Worker count. `1` folds sequentially in the calling thread.
    cancel_event : threading.Event, optional
        Checked before each sequential fold, and on a pool at least every
        `CANCEL_POLL_INTERVAL_S` seconds. Once set, folds not yet started are
        cancelled and `FoldingCancelledError` is raised with the results
        completed so far. Folds already running on a worker cannot be
        interrupted; the call returns once they finish.
    use_processes : bool, optional
        Use a process pool (default) rather than a thread pool. The DP is
        CPU-bound, so threads only help for very short sequences.
    convert_dna : bool, optional
        If True, 'T' is read as 'U' in every sequence.
    show_progress : bool, optional
        Show a `tqdm` progress bar over completed folds.

    Returns
    -------
    Dict[str, FoldResult]
        Results keyed by label, in input order.

    Raises
    ------
    FoldingCancelledError
        If `cancel_event` is set before all folds complete.
    SequenceValidationError
        If any sequence is invalid; remaining folds are cancelled.
    """
    config = config if config is not None else NussinovFoldingConfig()
    # Per-fold progress bars would interleave across workers.
    worker_config = NussinovFoldingConfig(
        allow_wobble=config.allow_wobble,
        min_hairpin_unpaired=config.min_hairpin_unpaired,
        verbose=False,
    )
    results: Dict[str, FoldResult] = {}

    if not named_sequences:
        return results

    logger.info(f"Batch folding {len(named_sequences)} sequence(s) with max_workers={max_workers}")

    if max_workers == 1:
        for name, raw_seq in tqdm(named_sequences.items(), desc="Folding", disable=not show_progress):
            if cancel_event is not None and cancel_event.is_set():
                logger.warning(f"Batch folding cancelled after {len(results)} fold(s)")
                raise FoldingCancelledError(_in_input_order(named_sequences, results))
            results[name] = predict_structure(raw_seq, worker_config, name=name, convert_dna=convert_dna)
        return _in_input_order(named_sequences, results)

    executor_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
    executor: Executor = executor_cls(max_workers=max_workers)
    try:
        futures: Dict[Future, str] = {
            executor.submit(predict_structure, raw_seq, worker_config, name, convert_dna): name
            for name, raw_seq in named_sequences.items()
        }
        pending = set(futures)
        poll_timeout = CANCEL_POLL_INTERVAL_S if cancel_event is not None else None
        with tqdm(total=len(futures), desc="Folding", disable=not show_progress) as progress:
            while pending:
                if cancel_event is not None and cancel_event.is_set():
                    logger.warning(f"Batch folding cancelled after {len(results)} fold(s)")
                    raise FoldingCancelledError(_in_input_order(named_sequences, results))
                done, pending = wait(pending, timeout=poll_timeout, return_when=FIRST_COMPLETED)
                for future in done:
                    results[futures[future]] = future.result()
                    progress.update(1)
    finally:
        # Pending folds are dropped on cancellation or error; a no-op after success.
        executor.shutdown(wait=True, cancel_futures=True)

    return _in_input_order(named_sequences, results)
