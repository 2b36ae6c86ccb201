#!/usr/bin/env python3
"""
Performance evaluation script for the maximum base-pairing folding algorithm.

Times the score matrix fill and the traceback separately over a range of
sequence lengths, measures peak memory, fits the empirical time exponent of
the fill and plots it against the $O(N^{3})$ bound.

Examples:
  - python -m rna_nussinov_fold.scripts.algorithm_performance
  - python -m rna_nussinov_fold.scripts.algorithm_performance --lengths 100 200 400 --trials 5 --wobble
"""

import argparse
import random
import time
import tracemalloc
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig, NussinovFoldingEngine
from rna_nussinov_fold.folding.nussinov.nussinov_traceback import traceback_nested

THEORETICAL_EXPONENT = 3.0
DEFAULT_LENGTHS = [50, 100, 150, 200, 250]
PLOT_NAME = 'nussinov_scaling.png'


def generate_random_sequence(length: int, seed: Optional[int] = None) -> str:
    """
    Generate a random RNA sequence of a given length.

    Parameters
    ----------
    length : int
        Number of nucleotides ($N$).
    seed : int, optional
        Seed of the private `random.Random` instance, so runs are repeatable.

    Returns
    -------
    str
        A random sequence over 'A', 'C', 'G', 'U'.
    """
    rng = random.Random(seed)
    return ''.join(rng.choices('ACGU', k=length))


def time_fold(sequence: str, config: NussinovFoldingConfig) -> dict:
    """
    Fold `sequence` once and time the two phases.

    Returns
    -------
    dict
        'fill_s' and 'traceback_s' in seconds, and the optimal 'score'.
    """
    engine = NussinovFoldingEngine(config)
    state = engine.make_state(len(sequence))

    t0 = time.perf_counter()
    engine.fill_score_matrix(sequence, state)
    t1 = time.perf_counter()
    traceback_nested(sequence, state)
    t2 = time.perf_counter()

    return {'fill_s': t1 - t0, 'traceback_s': t2 - t1, 'score': state.score}


def benchmark_runtime(lengths: List[int], config: NussinovFoldingConfig, num_trials: int = 3,
                      base_seed: int = 0) -> dict:
    """
    Mean and spread of fill and traceback time per sequence length.

    Every trial folds a fresh random sequence; the seed of trial `t` at
    length `n` is `base_seed + 1000 * n + t`.
    """
    results = {
        'lengths': list(lengths),
        'fill_mean': [],
        'fill_std': [],
        'traceback_mean': [],
        'mean_score': [],
    }

    for n in lengths:
        fill_times, traceback_times, scores = [], [], []
        for trial in range(num_trials):
            seq = generate_random_sequence(n, seed=base_seed + 1000 * n + trial)
            timing = time_fold(seq, config)
            fill_times.append(timing['fill_s'])
            traceback_times.append(timing['traceback_s'])
            scores.append(timing['score'])

        results['fill_mean'].append(float(np.mean(fill_times)))
        results['fill_std'].append(float(np.std(fill_times)))
        results['traceback_mean'].append(float(np.mean(traceback_times)))
        results['mean_score'].append(float(np.mean(scores)))
        print(f"N={n:5d}  fill {results['fill_mean'][-1]:8.3f}s ± {results['fill_std'][-1]:.3f}"
              f"  traceback {results['traceback_mean'][-1] * 1e3:7.2f}ms  pairs {results['mean_score'][-1]:.1f}")

    return results


def benchmark_memory(lengths: List[int], config: NussinovFoldingConfig, base_seed: int = 0) -> List[float]:
    """Peak traced memory (MB) of one full fold per length."""
    peaks = []
    for n in lengths:
        seq = generate_random_sequence(n, seed=base_seed + 1000 * n)
        tracemalloc.start()
        try:
            time_fold(seq, config)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        peaks.append(peak / 1024 ** 2)
    return peaks


def fit_exponent(lengths: List[int], times: List[float]) -> tuple[float, np.ndarray]:
    """
    Least-squares fit of $T = c N^{k}$ on log-log axes.

    Returns
    -------
    tuple[float, np.ndarray]
        The exponent $k$ and the fitted times at `lengths`.
    """
    n = np.asarray(lengths, dtype=float)
    k, log_c = np.polyfit(np.log(n), np.log(times), 1)
    return float(k), np.exp(log_c) * n ** k


def plot_results(runtime: dict, peaks_mb: List[float], fitted: np.ndarray, k: float, output_dir: Path) -> Path:
    """Write the scaling figure and return its path."""
    n = np.asarray(runtime['lengths'], dtype=float)
    # Cubic reference anchored at the first measured point.
    reference = runtime['fill_mean'][0] * (n / n[0]) ** THEORETICAL_EXPONENT

    fig, (ax_time, ax_mem) = plt.subplots(1, 2, figsize=(13, 5))

    ax_time.errorbar(n, runtime['fill_mean'], yerr=runtime['fill_std'], fmt='o-', capsize=4, label='Matrix fill')
    ax_time.plot(n, runtime['traceback_mean'], 'v-', label='Traceback')
    ax_time.plot(n, fitted, '--', label=f'Fit $N^{{{k:.2f}}}$')
    ax_time.plot(n, reference, ':', color='grey', label='$N^{3}$ reference')
    ax_time.set(xscale='log', yscale='log', xlabel='Sequence length $N$', ylabel='Seconds',
                title='Fold time')
    ax_time.legend()
    ax_time.grid(True, which='both', alpha=0.3)

    ax_mem.plot(n, peaks_mb, 's-', color='tab:orange')
    ax_mem.set(xscale='log', yscale='log', xlabel='Sequence length $N$', ylabel='Peak traced memory (MB)',
               title='Memory')
    ax_mem.grid(True, which='both', alpha=0.3)

    fig.tight_layout()
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / PLOT_NAME
    fig.savefig(out_path, dpi=200, bbox_inches='tight')
    plt.close(fig)
    return out_path


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the maximum base-pairing fold.")
    parser.add_argument("--lengths", type=int, nargs="+", default=DEFAULT_LENGTHS,
                        help="Sequence lengths to benchmark.")
    parser.add_argument("--trials", type=int, default=3, help="Random sequences per length.")
    parser.add_argument("--wobble", action="store_true", help="Also accept G-U wobble pairs.")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed.")
    parser.add_argument("--output-dir", default="benchmark_results", help="Directory for the figure.")
    args = parser.parse_args(argv)

    config = NussinovFoldingConfig(allow_wobble=args.wobble)
    print(f"Benchmarking lengths {args.lengths} ({args.trials} trial(s), wobble={args.wobble})")

    runtime = benchmark_runtime(args.lengths, config, args.trials, args.seed)
    peaks_mb = benchmark_memory(args.lengths, config, args.seed)

    if len(args.lengths) < 2:
        print("At least two lengths are needed to fit the exponent; skipping the plot.")
        return 0

    k, fitted = fit_exponent(runtime['lengths'], runtime['fill_mean'])
    print(f"Empirical fill exponent: {k:.2f} (bound {THEORETICAL_EXPONENT:.0f})")

    out_path = plot_results(runtime, peaks_mb, fitted, k, Path(args.output_dir))
    print(f"Plot saved to: {out_path}")

    print("\n| N | Fill (s) | Traceback (ms) | Peak memory (MB) | Mean pairs |")
    print("|---|----------|----------------|------------------|------------|")
    for i, n in enumerate(runtime['lengths']):
        print(f"| {n} | {runtime['fill_mean'][i]:.3f} | {runtime['traceback_mean'][i] * 1e3:.2f} "
              f"| {peaks_mb[i]:.2f} | {runtime['mean_score'][i]:.1f} |")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
