"""
Smoke tests for the benchmark script on tiny inputs.
"""
import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig  # noqa: E402
from rna_nussinov_fold.scripts.algorithm_performance import (  # noqa: E402
    PLOT_NAME,
    benchmark_runtime,
    fit_exponent,
    generate_random_sequence,
    main,
    time_fold,
)


def test_generate_random_sequence_is_seeded():
    seq = generate_random_sequence(40, seed=7)
    assert len(seq) == 40
    assert set(seq) <= set("ACGU")
    assert seq == generate_random_sequence(40, seed=7)


def test_time_fold_reports_score():
    timing = time_fold("GGGGAAAACCCC", NussinovFoldingConfig())
    assert timing['score'] == 4
    assert timing['fill_s'] >= 0.0
    assert timing['traceback_s'] >= 0.0


def test_benchmark_runtime_shapes():
    results = benchmark_runtime([10, 20], NussinovFoldingConfig(), num_trials=2)
    assert results['lengths'] == [10, 20]
    assert len(results['fill_mean']) == 2
    assert len(results['mean_score']) == 2


def test_fit_exponent_recovers_power_law():
    lengths = [10, 20, 40, 80]
    times = [1e-6 * n ** 3 for n in lengths]
    k, fitted = fit_exponent(lengths, times)
    assert k == pytest.approx(3.0)
    assert np.allclose(fitted, times)


def test_main_writes_plot(tmp_path, capsys):
    assert main(["--lengths", "8", "16", "--trials", "1", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / PLOT_NAME).exists()
    assert "Empirical fill exponent" in capsys.readouterr().out
