"""Tests for the benchmark harness."""

import math

import numpy as np
import pandas as pd
import pytest

from closest_pair import benchmark
from closest_pair.benchmark import (
    AgreementError,
    BenchmarkConfig,
    fit_scaling_law,
    growth_exponent,
    records_frame,
    run_benchmark,
    run_instance,
    summarize,
)


def test_run_instance_records_both_solvers():
    rec = run_instance([(0, 0), (5, 5), (1, 1), (10, 10), (2, 2)], family="scenario", seed=1)
    assert rec.n == 5
    assert rec.dc_distance == pytest.approx(math.sqrt(2))
    assert rec.brute_force_distance == pytest.approx(math.sqrt(2))
    assert rec.brute_force_basic_ops == 10
    assert rec.dc_ms >= 0 and rec.brute_force_ms >= 0


def test_run_instance_without_brute_force():
    rec = run_instance([(0, 0), (3, 4)], run_brute_force=False)
    assert rec.dc_distance == 5.0
    assert rec.brute_force_distance is None
    assert rec.brute_force_basic_ops is None


def test_disagreement_raises(monkeypatch):
    monkeypatch.setattr(benchmark, "closest_pair_brute_force", lambda pts, counter: 123.0)
    with pytest.raises(AgreementError, match="brute_force=123.0"):
        run_instance([(0, 0), (3, 4)], family="bad")


def test_run_benchmark_covers_grid_and_skips_large_brute_force():
    config = BenchmarkConfig(sizes=[8, 32, 128], families=["uniform", "grid"], seeds=2,
                             brute_force_limit=32)
    records = run_benchmark(config)
    assert len(records) == 3 * 2 * 2
    assert {(r.family, r.n) for r in records} == {
        (f, n) for f in ["uniform", "grid"] for n in [8, 32, 128]
    }
    assert all((r.brute_force_distance is None) == (r.n > 32) for r in records)


def test_run_benchmark_rejects_unknown_family():
    with pytest.raises(ValueError, match="unknown families"):
        run_benchmark(BenchmarkConfig(families=["uniform", "spiral"]))


def test_summary_and_growth_exponents():
    config = BenchmarkConfig(sizes=[64, 256, 1024], families=["uniform"], seeds=2)
    records = run_benchmark(config)
    summary = summarize(records)
    assert list(summary["n"]) == [64, 256, 1024]
    assert "dc_basic_ops_mean" in summary.columns
    assert "brute_force_ms_std" in summary.columns

    frame = records_frame(records)
    assert growth_exponent(frame, "brute_force_basic_ops") == pytest.approx(2.0, abs=0.05)
    assert growth_exponent(frame, "dc_basic_ops") < 1.5


def test_growth_exponent_needs_two_sizes():
    frame = pd.DataFrame({"n": [10, 10], "ops": [5, 7]})
    assert math.isnan(growth_exponent(frame, "ops"))


def test_skipped_brute_force_columns_stay_numeric():
    frame = records_frame([run_instance([(0, 0), (1, 0), (3, 3), (5, 1)], run_brute_force=False)])
    assert pd.api.types.is_float_dtype(frame["brute_force_basic_ops"])


def test_main_writes_csv_and_report(tmp_path, capsys):
    out = tmp_path / "results" / "bench.csv"
    code = benchmark.main(["--sizes", "10", "40", "--families", "clustered", "--seeds", "1",
                           "--output", str(out), "--log-level", "WARNING"])
    assert code == 0
    report = capsys.readouterr().out
    assert "CLUSTERED:" in report
    assert "Growth exponents" in report

    df = pd.read_csv(out)
    assert len(df) == 2
    assert (df["dc_distance"] - df["brute_force_distance"]).abs().max() < 1e-9


def test_fit_scaling_law_recovers_power_law():
    n = np.array([10, 100, 1000, 10000])
    a, b, r2 = fit_scaling_law(n, 3.0 * n ** 2)
    assert b == pytest.approx(2.0)
    assert a == pytest.approx(3.0)
    assert r2 == pytest.approx(1.0)


def test_growth_exponent_matches_fit_on_means():
    frame = pd.DataFrame({"n": [10, 10, 100, 100], "ops": [90, 110, 900, 1100]})
    _, b, _ = fit_scaling_law(np.array([10, 100]), np.array([100, 1000]))
    assert growth_exponent(frame, "ops") == pytest.approx(b)
    assert b == pytest.approx(1.0)
