import pandas as pd
import pytest

from searching.bench import PROBE_CASES, probe_targets, run_benchmark, summarize, to_metrics, write_results
from searching.bin_search import generate_sorted_random_array


@pytest.fixture
def array():
    return generate_sorted_random_array(2000, 1000, 10000, seed=11)


def test_probe_targets(array):
    targets = probe_targets(array, 1000, 10000)
    assert list(targets) == PROBE_CASES
    assert targets["first"] == array[0]
    assert targets["last"] == array[-1]
    assert targets["middle"] == array[1000]
    assert targets["below_min"] == 999
    assert targets["above_max"] == 10001


def test_probe_targets_empty():
    with pytest.raises(ValueError):
        probe_targets([])


def test_run_benchmark_finds_and_misses(array):
    results = run_benchmark(array, repeat=3)
    assert len(results) == 3 * len(PROBE_CASES)
    for r in results:
        if r["case"] in ("below_min", "above_max"):
            assert r["index"] == -1
        else:
            assert array[r["index"]] == r["target"]
        assert r["execution_time_ms"] >= 0


def test_run_benchmark_rejects_zero_repeat(array):
    with pytest.raises(ValueError):
        run_benchmark(array, repeat=0)


def test_summarize(array):
    summary = summarize(run_benchmark(array, repeat=4))
    assert list(summary.columns) == ["case", "count", "mean", "p50", "p95", "max"]
    assert list(summary["case"]) == PROBE_CASES
    assert (summary["count"] == 4).all()
    assert (summary["max"] >= summary["p50"]).all()


def test_summarize_empty():
    assert summarize([]).empty


def test_to_metrics(array):
    results = run_benchmark(array, repeat=2)
    metrics = to_metrics(summarize(results), results)
    assert [m["operation"] for m in metrics] == [f"BINARY_SEARCH ({c})" for c in PROBE_CASES]
    assert set(metrics[0]) == {"timestamp", "operation", "execution_time_ms", "memory_mb"}


def test_write_results(tmp_path, array):
    path = tmp_path / "results.csv"
    write_results(run_benchmark(array), path)
    df = pd.read_csv(path)
    assert list(df.columns) == ["case", "target", "index", "execution_time_ms", "memory_mb"]
    assert len(df) == len(PROBE_CASES)
