import csv

import pytest

from searching.metrics import (
    METRIC_FIELDS,
    append_metric_to_csv,
    current_memory_mb,
    measure_execution_metrics,
    percentile,
)


def test_current_memory_is_positive():
    assert current_memory_mb() > 0


def test_measure_execution_metrics_returns_result():
    result, exec_time, mem_used = measure_execution_metrics(lambda: sum(range(1000)))
    assert result == 499500
    assert exec_time >= 0
    assert mem_used >= 0


def test_percentile():
    assert percentile([], 50) is None
    assert percentile([4, 1, 3, 2], 50) == pytest.approx(2.5)
    assert percentile([1, 2, 3], 100) == 3
    assert percentile([7], 95) == 7


def test_append_metric_writes_header_once(tmp_path):
    path = tmp_path / "metrics.csv"
    metric = {"timestamp": "2024-01-01 00:00:00", "operation": "BINARY_SEARCH (first)",
              "execution_time_ms": 0.01, "memory_mb": 0.0}
    append_metric_to_csv(metric, path)
    append_metric_to_csv(dict(metric, operation="BINARY_SEARCH (last)"), path)
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == METRIC_FIELDS
    assert len(rows) == 3
    assert rows[2][1] == "BINARY_SEARCH (last)"
