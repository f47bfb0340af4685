"""
Benchmark for binary search on a sorted random array.

Every probe case (first, last and middle element, plus one value below and
one above the generated range) is searched ``repeat`` times. Each call is
timed and its memory delta recorded, then summarised per case.
"""

import logging
from datetime import datetime

import pandas as pd
from line_profiler import profile

from searching.bin_search import MAX, MIN, binary_search
from searching.metrics import measure_execution_metrics

logger = logging.getLogger(__name__)

PROBE_CASES = ["first", "last", "middle", "below_min", "above_max"]


def probe_targets(arr, low=MIN, high=MAX):
    if len(arr) == 0:
        raise ValueError("Cannot build probe targets for an empty array")
    return {
        "first": arr[0],
        "last": arr[-1],
        "middle": arr[len(arr) // 2],
        "below_min": low - 1,
        "above_max": high + 1,
    }


@profile
def run_benchmark(arr, repeat: int = 1, targets=None):
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")
    targets = targets if targets is not None else probe_targets(arr)
    results = []
    for case, target in targets.items():
        for _ in range(repeat):
            index, exec_time, mem_used = measure_execution_metrics(lambda: binary_search(arr, target))
            results.append({
                "case": case,
                "target": target,
                "index": index,
                "execution_time_ms": exec_time,
                "memory_mb": mem_used,
            })
        logger.debug("Benchmarked %s (target=%s) %d times", case, target, repeat)
    return results


def summarize(results) -> pd.DataFrame:
    columns = ["case", "count", "mean", "p50", "p95", "max"]
    if not results:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(results)
    times = df.groupby("case", sort=False)["execution_time_ms"]
    summary = times.agg(
        count="count",
        mean="mean",
        p50="median",
        p95=lambda s: s.quantile(0.95),
        max="max",
    ).reset_index()
    return summary[columns]


def to_metrics(summary: pd.DataFrame, results):
    """One metric record per case, in the shape ``append_metric_to_csv`` writes."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    memory = pd.DataFrame(results).groupby("case")["memory_mb"].max() if results else {}
    return [
        {
            "timestamp": timestamp,
            "operation": f"BINARY_SEARCH ({row['case']})",
            "execution_time_ms": round(float(row["mean"]), 4),
            "memory_mb": float(memory[row["case"]]),
        }
        for row in summary.to_dict("records")
    ]


def write_results(results, path):
    pd.DataFrame(results, columns=["case", "target", "index", "execution_time_ms", "memory_mb"]).to_csv(path, index=False)
    logger.info("Wrote per-call CSV to %s", path)
