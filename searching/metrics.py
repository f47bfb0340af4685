import csv
import os
import time

import psutil

METRIC_FIELDS = ["timestamp", "operation", "execution_time_ms", "memory_mb"]


def current_memory_mb():
    """Return the current memory (MB) used by this process."""
    process = psutil.Process()
    return process.memory_info().rss / (1024 * 1024)


def measure_execution_metrics(func):
    """
    Measure execution time (ms) and memory delta (MB) for a given function.
    Returns (result, exec_time_ms, memory_used_mb)
    """
    before_mem = current_memory_mb()
    start_time = time.perf_counter()

    result = func()

    end_time = time.perf_counter()
    after_mem = current_memory_mb()

    # search calls finish well under a millisecond
    exec_time_ms = round((end_time - start_time) * 1000, 4)
    memory_used_mb = round(max(after_mem - before_mem, 0), 2)  # delta only

    return result, exec_time_ms, memory_used_mb


def percentile(data, p: float):
    if not data:
        return None
    data = sorted(data)
    k = (len(data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(data):
        return data[-1]
    d0 = data[f] * (c - k)
    d1 = data[c] * (k - f)
    return d0 + d1


def append_metric_to_csv(metric, path):
    """Append a metric entry to the CSV log, writing the header for a new file."""
    file_exists = os.path.isfile(path)
    with open(path, mode="a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=METRIC_FIELDS, extrasaction="ignore")
        if not file_exists:
            writer.writeheader()
        writer.writerow(metric)
