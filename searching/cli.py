"""
Command line for the search benchmark and its helper utilities.

Usage examples:
  searching search 5 1 3 5 7 9
  searching factorial 5
  searching csv data.csv --strip-trailing
  searching debug-log --message "Logging check"
  searching bench --size 1000000 --repeat 20 --seed 7 --output results.csv
"""

import argparse
import logging
import sys

from searching.bench import probe_targets, run_benchmark, summarize, to_metrics, write_results
from searching.bin_search import binary_search, generate_sorted_random_array
from searching.config import load_settings
from searching.debug_log import write_debug_log
from searching.factorial import factorial
from searching.metrics import append_metric_to_csv, percentile
from searching.read_csv import read_csv

logger = logging.getLogger(__name__)


def parse_value(raw: str):
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            pass
    return raw


def cmd_search(args, settings):
    values = [parse_value(v) for v in args.values]
    target = parse_value(args.target)
    try:
        print(binary_search(values, target))
    except TypeError as e:
        print(f"Cannot compare {target!r} with the given values: {e}", file=sys.stderr)
        return 2
    return 0


def cmd_factorial(args, settings):
    try:
        print(factorial(args.n))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


def cmd_csv(args, settings):
    path = args.path or settings["csv_file"]
    try:
        rows = read_csv(path, strip_trailing=args.strip_trailing)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading CSV file: {e}", file=sys.stderr)
        return 1
    for fields in rows:
        print(fields)
    return 0


def cmd_debug_log(args, settings):
    try:
        log_file = write_debug_log(args.message, tag=args.tag, log_dir=args.log_dir)
    except OSError as e:
        print(f"Failed to write: {e}", file=sys.stderr)
        return 1
    print(f"Successfully wrote to {log_file}")
    return 0


def cmd_bench(args, settings):
    size = args.size if args.size is not None else settings["array_size"]
    low, high = settings["min"], settings["max"]
    if size < 1:
        print("Array size must be at least 1", file=sys.stderr)
        return 2
    if args.repeat < 1:
        print("Repeat count must be at least 1", file=sys.stderr)
        return 2

    array = generate_sorted_random_array(size, low, high, seed=args.seed)
    targets = probe_targets(array, low, high)
    print(f"Array size : {size} , Range : [{low}, {high}]")
    for case, target in targets.items():
        print(f"Bin Search {case} ({target}) : {binary_search(array, target)}")

    results = run_benchmark(array, repeat=args.repeat, targets=targets)
    latencies = [r["execution_time_ms"] for r in results]

    def ms(x):
        return f"{x:.4f} ms" if x is not None else 'n/a'

    print('\nSummary:')
    print(f"Total searches: {len(results)}")
    print(f"Mean: {ms(sum(latencies) / len(latencies))}")
    print(f"p50: {ms(percentile(latencies, 50))}")
    print(f"p95: {ms(percentile(latencies, 95))}")
    print(f"p99: {ms(percentile(latencies, 99))}")
    summary = summarize(results)
    print()
    print(summary.to_string(index=False))

    try:
        if args.output:
            write_results(results, args.output)
            print(f"Wrote per-search CSV to {args.output}")
        metrics_csv = args.metrics_csv or settings["metrics_csv"]
        if metrics_csv:
            for metric in to_metrics(summary, results):
                append_metric_to_csv(metric, metrics_csv)
            print(f"Appended metrics to {metrics_csv}")
    except OSError as e:
        print(f"Failed to write results: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="searching", description="Binary search benchmark and utilities")
    p.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("search", help="Binary search TARGET in the ascending VALUES")
    s.add_argument("target")
    s.add_argument("values", nargs="*")
    s.set_defaults(func=cmd_search)

    f = sub.add_parser("factorial", help="Print N!")
    f.add_argument("n", type=int)
    f.set_defaults(func=cmd_factorial)

    c = sub.add_parser("csv", help="Split a CSV file by newline then comma")
    c.add_argument("path", nargs="?", default=None)
    c.add_argument("--strip-trailing", action="store_true", help="Drop the empty row after a final newline")
    c.set_defaults(func=cmd_csv)

    d = sub.add_parser("debug-log", help="Append a timestamped line to session_debug.log")
    d.add_argument("--message", "-m", default="Logging check")
    d.add_argument("--tag", default="TEST")
    d.add_argument("--log-dir", default=None)
    d.set_defaults(func=cmd_debug_log)

    b = sub.add_parser("bench", help="Time binary search on a sorted random array")
    b.add_argument("--size", "-n", type=int, default=None)
    b.add_argument("--repeat", "-r", type=int, default=1)
    b.add_argument("--seed", type=int, default=None)
    b.add_argument("--output", "-o", default=None, help="CSV output file path")
    b.add_argument("--metrics-csv", default=None, help="Append one metric row per probe case (default: SEARCH_METRICS_CSV)")
    b.set_defaults(func=cmd_bench)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    level = logging.DEBUG if args.verbose else getattr(logging, settings["log_level"], logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.debug("Running %s", args.command)
    return args.func(args, settings)


if __name__ == '__main__':
    sys.exit(main())
