"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so values can be
kept there instead of exported in the shell.
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULTS = {
    "min": 1000,
    "max": 10000,
    "array_size": 10_00_000,
    "csv_file": "data.csv",
    "log_level": "INFO",
}


def _get_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.replace("_", ""))
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def default_log_dir():
    return os.path.join(os.getcwd(), "data")


def log_dir():
    return os.getenv("SEARCH_LOG_DIR") or default_log_dir()


def load_settings():
    """Return a fresh settings dict built from the current environment.

    ``metrics_csv`` is None unless SEARCH_METRICS_CSV is set.
    """
    low = _get_int("SEARCH_MIN", DEFAULTS["min"])
    high = _get_int("SEARCH_MAX", DEFAULTS["max"])
    if low > high:
        raise ValueError(f"SEARCH_MIN ({low}) must not be greater than SEARCH_MAX ({high})")
    return {
        "min": low,
        "max": high,
        "array_size": _get_int("SEARCH_ARRAY_SIZE", DEFAULTS["array_size"]),
        "log_dir": log_dir(),
        "csv_file": os.getenv("SEARCH_CSV_FILE") or DEFAULTS["csv_file"],
        "metrics_csv": os.getenv("SEARCH_METRICS_CSV") or None,
        "log_level": (os.getenv("SEARCH_LOG_LEVEL") or DEFAULTS["log_level"]).upper(),
    }
