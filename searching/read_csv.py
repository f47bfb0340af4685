"""Naive CSV reading.

Lines are split on newlines and fields on commas. There is no support for
quoting or escaping, so a comma inside a field always starts a new field.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def split_csv_text(text: str, strip_trailing: bool = False) -> list[list[str]]:
    lines = text.split("\n")
    if strip_trailing and lines and lines[-1] == "":
        lines.pop()
    rows = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        rows.append(line.split(","))
    return rows


def read_csv(path, encoding: str = "utf-8", strip_trailing: bool = False) -> list[list[str]]:
    """Read ``path`` and split it into rows of raw string fields."""
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            data = f.read()
    except FileNotFoundError:
        logger.debug("CSV file not found: %s", path)
        raise
    rows = split_csv_text(data, strip_trailing=strip_trailing)
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


def csv_to_dataframe(rows, header: bool = True) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame()
    width = max(len(r) for r in rows)
    padded = [list(r) + [None] * (width - len(r)) for r in rows]
    if header:
        columns = [c if c is not None else f"column_{i}" for i, c in enumerate(padded[0])]
        return pd.DataFrame(padded[1:], columns=columns)
    return pd.DataFrame(padded)
