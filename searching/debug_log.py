import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from searching import config

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "session_debug.log"


def _one_line(text):
    return " ".join(str(text).splitlines())


def format_line(message, tag, when=None):
    when = when or datetime.now(timezone.utc)
    message, tag = _one_line(message), _one_line(tag)
    return f"[{tag}] {message} at {when.isoformat()}\n"


def write_debug_log(message: str = "Logging check", tag: str = "TEST", log_dir=None) -> Path:
    """Append one timestamped line to ``session_debug.log`` and return its path.

    The directory is created if needed. ``log_dir`` falls back to the
    ``SEARCH_LOG_DIR`` setting, which itself defaults to ``<cwd>/data``.
    Line breaks in ``message`` or ``tag`` become spaces so each call adds one line.
    """
    log_dir = Path(log_dir or config.log_dir())
    logger.debug("Log Dir: %s", log_dir)
    log_file = log_dir / LOG_FILE_NAME
    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(format_line(message, tag))
    except OSError:
        logger.debug("Failed to write to %s", log_file)
        raise
    return log_file
