from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileError

LOGGER = logging.getLogger(__name__)

LOG_FILE_PREFIX = "log_"


def log_path_for(source_path: str | Path) -> Path:
    """Return the sibling log path, e.g. ``notes.txt`` -> ``log_notes.txt``."""
    source = Path(source_path)
    return source.with_name(LOG_FILE_PREFIX + source.name)


def write_log(log_path: str | Path, contents: str, encoding: str = "utf-8") -> Path:
    """Write contents to log_path, replacing any existing file."""
    destination = Path(log_path)
    try:
        destination.write_text(contents, encoding=encoding)
    except OSError as exc:
        raise FileError(f"Unable to write log file {destination}: {exc}") from exc
    LOGGER.info("Saved analysis log to %s", destination)
    return destination
