from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import FileError, ParseError
from .models import TextSource

LOGGER = logging.getLogger(__name__)


def validate_source_path(path: str | Path | None) -> Path:
    """Check that path names an existing, readable file and return it."""
    if path is None or str(path) == "":
        raise FileError("File path is not set.")
    source_path = Path(path)
    if not source_path.exists():
        raise FileError(f"File cannot be found: {source_path}")
    if not source_path.is_file():
        raise FileError(f"Path is not a file: {source_path}")
    if not os.access(source_path, os.R_OK):
        raise FileError(f"File cannot be read: {source_path}")
    return source_path


def read_source(path: str | Path | None, encoding: str = "utf-8") -> TextSource:
    """
    Read the whole file once so every tokenizer pass can share the buffer.

    Line terminators are kept exactly as stored on disk; the character pass
    is responsible for collapsing them.
    """
    source_path = validate_source_path(path)
    try:
        with source_path.open("r", encoding=encoding, newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"File is not valid {encoding} text: {source_path}"
        ) from exc
    except OSError as exc:
        raise FileError(f"Unable to read {source_path}: {exc}") from exc
    LOGGER.debug("Read %d characters from %s", len(text), source_path)
    return TextSource(path=source_path, text=text)
