from __future__ import annotations

from pathlib import Path

SAMPLE_TEXT = "This phrase. contains. multiple sentences."


def write_source(path: Path, text: str) -> Path:
    """Write text to path byte-for-byte so line terminators are not translated."""
    path.write_bytes(text.encode("utf-8"))
    return path


def naive_count(pattern: str, text: str) -> int:
    """Count overlapping occurrences by checking every alignment."""
    return sum(
        1
        for start in range(len(text) - len(pattern) + 1)
        if text[start : start + len(pattern)] == pattern
    )
