from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, List

from .models import (
    AVERAGE_METRICS,
    FREQUENCY_METRICS,
    Computed,
    StatisticsReport,
)
from .textutils import is_whitespace

TIMESTAMP_FORMAT = "%d/%m/%Y, %I:%M:%S %p %Z"

AVERAGES_HEADER = "=== Average Lengths ==="
FREQUENCIES_HEADER = "=== Frequencies ==="
CHAR_FREQUENCY_HEADER = "--- Character frequencies (out of 100%) ---"
OTHER_NUMBERS_HEADER = "--- Other numbers ---"
OCCURRENCES_HEADER = "=== Text Occurrences ==="

AVERAGE_LABELS = {
    "avg_sentence_length": "Average sentence length",
    "avg_word_length": "Average word length",
}

# Whole-number lines in the "Other numbers" block, in report order.
COUNT_LABELS = {
    "english_alphanumeric_count": "English alphanumeric characters",
    "non_alphanumeric_count": "Non-alphanumeric characters",
    "whitespace_count": "Whitespaces",
    "international_char_count": "International/Accented characters",
    "suffix_count": "No. of suffixes 'ed' 'ing' 'ly'",
}

_COUNT_LINE_RE = re.compile(
    r"^(?P<label>" + "|".join(re.escape(label) for label in COUNT_LABELS.values())
    + r"): (?P<value>\d+)$"
)
_OCCURRENCE_LINE_RE = re.compile(
    r"^Number of occurrences of (?P<pattern>.*) in text file: (?P<value>\d+)$"
)


def render_report(report: StatisticsReport, now: datetime | None = None) -> str:
    """Render the computed metrics as a human-readable report.

    Returns an empty string when nothing has been computed.
    """
    if report.is_reset():
        return ""
    if now is None:
        now = datetime.now().astimezone()

    lines: List[str] = [now.strftime(TIMESTAMP_FORMAT).rstrip()]
    lines.extend(_average_lines(report))
    lines.extend(_frequency_lines(report))
    lines.extend(_occurrence_lines(report))
    return "\n".join(lines) + "\n"


def _average_lines(report: StatisticsReport) -> List[str]:
    if not _any_computed(report, AVERAGE_METRICS):
        return []
    lines = ["", AVERAGES_HEADER]
    for name, label in AVERAGE_LABELS.items():
        metric = getattr(report, name)
        if isinstance(metric, Computed):
            lines.append(f"{label}: {_two_decimals(metric.value)}")
    return lines


def _frequency_lines(report: StatisticsReport) -> List[str]:
    if not _any_computed(report, FREQUENCY_METRICS):
        return []
    lines = ["", FREQUENCIES_HEADER]
    if isinstance(report.char_frequency, Computed):
        lines.append(CHAR_FREQUENCY_HEADER)
        whitespace_total = 0.0
        for char, frequency in report.char_frequency.value.items():
            if is_whitespace(char):
                whitespace_total += frequency
            else:
                lines.append(f"{char}: {_two_decimals(frequency)}%")
        lines.append(f"Whitespaces: {_two_decimals(whitespace_total)}%")
    lines.append(OTHER_NUMBERS_HEADER)
    for name, label in COUNT_LABELS.items():
        metric = getattr(report, name)
        if isinstance(metric, Computed):
            lines.append(f"{label}: {metric.value:d}")
    return lines


def _occurrence_lines(report: StatisticsReport) -> List[str]:
    metric = report.pattern_occurrence_count
    if not isinstance(metric, Computed):
        return []
    return [
        "",
        OCCURRENCES_HEADER,
        f"Number of occurrences of {report.pattern} in text file: {metric.value:d}",
    ]


def _any_computed(report: StatisticsReport, names: tuple[str, ...]) -> bool:
    return any(isinstance(getattr(report, name), Computed) for name in names)


def _two_decimals(value: float) -> str:
    return f"{value:.2f}"


def read_report_counts(text: str) -> Dict[str, int]:
    """
    Parse the whole-number metrics back out of a rendered report.

    Averages and frequencies are rounded to two decimals when rendered, so
    they are not recovered here.
    """
    label_to_name = {label: name for name, label in COUNT_LABELS.items()}
    counts: Dict[str, int] = {}
    for line in text.splitlines():
        count_match = _COUNT_LINE_RE.match(line)
        if count_match:
            counts[label_to_name[count_match.group("label")]] = int(
                count_match.group("value")
            )
            continue
        occurrence_match = _OCCURRENCE_LINE_RE.match(line)
        if occurrence_match:
            counts["pattern_occurrence_count"] = int(occurrence_match.group("value"))
    return counts


def metric_summary(report: StatisticsReport) -> Dict[str, object]:
    """JSON-friendly view of the computed metrics (frequency table included)."""
    summary: Dict[str, object] = dict(report.computed_values())
    if report.pattern is not None:
        summary["pattern"] = report.pattern
    return summary
