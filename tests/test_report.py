from datetime import datetime, timezone

from textualyser.config import AnalysisOptions
from textualyser.models import Computed, StatisticsReport
from textualyser.report import metric_summary, read_report_counts, render_report
from textualyser.stats import StatisticsEngine
from textualyser.tokenization import tokenize

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)


def _report(text: str, options: AnalysisOptions) -> StatisticsReport:
    return StatisticsEngine().compute(tokenize(text), options)


def test_render_report_contains_every_section():
    options = AnalysisOptions(
        averages=True, frequencies=True, occurrences=True, pattern="is"
    )
    rendered = render_report(_report("This is a test.", options), now=FIXED_NOW)
    lines = rendered.splitlines()

    assert lines[0] == "05/03/2024, 02:07:09 PM UTC"
    assert "=== Average Lengths ===" in lines
    assert "Average sentence length: 15.00" in lines
    assert "Average word length: 2.75" in lines
    assert "=== Frequencies ===" in lines
    assert "--- Character frequencies (out of 100%) ---" in lines
    assert "s: 20.00%" in lines
    assert "T: 6.67%" in lines
    assert "Whitespaces: 20.00%" in lines
    assert "English alphanumeric characters: 11" in lines
    assert "Non-alphanumeric characters: 1" in lines
    assert "Whitespaces: 3" in lines
    assert "International/Accented characters: 0" in lines
    assert "No. of suffixes 'ed' 'ing' 'ly': 0" in lines
    assert "=== Text Occurrences ===" in lines
    assert lines[-1] == "Number of occurrences of is in text file: 2"


def test_whitespace_frequencies_are_aggregated():
    options = AnalysisOptions(averages=False, frequencies=True)
    rendered = render_report(_report("a\tb c", options), now=FIXED_NOW)
    assert "Whitespaces: 40.00%" in rendered
    assert "\t:" not in rendered


def test_sections_only_appear_when_computed():
    options = AnalysisOptions(
        averages=False, frequencies=False, occurrences=True, pattern="t"
    )
    rendered = render_report(_report("test", options), now=FIXED_NOW)
    assert "=== Average Lengths ===" not in rendered
    assert "=== Frequencies ===" not in rendered
    assert "Number of occurrences of t in text file: 2" in rendered


def test_reset_report_renders_empty_string():
    assert render_report(StatisticsReport()) == ""


def test_rendered_counts_round_trip():
    options = AnalysisOptions(
        averages=True, frequencies=True, occurrences=True, pattern="ing"
    )
    report = _report("Singing and dancing happily.\r\nJumped over 3 logs!", options)
    counts = read_report_counts(render_report(report, now=FIXED_NOW))

    assert counts == {
        "english_alphanumeric_count": report.english_alphanumeric_count.value,
        "non_alphanumeric_count": report.non_alphanumeric_count.value,
        "whitespace_count": report.whitespace_count.value,
        "international_char_count": report.international_char_count.value,
        "suffix_count": report.suffix_count.value,
        "pattern_occurrence_count": report.pattern_occurrence_count.value,
    }
    assert counts["suffix_count"] == 4
    assert counts["pattern_occurrence_count"] == 3


def test_read_report_counts_ignores_percentages_and_averages():
    text = "Whitespaces: 12.50%\nAverage word length: 4.00\nWhitespaces: 7\n"
    assert read_report_counts(text) == {"whitespace_count": 7}


def test_metric_summary_lists_computed_values():
    report = StatisticsReport()
    report.whitespace_count = Computed(4)
    report.pattern_occurrence_count = Computed(1)
    report.pattern = "cat"
    assert metric_summary(report) == {
        "whitespace_count": 4,
        "pattern_occurrence_count": 1,
        "pattern": "cat",
    }
