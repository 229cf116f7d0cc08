from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, Sequence

from .config import AnalysisOptions
from .matching import EXTENDED_ASCII_ALPHABET_SIZE, StringMatcher
from .models import Computed, StatisticsReport, TokenizedText
from .textutils import (
    has_counted_suffix,
    is_english_alphanumeric,
    is_international,
    is_non_alphanumeric,
    is_whitespace,
)

LOGGER = logging.getLogger(__name__)


def average_length(items: Sequence[str]) -> float:
    """Mean character length of items; 0.0 for an empty sequence."""
    if not items:
        return 0.0
    return sum(len(item) for item in items) / len(items)


def character_frequency(characters: str) -> Dict[str, float]:
    """
    Map each distinct character to its share of the stream, as a percentage.

    Values are not rounded; rendering rounds to two decimals. Keys are
    ordered by code point.
    """
    total = len(characters)
    if total == 0:
        return {}
    counts = Counter(characters)
    return {char: counts[char] / total * 100.0 for char in sorted(counts)}


def count_english_alphanumerics(characters: Iterable[str]) -> int:
    return sum(1 for char in characters if is_english_alphanumeric(char))


def count_non_alphanumerics(characters: Iterable[str]) -> int:
    return sum(1 for char in characters if is_non_alphanumeric(char))


def count_whitespaces(characters: Iterable[str], line_terminator_count: int = 0) -> int:
    """Count whitespace characters, adding the collapsed line terminators."""
    return line_terminator_count + sum(1 for char in characters if is_whitespace(char))


def count_international_chars(characters: Iterable[str]) -> int:
    return sum(1 for char in characters if is_international(char))


def count_suffixes(words: Iterable[str]) -> int:
    """Count words ending in 'ed', 'ing' or 'ly'."""
    return sum(1 for word in words if has_counted_suffix(word))


class StatisticsEngine:
    """Compute the metrics selected by an AnalysisOptions into a StatisticsReport."""

    def __init__(self, alphabet_size: int = EXTENDED_ASCII_ALPHABET_SIZE) -> None:
        self.alphabet_size = alphabet_size

    def compute(
        self,
        tokens: TokenizedText,
        options: AnalysisOptions,
        report: StatisticsReport | None = None,
    ) -> StatisticsReport:
        """Populate report (a fresh one when omitted) for every enabled option."""
        options.validate()
        if report is None:
            report = StatisticsReport()

        if options.averages:
            self.compute_averages(tokens, report)
        if options.frequencies:
            self.compute_frequencies(tokens, report)
        if options.occurrences:
            self.compute_occurrences(tokens, options.pattern or "", report)
        return report

    def compute_averages(self, tokens: TokenizedText, report: StatisticsReport) -> None:
        if not tokens.sentences or not tokens.words:
            LOGGER.warning(
                "Averaging over %d sentences and %d words; empty lists average to 0.",
                len(tokens.sentences),
                len(tokens.words),
            )
        report.avg_sentence_length = Computed(average_length(tokens.sentences))
        report.avg_word_length = Computed(average_length(tokens.words))

    def compute_frequencies(
        self, tokens: TokenizedText, report: StatisticsReport
    ) -> None:
        characters = tokens.characters.text
        report.char_frequency = Computed(character_frequency(characters))
        report.english_alphanumeric_count = Computed(
            count_english_alphanumerics(characters)
        )
        report.non_alphanumeric_count = Computed(count_non_alphanumerics(characters))
        report.whitespace_count = Computed(
            count_whitespaces(characters, tokens.characters.line_terminator_count)
        )
        report.international_char_count = Computed(
            count_international_chars(characters)
        )
        report.suffix_count = Computed(count_suffixes(tokens.words))

    def compute_occurrences(
        self, tokens: TokenizedText, pattern: str, report: StatisticsReport
    ) -> None:
        if not pattern:
            LOGGER.info("Empty search pattern; skipping text occurrences.")
            return
        matcher = StringMatcher(pattern, self.alphabet_size)
        report.pattern = pattern
        report.pattern_occurrence_count = Computed(
            matcher.count_occurrences(tokens.characters.text)
        )
