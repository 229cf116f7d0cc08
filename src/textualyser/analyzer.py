from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .config import AnalysisOptions, TextualyserConfig
from .errors import ConfigurationError, FileError
from .logfile import log_path_for, write_log
from .models import StatisticsReport, TextSource, TokenizedText
from .report import render_report
from .source import read_source
from .stats import StatisticsEngine
from .tokenization import (
    tokenize,
    tokenize_characters,
    tokenize_sentences,
    tokenize_words,
)

LOGGER = logging.getLogger(__name__)

PASS_WORKERS = 3


def tokenize_concurrently(text: str) -> TokenizedText:
    """Run the three tokenizer passes on worker threads over the shared text."""
    with ThreadPoolExecutor(
        max_workers=PASS_WORKERS, thread_name_prefix="textualyser-pass"
    ) as executor:
        characters_future = executor.submit(tokenize_characters, text)
        words_future = executor.submit(tokenize_words, text)
        sentences_future = executor.submit(tokenize_sentences, text)
        return TokenizedText(
            characters=characters_future.result(),
            words=words_future.result(),
            sentences=sentences_future.result(),
        )


def analyze_text(
    text: str,
    options: AnalysisOptions,
    config: TextualyserConfig | None = None,
    report: StatisticsReport | None = None,
) -> StatisticsReport:
    """Tokenize text and compute the metrics enabled in options."""
    cfg = config or TextualyserConfig()
    tokens = tokenize_concurrently(text) if cfg.parallel_passes else tokenize(text)
    engine = StatisticsEngine(alphabet_size=cfg.alphabet_size)
    return engine.compute(tokens, options, report)


class FileAnalyser:
    """
    Analyse one text file at a time and keep the latest report.

    Instances are owned by the caller. ``process`` calls on the same instance
    are serialized, so a report is never reset while another run reads it.
    """

    def __init__(self, config: TextualyserConfig | None = None) -> None:
        self._config = config or TextualyserConfig()
        self._report = StatisticsReport()
        self._options: AnalysisOptions | None = None
        self._source_path: Path | None = None
        self._lock = threading.Lock()

    @property
    def config(self) -> TextualyserConfig:
        return self._config

    @property
    def report(self) -> StatisticsReport:
        """Snapshot of the latest report."""
        with self._lock:
            return self._report.snapshot()

    @property
    def options(self) -> AnalysisOptions | None:
        return self._options

    @property
    def file_path(self) -> Path | None:
        return self._source_path

    def set_file_path(self, path: str | Path) -> None:
        if path is None or str(path) == "":
            raise FileError("File path is not set.")
        self._source_path = Path(path)

    def set_options(self, options: AnalysisOptions) -> None:
        """Validate and store the options used by subsequent ``process`` calls."""
        if not isinstance(options, AnalysisOptions):
            raise ConfigurationError(
                f"Expected AnalysisOptions, got {type(options).__name__}."
            )
        options.validate()
        self._options = options

    def process(
        self,
        path: str | Path | None = None,
        options: AnalysisOptions | None = None,
    ) -> StatisticsReport:
        """
        Read the source file, tokenize it and compute the requested metrics.

        Raises ConfigurationError for invalid options and FileError when the
        source cannot be read; in both cases no tokenizing takes place.
        """
        with self._lock:
            if path is not None:
                self.set_file_path(path)
            if options is not None:
                self.set_options(options)
            active_options = self._options or self._config.options()
            active_options.validate()

            self._report.reset()
            source = read_source(self._source_path, encoding=self._config.encoding)
            LOGGER.info(
                "Analysing %s (averages=%s, frequencies=%s, occurrences=%s)",
                source.path,
                active_options.averages,
                active_options.frequencies,
                active_options.occurrences,
            )
            self._run(source, active_options)
            return self._report.snapshot()

    def _run(self, source: TextSource, options: AnalysisOptions) -> None:
        try:
            analyze_text(source.text, options, self._config, self._report)
        except Exception:
            # Never leave a half-populated report behind.
            self._report.reset()
            raise

    def render(self) -> str:
        """Return the rendered text of the latest report."""
        with self._lock:
            return render_report(self._report)

    def save_log(self) -> Path:
        """Write the rendered report to ``log_<file name>`` beside the source file."""
        with self._lock:
            if self._source_path is None:
                raise FileError("File path is not set.")
            log_path = log_path_for(self._source_path)
            contents = render_report(self._report)
        return write_log(log_path, contents, self._config.encoding)

    def __str__(self) -> str:
        return self.render()
