from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Generic, List, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Computed(Generic[T]):
    """A metric that was requested and calculated."""

    value: T


class NotRequested:
    """Marker for a metric that was not requested in the current run."""

    __slots__ = ()
    _instance: "NotRequested | None" = None

    def __new__(cls) -> "NotRequested":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_REQUESTED"

    def __bool__(self) -> bool:
        return False


NOT_REQUESTED = NotRequested()

Metric = Union[Computed[T], NotRequested]


@dataclass(frozen=True, slots=True)
class TextSource:
    """Text buffered from a single file read."""

    path: Path
    text: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True, slots=True)
class CharacterStream:
    """Source characters with line terminators collapsed to single spaces."""

    text: str
    line_terminator_count: int = 0


@dataclass(frozen=True, slots=True)
class TokenizedText:
    """The three views produced by one tokenizer run."""

    characters: CharacterStream
    words: List[str] = field(default_factory=list)
    sentences: List[str] = field(default_factory=list)


@dataclass(slots=True)
class StatisticsReport:
    """Results of one analysis run; every metric starts as NOT_REQUESTED."""

    avg_sentence_length: Metric[float] = NOT_REQUESTED
    avg_word_length: Metric[float] = NOT_REQUESTED
    char_frequency: Metric[Dict[str, float]] = NOT_REQUESTED
    english_alphanumeric_count: Metric[int] = NOT_REQUESTED
    non_alphanumeric_count: Metric[int] = NOT_REQUESTED
    whitespace_count: Metric[int] = NOT_REQUESTED
    international_char_count: Metric[int] = NOT_REQUESTED
    suffix_count: Metric[int] = NOT_REQUESTED
    pattern_occurrence_count: Metric[int] = NOT_REQUESTED
    pattern: str | None = None

    def reset(self) -> None:
        """Return every metric to NOT_REQUESTED and forget the pattern."""
        for name in METRIC_NAMES:
            setattr(self, name, NOT_REQUESTED)
        self.pattern = None

    def is_reset(self) -> bool:
        return self.pattern is None and not any(
            isinstance(getattr(self, name), Computed) for name in METRIC_NAMES
        )

    def snapshot(self) -> "StatisticsReport":
        """Return a copy that shares no mutable state with this report."""
        copy = replace(self)
        if isinstance(self.char_frequency, Computed):
            copy.char_frequency = Computed(dict(self.char_frequency.value))
        return copy

    def metric(self, name: str) -> Metric:
        if name not in METRIC_NAMES:
            raise KeyError(f"Unknown metric '{name}'.")
        return getattr(self, name)

    def computed_values(self) -> Dict[str, object]:
        """Return a plain mapping of the metrics that were computed."""
        values: Dict[str, object] = {}
        for name in METRIC_NAMES:
            current = getattr(self, name)
            if isinstance(current, Computed):
                values[name] = current.value
        return values


AVERAGE_METRICS = ("avg_sentence_length", "avg_word_length")
FREQUENCY_METRICS = (
    "char_frequency",
    "english_alphanumeric_count",
    "non_alphanumeric_count",
    "whitespace_count",
    "international_char_count",
    "suffix_count",
)
OCCURRENCE_METRICS = ("pattern_occurrence_count",)
METRIC_NAMES = AVERAGE_METRICS + FREQUENCY_METRICS + OCCURRENCE_METRICS
