from __future__ import annotations

import codecs
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml

from .errors import ConfigurationError

OPTION_COUNT = 3
FLAG_FIELDS = ("averages", "frequencies", "occurrences")


@dataclass(slots=True)
class AnalysisOptions:
    """Which statistic categories to compute, plus the text occurrence pattern."""

    averages: bool = True
    frequencies: bool = True
    occurrences: bool = False
    pattern: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_flags(
        cls, flags: Sequence[bool], pattern: str | None = None
    ) -> "AnalysisOptions":
        """Build options from an [averages, frequencies, occurrences] flag triple."""
        if len(flags) != OPTION_COUNT:
            raise ConfigurationError(
                f"Expected {OPTION_COUNT} option flags, got {len(flags)}."
            )
        averages, frequencies, occurrences = (bool(flag) for flag in flags)
        return cls(
            averages=averages,
            frequencies=frequencies,
            occurrences=occurrences,
            pattern=pattern,
        )

    @property
    def flags(self) -> tuple[bool, bool, bool]:
        return (self.averages, self.frequencies, self.occurrences)

    def validate(self) -> None:
        _require_bools(self, FLAG_FIELDS)
        _require_pattern(self.pattern)
        if self.occurrences and self.pattern is None:
            raise ConfigurationError(
                "The text occurrences option is set but no pattern was given."
            )


@dataclass(slots=True)
class TextualyserConfig:
    """Configuration options for the file analyser."""

    averages: bool = True
    frequencies: bool = True
    occurrences: bool = False
    pattern: str | None = None
    alphabet_size: int = 256
    encoding: str = "utf-8"
    parallel_passes: bool = True
    save_log: bool = False

    def __post_init__(self) -> None:
        _require_bools(self, FLAG_FIELDS + ("parallel_passes", "save_log"))
        _require_pattern(self.pattern)
        if isinstance(self.alphabet_size, bool) or not isinstance(
            self.alphabet_size, int
        ):
            raise ConfigurationError(
                f"alphabet_size must be an integer, got {self.alphabet_size!r}."
            )
        if self.alphabet_size <= 0:
            raise ConfigurationError(
                f"alphabet_size must be positive, got {self.alphabet_size}."
            )
        if not isinstance(self.encoding, str):
            raise ConfigurationError(f"encoding must be a string, got {self.encoding!r}.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown encoding '{self.encoding}'.") from exc

    def options(self) -> AnalysisOptions:
        """Return the default AnalysisOptions described by this configuration."""
        return AnalysisOptions(
            averages=self.averages,
            frequencies=self.frequencies,
            occurrences=self.occurrences,
            pattern=self.pattern,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _require_bools(target: object, names: Sequence[str]) -> None:
    for name in names:
        value = getattr(target, name)
        if not isinstance(value, bool):
            raise ConfigurationError(f"{name} must be true or false, got {value!r}.")


def _require_pattern(pattern: object) -> None:
    if pattern is not None and not isinstance(pattern, str):
        raise ConfigurationError(
            f"pattern must be a string, got {type(pattern).__name__}."
        )


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(TextualyserConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> TextualyserConfig:
    """Build a TextualyserConfig from a dictionary-like input."""
    if data is None:
        return TextualyserConfig()
    return TextualyserConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TextualyserConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ConfigurationError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TextualyserConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TextualyserConfig()
    return config_from_yaml(path)
