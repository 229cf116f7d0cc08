from pathlib import Path

import pytest

from textualyser.config import (
    AnalysisOptions,
    TextualyserConfig,
    config_from_dict,
    load_config,
)
from textualyser.errors import ConfigurationError


def test_from_flags_requires_three_flags():
    options = AnalysisOptions.from_flags([True, False, True], pattern="cat")
    assert options.flags == (True, False, True)
    assert options.pattern == "cat"
    with pytest.raises(ConfigurationError):
        AnalysisOptions.from_flags([True, False])
    with pytest.raises(ConfigurationError):
        AnalysisOptions.from_flags([True, False, True, False], pattern="cat")


def test_occurrences_without_pattern_is_rejected_eagerly():
    with pytest.raises(ConfigurationError):
        AnalysisOptions(occurrences=True)
    with pytest.raises(ConfigurationError):
        AnalysisOptions.from_flags([False, False, True])


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"averages": False, "pattern": "x", "colour": "blue"})
    assert cfg.averages is False
    assert cfg.pattern == "x"
    assert config_from_dict(None) == TextualyserConfig()


def test_config_options_mirror_fields():
    cfg = TextualyserConfig(frequencies=False, occurrences=True, pattern="the")
    options = cfg.options()
    assert options.flags == (True, False, True)
    assert options.pattern == "the"


def test_invalid_config_values_raise():
    with pytest.raises(ConfigurationError):
        TextualyserConfig(alphabet_size=0)
    with pytest.raises(ConfigurationError):
        TextualyserConfig(encoding="not-a-codec")


def test_load_config_reads_yaml(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "frequencies: false\nalphabet_size: 128\nparallel_passes: false\n",
        encoding="utf-8",
    )
    cfg = load_config(config_path)
    assert cfg.frequencies is False
    assert cfg.alphabet_size == 128
    assert cfg.parallel_passes is False
    assert load_config(None) == TextualyserConfig()


def test_load_config_rejects_non_mapping_yaml(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"alphabet_size": "256"},
        {"alphabet_size": True},
        {"alphabet_size": 12.5},
        {"averages": "yes"},
        {"save_log": 1},
        {"parallel_passes": None},
        {"pattern": 123},
        {"encoding": 8},
    ],
)
def test_config_rejects_values_of_the_wrong_type(overrides):
    with pytest.raises(ConfigurationError):
        config_from_dict(overrides)


def test_load_config_rejects_quoted_alphabet_size(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text('alphabet_size: "256"\n', encoding="utf-8")
    with pytest.raises(ConfigurationError, match="alphabet_size"):
        load_config(config_path)


def test_options_reject_non_string_pattern_and_non_bool_flags():
    with pytest.raises(ConfigurationError, match="pattern"):
        AnalysisOptions(occurrences=True, pattern=123)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError, match="frequencies"):
        AnalysisOptions(frequencies="no")  # type: ignore[arg-type]

    options = AnalysisOptions()
    options.pattern = ["a"]  # type: ignore[assignment]
    with pytest.raises(ConfigurationError):
        options.validate()
