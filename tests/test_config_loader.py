from __future__ import annotations

import pytest

from exercise_grader.config import DEFAULT_API_URL, PACING_INTERVAL_MS
from exercise_grader.config_loader import RunnerConfig, load_config
from exercise_grader.errors import ConfigError


def test_defaults():
    config = RunnerConfig()
    assert config.api_url == DEFAULT_API_URL
    assert config.pacing_interval_ms == PACING_INTERVAL_MS == 205
    assert config.rules_filename == "rules.toml"
    assert config.verbose is False


def test_load_yaml(tmp_path):
    path = tmp_path / "grader_config.yml"
    path.write_text("api_url: http://localhost:2000/api/v2\npacing_interval_ms: 0\nverbose: true\n", encoding="utf-8")

    config = load_config(path)

    assert config.api_url == "http://localhost:2000/api/v2"
    assert config.pacing_interval_ms == 0
    assert config.verbose is True


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "grader_config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == RunnerConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "grader_config.yml"
    path.write_text("api_url: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_non_mapping(tmp_path):
    path = tmp_path / "grader_config.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_negative_delay_rejected(tmp_path):
    path = tmp_path / "grader_config.yml"
    path.write_text("pacing_interval_ms: -5\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="pacing_interval_ms"):
        load_config(path)


def test_overrides_skip_none_and_coerce_strings():
    config = RunnerConfig().with_overrides(api_url=None, pacing_interval_ms="10", request_timeout="2.5")
    assert config.api_url == DEFAULT_API_URL
    assert config.pacing_interval_ms == 10
    assert config.request_timeout == 2.5


def test_invalid_override():
    with pytest.raises(ConfigError, match="command line"):
        RunnerConfig().with_overrides(pacing_interval_ms="soon")
