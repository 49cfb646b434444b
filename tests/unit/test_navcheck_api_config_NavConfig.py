"""Tests for NavConfig loading and validation."""

import json

import pytest

from navcheck.api.config.ConfigError import ConfigError
from navcheck.api.config.NavConfig import NavConfig


def test_defaults_without_config_file(tmp_path):
    config = NavConfig.load(tmp_path)
    assert config == NavConfig()
    assert config.index_files == ["AGENTS.md", "README.md"]
    assert config.guide_dirs == ["guides", "adoption"]
    assert config.strict is False
    assert config.jobs == 1


def test_load_from_root_config_file(tmp_path):
    (tmp_path / ".navcheck.json").write_text(json.dumps({"strict": True, "guide_dirs": ["docs"]}))
    config = NavConfig.load(tmp_path)
    assert config.strict is True
    assert config.guide_dirs == ["docs"]
    assert config.index_files == ["AGENTS.md", "README.md"]


def test_explicit_config_path(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"check_contents": False}))
    assert NavConfig.load(tmp_path, path).check_contents is False


def test_explicit_config_path_must_exist(tmp_path):
    with pytest.raises(ConfigError, match="Configuration file not found"):
        NavConfig.load(tmp_path, tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    (tmp_path / ".navcheck.json").write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        NavConfig.load(tmp_path)


def test_non_object_json(tmp_path):
    (tmp_path / ".navcheck.json").write_text("[1, 2]")
    with pytest.raises(ConfigError, match="expected an object"):
        NavConfig.load(tmp_path)


def test_unknown_field_is_rejected(tmp_path):
    (tmp_path / ".navcheck.json").write_text(json.dumps({"unknown_key": 1}))
    with pytest.raises(ConfigError, match="Configuration validation error: unknown_key"):
        NavConfig.load(tmp_path)


def test_jobs_must_be_positive(tmp_path):
    (tmp_path / ".navcheck.json").write_text(json.dumps({"jobs": 0}))
    with pytest.raises(ConfigError, match="jobs"):
        NavConfig.load(tmp_path)


def test_extensions_are_normalized():
    assert NavConfig(markdown_extensions=["MD", ".Markdown"]).markdown_extensions == [".md", ".markdown"]


def test_with_overrides_ignores_none():
    config = NavConfig(jobs=3).with_overrides(strict=True, jobs=None)
    assert config.strict is True
    assert config.jobs == 3


def test_with_overrides_validates():
    with pytest.raises(ConfigError, match="jobs"):
        NavConfig().with_overrides(jobs=0)
