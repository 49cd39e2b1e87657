"""Tests for configuration settings loading."""

import importlib
from pathlib import Path

import pytest

ENV_KEYS = [
    "DAYLOG_ROOT",
    "LOG_ROOT",
    "DAYLOG_DIR_NAME",
    "DAYLOG_ENCODING",
    "DAYLOG_TAG_WIDTH",
    "DAYLOG_MIRROR_STDOUT",
    "DAYLOG_DIAGNOSTICS_LEVEL",
    "LOG_LEVEL",
    "DAYLOG_LOG_ROOT",
    "DAYLOG_LOG_DIR_NAME",
    "DAYLOG_LOG_ENCODING",
]


def reload_settings():
    config_module = importlib.import_module("config.config")
    importlib.reload(config_module)
    return config_module.settings


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setenv("SETTINGS_SKIP_DOTENV", "1")
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(importlib.import_module("config.config"))


def test_defaults(clean_env, tmp_path):
    clean_env.chdir(tmp_path)

    settings = reload_settings()

    assert settings.log_root == tmp_path.resolve()
    assert settings.log_dir_name == "logs"
    assert settings.log_encoding == "utf-8"
    assert settings.tag_width == 11
    assert settings.mirror_stdout is True
    assert settings.diagnostics_level == "INFO"


def test_env_overrides(clean_env, tmp_path):
    target = tmp_path / "robot-root"
    clean_env.setenv("DAYLOG_ROOT", str(target))
    clean_env.setenv("DAYLOG_DIR_NAME", "journal")
    clean_env.setenv("DAYLOG_TAG_WIDTH", "15")
    clean_env.setenv("DAYLOG_MIRROR_STDOUT", "off")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = reload_settings()

    assert settings.log_root == target.resolve()
    assert settings.log_dir_name == "journal"
    assert settings.tag_width == 15
    assert settings.mirror_stdout is False
    assert settings.diagnostics_level == "DEBUG"


def test_canonical_root_wins_over_alias(clean_env, tmp_path):
    clean_env.setenv("LOG_ROOT", str(tmp_path / "alias"))
    clean_env.setenv("DAYLOG_ROOT", str(tmp_path / "canonical"))

    settings = reload_settings()

    assert settings.log_root == (tmp_path / "canonical").resolve()


def test_invalid_and_small_tag_width(clean_env):
    clean_env.setenv("DAYLOG_TAG_WIDTH", "wide")
    assert reload_settings().tag_width == 11

    clean_env.setenv("DAYLOG_TAG_WIDTH", "0")
    assert reload_settings().tag_width == 1


def test_relative_root_is_made_absolute(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    clean_env.setenv("DAYLOG_ROOT", "var")

    settings = reload_settings()

    assert settings.log_root == (tmp_path / "var").resolve()
    assert Path(settings.log_root).is_absolute()


def test_field_names_are_read_with_prefix(clean_env, tmp_path):
    clean_env.setenv("DAYLOG_LOG_ROOT", str(tmp_path))
    clean_env.setenv("DAYLOG_LOG_DIR_NAME", "archive")
    clean_env.setenv("DAYLOG_DIAGNOSTICS_LEVEL", "warning")

    settings = reload_settings()

    assert settings.log_root == tmp_path.resolve()
    assert settings.log_dir_name == "archive"
    assert settings.diagnostics_level == "WARNING"
