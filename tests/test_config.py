"""Unit tests for settings management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from oxlint_x.config import (
    APP_NAME,
    DEFAULT_CONFIG_FILE_NAME,
    TEMP_DIR_NAME,
    FilesConfig,
    LoggingConfig,
    RunnerConfig,
    Settings,
    _strip_comment_fields,
    get_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in [
        "OXLINT_X_RUNNER__BINARY_PATH",
        "OXLINT_X_RUNNER__TIMEOUT_SECONDS",
        "OXLINT_X_FILES__CONFIG_FILE_NAME",
        "OXLINT_X_LOGGING__LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_app_name_constant():
    assert APP_NAME == "oxlint-x"


def test_default_values():
    """Defaults match the documented behaviour."""
    settings = Settings()

    assert settings.runner.binary_path is None
    assert settings.runner.search_root is None
    assert settings.runner.timeout_seconds == 30.0
    assert settings.runner.max_output_bytes == 10 * 1024 * 1024

    assert settings.files.config_file_name == DEFAULT_CONFIG_FILE_NAME == ".oxlintrc.json"
    assert settings.files.temp_dir is None
    assert settings.files.default_extension == "js"

    assert settings.logging.level == "WARNING"
    assert settings.logging.file is None


def test_default_temp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert Settings().temp_dir == Path.cwd() / "node_modules" / TEMP_DIR_NAME


def test_explicit_temp_dir(tmp_path):
    settings = Settings(files=FilesConfig(temp_dir=str(tmp_path / "scratch")))

    assert settings.temp_dir == tmp_path / "scratch"


def test_env_override(monkeypatch):
    monkeypatch.setenv("OXLINT_X_RUNNER__TIMEOUT_SECONDS", "60")
    monkeypatch.setenv("OXLINT_X_FILES__CONFIG_FILE_NAME", "oxlint.json")

    settings = Settings()

    assert settings.runner.timeout_seconds == 60.0
    assert settings.files.config_file_name == "oxlint.json"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        RunnerConfig(timeout_seconds=0)


def test_blank_binary_path_rejected():
    with pytest.raises(ValidationError):
        RunnerConfig(binary_path="   ")


def test_log_level_normalized():
    assert LoggingConfig(level="debug").level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


def test_strip_comment_fields():
    data = {"_comment": "x", "$schema": "y", "runner": {"_note": 1, "timeout_seconds": 5}}

    assert _strip_comment_fields(data) == {"runner": {"timeout_seconds": 5}}
    assert _strip_comment_fields([1, 2]) == [1, 2]


def test_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"_comment": "ignored", "runner": {"timeout_seconds": 12}}), encoding="utf-8")

    settings = Settings.from_file(path)

    assert settings.runner.timeout_seconds == 12


def test_from_missing_file(tmp_path):
    assert Settings.from_file(tmp_path / "missing.json").runner.timeout_seconds == 30.0


def test_get_settings_with_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logging": {"level": "info"}}), encoding="utf-8")

    settings = get_settings(path)

    assert settings.logging.level == "INFO"


def test_env_beats_settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"runner": {"timeout_seconds": 12}}), encoding="utf-8")
    monkeypatch.setenv("OXLINT_X_RUNNER__TIMEOUT_SECONDS", "99")

    assert get_settings(path).runner.timeout_seconds == 99


def test_get_settings_is_cached():
    first = get_settings(_force_reload=True)

    assert get_settings() is first


def test_force_reload_creates_new_instance():
    first = get_settings(_force_reload=True)

    assert get_settings(_force_reload=True) is not first
