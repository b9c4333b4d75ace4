"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at a tmp_path file.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from tomate_cli.models.config_models import TimerConfig
from tomate_cli.services.config_service import (
    ConfigService,
    deep_merge,
    normalize_keys,
    validate_config,
    validate_duration,
)


@pytest.fixture()
def svc(config_path: Path) -> ConfigService:
    return ConfigService(config_path)


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, svc):
        assert svc.load_config() == TimerConfig()

    def test_loads_valid_file(self, svc, config_path):
        _write(config_path, json.dumps({"pomodoro": 600, "shortBreak": 60}))

        config = svc.load_config()

        assert config.pomodoro == 600
        assert config.short_break == 60
        assert config.long_break == 900

    def test_malformed_json_returns_defaults(self, svc, config_path):
        _write(config_path, "{not json")

        with patch("tomate_cli.services.config_service.display_error") as mock_err:
            config = svc.load_config()

        assert config == TimerConfig()
        mock_err.assert_called_once()

    def test_invalid_values_return_defaults(self, svc, config_path):
        _write(config_path, json.dumps({"pomodoro": -1}))

        with patch("tomate_cli.services.config_service.display_error"):
            assert svc.load_config() == TimerConfig()

    def test_undecodable_file_returns_defaults(self, svc, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(b'{"pomodoro": "\xff\xfe"}')

        with patch("tomate_cli.services.config_service.display_error") as mock_err:
            config = svc.load_config()

        assert config == TimerConfig()
        mock_err.assert_called_once()

    @pytest.mark.parametrize("value", [True, "1500", 1500.5])
    def test_non_integer_duration_returns_defaults(self, svc, config_path, value):
        _write(config_path, json.dumps({"pomodoro": value, "shortBreak": 60}))

        with patch("tomate_cli.services.config_service.display_error"):
            config = svc.load_config()

        assert config.pomodoro == 1500
        assert config.short_break == 300

    def test_uses_env_path_when_none_given(self, tmp_path, monkeypatch):
        env_path = tmp_path / "env-config.json"
        _write(env_path, json.dumps({"longBreak": 1200}))
        monkeypatch.setenv("TOMATE_CONFIG_PATH", str(env_path))

        assert ConfigService().load_config().long_break == 1200


# ---------------------------------------------------------------------------
# save_config
# ---------------------------------------------------------------------------


class TestSaveConfig:
    def test_creates_file_and_directories(self, svc, config_path):
        assert svc.save_config({"pomodoro": 1800}) is True

        data = json.loads(config_path.read_text())
        assert data["pomodoro"] == 1800
        assert data["shortBreak"] == 300
        assert "sound" in data

    def test_deep_merges_with_disk(self, svc, config_path):
        _write(
            config_path,
            json.dumps(
                {
                    "pomodoro": 100,
                    "sound": {"pomodoroEnd": "mine.mp3", "breakEnd": "brk.mp3"},
                }
            ),
        )

        assert svc.save_config({"sound": {"breakEnd": "new.mp3"}}) is True

        config = svc.load_config()
        assert config.pomodoro == 100
        assert config.sound.pomodoro_end == "mine.mp3"
        assert config.sound.break_end == "new.mp3"

    def test_accepts_snake_case_keys(self, svc):
        assert svc.save_config({"short_break": 120, "long_break": 600}) is True

        config = svc.load_config()
        assert config.short_break == 120
        assert config.long_break == 600

    def test_accepts_timer_config(self, svc, timer_config):
        assert svc.save_config(timer_config) is True
        assert svc.load_config() == timer_config

    def test_rejects_invalid_duration(self, svc, config_path):
        with patch("tomate_cli.services.config_service.display_error") as mock_err:
            assert svc.save_config({"pomodoro": 0}) is False

        assert not config_path.exists()
        mock_err.assert_called_once()

    def test_rejects_empty_sound(self, svc, config_path):
        with patch("tomate_cli.services.config_service.display_error"):
            assert svc.save_config({"sound": {"breakEnd": ""}}) is False
        assert not config_path.exists()

    def test_write_failure_returns_false(self, svc):
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with patch("tomate_cli.services.config_service.display_error") as mock_err:
                assert svc.save_config({"pomodoro": 60}) is False
        mock_err.assert_called_once()


class TestResetConfig:
    def test_writes_defaults(self, svc, config_path):
        svc.save_config({"pomodoro": 60})

        assert svc.reset_config() is True
        assert svc.load_config() == TimerConfig()
        assert json.loads(config_path.read_text())["pomodoro"] == 1500


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize("value", [1, 60, 86400])
    def test_valid_durations(self, value):
        assert validate_duration(value) is True

    @pytest.mark.parametrize("value", [0, -1, 86401, 1.5, "60", None, True])
    def test_invalid_durations(self, value):
        assert validate_duration(value) is False

    def test_validate_config_messages(self):
        errors = validate_config({"pomodoro": 0, "shortBreak": 300, "long_break": 90000})

        assert errors == [
            "Pomodoro duration must be between 1-86400 seconds (got 0)",
            "Long break must be between 1-86400 seconds (got 90000)",
        ]

    def test_validate_config_ignores_absent_keys(self):
        assert validate_config({}) == []


def test_normalize_keys_nested():
    assert normalize_keys({"short_break": 1, "sound": {"break_end": "x"}}) == {
        "shortBreak": 1,
        "sound": {"breakEnd": "x"},
    }


def test_deep_merge_does_not_mutate_inputs():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    override = {"nested": {"y": 3}}

    merged = deep_merge(base, override)

    assert merged == {"a": 1, "nested": {"x": 1, "y": 3}}
    assert base == {"a": 1, "nested": {"x": 1, "y": 2}}
