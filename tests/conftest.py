"""Shared test fixtures and configuration.

Keeps every test away from the real config, metrics and log locations.
"""

from __future__ import annotations

import logging

import pytest

from tomate_cli.models.config_models import SoundConfig, TimerConfig


@pytest.fixture(autouse=True)
def isolate_app_dirs(tmp_path, monkeypatch):
    """Point logs and config lookups at *tmp_path*."""
    import tomate_cli.utils.logger as logger_mod

    monkeypatch.setattr(
        logger_mod, "user_log_dir", lambda *args, **kwargs: str(tmp_path / "logs")
    )
    monkeypatch.setattr(logger_mod, "_logger", None)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("TOMATE_CONFIG_PATH", raising=False)
    monkeypatch.delenv("TOMATE_METRICS_PATH", raising=False)

    yield

    app_logger = logging.getLogger("tomate_cli")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture()
def timer_config() -> TimerConfig:
    """Standard 25/5/15 minute configuration with fake sound paths."""
    return TimerConfig(
        pomodoro=25 * 60,
        short_break=5 * 60,
        long_break=15 * 60,
        sound=SoundConfig(
            pomodoro_end="path/to/pomodoro.mp3", break_end="path/to/break.mp3"
        ),
    )


@pytest.fixture()
def config_path(tmp_path):
    return tmp_path / "config" / "config.json"


@pytest.fixture()
def metrics_path(tmp_path):
    return tmp_path / "config" / "metrics.json"
