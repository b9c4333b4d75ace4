"""Configuration service for the timer's ``config.json``.

Loading never fails: a missing, unreadable or invalid file yields the
default configuration. Saving merges a partial update into what is on
disk, validates the result and reports success as a boolean.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tomate_cli.models.config_models import (
    MAX_DURATION_SECONDS,
    MIN_DURATION_SECONDS,
    TimerConfig,
)
from tomate_cli.utils.errors import display_error
from tomate_cli.utils.logger import get_logger
from tomate_cli.utils.paths import resolve_config_path

# Python attribute name -> on-disk key
_KEY_ALIASES = {
    "short_break": "shortBreak",
    "long_break": "longBreak",
    "pomodoro_end": "pomodoroEnd",
    "break_end": "breakEnd",
}

_DURATION_LABELS = {
    "pomodoro": "Pomodoro duration",
    "shortBreak": "Short break",
    "longBreak": "Long break",
}


def validate_duration(seconds: Any) -> bool:
    """True if *seconds* is a whole number of seconds within 1-86400."""
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        return False
    return MIN_DURATION_SECONDS <= seconds <= MAX_DURATION_SECONDS


def normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Rewrite snake_case keys to their on-disk camelCase spelling."""
    normalized = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = normalize_keys(value)
        normalized[_KEY_ALIASES.get(key, key)] = value
    return normalized


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into a copy of *base*."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(partial: dict[str, Any]) -> list[str]:
    """Return a human readable error for every invalid duration in *partial*."""
    errors = []
    normalized = normalize_keys(partial)
    for key, label in _DURATION_LABELS.items():
        if key in normalized and not validate_duration(normalized[key]):
            errors.append(
                f"{label} must be between {MIN_DURATION_SECONDS}-"
                f"{MAX_DURATION_SECONDS} seconds (got {normalized[key]})"
            )
    return errors


class ConfigService:
    """Loads, validates and persists the timer configuration."""

    def __init__(self, config_path: Path | str | None = None):
        self.config_path = resolve_config_path(config_path)
        self.logger = get_logger(__name__)

    def load_config(self) -> TimerConfig:
        """Load configuration, falling back to defaults on any problem."""
        if not self.config_path.exists():
            return TimerConfig()

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = json.load(f)
            return TimerConfig.model_validate(data)
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            ValidationError,
        ) as e:
            display_error("Error loading config", e)
            return TimerConfig()

    def save_config(self, partial: dict[str, Any] | TimerConfig) -> bool:
        """Merge *partial* into the stored config and write it back."""
        if isinstance(partial, TimerConfig):
            partial = partial.to_file_dict()

        errors = validate_config(partial)
        if errors:
            for error in errors:
                display_error("Invalid configuration", error)
            return False

        merged = deep_merge(self.load_config().to_file_dict(), normalize_keys(partial))
        try:
            config = TimerConfig.model_validate(merged)
        except ValidationError as e:
            display_error("Invalid configuration", e)
            return False

        return self._write(config)

    def reset_config(self) -> bool:
        """Overwrite the stored config with the defaults."""
        return self._write(TimerConfig())

    def _write(self, config: TimerConfig) -> bool:
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.to_file_dict(), f, indent=2)
        except OSError as e:
            display_error("Error saving config", e)
            return False

        self.logger.info("Saved config to %s", self.config_path)
        return True
