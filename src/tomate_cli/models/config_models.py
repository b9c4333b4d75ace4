"""Configuration models for the Pomodoro timer.

Field names are snake_case in Python and camelCase on disk so existing
``config.json`` files keep working.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tomate_cli.utils.paths import app_data_dir

TimerMode = Literal["pomodoro", "shortBreak", "longBreak"]

MIN_DURATION_SECONDS = 1
MAX_DURATION_SECONDS = 86400  # 24 hours

DEFAULT_POMODORO_SECONDS = 25 * 60
DEFAULT_SHORT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 15 * 60


def _default_sound(name: str) -> str:
    return str(app_data_dir() / "sounds" / name)


class SoundConfig(BaseModel):
    """Sound files played when a phase ends."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pomodoro_end: str = Field(
        default_factory=lambda: _default_sound("pomodoro-end.mp3"),
        alias="pomodoroEnd",
    )
    break_end: str = Field(
        default_factory=lambda: _default_sound("break-end.mp3"),
        alias="breakEnd",
    )

    @field_validator("pomodoro_end", "break_end")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("sound path cannot be empty")
        return v.strip()


class TimerConfig(BaseModel):
    """Phase durations in seconds plus sound settings."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pomodoro: int = Field(
        default=DEFAULT_POMODORO_SECONDS,
        ge=MIN_DURATION_SECONDS,
        le=MAX_DURATION_SECONDS,
        strict=True,
    )
    short_break: int = Field(
        default=DEFAULT_SHORT_BREAK_SECONDS,
        ge=MIN_DURATION_SECONDS,
        le=MAX_DURATION_SECONDS,
        strict=True,
        alias="shortBreak",
    )
    long_break: int = Field(
        default=DEFAULT_LONG_BREAK_SECONDS,
        ge=MIN_DURATION_SECONDS,
        le=MAX_DURATION_SECONDS,
        strict=True,
        alias="longBreak",
    )
    sound: SoundConfig = Field(default_factory=SoundConfig)

    def duration_for(self, mode: TimerMode) -> int:
        """Configured length of *mode* in seconds."""
        if mode == "pomodoro":
            return self.pomodoro
        if mode == "shortBreak":
            return self.short_break
        if mode == "longBreak":
            return self.long_break
        raise ValueError(f"Unknown timer mode: {mode!r}")

    def to_file_dict(self) -> dict:
        """Dump using the on-disk (camelCase) keys."""
        return self.model_dump(by_alias=True)
