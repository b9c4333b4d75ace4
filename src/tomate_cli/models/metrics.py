"""Session history models and duration helpers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from .config_models import TimerMode


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z``."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_timestamp(moment: datetime) -> str:
    """Format *moment* as a millisecond-precision UTC ISO string ending in Z."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Session(BaseModel):
    """A completed timer phase."""

    type: TimerMode
    start: str  # ISO 8601
    end: str  # ISO 8601

    @field_validator("start", "end")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        parse_timestamp(v)
        return v

    @property
    def start_datetime(self) -> datetime:
        return parse_timestamp(self.start)

    @property
    def end_datetime(self) -> datetime:
        return parse_timestamp(self.end)

    def duration_seconds(self) -> float:
        """Length of the session in seconds."""
        return (self.end_datetime - self.start_datetime).total_seconds()


class Metrics(BaseModel):
    """The metrics file document."""

    sessions: list[Session] = Field(default_factory=list)


class MetricsStats(BaseModel):
    """Aggregate statistics over recorded sessions."""

    total_pomodoros: int = 0
    total_short_breaks: int = 0
    total_long_breaks: int = 0
    total_pomodoro_time_seconds: float = 0
    total_breaks_time_seconds: float = 0
    avg_pomodoro_seconds: float = 0
    avg_short_break_seconds: float = 0
    avg_long_break_seconds: float = 0


def total_duration(session_type: str, sessions: Iterable[Session]) -> float:
    """Sum of durations, in seconds, of sessions of *session_type*."""
    return sum(s.duration_seconds() for s in sessions if s.type == session_type)


def avg_duration(session_type: str, sessions: Iterable[Session]) -> float:
    """Mean duration, in seconds, of sessions of *session_type*; 0 if none."""
    matching = [s for s in sessions if s.type == session_type]
    if not matching:
        return 0
    return sum(s.duration_seconds() for s in matching) / len(matching)
