"""Session history stored as a JSON document."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tomate_cli.models.metrics import (
    Metrics,
    MetricsStats,
    Session,
    avg_duration,
    format_timestamp,
    total_duration,
)
from tomate_cli.utils.errors import display_error
from tomate_cli.utils.logger import get_logger
from tomate_cli.utils.paths import resolve_metrics_path


class MetricsService:
    """Appends completed sessions to ``metrics.json`` and aggregates them."""

    def __init__(self, metrics_path: Path | str | None = None):
        self.metrics_path = resolve_metrics_path(metrics_path)
        self.logger = get_logger(__name__)

    def load_metrics(self) -> Metrics:
        """Load all sessions. Returns empty metrics if the file is missing or invalid."""
        if not self.metrics_path.exists():
            return Metrics()

        try:
            with open(self.metrics_path, encoding="utf-8") as f:
                data = json.load(f)
            return Metrics.model_validate(data)
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            ValidationError,
        ) as e:
            display_error("Failed to load metrics", e)
            return Metrics()

    def save_metrics(self, metrics: Metrics) -> None:
        """Write *metrics* to disk, creating the parent directory if needed."""
        try:
            validated = Metrics.model_validate(metrics.model_dump())
            self.metrics_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.metrics_path, "w", encoding="utf-8") as f:
                json.dump(validated.model_dump(), f, indent=2)
        except (OSError, ValidationError) as e:
            display_error("Failed to save metrics", e)

    def record_session(self, session: Session | dict[str, Any]) -> None:
        """
        Append a session to the history.

        Args:
            session: A Session, or a dict with ``type``, ``start`` and an
                optional ``end`` (defaults to now).
        """
        try:
            if isinstance(session, dict):
                data = dict(session)
                if not data.get("end"):
                    data["end"] = format_timestamp(datetime.now().astimezone())
                session = Session.model_validate(data)
        except ValidationError as e:
            display_error("Failed to record session", e)
            return

        metrics = self.load_metrics()
        metrics.sessions.append(session)
        self.save_metrics(metrics)
        self.logger.info(
            "Recorded %s session %s -> %s", session.type, session.start, session.end
        )

    def reset_metrics(self) -> None:
        """Discard all recorded sessions."""
        self.save_metrics(Metrics())

    def get_stats(self) -> MetricsStats:
        """Aggregate counts and durations over all recorded sessions."""
        sessions = self.load_metrics().sessions

        return MetricsStats(
            total_pomodoros=sum(1 for s in sessions if s.type == "pomodoro"),
            total_short_breaks=sum(1 for s in sessions if s.type == "shortBreak"),
            total_long_breaks=sum(1 for s in sessions if s.type == "longBreak"),
            total_pomodoro_time_seconds=total_duration("pomodoro", sessions),
            total_breaks_time_seconds=(
                total_duration("shortBreak", sessions)
                + total_duration("longBreak", sessions)
            ),
            avg_pomodoro_seconds=avg_duration("pomodoro", sessions),
            avg_short_break_seconds=avg_duration("shortBreak", sessions),
            avg_long_break_seconds=avg_duration("longBreak", sessions),
        )
