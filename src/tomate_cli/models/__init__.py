"""Tomate CLI domain models.

Pydantic models for the configuration and metrics files, and the timer
state machine that ties them together.
"""

from .config_models import SoundConfig, TimerConfig, TimerMode
from .metrics import Metrics, MetricsStats, Session, avg_duration, total_duration
from .timer_state import PhaseTransition, TimerState, TimerStateMachine

__all__ = [
    # Configuration
    "SoundConfig",
    "TimerConfig",
    "TimerMode",
    # Metrics
    "Metrics",
    "MetricsStats",
    "Session",
    "avg_duration",
    "total_duration",
    # Timer
    "PhaseTransition",
    "TimerState",
    "TimerStateMachine",
]
