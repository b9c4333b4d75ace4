"""Timer state machine: current phase, cycle count and remaining time.

The machine owns an immutable ``TimerState`` snapshot. Every mutation goes
through ``update_state``, which swaps in a new snapshot, so callers holding
an older snapshot never see it change underneath them.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from tomate_cli.utils.logger import get_logger

from .config_models import TimerConfig, TimerMode
from .metrics import Session, format_timestamp

POMODOROS_BEFORE_LONG_BREAK = 4

ConfigLoader = Callable[[], TimerConfig]
SessionRecorder = Callable[[Session], None]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TimerState:
    """Snapshot of the timer."""

    config: TimerConfig
    is_paused: bool = False
    in_config_menu: bool = False
    current_mode: TimerMode = "pomodoro"
    current_cycle: int = 0
    seconds_left: int = 0


@dataclass(frozen=True)
class PhaseTransition:
    """Emitted by ``advance_cycle`` when a phase has been completed."""

    completed_mode: TimerMode
    next_mode: TimerMode
    cycle: int
    session: Session


def next_phase(mode: TimerMode, cycle: int) -> tuple[TimerMode, int]:
    """Return ``(next_mode, next_cycle)`` for a phase ending in *mode*.

    Only a finished pomodoro bumps the cycle counter; every fourth one is
    followed by a long break.
    """
    if mode == "pomodoro":
        cycle += 1
        if cycle % POMODOROS_BEFORE_LONG_BREAK == 0:
            return "longBreak", cycle
        return "shortBreak", cycle
    return "pomodoro", cycle


class TimerStateMachine:
    """Owns one timer's state and the cycle-advancement policy."""

    def __init__(
        self,
        config_loader: ConfigLoader,
        session_recorder: SessionRecorder,
        clock: Clock = utc_now,
    ):
        self._config_loader = config_loader
        self._session_recorder = session_recorder
        self._clock = clock
        self._state: TimerState | None = None
        self._logger = get_logger(__name__)

    def get_state(self) -> TimerState:
        """Return the current snapshot, building it on first access."""
        if self._state is None:
            config = self._config_loader()
            self._state = TimerState(config=config, seconds_left=config.pomodoro)
        return self._state

    def update_state(self, **changes) -> TimerState:
        """Replace the snapshot with a copy carrying *changes*.

        No validation is done here; unknown field names raise ``TypeError``.
        """
        self._state = dataclasses.replace(self.get_state(), **changes)
        return self._state

    def reset_state(self) -> TimerState:
        """Go back to the first pomodoro using the current config."""
        state = self.get_state()
        return self.update_state(
            current_mode="pomodoro",
            current_cycle=0,
            seconds_left=state.config.pomodoro,
        )

    def advance_cycle(self) -> PhaseTransition:
        """Record the phase that just expired and move to the next one."""
        state = self.get_state()
        mode = state.current_mode
        config = state.config

        session = self._build_session(mode, config)
        self._record(session)

        next_mode, next_cycle = next_phase(mode, state.current_cycle)
        self.update_state(
            current_mode=next_mode,
            current_cycle=next_cycle,
            seconds_left=config.duration_for(next_mode),
        )
        self._logger.debug(
            "Phase %s finished; next %s (cycle %d)", mode, next_mode, next_cycle
        )
        return PhaseTransition(
            completed_mode=mode,
            next_mode=next_mode,
            cycle=next_cycle,
            session=session,
        )

    def _build_session(self, mode: TimerMode, config: TimerConfig) -> Session:
        # start is derived from the configured length, not observed; paused
        # time is therefore counted as part of the session.
        end = self._clock()
        duration_ms = config.duration_for(mode) * 1000
        start = end - timedelta(milliseconds=duration_ms)
        return Session(
            type=mode, start=format_timestamp(start), end=format_timestamp(end)
        )

    def _record(self, session: Session) -> None:
        try:
            self._session_recorder(session)
        except Exception as e:
            self._logger.warning("Failed to record %s session: %s", session.type, e)
