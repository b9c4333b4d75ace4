"""Alerts shown when a timer phase expires: a sound and a popup dialog.

Both are delegated to external programs (``ffplay`` and ``yad``). Neither
is required: if a program is missing or fails, the failure is reported and
the terminal bell is rung instead.
"""

from __future__ import annotations

import os
import subprocess
from typing import Literal

from rich.console import Console

from tomate_cli.models.config_models import TimerConfig
from tomate_cli.models.timer_state import TimerState
from tomate_cli.utils.errors import display_error
from tomate_cli.utils.logger import get_logger
from tomate_cli.utils.ui.console import get_console

SoundKind = Literal["pomodoro", "break"]

POPUP_ARGS = [
    "--center",
    "--sticky",
    "--on-top",
    "--button=(Return):0",
    "--button-layout=center",
    "--borders=20",
    "--text=Time's Up!",
    "--title=Tomate CLI",
]


class Notifier:
    """Tells the user a phase is over."""

    def __init__(
        self,
        console: Console | None = None,
        sound_command: str = "ffplay",
        popup_command: str = "yad",
    ):
        self.console = console or get_console()
        self.sound_command = sound_command
        self.popup_command = popup_command
        self.logger = get_logger(__name__)

    def play_sound(self, kind: SoundKind, config: TimerConfig) -> bool:
        """Start playing the end-of-phase sound without waiting for it."""
        path = config.sound.pomodoro_end if kind == "pomodoro" else config.sound.break_end
        try:
            subprocess.Popen(
                [self.sound_command, "-nodisp", "-autoexit", "-loglevel", "quiet", path],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            display_error(f"Error playing {kind} sound", e, self.console)
            self.console.bell()
            return False
        return True

    def show_time_up_popup(self) -> bool:
        """Show the "Time's Up!" dialog and block until it is dismissed."""
        try:
            result = subprocess.run(
                [self.popup_command, *POPUP_ARGS],
                env=dict(os.environ),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            display_error("Popup failed", e, self.console)
            self.console.bell()
            return False

        if result.returncode != 0:
            display_error(
                "Popup failed",
                f"{self.popup_command} exited with code {result.returncode}",
                self.console,
            )
            self.console.bell()
            return False
        return True

    def phase_expired(self, state: TimerState) -> None:
        """Alert for the phase in *state*, which has just run out."""
        kind: SoundKind = "pomodoro" if state.current_mode == "pomodoro" else "break"
        self.logger.info("Phase %s expired", state.current_mode)
        self.play_sound(kind, state.config)
        self.console.print("\n[green]🎉 Time's up![/green]")
        self.show_time_up_popup()
