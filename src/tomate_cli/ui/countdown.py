"""Countdown panel for the running timer."""

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from tomate_cli.models.config_models import TimerMode
from tomate_cli.models.timer_state import TimerState
from tomate_cli.utils.time_format import format_hms

MODE_LABELS: dict[TimerMode, str] = {
    "pomodoro": "🍅 Pomodoro",
    "shortBreak": "☕ Short Break",
    "longBreak": "🌴 Long Break",
}

MODE_COLORS: dict[TimerMode, str] = {
    "pomodoro": "cyan",
    "shortBreak": "green",
    "longBreak": "magenta",
}

KEY_HINTS = "[p]ause   [q]uit   [c]onfig"


class TimerDisplay:
    """Builds the renderable shown while the timer runs."""

    def render(self, state: TimerState) -> Panel:
        """Create the countdown panel for *state*."""
        color = MODE_COLORS[state.current_mode]

        line = Text(justify="center")
        line.append(MODE_LABELS[state.current_mode], style=f"bold {color}")
        line.append("  ")
        # The driver lets seconds_left reach -1 before the phase ends
        line.append(format_hms(max(0, state.seconds_left)), style="bold yellow")
        if state.is_paused:
            line.append("  ")
            line.append("[PAUSED]", style="bold red")

        cycle = Text(
            f"Completed pomodoros: {state.current_cycle}",
            style="dim",
            justify="center",
        )
        hints = Text(KEY_HINTS, style="dim", justify="center")

        return Panel(
            Align.center(Group(line, Text(""), cycle, hints)),
            border_style=color,
            padding=(1, 2),
        )
