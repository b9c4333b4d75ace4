"""Interactive menu for changing phase durations while the timer runs."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from tomate_cli.models.config_models import TimerConfig, TimerMode
from tomate_cli.models.timer_state import TimerStateMachine
from tomate_cli.services.config_service import ConfigService, validate_duration
from tomate_cli.utils.time_format import format_hms
from tomate_cli.utils.ui.console import get_console

MENU_OPTIONS: dict[str, tuple[TimerMode, str]] = {
    "1": ("pomodoro", "New Pomodoro (seconds)"),
    "2": ("shortBreak", "New Short Break (seconds)"),
    "3": ("longBreak", "New Long Break (seconds)"),
}

_MODE_NAMES: dict[TimerMode, str] = {
    "pomodoro": "pomodoro",
    "shortBreak": "short break",
    "longBreak": "long break",
}


def build_menu_panel(config: TimerConfig) -> Panel:
    """Panel listing the current durations and the menu choices."""
    body = (
        "[green]Configure Pomodoro Timers[/green]\n\n"
        "Current Values:\n"
        f"🍅 Pomodoro:    [cyan]{format_hms(config.pomodoro)}[/cyan]\n"
        f"☕ Short Break: [cyan]{format_hms(config.short_break)}[/cyan]\n"
        f"🌴 Long Break:  [cyan]{format_hms(config.long_break)}[/cyan]\n\n"
        + escape("[1] Set Pomodoro\n[2] Set Short Break\n[3] Set Long Break\n[q] Back to Timer")
    )
    return Panel(body, border_style="green", padding=(1, 2))


class ConfigMenu:
    """Pauses the timer, edits one duration, then hands control back."""

    def __init__(
        self,
        machine: TimerStateMachine,
        config_service: ConfigService,
        console: Console | None = None,
    ):
        self.machine = machine
        self.config_service = config_service
        self.console = console or get_console()

    def show(self) -> None:
        """Run the menu once. The previous pause flag is restored on exit."""
        was_paused = self.machine.get_state().is_paused
        self.machine.update_state(is_paused=True, in_config_menu=True)
        try:
            config = self.config_service.load_config()
            self.console.clear()
            self.console.print(build_menu_panel(config))

            answer = Prompt.ask("[cyan]Choose an option[/cyan]", console=self.console)
            answer = answer.strip().lower()
            if answer in MENU_OPTIONS:
                mode, prompt = MENU_OPTIONS[answer]
                value = Prompt.ask(f"[cyan]{prompt}[/cyan]", console=self.console)
                self.apply_duration(mode, value)
            elif answer != "q":
                self.console.print("[red]⚠ Invalid option[/red]")
        finally:
            self.machine.update_state(in_config_menu=False, is_paused=was_paused)

    def apply_duration(self, mode: TimerMode, raw_value: str) -> bool:
        """Validate and persist a new duration for *mode*."""
        try:
            seconds = int(raw_value.strip())
        except ValueError:
            seconds = 0

        if not validate_duration(seconds):
            self.console.print("[red]❌ Invalid duration (must be positive number)[/red]")
            return False

        if not self.config_service.save_config({mode: seconds}):
            return False

        changes = {"config": self.config_service.load_config()}
        if self.machine.get_state().current_mode == mode:
            changes["seconds_left"] = seconds
        self.machine.update_state(**changes)

        self.console.print(f"[green]✅ Updated {_MODE_NAMES[mode]}[/green]")
        return True
