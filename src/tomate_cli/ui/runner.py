"""Interval driver: ticks the countdown once a second and dispatches keys."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.console import Console
from rich.live import Live

from tomate_cli.models.timer_state import PhaseTransition, TimerStateMachine
from tomate_cli.services.config_service import ConfigService
from tomate_cli.services.notification_service import Notifier
from tomate_cli.utils.logger import get_logger
from tomate_cli.utils.ui.console import get_console

from .config_menu import ConfigMenu
from .countdown import TimerDisplay
from .keyboard import create_keyboard_handler


class TimerRunner:
    """Runs the timer until the user quits."""

    def __init__(
        self,
        machine: TimerStateMachine,
        config_service: ConfigService,
        notifier: Notifier | None = None,
        display: TimerDisplay | None = None,
        console: Console | None = None,
        keyboard_factory: Callable = create_keyboard_handler,
        tick_seconds: float = 1.0,
        poll_seconds: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.machine = machine
        self.console = console or get_console()
        self.config_service = config_service
        self.notifier = notifier or Notifier(self.console)
        self.display = display or TimerDisplay()
        self.menu = ConfigMenu(machine, config_service, self.console)
        self.keyboard_factory = keyboard_factory
        self.tick_seconds = tick_seconds
        self.poll_seconds = poll_seconds
        self.clock = clock
        self.sleep = sleep
        self.logger = get_logger(__name__)

        self._keyboard = None
        self._live: Live | None = None

    def tick(self) -> bool:
        """Count down one second. Returns True once the phase has run out."""
        state = self.machine.get_state()
        if state.is_paused or state.in_config_menu:
            return False
        state = self.machine.update_state(seconds_left=state.seconds_left - 1)
        return state.seconds_left < 0

    def complete_phase(self) -> PhaseTransition:
        """Alert the user, then move the state machine to the next phase."""
        self._suspend_live()
        try:
            self.notifier.phase_expired(self.machine.get_state())
            return self.machine.advance_cycle()
        finally:
            self._resume_live()

    def handle_key(self, key: str | None) -> bool:
        """React to a keypress. Returns False when the timer should stop."""
        if key is None or self.machine.get_state().in_config_menu:
            return True

        if key == "p":
            paused = not self.machine.get_state().is_paused
            self.machine.update_state(is_paused=paused)
            self.logger.debug("Timer %s", "paused" if paused else "resumed")
        elif key == "q":
            return False
        elif key == "c":
            self.open_menu()

        self._refresh()
        return True

    def open_menu(self) -> None:
        """Hand the terminal to the configuration menu."""
        self._suspend_live()
        if self._keyboard is not None:
            self._keyboard.suspend()
        try:
            self.menu.show()
        finally:
            if self._keyboard is not None:
                self._keyboard.resume()
            self._resume_live()

    def run(self) -> str:
        """
        Start from the first pomodoro and run until stopped.

        Returns 'quit' when the user pressed q, or 'interrupted' on Ctrl-C.
        """
        self.machine.reset_state()
        self._keyboard = self.keyboard_factory()
        next_tick = self.clock() + self.tick_seconds

        try:
            with Live(
                self.display.render(self.machine.get_state()),
                console=self.console,
                refresh_per_second=4,
                screen=True,
            ) as live:
                self._live = live
                while True:
                    if not self.handle_key(self._keyboard.get_key()):
                        self.console.print("[yellow]👋 Quitting...[/yellow]")
                        return "quit"

                    if self.clock() >= next_tick:
                        if self.tick():
                            self.complete_phase()
                        next_tick = self.clock() + self.tick_seconds
                        self._refresh()

                    self.sleep(self.poll_seconds)
        except KeyboardInterrupt:
            return "interrupted"
        finally:
            self._live = None
            self._keyboard.stop()

    def _refresh(self) -> None:
        if self._live is not None:
            self._live.update(self.display.render(self.machine.get_state()))

    def _suspend_live(self) -> None:
        if self._live is not None:
            self._live.stop()

    def _resume_live(self) -> None:
        if self._live is not None:
            self._live.start()
            self._refresh()
