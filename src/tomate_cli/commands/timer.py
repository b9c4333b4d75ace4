"""Run the Pomodoro timer in the terminal."""

import typer

from tomate_cli.models.timer_state import TimerStateMachine
from tomate_cli.services.config_service import ConfigService
from tomate_cli.services.metrics_service import MetricsService
from tomate_cli.ui.runner import TimerRunner
from tomate_cli.utils.ui.console import get_console

from .app_context import get_config_service, get_metrics_service

console = get_console()


def build_runner(
    config_service: ConfigService, metrics_service: MetricsService
) -> TimerRunner:
    """Wire a state machine to its stores and wrap it in a runner."""
    machine = TimerStateMachine(
        config_loader=config_service.load_config,
        session_recorder=metrics_service.record_session,
    )
    return TimerRunner(machine, config_service, console=console)


def run_timer(ctx: typer.Context | None = None) -> None:
    """Start the timer and block until the user quits."""
    runner = build_runner(get_config_service(ctx), get_metrics_service(ctx))
    result = runner.run()

    state = runner.machine.get_state()
    if result == "interrupted":
        console.print("\n[yellow]Timer interrupted.[/yellow]")
    console.print(f"[dim]Completed pomodoros this run: {state.current_cycle}[/dim]")


def start_timer(ctx: typer.Context):
    """Start the countdown at the first pomodoro.

    Keys: p pauses/resumes, c opens the config menu, q quits.
    """
    run_timer(ctx)
