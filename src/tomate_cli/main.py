"""Main entry point for Tomate CLI."""

from pathlib import Path

import typer

from tomate_cli import __version__
from tomate_cli.commands import config, stats, timer
from tomate_cli.commands.app_context import AppPaths, get_config_service
from tomate_cli.utils.exit_codes import ERROR_GENERAL
from tomate_cli.utils.paths import (
    CONFIG_PATH_ENV,
    METRICS_PATH_ENV,
    resolve_config_path,
    resolve_metrics_path,
)
from tomate_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tomate",
    help="A Pomodoro timer for the terminal",
)

console = get_console()

app.add_typer(stats.app, name="stats", help="Pomodoro statistics")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        None,
        "--config-path",
        envvar=CONFIG_PATH_ENV,
        help="Use a custom config file path",
    ),
    metrics_path: Path = typer.Option(
        None,
        "--metrics-path",
        envvar=METRICS_PATH_ENV,
        help="Use a custom metrics file path",
    ),
) -> None:
    """Run the timer when no command is given.

    Keys while running: p pause/resume, c config menu, q quit.
    """
    ctx.obj = AppPaths(
        config_path=resolve_config_path(config_path),
        metrics_path=resolve_metrics_path(metrics_path),
    )
    if ctx.invoked_subcommand is None:
        timer.run_timer(ctx)


app.command("start")(timer.start_timer)


@app.command("reset-config")
def reset_config(ctx: typer.Context) -> None:
    """Reset configuration to defaults."""
    if not get_config_service(ctx).reset_config():
        raise typer.Exit(ERROR_GENERAL)
    console.print("[green]✓ Configuration reset to defaults[/green]")


@app.command("reset-metrics")
def reset_metrics(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete all recorded sessions."""
    stats.reset_statistics(ctx, yes=yes)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Tomate CLI[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
