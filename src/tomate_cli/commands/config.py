"""Configuration management commands."""

import typer
from rich.table import Table

from tomate_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from tomate_cli.utils.time_format import format_hms
from tomate_cli.utils.ui.console import get_console

from .app_context import get_config_service

console = get_console()
app = typer.Typer(help="Configuration management")

DURATION_KEYS = {
    "pomodoro": "pomodoro",
    "short-break": "shortBreak",
    "long-break": "longBreak",
}

SOUND_KEYS = {
    "sound.pomodoro-end": "pomodoroEnd",
    "sound.break-end": "breakEnd",
}


@app.command("show")
def show_config(ctx: typer.Context):
    """Show the effective configuration."""
    service = get_config_service(ctx)
    config = service.load_config()

    table = Table(title=f"Configuration ({service.config_path})", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("pomodoro", f"{config.pomodoro}s ({format_hms(config.pomodoro)})")
    table.add_row(
        "short-break", f"{config.short_break}s ({format_hms(config.short_break)})"
    )
    table.add_row(
        "long-break", f"{config.long_break}s ({format_hms(config.long_break)})"
    )
    table.add_row("sound.pomodoro-end", config.sound.pomodoro_end)
    table.add_row("sound.break-end", config.sound.break_end)

    console.print(table)


@app.command("set")
def set_config(
    ctx: typer.Context,
    key: str = typer.Argument(
        ...,
        help="pomodoro, short-break, long-break, sound.pomodoro-end or sound.break-end",
    ),
    value: str = typer.Argument(..., help="Seconds for durations, a file path for sounds"),
):
    """Set one configuration value."""
    if key in DURATION_KEYS:
        try:
            partial = {DURATION_KEYS[key]: int(value)}
        except ValueError as e:
            console.print(f"[red]Invalid duration: {value}[/red]")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
    elif key in SOUND_KEYS:
        partial = {"sound": {SOUND_KEYS[key]: value}}
    else:
        valid = ", ".join([*DURATION_KEYS, *SOUND_KEYS])
        console.print(f"[red]Unknown key '{key}'. Valid keys: {valid}[/red]")
        raise typer.Exit(ERROR_INVALID_ARGS)

    if not get_config_service(ctx).save_config(partial):
        raise typer.Exit(ERROR_INVALID_ARGS)

    console.print(f"[green]✓ Set {key} = {value}[/green]")


@app.command("reset")
def reset_config(ctx: typer.Context):
    """Restore the default configuration."""
    if not get_config_service(ctx).reset_config():
        raise typer.Exit(ERROR_GENERAL)
    console.print("[green]✓ Configuration reset to defaults[/green]")
