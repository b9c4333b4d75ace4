"""Statistics over recorded sessions."""

import typer

from tomate_cli.ui.stats_display import show_stats
from tomate_cli.utils.exit_codes import SUCCESS
from tomate_cli.utils.ui.console import get_console

from .app_context import get_metrics_service

console = get_console()
app = typer.Typer(help="Pomodoro statistics")


@app.callback(invoke_without_command=True)
def statistics_default(
    ctx: typer.Context,
    output: str = typer.Option(None, "--output", "-o", help="Output format (json)"),
):
    """Show statistics when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        show_statistics(ctx, output)


@app.command("show")
def show_statistics(
    ctx: typer.Context,
    output: str = typer.Option(None, "--output", "-o", help="Output format (json)"),
):
    """Show totals and averages for completed sessions."""
    stats = get_metrics_service(ctx).get_stats()

    if output == "json":
        console.print_json(data=stats.model_dump())
        return

    show_stats(stats, console)


@app.command("reset")
def reset_statistics(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
):
    """Delete all recorded sessions."""
    if not yes and not typer.confirm("Delete all recorded sessions?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(SUCCESS)

    get_metrics_service(ctx).reset_metrics()
    console.print("[green]✓ Metrics reset[/green]")
