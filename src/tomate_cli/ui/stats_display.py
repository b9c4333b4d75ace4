"""Statistics panel for recorded sessions."""

from rich.console import Console
from rich.panel import Panel

from tomate_cli.models.metrics import MetricsStats
from tomate_cli.utils.time_format import format_hms, format_min_sec
from tomate_cli.utils.ui.console import get_console


def build_stats_text(stats: MetricsStats) -> str:
    """Rich markup body of the statistics panel."""
    lines = [
        f"[cyan]Total Pomodoros: {stats.total_pomodoros}[/cyan]",
        f"[cyan]Total Pomodoro Time: {format_hms(stats.total_pomodoro_time_seconds)}[/cyan]",
        "",
    ]
    if stats.total_pomodoros:
        lines.append(
            f"Average Pomodoro Duration: {format_min_sec(stats.avg_pomodoro_seconds)}"
        )
    lines.append(f"Total Breaks Time: {format_hms(stats.total_breaks_time_seconds)}")
    lines.append(f"Short Breaks: {stats.total_short_breaks}")
    if stats.total_short_breaks:
        lines.append(
            "Average Short Break Duration: "
            f"{format_min_sec(stats.avg_short_break_seconds)}"
        )
    lines.append(f"Long Breaks: {stats.total_long_breaks}")
    if stats.total_long_breaks:
        lines.append(
            "Average Long Break Duration: "
            f"{format_min_sec(stats.avg_long_break_seconds)}"
        )
    return "\n".join(lines)


def show_stats(stats: MetricsStats, console: Console | None = None) -> None:
    """Print the statistics panel."""
    console = console or get_console()
    panel = Panel(
        build_stats_text(stats),
        title="📊 Pomodoro Statistics",
        title_align="center",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)
