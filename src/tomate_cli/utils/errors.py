"""Error reporting helpers shared by the stores and the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from tomate_cli.utils.logger import get_logger
from tomate_cli.utils.ui.console import get_console


def error_message(error: object) -> str:
    """Extract a printable message from an exception or arbitrary value."""
    if isinstance(error, BaseException):
        return str(error) or error.__class__.__name__
    if isinstance(error, str):
        return error
    return "Unknown error"


def display_error(
    context: str, error: object, console: Console | None = None
) -> None:
    """Log an error and print it in red on the console."""
    message = error_message(error)
    get_logger(__name__).error("%s: %s", context, message)

    console = console or get_console()
    console.print(f"[red]⛔ {escape(context)}:[/red] {escape(message)}")
