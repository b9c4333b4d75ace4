"""Tomate CLI - a terminal Pomodoro timer."""

__version__ = "0.3.0"
