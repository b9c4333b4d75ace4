"""Shared plumbing for commands: resolved file paths and service factories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from tomate_cli.services.config_service import ConfigService
from tomate_cli.services.metrics_service import MetricsService
from tomate_cli.utils.paths import resolve_config_path, resolve_metrics_path


@dataclass
class AppPaths:
    """File locations chosen on the command line (or their defaults)."""

    config_path: Path
    metrics_path: Path


def get_paths(ctx: typer.Context | None) -> AppPaths:
    """Paths stored by the root callback, or the defaults if run standalone."""
    if ctx is not None and isinstance(ctx.obj, AppPaths):
        return ctx.obj
    return AppPaths(resolve_config_path(), resolve_metrics_path())


def get_config_service(ctx: typer.Context | None) -> ConfigService:
    return ConfigService(get_paths(ctx).config_path)


def get_metrics_service(ctx: typer.Context | None) -> MetricsService:
    return MetricsService(get_paths(ctx).metrics_path)
