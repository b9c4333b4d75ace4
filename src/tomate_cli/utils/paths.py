"""Resolution of the config and metrics file locations.

An explicit CLI argument wins, then the ``TOMATE_CONFIG_PATH`` /
``TOMATE_METRICS_PATH`` environment variables, then ``$XDG_CONFIG_HOME``,
and finally the platformdirs user config directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_DIR_NAME = "tomate-cli"
CONFIG_FILE_NAME = "config.json"
METRICS_FILE_NAME = "metrics.json"

CONFIG_PATH_ENV = "TOMATE_CONFIG_PATH"
METRICS_PATH_ENV = "TOMATE_METRICS_PATH"


def app_config_dir() -> Path:
    """Directory holding config.json and metrics.json."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path(user_config_dir(APP_DIR_NAME))


def app_data_dir() -> Path:
    """Directory holding bundled user data such as sound files."""
    return Path(user_data_dir(APP_DIR_NAME))


def resolve_config_path(cli_arg: str | Path | None = None) -> Path:
    """Return the config file path to use."""
    if cli_arg:
        return Path(cli_arg).expanduser()
    env = os.environ.get(CONFIG_PATH_ENV)
    if env:
        return Path(env).expanduser()
    return app_config_dir() / CONFIG_FILE_NAME


def resolve_metrics_path(cli_arg: str | Path | None = None) -> Path:
    """Return the metrics file path to use."""
    if cli_arg:
        return Path(cli_arg).expanduser()
    env = os.environ.get(METRICS_PATH_ENV)
    if env:
        return Path(env).expanduser()
    return app_config_dir() / METRICS_FILE_NAME
