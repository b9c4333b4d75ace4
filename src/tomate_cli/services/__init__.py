"""Services module for Tomate CLI - persistence and notifications."""

from .config_service import ConfigService
from .metrics_service import MetricsService
from .notification_service import Notifier

__all__ = [
    "ConfigService",
    "MetricsService",
    "Notifier",
]
