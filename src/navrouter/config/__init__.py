"""
Configuration models and logging setup.
"""

from .models import (
    APIConfig,
    RoutingConfig,
    TelemetryConfig,
    LoggingConfig,
    AppConfig,
    load_config,
)
from .logging import configure_logging

__all__ = [
    "APIConfig",
    "RoutingConfig",
    "TelemetryConfig",
    "LoggingConfig",
    "AppConfig",
    "load_config",
    "configure_logging",
]
