"""Configuration management for easekit."""

from easekit.core.config.loader import (
    build_registry,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from easekit.core.config.models import AppConfig, CustomCurveConfig, LoggingConfig

__all__ = [
    # Loaders
    "build_registry",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "CustomCurveConfig",
    "LoggingConfig",
]
