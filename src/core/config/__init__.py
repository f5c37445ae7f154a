"""Configuration management for the plugin compatibility hooks."""

from src.core.config.loader import ConfigLoader
from src.core.config.settings import (
    HookSettings,
    LoggingSettings,
    MavenSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "Settings",
    "MavenSettings",
    "LoggingSettings",
    "HookSettings",
    "get_settings",
]
