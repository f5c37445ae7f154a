"""Data models module."""

from src.models.context import HookContext, PluginCompatConfig

__all__ = [
    "HookContext",
    "PluginCompatConfig",
]
