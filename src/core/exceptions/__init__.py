"""Exception definitions module."""

from src.core.exceptions.errors import (
    BuildExecutionError,
    ConfigurationError,
    ModuleResolutionError,
    PluginCompatError,
    ResourceError,
)

__all__ = [
    "PluginCompatError",
    "BuildExecutionError",
    "ResourceError",
    "ConfigurationError",
    "ModuleResolutionError",
]
