"""Maven integration: the runner and multi-module helpers."""

from src.maven.modules import parse_module_list, resolve_maven_module
from src.maven.runner import ExternalMavenRunner, MavenRunner

__all__ = [
    "MavenRunner",
    "ExternalMavenRunner",
    "resolve_maven_module",
    "parse_module_list",
]
