"""
Base hook definitions.

Hooks run at fixed stages of the plugin test pipeline. Each hook decides
whether it applies to a plugin (``check``), does its work on the shared
context (``action``) and may verify the outcome (``validate``).
"""

from abc import ABC, abstractmethod
from enum import Enum

from src.models.context import HookContext


class HookStage(str, Enum):
    """Pipeline stages hooks can be registered for."""

    CHECKOUT = "checkout"
    COMPILATION = "compilation"


class PluginCompatTesterHook(ABC):
    """Abstract base class for pipeline hooks."""

    stage: HookStage

    @abstractmethod
    def check(self, context: HookContext) -> bool:
        """
        Report whether this hook applies to the plugin.

        Must not modify ``context``.
        """

    @abstractmethod
    def action(self, context: HookContext) -> HookContext:
        """
        Run the hook.

        Args:
            context: Shared context for the plugin.

        Returns:
            The context, possibly updated.
        """

    def validate(self, context: HookContext) -> None:
        """Verify the outcome of ``action``. Raises on failure."""

    @property
    def name(self) -> str:
        return type(self).__name__


class MultiParentVoter(ABC):
    """Capability of checkout hooks that recognise multi-module plugins.

    The compile-stage hook applies to a plugin as soon as one registered
    voter claims it.
    """

    parent_folder: str

    @abstractmethod
    def check(self, context: HookContext) -> bool:
        """Report whether the plugin belongs to this voter's parent project."""
