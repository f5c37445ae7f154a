"""Checkout-stage hook recognising plugins built from a multi-module project."""

from src.core.logger.logger import get_logger
from src.hooks.base import HookStage, MultiParentVoter, PluginCompatTesterHook
from src.models.context import HookContext

logger = get_logger(__name__)


class MultiParentCheckoutHook(PluginCompatTesterHook, MultiParentVoter):
    """Claims the plugins of one multi-module parent project.

    Fetching the parent sources is left to the harness; this hook only
    records which parent folder a claimed plugin lives in.
    """

    stage = HookStage.CHECKOUT

    def __init__(self, parent_folder: str, plugin_names: list[str]) -> None:
        self.parent_folder = parent_folder
        self.plugin_names = frozenset(plugin_names)

    def check(self, context: HookContext) -> bool:
        return context.plugin_name in self.plugin_names

    def action(self, context: HookContext) -> HookContext:
        if context.parent_folder is None:
            context.parent_folder = self.parent_folder
            logger.info(f"{context.plugin_name} is built from {self.parent_folder}")
        return context

    @property
    def name(self) -> str:
        return f"{type(self).__name__}[{self.parent_folder}]"
