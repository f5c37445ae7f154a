"""Registry of hooks and the per-stage runner."""

from src.core.logger.logger import get_logger
from src.hooks.base import HookStage, PluginCompatTesterHook
from src.models.context import HookContext

logger = get_logger(__name__)


class HookRegistry:
    """
    Registry for pipeline hooks, grouped by stage.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookStage, list[PluginCompatTesterHook]] = {
            stage: [] for stage in HookStage
        }

    def register(self, hook: PluginCompatTesterHook) -> None:
        """Register a hook for its stage."""
        self._hooks[hook.stage].append(hook)
        logger.debug(f"Registered {hook.name} for stage {hook.stage.value}")

    def get_hooks_from_stage(
        self,
        stage: HookStage,
        context: HookContext | None = None,
    ) -> list[PluginCompatTesterHook]:
        """Get the hooks of a stage in registration order.

        Hooks whose class name the context excludes are left out.
        """
        excluded = set(context.config.exclude_hooks) if context else set()
        return [hook for hook in self._hooks[stage] if type(hook).__name__ not in excluded]

    def list_hooks(self) -> list[str]:
        """List all registered hook names."""
        return [hook.name for hooks in self._hooks.values() for hook in hooks]

    def run_stage(self, stage: HookStage, context: HookContext) -> HookContext:
        """
        Run every applicable hook of a stage against ``context``.

        Errors raised by a hook propagate to the caller, which is expected to
        abandon this plugin.

        Returns:
            The context after all hooks ran.
        """
        for hook in self.get_hooks_from_stage(stage, context):
            if not hook.check(context):
                continue
            logger.info(f"Running {hook.name} for {context.plugin_name}")
            context = hook.action(context)
            hook.validate(context)
        return context
