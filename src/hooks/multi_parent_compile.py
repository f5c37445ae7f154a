"""Compile-stage hook for plugins built from a multi-module parent."""

from collections.abc import Callable

from src.core.logger.logger import get_logger
from src.hooks.base import HookStage, MultiParentVoter, PluginCompatTesterHook
from src.hooks.compile import MultiParentCompiler
from src.hooks.registry import HookRegistry
from src.hooks.resources import stage_eslintrc
from src.maven.runner import ExternalMavenRunner, MavenRunner
from src.models.context import HookContext, PluginCompatConfig

logger = get_logger(__name__)

RunnerFactory = Callable[[PluginCompatConfig], MavenRunner]


class MultiParentCompileHook(PluginCompatTesterHook):
    """Compiles a plugin before the default compilation would run.

    The plugin is compiled at most once per run: after a successful build
    ``override_default_compile`` is set on the context and later calls only
    stage resources.
    """

    stage = HookStage.COMPILATION

    def __init__(
        self,
        registry: HookRegistry,
        runner_factory: RunnerFactory | None = None,
    ) -> None:
        """
        Initialize the hook.

        Args:
            registry: Registry consulted for checkout-stage voters.
            runner_factory: Creates the Maven runner from the build configuration.
        """
        self.registry = registry
        self.runner_factory = runner_factory or ExternalMavenRunner.from_config
        logger.info("Loaded multi-parent compile hook")

    def check(self, context: HookContext) -> bool:
        for hook in self.registry.get_hooks_from_stage(HookStage.CHECKOUT, context):
            if isinstance(hook, MultiParentVoter) and hook.check(context):
                return True
        return False

    def action(self, context: HookContext) -> HookContext:
        logger.info("Executing multi-parent compile hook")
        runner = self.runner_factory(context.config)
        logger.info(f"Plugin dir is {context.plugin_dir}")

        local_checkout_dir = context.local_checkout_dir
        if local_checkout_dir is not None:
            stage_eslintrc(
                local_checkout_dir,
                context.plugin_dir,
                context.config.has_multiple_local_plugins,
            )

        if not context.override_default_compile:
            MultiParentCompiler(runner).decide_and_compile(
                context.plugin_dir,
                local_checkout_dir,
                context.parent_folder,
                context.plugin_name,
            )
            context.mark_compiled()

        logger.info("Executed multi-parent compile hook")
        return context
