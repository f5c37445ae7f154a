"""Default hook registry built from settings."""

from functools import partial

from src.core.config.settings import Settings, get_settings
from src.hooks.multi_parent_checkout import MultiParentCheckoutHook
from src.hooks.multi_parent_compile import MultiParentCompileHook, RunnerFactory
from src.hooks.registry import HookRegistry
from src.maven.runner import ExternalMavenRunner


def build_registry(
    settings: Settings | None = None,
    runner_factory: RunnerFactory | None = None,
) -> HookRegistry:
    """Create a registry with a checkout voter per configured parent folder
    and the multi-parent compile hook.

    Without a ``runner_factory`` the compile hook runs Maven as configured by
    ``settings``.
    """
    if settings is None:
        settings = get_settings()
    if runner_factory is None:
        runner_factory = partial(ExternalMavenRunner.from_config, settings=settings)

    registry = HookRegistry()
    for parent_folder, plugin_names in settings.hooks.multi_parent.items():
        registry.register(MultiParentCheckoutHook(parent_folder, plugin_names))
    registry.register(MultiParentCompileHook(registry=registry, runner_factory=runner_factory))
    return registry
