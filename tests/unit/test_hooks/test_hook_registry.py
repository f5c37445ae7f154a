"""Tests for the hook registry, checkout voters and the default registry."""

from pathlib import Path

import pytest

from src.core.config.settings import HookSettings, MavenSettings, Settings
from src.core.exceptions.errors import BuildExecutionError
from src.hooks.base import HookStage, MultiParentVoter, PluginCompatTesterHook
from src.hooks.factory import build_registry
from src.hooks.multi_parent_checkout import MultiParentCheckoutHook
from src.hooks.multi_parent_compile import MultiParentCompileHook
from src.hooks.registry import HookRegistry
from src.maven.runner import ExternalMavenRunner
from src.models.context import HookContext, PluginCompatConfig


class RecordingHook(PluginCompatTesterHook):
    """Hook that records the order it ran in."""

    def __init__(self, stage: HookStage, applies: bool, journal: list[str], label: str) -> None:
        self.stage = stage
        self.applies = applies
        self.journal = journal
        self.label = label

    def check(self, context: HookContext) -> bool:
        return self.applies

    def action(self, context: HookContext) -> HookContext:
        self.journal.append(f"action:{self.label}")
        return context

    def validate(self, context: HookContext) -> None:
        self.journal.append(f"validate:{self.label}")


class FailingHook(RecordingHook):
    def action(self, context: HookContext) -> HookContext:
        raise BuildExecutionError("Maven build failed with code 1")


@pytest.fixture
def context(standalone_plugin: Path) -> HookContext:
    return HookContext(plugin_dir=standalone_plugin, plugin_name="plugin-x")


class TestHookRegistry:
    """Tests for HookRegistry."""

    def test_hooks_grouped_by_stage(self) -> None:
        registry = HookRegistry()
        checkout = MultiParentCheckoutHook("bom-parent", ["plugin-x"])
        compile_hook = MultiParentCompileHook(registry=registry)
        registry.register(checkout)
        registry.register(compile_hook)

        assert registry.get_hooks_from_stage(HookStage.CHECKOUT) == [checkout]
        assert registry.get_hooks_from_stage(HookStage.COMPILATION) == [compile_hook]

    def test_compile_hook_needs_a_registry(self) -> None:
        """Test the compile hook cannot be built without voters to consult."""
        with pytest.raises(TypeError):
            MultiParentCompileHook()

    def test_list_hooks(self) -> None:
        registry = HookRegistry()
        registry.register(MultiParentCheckoutHook("bom-parent", []))

        assert registry.list_hooks() == ["MultiParentCheckoutHook[bom-parent]"]

    def test_excluded_hooks_filtered(self, context: HookContext) -> None:
        registry = HookRegistry()
        registry.register(MultiParentCheckoutHook("bom-parent", ["plugin-x"]))
        context.config.exclude_hooks = ["MultiParentCheckoutHook"]

        assert registry.get_hooks_from_stage(HookStage.CHECKOUT, context) == []

    def test_run_stage_runs_applicable_hooks_in_order(self, context: HookContext) -> None:
        journal: list[str] = []
        registry = HookRegistry()
        registry.register(RecordingHook(HookStage.COMPILATION, True, journal, "first"))
        registry.register(RecordingHook(HookStage.COMPILATION, False, journal, "skipped"))
        registry.register(RecordingHook(HookStage.COMPILATION, True, journal, "second"))
        registry.register(RecordingHook(HookStage.CHECKOUT, True, journal, "checkout"))

        result = registry.run_stage(HookStage.COMPILATION, context)

        assert result is context
        assert journal == ["action:first", "validate:first", "action:second", "validate:second"]

    def test_run_stage_propagates_errors(self, context: HookContext) -> None:
        journal: list[str] = []
        registry = HookRegistry()
        registry.register(FailingHook(HookStage.COMPILATION, True, journal, "failing"))
        registry.register(RecordingHook(HookStage.COMPILATION, True, journal, "after"))

        with pytest.raises(BuildExecutionError):
            registry.run_stage(HookStage.COMPILATION, context)

        assert journal == []


class TestMultiParentCheckoutHook:
    """Tests for MultiParentCheckoutHook."""

    def test_is_a_voter(self) -> None:
        hook = MultiParentCheckoutHook("bom-parent", ["plugin-x"])

        assert isinstance(hook, MultiParentVoter)
        assert hook.stage == HookStage.CHECKOUT

    def test_claims_listed_plugins(self, context: HookContext) -> None:
        assert MultiParentCheckoutHook("bom-parent", ["plugin-x"]).check(context) is True
        assert MultiParentCheckoutHook("bom-parent", ["plugin-y"]).check(context) is False

    def test_records_parent_folder(self, context: HookContext) -> None:
        MultiParentCheckoutHook("bom-parent", ["plugin-x"]).action(context)

        assert context.parent_folder == "bom-parent"

    def test_keeps_existing_parent_folder(self, context: HookContext) -> None:
        context.parent_folder = "other-parent"

        MultiParentCheckoutHook("bom-parent", ["plugin-x"]).action(context)

        assert context.parent_folder == "other-parent"


class TestBuildRegistry:
    """Tests for the default registry."""

    def test_voter_per_parent_folder(self) -> None:
        settings = Settings(
            hooks=HookSettings(multi_parent={"bom-parent": ["plugin-x"], "core-parent": ["plugin-y"]})
        )

        registry = build_registry(settings)

        voters = registry.get_hooks_from_stage(HookStage.CHECKOUT)
        assert sorted(hook.parent_folder for hook in voters) == ["bom-parent", "core-parent"]
        [compile_hook] = registry.get_hooks_from_stage(HookStage.COMPILATION)
        assert isinstance(compile_hook, MultiParentCompileHook)
        assert compile_hook.registry is registry

    def test_default_runner_uses_given_settings(self) -> None:
        """Test the compile hook builds Maven runners from the registry's settings."""
        settings = Settings(
            maven=MavenSettings(executable="/opt/custom/mvn", args=["-Pquick"], timeout=30)
        )

        registry = build_registry(settings)

        [compile_hook] = registry.get_hooks_from_stage(HookStage.COMPILATION)
        runner = compile_hook.runner_factory(PluginCompatConfig())
        assert isinstance(runner, ExternalMavenRunner)
        assert runner.executable == "/opt/custom/mvn"
        assert runner.extra_args == ["-Pquick"]
        assert runner.timeout == 30

    def test_checkout_then_compile(self, multi_module_plugin: Path, snapshot_runner) -> None:
        """Test the two stages together build a claimed plugin from its parent."""
        settings = Settings(hooks=HookSettings(multi_parent={"bom-parent": ["plugin-x"]}))
        registry = build_registry(settings, runner_factory=lambda config: snapshot_runner)
        context = HookContext(
            config=PluginCompatConfig(),
            plugin_dir=multi_module_plugin,
            plugin_name="plugin-x",
        )

        context = registry.run_stage(HookStage.CHECKOUT, context)
        context = registry.run_stage(HookStage.COMPILATION, context)

        assert context.parent_folder == "bom-parent"
        assert context.override_default_compile is True
        [build] = snapshot_runner.build_calls
        assert build.working_dir == multi_module_plugin.parent
        assert build.goals == ("clean", "install", "-am", "-pl", "plugin-x")

    def test_unclaimed_plugin_is_not_compiled(self, standalone_plugin: Path, recording_runner) -> None:
        settings = Settings(hooks=HookSettings(multi_parent={"bom-parent": ["plugin-y"]}))
        registry = build_registry(settings, runner_factory=lambda config: recording_runner)
        context = HookContext(plugin_dir=standalone_plugin, plugin_name="plugin-x")

        context = registry.run_stage(HookStage.CHECKOUT, context)
        context = registry.run_stage(HookStage.COMPILATION, context)

        assert context.override_default_compile is False
        assert recording_runner.calls == []
