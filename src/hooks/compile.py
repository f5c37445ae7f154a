"""Compile strategy selection for plugins that may live in a multi-module project."""

from dataclasses import dataclass
from pathlib import Path

from src.core.exceptions.errors import ModuleResolutionError
from src.core.logger.logger import get_logger
from src.hooks.resources import setup_compile_resources
from src.hooks.topology import is_multi_parent_layout
from src.hooks.version import is_snapshot_version
from src.maven.modules import resolve_maven_module
from src.maven.runner import MavenRunner

logger = get_logger(__name__)

# Siblings must be installed before a targeted build can see their classes,
# and process-test-classes alone does not work for multi-module plugins.
MULTI_PARENT_OPTIONS = {
    "skipTests": "true",
    "invoker.skip": "true",
    "enforcer.skip": "true",
    "maven.javadoc.skip": "true",
}
STANDALONE_OPTIONS = {"maven.javadoc.skip": "true"}
STANDALONE_GOALS = ("clean", "process-test-classes")


@dataclass(frozen=True)
class CompileDecision:
    """How a plugin has to be compiled.

    Attributes:
        multi_parent: Plugin sits directly inside its multi-module parent folder.
        snapshot: Parent project declares a snapshot version. Only evaluated
            when ``multi_parent`` holds, False otherwise.
    """

    multi_parent: bool
    snapshot: bool = False

    @property
    def is_multi_parent_snapshot(self) -> bool:
        return self.multi_parent and self.snapshot


class MultiParentCompiler:
    """Chooses and runs the Maven build that compiles a plugin."""

    def __init__(self, runner: MavenRunner) -> None:
        self.runner = runner

    def decide(
        self,
        plugin_dir: Path,
        local_checkout_dir: Path | None,
        parent_folder: str | None,
    ) -> CompileDecision:
        """
        Classify the plugin's layout and, if needed, its parent's version.

        Maven is only asked for the version when the layout is multi-module.

        Raises:
            BuildExecutionError: If the version evaluation fails.
        """
        has_local_checkout = local_checkout_dir is not None
        if not is_multi_parent_layout(plugin_dir, parent_folder, has_local_checkout):
            return CompileDecision(multi_parent=False)

        snapshot = is_snapshot_version(plugin_dir.absolute().parent, self.runner)
        return CompileDecision(multi_parent=True, snapshot=snapshot)

    def decide_and_compile(
        self,
        plugin_dir: Path,
        local_checkout_dir: Path | None,
        parent_folder: str | None,
        plugin_name: str,
    ) -> CompileDecision:
        """
        Compile the plugin with the build matching its layout.

        Args:
            plugin_dir: Plugin directory.
            local_checkout_dir: Local checkout override, if any.
            parent_folder: Name of the enclosing multi-module folder, if any.
            plugin_name: Declared plugin name.

        Returns:
            The decision the build was based on.

        Raises:
            BuildExecutionError: If a Maven invocation fails.
            ModuleResolutionError: If the plugin's module cannot be found.
            ResourceError: If the working directory cannot be prepared.
        """
        decision = self.decide(plugin_dir, local_checkout_dir, parent_folder)

        if decision.is_multi_parent_snapshot:
            self._compile_multi_parent(plugin_dir, plugin_name)
        else:
            self._compile_standalone(plugin_dir)

        return decision

    def _compile_multi_parent(self, plugin_dir: Path, plugin_name: str) -> None:
        module = resolve_maven_module(plugin_name, plugin_dir, self.runner)
        if module is None or not module.strip():
            raise ModuleResolutionError(
                f"Unable to retrieve the Maven module for plugin {plugin_name} on {plugin_dir}",
                plugin_name=plugin_name,
                plugin_dir=str(plugin_dir),
            )

        parent_dir = plugin_dir.absolute().parent
        logger.info(f"Building module {module} and its dependencies from {parent_dir}")
        self.runner.run(
            MULTI_PARENT_OPTIONS,
            parent_dir,
            setup_compile_resources(parent_dir),
            "clean",
            "install",
            "-am",
            "-pl",
            module,
        )

    def _compile_standalone(self, plugin_dir: Path) -> None:
        logger.info(f"Compiling {plugin_dir}")
        self.runner.run(
            STANDALONE_OPTIONS,
            plugin_dir,
            setup_compile_resources(plugin_dir),
            *STANDALONE_GOALS,
        )
