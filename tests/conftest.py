"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Generator

import pytest

from src.core.exceptions.errors import BuildExecutionError
from src.maven.runner import MavenRunner
from src.models.context import HookContext, PluginCompatConfig


@dataclass
class MavenCall:
    """One recorded Maven invocation."""

    options: dict[str, str]
    working_dir: Path
    log_file: Path | None
    goals: tuple[str, ...]


class RecordingRunner(MavenRunner):
    """Maven runner that records invocations instead of running Maven.

    Expression evaluations write the configured output to the log file so
    callers can parse it as they would real Maven output.
    """

    def __init__(
        self,
        version_output: str = "1.0\n",
        modules_output: str = "",
        fail_goal: str | None = None,
    ) -> None:
        self.version_output = version_output
        self.modules_output = modules_output
        self.fail_goal = fail_goal
        self.calls: list[MavenCall] = []

    def run(
        self,
        options: Mapping[str, str],
        working_dir: Path,
        log_file: Path | None,
        *goals: str,
    ) -> None:
        self.calls.append(MavenCall(dict(options), working_dir, log_file, goals))

        if self.fail_goal is not None and self.fail_goal in goals:
            raise BuildExecutionError(
                "Maven build failed with code 1",
                goals=list(goals),
                working_dir=str(working_dir),
                return_code=1,
            )

        if log_file is None:
            return
        expression = options.get("expression")
        if expression == "project.version":
            log_file.write_text(self.version_output, encoding="utf-8")
        elif expression == "project.modules":
            log_file.write_text(self.modules_output, encoding="utf-8")
        else:
            log_file.write_text("[INFO] BUILD SUCCESS\n", encoding="utf-8")

    @property
    def build_calls(self) -> list[MavenCall]:
        """Invocations that were not expression evaluations."""
        return [call for call in self.calls if "help:evaluate" not in call.goals]

    @property
    def evaluate_calls(self) -> list[MavenCall]:
        """Expression evaluations."""
        return [call for call in self.calls if "help:evaluate" in call.goals]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """Create a runner reporting a released parent version."""
    return RecordingRunner()


@pytest.fixture
def snapshot_runner() -> RecordingRunner:
    """Create a runner reporting a snapshot parent version."""
    return RecordingRunner(
        version_output="[INFO] Apache Maven 3.9.6\n2.0-SNAPSHOT\n",
        modules_output="<strings>\n  <string>plugin-x</string>\n</strings>\n",
    )


@pytest.fixture
def multi_module_plugin(temp_dir: Path) -> Path:
    """Create a plugin directory nested in a ``bom-parent`` folder.

    Returns:
        Path to ``<tmp>/bom-parent/plugin-x``.
    """
    plugin_dir = temp_dir / "bom-parent" / "plugin-x"
    plugin_dir.mkdir(parents=True)
    (plugin_dir.parent / "pom.xml").write_text("<project/>\n")
    (plugin_dir / "pom.xml").write_text("<project/>\n")
    return plugin_dir


@pytest.fixture
def standalone_plugin(temp_dir: Path) -> Path:
    """Create a plugin directory that is not part of a multi-module project."""
    plugin_dir = temp_dir / "plugin-x"
    plugin_dir.mkdir()
    (plugin_dir / "pom.xml").write_text("<project/>\n")
    return plugin_dir


@pytest.fixture
def multi_module_context(multi_module_plugin: Path) -> HookContext:
    """Create a context for the nested plugin."""
    return HookContext(
        config=PluginCompatConfig(),
        plugin_dir=multi_module_plugin,
        plugin_name="plugin-x",
        parent_folder="bom-parent",
    )


@pytest.fixture
def make_runner() -> type[RecordingRunner]:
    """Return the recording runner class for tests needing custom output."""
    return RecordingRunner
