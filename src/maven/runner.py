"""Maven runner used by the hooks to drive builds.

Every invocation blocks until Maven exits. A failed build is reported as a
``BuildExecutionError`` and never retried here.
"""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from src.core.config.settings import Settings, get_settings
from src.core.exceptions.errors import BuildExecutionError, ResourceError
from src.core.logger.logger import get_logger
from src.models.context import PluginCompatConfig

logger = get_logger(__name__)

# Lines of build output kept in error details
OUTPUT_TAIL_LINES = 20


class MavenRunner(ABC):
    """Runs Maven goals in a working directory."""

    @abstractmethod
    def run(
        self,
        options: Mapping[str, str],
        working_dir: Path,
        log_file: Path | None,
        *goals: str,
    ) -> None:
        """
        Run Maven and wait for it to finish.

        Args:
            options: System properties passed as -Dkey=value.
            working_dir: Directory containing the POM to build.
            log_file: File receiving the build output, or None.
            *goals: Goals, phases and flags in invocation order.

        Raises:
            BuildExecutionError: If the build does not succeed.
        """


class ExternalMavenRunner(MavenRunner):
    """Runs an external Maven installation as a subprocess."""

    def __init__(
        self,
        executable: Path | str = "mvn",
        settings_file: Path | None = None,
        extra_args: list[str] | None = None,
        timeout: int | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            executable: Maven executable.
            settings_file: settings.xml passed with --settings.
            extra_args: Arguments appended before the goals.
            timeout: Seconds before an invocation is killed (None = no limit).
        """
        self.executable = str(executable)
        self.settings_file = settings_file
        self.extra_args = list(extra_args or [])
        self.timeout = timeout

    @classmethod
    def from_config(
        cls,
        config: PluginCompatConfig,
        settings: Settings | None = None,
    ) -> "ExternalMavenRunner":
        """Create a runner from the harness build configuration.

        Values from ``config`` win over the application settings.
        """
        if settings is None:
            settings = get_settings()

        return cls(
            executable=config.external_maven or settings.maven.executable,
            settings_file=config.maven_settings or settings.maven.settings_file,
            extra_args=[*settings.maven.args, *config.maven_args],
            timeout=settings.maven.timeout,
        )

    def build_command(self, options: Mapping[str, str], *goals: str) -> list[str]:
        """Build the Maven command line."""
        cmd = [self.executable, "--show-version", "--batch-mode"]
        if self.settings_file:
            cmd.extend(["--settings", str(self.settings_file)])
        cmd.extend(f"-D{key}={value}" for key, value in options.items())
        cmd.extend(self.extra_args)
        cmd.extend(goals)
        return cmd

    def run(
        self,
        options: Mapping[str, str],
        working_dir: Path,
        log_file: Path | None,
        *goals: str,
    ) -> None:
        cmd = self.build_command(options, *goals)
        error_kwargs = {
            "goals": list(goals),
            "working_dir": str(working_dir),
            "log_file": str(log_file) if log_file else None,
        }
        logger.info(f"Running {' '.join(cmd)} in {working_dir}")

        # Output is streamed into the log while Maven runs
        log = self._open_log(log_file) if log_file is not None else None
        try:
            completed = subprocess.run(
                cmd,
                cwd=working_dir,
                stdout=log if log is not None else subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise BuildExecutionError(
                f"Maven timed out after {self.timeout} seconds",
                **error_kwargs,
            ) from e
        except OSError as e:
            raise BuildExecutionError(
                f"Unable to start Maven: {self.executable}",
                details={"error": str(e)},
                **error_kwargs,
            ) from e
        finally:
            if log is not None:
                log.close()

        if log_file is None:
            output = completed.stdout or ""
            logger.debug(output)
        elif completed.returncode != 0:
            output = self._read_log(log_file)

        if completed.returncode != 0:
            tail = output.splitlines()[-OUTPUT_TAIL_LINES:]
            raise BuildExecutionError(
                f"Maven build failed with code {completed.returncode}",
                return_code=completed.returncode,
                details={"output_tail": "\n".join(tail)},
                **error_kwargs,
            )

    @staticmethod
    def _open_log(log_file: Path) -> TextIO:
        try:
            return open(log_file, "w", encoding="utf-8")
        except OSError as e:
            raise ResourceError(
                f"Unable to write Maven log: {log_file}",
                path=str(log_file),
                details={"error": str(e)},
            ) from e

    @staticmethod
    def _read_log(log_file: Path) -> str:
        try:
            return log_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ResourceError(
                f"Unable to read Maven log: {log_file}",
                path=str(log_file),
                details={"error": str(e)},
            ) from e
