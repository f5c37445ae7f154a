"""Snapshot detection for a multi-module parent project.

Maven is asked for the effective ``project.version`` because the version may
be inherited or interpolated and cannot be read reliably from the POM text.
"""

from pathlib import Path

from src.core.exceptions.errors import ResourceError
from src.maven.runner import MavenRunner

SNAPSHOT_SUFFIX = "-SNAPSHOT"
VERSION_LOG = "version.log"


def is_snapshot_output(text: str) -> bool:
    """Return True if the last non-empty line of ``text`` is a snapshot version."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return False
    return lines[-1].endswith(SNAPSHOT_SUFFIX)


def is_snapshot_version(parent_dir: Path, runner: MavenRunner) -> bool:
    """
    Check whether the project in ``parent_dir`` declares a snapshot version.

    Args:
        parent_dir: Multi-module root directory.
        runner: Maven runner used to evaluate the version.

    Returns:
        True if the effective version ends with ``-SNAPSHOT``.

    Raises:
        BuildExecutionError: If the evaluation fails.
        ResourceError: If the evaluation log cannot be read.
    """
    log = parent_dir / VERSION_LOG
    runner.run(
        {"expression": "project.version", "forceStdout": "true"},
        parent_dir,
        log,
        "-q",
        "help:evaluate",
    )

    try:
        output = log.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ResourceError(
            f"Unable to read version log: {log}",
            path=str(log),
            details={"error": str(e)},
        ) from e

    return is_snapshot_output(output)
