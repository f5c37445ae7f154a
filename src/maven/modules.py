"""Maven module resolution for plugins living inside a multi-module project."""

from pathlib import Path

from src.core.exceptions.errors import ResourceError
from src.core.logger.logger import get_logger
from src.maven.runner import MavenRunner

logger = get_logger(__name__)

MODULES_LOG = "modules.log"

_MODULE_START = "<string>"
_MODULE_END = "</string>"


def parse_module_list(text: str) -> list[str]:
    """Extract module names from the output of evaluating ``project.modules``.

    Maven prints the list as XML, one ``<string>name</string>`` per line.
    """
    modules = []
    for line in text.splitlines():
        line = line.strip()
        if line.startswith(_MODULE_START) and line.endswith(_MODULE_END):
            modules.append(line[len(_MODULE_START) : -len(_MODULE_END)])
    return modules


def resolve_maven_module(
    plugin_name: str,
    plugin_dir: Path,
    runner: MavenRunner,
) -> str | None:
    """
    Find the module that builds ``plugin_name`` within its parent project.

    Args:
        plugin_name: Declared plugin name.
        plugin_dir: Plugin directory, a child of the multi-module root.
        runner: Maven runner used to evaluate the parent's module list.

    Returns:
        The module name, or None if the parent does not declare it.

    Raises:
        BuildExecutionError: If evaluating the module list fails.
        ResourceError: If the evaluation log cannot be read.
    """
    absolute = plugin_dir.absolute()
    if str(absolute).endswith(plugin_name):
        return plugin_name

    candidate = absolute.name
    parent_dir = absolute.parent
    log = parent_dir / MODULES_LOG
    runner.run(
        {"expression": "project.modules", "forceStdout": "true"},
        parent_dir,
        log,
        "-q",
        "help:evaluate",
    )

    try:
        output = log.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ResourceError(
            f"Unable to read module list: {log}",
            path=str(log),
            details={"error": str(e)},
        ) from e

    if candidate in parse_module_list(output):
        return candidate

    logger.warning(f"Module {candidate} is not declared by {parent_dir}")
    return None
