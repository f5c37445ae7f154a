"""Working directory preparation before a plugin build.

Stale frontend tool folders break incremental builds, so they are removed
before Maven runs. When testing a local checkout, the shared ``.eslintrc``
is staged next to the plugin so the frontend lint step finds it.
"""

import shutil
from pathlib import Path

from src.core.exceptions.errors import ResourceError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

ESLINTRC = ".eslintrc"
NODE_FOLDERS = ("node", "node_modules")
COMPILE_LOG = "compilePluginLog.log"


def remove_node_folders(path: Path) -> list[Path]:
    """
    Delete generated node folders below ``path``.

    Args:
        path: Directory a build is about to run in.

    Returns:
        The folders that were removed.

    Raises:
        ResourceError: If a folder exists but cannot be deleted.
    """
    removed = []
    for name in NODE_FOLDERS:
        folder = path / name
        if not folder.is_dir():
            continue
        try:
            shutil.rmtree(folder)
        except OSError as e:
            raise ResourceError(
                f"Unable to delete {folder}",
                path=str(folder),
                details={"error": str(e)},
            ) from e
        logger.debug(f"Removed {folder}")
        removed.append(folder)
    return removed


def setup_compile_resources(path: Path) -> Path:
    """
    Clean ``path`` for a build and return the log file for that build.

    Args:
        path: Directory a build is about to run in.

    Returns:
        Path of the compilation log inside ``path``.

    Raises:
        ResourceError: If cleanup fails.
    """
    logger.info("Cleaning up node modules if necessary")
    remove_node_folders(path)
    logger.info(f"Plugin compilation log directory: {path}")
    return path / COMPILE_LOG


def find_eslintrc_root(local_checkout_dir: Path, multiple_plugins: bool) -> Path:
    """Return the directory holding the shared ``.eslintrc``.

    With several plugins under test the checkout dir is a folder of plugins
    and carries the file itself; with a single plugin the checkout dir is the
    plugin and the file sits one level up.
    """
    if multiple_plugins:
        return local_checkout_dir
    return local_checkout_dir.parent


def stage_eslintrc(
    local_checkout_dir: Path,
    plugin_dir: Path,
    multiple_plugins: bool,
) -> Path | None:
    """
    Copy ``.eslintrc`` from the local checkout next to the plugin directory.

    Args:
        local_checkout_dir: Local checkout override.
        plugin_dir: Directory the plugin is built from.
        multiple_plugins: Whether more than one plugin is under test.

    Returns:
        The copied file, or None when the checkout has no ``.eslintrc``.

    Raises:
        ResourceError: If the checkout cannot be listed or the copy fails.
    """
    root = find_eslintrc_root(local_checkout_dir, multiple_plugins)

    try:
        source = next(
            (entry for entry in root.iterdir() if entry.name == ESLINTRC and entry.is_file()),
            None,
        )
    except OSError as e:
        raise ResourceError(
            f"Unable to list {root}",
            path=str(root),
            details={"error": str(e)},
        ) from e

    if source is None:
        logger.debug(f"No {ESLINTRC} found in {root}")
        return None

    target = plugin_dir.parent / ESLINTRC
    try:
        if target.exists() and source.samefile(target):
            return target
        shutil.copyfile(source, target)
    except OSError as e:
        raise ResourceError(
            "Unable to copy eslintrc file",
            path=str(source),
            details={"target": str(target), "error": str(e)},
        ) from e

    logger.info(f"Copied {source} to {target}")
    return target
