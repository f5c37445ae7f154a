"""Multi-module layout detection."""

from pathlib import Path

from src.core.logger.logger import get_logger

logger = get_logger(__name__)


def is_multi_parent_layout(
    plugin_dir: Path,
    parent_folder: str | None,
    has_local_checkout: bool,
) -> bool:
    """
    Check whether the plugin sits directly inside its multi-module parent folder.

    A local checkout is always built as laid out by the user. Mismatches are
    logged and classified as standalone.

    Args:
        plugin_dir: Plugin directory.
        parent_folder: Expected name of the enclosing parent folder.
        has_local_checkout: Whether a local checkout override is in use.

    Returns:
        True if ``plugin_dir`` is a direct child of a folder named ``parent_folder``.
    """
    if has_local_checkout:
        return False
    if parent_folder is None or not parent_folder.strip():
        return False

    absolute = plugin_dir.absolute()
    if parent_folder not in str(absolute):
        logger.warning(f"Parent folder {parent_folder} not present in path {absolute}")
        return False

    if absolute.parent.name != parent_folder:
        logger.warning(f"{parent_folder} is not the parent folder of {absolute}")
        return False

    return True
