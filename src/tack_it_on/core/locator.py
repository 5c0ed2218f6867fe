"""Find (and create) the `.tacked` directory that marks a project root."""

import os
from pathlib import Path

from loguru import logger

from tack_it_on.config import MARKER_NAME


def _contains_marker(directory: Path) -> bool:
    """Check whether directory holds a marker directory.

    Only directories count; a stray file named like the marker is ignored.
    Errors listing the directory (e.g. permission denied) propagate.
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name == MARKER_NAME and entry.is_dir():
                return True
    return False


def ancestry(start_dir: Path) -> list[Path]:
    """Return start_dir and all its parents, deepest first, ending at the root."""
    return [start_dir, *start_dir.parents]


def locate_project_root(start_dir: Path) -> Path | None:
    """Find the nearest marker directory at or above start_dir.

    Symlinks are resolved once, up front; the walk then follows the
    canonical path upwards.

    Returns:
        Path of the marker directory itself (`<root>/.tacked`), or None when
        no directory up to the filesystem root has one.
    """
    canonical = start_dir.resolve()
    for candidate in ancestry(canonical):
        if _contains_marker(candidate):
            marker = candidate / MARKER_NAME
            logger.debug("Found project marker {}", marker)
            return marker
    logger.debug("No {} directory above {}", MARKER_NAME, canonical)
    return None


def create_marker(directory: Path) -> Path:
    """Create the marker directory inside directory and return its path.

    Raises FileExistsError if anything by the marker name is already there.
    """
    marker = directory.resolve() / MARKER_NAME
    marker.mkdir()
    logger.debug("Created {}", marker)
    return marker
