"""Filesystem helpers: bounded walk-up search and directory removal.

The walk-up is shared by project discovery, lockfile detection, and
``npmctl.toml`` discovery, similar to how git finds ``.git/``.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# Upper bound on directories visited by a single walk-up.
DEFAULT_MAX_DEPTH = 256


def find_upward(
    start: Path,
    filename: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Path | None:
    """Walk up from *start* (inclusive) looking for a file named *filename*.

    Returns the path to the file, or None once the filesystem root or
    *max_depth* directories have been checked.
    """
    current = start.resolve()
    for _ in range(max_depth):
        candidate = current / filename
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent
    logger.debug("Walk-up for %s stopped after %d directories", filename, max_depth)
    return None


def remove_tree(path: Path) -> bool:
    """Delete the directory at *path*. Returns False if it did not exist."""
    if not path.is_dir():
        return False
    shutil.rmtree(path)
    return True
