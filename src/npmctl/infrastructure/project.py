"""Project discovery, lockfile detection, and manifest field extraction.

All functions here are pure queries against the filesystem: the manifest
is read fresh on every call and never written back. Mutation of
``package.json`` is the package manager's job.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from npmctl.domain.errors import (
    ManifestIOError,
    ManifestParseError,
    NoLockfileError,
    ProjectNotFoundError,
)
from npmctl.domain.types import (
    DEPENDENCY_FIELDS,
    LOCKFILE_RULES,
    MANIFEST_FILENAME,
    PackageManager,
)
from npmctl.infrastructure.filesystem import DEFAULT_MAX_DEPTH, find_upward

logger = logging.getLogger(__name__)

Entry = tuple[str, str]


# ---------------------------------------------------------------------------
# Project root
# ---------------------------------------------------------------------------


def locate(start: Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Path:
    """Return the path of the nearest ``package.json`` at or above *start*."""
    manifest = find_upward(start, MANIFEST_FILENAME, max_depth=max_depth)
    if manifest is None:
        raise ProjectNotFoundError(
            f"No {MANIFEST_FILENAME} found in {start} or any parent directory",
            start=start,
        )
    logger.debug("Located manifest at %s", manifest)
    return manifest


def project_root(start: Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Path:
    """Directory containing the nearest ``package.json``."""
    return locate(start, max_depth=max_depth).parent


# ---------------------------------------------------------------------------
# Package manager detection
# ---------------------------------------------------------------------------


def detect(start: Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> PackageManager:
    """Detect the package manager from the first lockfile rule that matches.

    Each rule runs its own walk-up from *start*, in priority order, so an
    npm lockfile anywhere up the tree wins over a closer ``yarn.lock``.
    """
    for manager, lockfile in LOCKFILE_RULES:
        found = find_upward(start, lockfile, max_depth=max_depth)
        if found is not None:
            logger.debug("Detected %s from %s", manager, found)
            return manager
    names = ", ".join(lockfile for _, lockfile in LOCKFILE_RULES)
    raise NoLockfileError(
        f"No lockfile ({names}) found in {start} or any parent directory",
        start=start,
    )


# ---------------------------------------------------------------------------
# Manifest reading
# ---------------------------------------------------------------------------


def load_manifest(root: Path) -> dict[str, Any]:
    """Read and parse ``package.json`` in *root*."""
    path = root / MANIFEST_FILENAME
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestIOError(f"Cannot read {path}: {exc}", path=path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(
            f"Invalid JSON in {path}: {exc}",
            path=path,
            line=exc.lineno,
            column=exc.colno,
        ) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Expected a JSON object in {path}, got {type(data).__name__}",
            path=path,
        )
    return data


def _preview(value: dict[str, Any], manager: PackageManager) -> list[Entry]:
    return [(key, f"{manager} {key}") for key in value]


def read_field(root: Path, field: str, manager: PackageManager) -> Any:
    """Return the top-level manifest *field*.

    Mapping values become ``[(key, "<manager> <key>"), ...]`` in manifest
    order, the second element previewing what running that entry executes.
    Any other JSON value is returned unchanged; a missing field is None.
    """
    value = load_manifest(root).get(field)
    if isinstance(value, dict):
        return _preview(value, manager)
    return value


def get_scripts(root: Path, manager: PackageManager) -> list[Entry]:
    """``(script, preview)`` pairs from the ``scripts`` field."""
    scripts = load_manifest(root).get("scripts")
    return _preview(scripts, manager) if isinstance(scripts, dict) else []


def get_dependencies(root: Path, manager: PackageManager) -> list[Entry]:
    """``(name, preview)`` pairs across all dependency groups.

    Groups are concatenated in :data:`DEPENDENCY_FIELDS` order without
    de-duplication.
    """
    manifest = load_manifest(root)
    entries: list[Entry] = []
    for field in DEPENDENCY_FIELDS:
        group = manifest.get(field)
        if isinstance(group, dict):
            entries.extend(_preview(group, manager))
    return entries
