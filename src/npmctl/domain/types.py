"""Package manager identities, logical operations, and lockfile rules.

Detection priority is part of the user-visible contract: rules are probed
in the order of :data:`LOCKFILE_RULES`, so a project carrying both
``package-lock.json`` and ``yarn.lock`` resolves to npm.
"""

from __future__ import annotations

from enum import StrEnum

MANIFEST_FILENAME = "package.json"
NODE_MODULES_DIRNAME = "node_modules"


class PackageManager(StrEnum):
    """Supported package manager binaries."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class Operation(StrEnum):
    """Logical actions that translate into a package manager invocation."""

    INIT = "init"
    INSTALL = "install"
    INSTALL_SAVE = "install-save"
    INSTALL_SAVE_DEV = "install-save-dev"
    UNINSTALL = "uninstall"
    LIST = "list"
    RUN = "run"
    CLEAN = "clean"


# (manager, lockfile) in detection priority order.
LOCKFILE_RULES: tuple[tuple[PackageManager, str], ...] = (
    (PackageManager.NPM, "package-lock.json"),
    (PackageManager.YARN, "yarn.lock"),
    (PackageManager.PNPM, "pnpm-lock.yaml"),
)

# Manifest fields aggregated into the dependency list, in output order.
DEPENDENCY_FIELDS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
)
