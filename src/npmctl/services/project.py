"""ProjectService — resolve the project, pick the manager, run the command.

Pipeline for every package manager operation:
LOCATE → DETECT → BUILD → (dry run | RUN) → REPORT

Detection is repeated on every call and its result is passed explicitly
into :func:`~npmctl.domain.commands.build`; nothing is remembered between
operations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from npmctl.domain.commands import Invocation, build, clean_target
from npmctl.domain.errors import NoLockfileError, NpmctlError, ProjectNotFoundError
from npmctl.domain.types import Operation, PackageManager
from npmctl.infrastructure import project as proj
from npmctl.infrastructure.filesystem import remove_tree
from npmctl.infrastructure.runner import run_invocation
from npmctl.services.base import BaseService
from npmctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]


class ProjectService(BaseService):
    """Package manager operations for the project enclosing ``start_dir``."""

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @property
    def _start(self) -> Path:
        return self._settings.start_dir

    @property
    def _max_depth(self) -> int:
        return self._settings.search.max_depth

    def _root(self) -> Path:
        return proj.project_root(self._start, max_depth=self._max_depth)

    def _detect(self) -> PackageManager:
        return proj.detect(self._start, max_depth=self._max_depth)

    def _resolve(self) -> tuple[Path, PackageManager]:
        root = self._root()
        return root, self._detect()

    def _resolve_for_init(self, warnings: list[str]) -> tuple[Path, PackageManager]:
        """Like :meth:`_resolve`, but honours ``project.default_manager``.

        Without a configured default the lockfile requirement stands.
        """
        fallback = self._settings.project.default_manager
        try:
            root = self._root()
        except ProjectNotFoundError:
            if fallback is None:
                raise
            root = self._start
        try:
            return root, self._detect()
        except NoLockfileError:
            if fallback is None:
                raise
            warnings.append(f"No lockfile found, using configured default manager {fallback}")
            return root, fallback

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def show_root(self) -> ServiceResult:
        """Path of the nearest ``package.json``."""
        op = "show_root"
        try:
            manifest = proj.locate(self._start, max_depth=self._max_depth)
        except NpmctlError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"project_root": str(manifest.parent), "manifest": str(manifest)},
        )

    def show_manager(self) -> ServiceResult:
        """The package manager the next operation would use."""
        op = "show_manager"
        try:
            root, manager = self._resolve()
        except NpmctlError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"project_root": str(root), "manager": str(manager)},
        )

    def scripts(self) -> ServiceResult:
        """Scripts declared in the manifest, with command previews."""
        return self._entries("scripts", proj.get_scripts)

    def dependencies(self) -> ServiceResult:
        """Dependencies across all groups, with command previews."""
        return self._entries("dependencies", proj.get_dependencies)

    def _entries(
        self,
        op: str,
        reader: Callable[[Path, PackageManager], list[tuple[str, str]]],
    ) -> ServiceResult:
        try:
            root, manager = self._resolve()
            entries = reader(root, manager)
        except NpmctlError as exc:
            return self._failure(op, exc)
        items = [{"name": name, "preview": preview} for name, preview in entries]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "project_root": str(root),
                "manager": str(manager),
                "count": len(items),
                "items": items,
            },
        )

    # ------------------------------------------------------------------
    # Package manager operations
    # ------------------------------------------------------------------

    def init(self) -> ServiceResult:
        """``<pm> init``, always interactive."""
        op = "init"
        warnings: list[str] = []
        try:
            root, manager = self._resolve_for_init(warnings)
            invocation = build(Operation.INIT, manager, interactive=True)
        except NpmctlError as exc:
            return self._failure(op, exc)
        return self._launch(op, root, invocation, warnings)

    def install(self) -> ServiceResult:
        """Install everything the manifest declares."""
        return self._execute("install", Operation.INSTALL)

    def add(self, dependency: str, *, dev: bool = False) -> ServiceResult:
        """Add *dependency*, saved to devDependencies when *dev* is set."""
        operation = Operation.INSTALL_SAVE_DEV if dev else Operation.INSTALL_SAVE
        return self._execute("add", operation, dependency)

    def uninstall(self, dependency: str) -> ServiceResult:
        """Remove *dependency* from the project."""
        return self._execute("uninstall", Operation.UNINSTALL, dependency)

    def list_packages(self) -> ServiceResult:
        """Top-level installed packages."""
        return self._execute("list", Operation.LIST)

    def run(self, script: str, *, interactive: bool | None = None) -> ServiceResult:
        """Run a manifest script."""
        if interactive is None:
            interactive = self._settings.runner.interactive_run
        return self._execute("run", Operation.RUN, script, interactive=interactive)

    def _execute(
        self,
        op: str,
        operation: Operation,
        arg: str | None = None,
        *,
        interactive: bool = False,
    ) -> ServiceResult:
        try:
            root, manager = self._resolve()
            invocation = build(operation, manager, arg, interactive=interactive)
        except NpmctlError as exc:
            return self._failure(op, exc)
        return self._launch(op, root, invocation, [])

    def _launch(
        self,
        op: str,
        root: Path,
        invocation: Invocation,
        warnings: list[str],
    ) -> ServiceResult:
        data: dict[str, Any] = {
            "command": invocation.command_line,
            "manager": str(invocation.manager),
            "project_root": str(root),
            "interactive": invocation.interactive,
        }
        if self._settings.dry_run:
            data["dry_run"] = True
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        self._dispatch_hook(
            "pre_invocation",
            {"command_line": invocation.command_line, "project_root": str(root)},
            warnings,
        )
        try:
            outcome = run_invocation(invocation, root)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                warnings=warnings,
                error=ServiceError(
                    code="COMMAND_NOT_FOUND",
                    message=f"Cannot start {invocation.manager}: {exc}",
                    detail={"command": invocation.command_line},
                ),
            )
        self._dispatch_hook(
            "post_invocation",
            {
                "command_line": invocation.command_line,
                "project_root": str(root),
                "returncode": outcome.returncode,
            },
            warnings,
        )

        data.update(
            returncode=outcome.returncode,
            stdout=outcome.stdout,
            stderr=outcome.stderr,
        )
        if not outcome.ok:
            return ServiceResult(
                ok=False,
                op=op,
                warnings=warnings,
                error=ServiceError(
                    code="COMMAND_FAILED",
                    message=f"{invocation.command_line} exited with status {outcome.returncode}",
                    detail=data,
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # Clean
    # ------------------------------------------------------------------

    def clean(self, confirm: ConfirmFn | None = None) -> ServiceResult:
        """Delete ``node_modules`` in the project root.

        *confirm* is asked first unless ``runner.confirm_clean`` is off.
        A declined or unanswerable confirmation is not an error.
        """
        op = "clean"
        warnings: list[str] = []
        try:
            root = self._root()
        except NpmctlError as exc:
            return self._failure(op, exc)

        target = clean_target(root)
        data: dict[str, Any] = {"project_root": str(root), "path": str(target), "removed": False}

        if not target.is_dir():
            warnings.append(f"Nothing to clean: {target} does not exist")
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
        if self._settings.dry_run:
            data["dry_run"] = True
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        if self._settings.runner.confirm_clean:
            if confirm is None:
                warnings.append("Confirmation required to delete node_modules; pass --yes")
                return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
            if not confirm(target):
                return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        try:
            data["removed"] = remove_tree(target)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                warnings=warnings,
                error=ServiceError(
                    code="CLEAN_FAILED",
                    message=f"Failed to remove {target}: {exc}",
                    detail={"path": str(target)},
                ),
            )
        logger.debug("Removed %s", target)
        self._dispatch_hook(
            "post_clean",
            {"project_root": str(root), "removed": data["removed"]},
            warnings,
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
