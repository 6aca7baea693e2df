"""Pluggy hook specifications for npmctl command lifecycle events.

Hooks fire synchronously around each package manager invocation and
after ``clean``. Dry runs fire nothing.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("npmctl")
hookimpl = pluggy.HookimplMarker("npmctl")


class NpmctlHookSpec:
    """Hook specifications for the npmctl plugin system."""

    @hookspec
    def pre_invocation(self, command_line: str, project_root: str) -> None:
        """Called before a package manager process is started."""

    @hookspec
    def post_invocation(
        self,
        command_line: str,
        project_root: str,
        returncode: int,
    ) -> None:
        """Called after the package manager process exits."""

    @hookspec
    def post_clean(self, project_root: str, removed: bool) -> None:
        """Called after node_modules removal."""
