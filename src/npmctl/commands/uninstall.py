"""Command: remove a dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.command(
    cls=NpmCommand,
    examples="""\
  npmctl uninstall left-pad
  npmctl uninstall     # choose from package.json dependencies""",
)
@click.argument("dependency", required=False)
@click.pass_obj
def uninstall(app: AppContext, dependency: str | None) -> None:
    """Uninstall DEPENDENCY and drop it from package.json."""
    svc = app.service
    if dependency is None:
        dependency = app.choose(svc.dependencies(), "dependency")
    app.emit(svc.uninstall(dependency))
