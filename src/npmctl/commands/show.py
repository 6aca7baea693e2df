"""Command group: inspect the project without running anything."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmGroup

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.group(
    cls=NpmGroup,
    examples="""\
  npmctl show root
  npmctl show manager
  npmctl show scripts
  npmctl -q show deps | xargs -n1 echo
  npmctl --json show deps""",
)
def show() -> None:
    """Show project root, package manager, scripts, or dependencies."""


@show.command()
@click.pass_obj
def root(app: AppContext) -> None:
    """Path of the nearest package.json."""
    app.emit(app.service.show_root())


@show.command()
@click.pass_obj
def manager(app: AppContext) -> None:
    """Package manager inferred from the lockfile."""
    app.emit(app.service.show_manager())


@show.command()
@click.pass_obj
def scripts(app: AppContext) -> None:
    """Scripts and the command each would run."""
    app.emit(app.service.scripts())


@show.command("deps")
@click.pass_obj
def deps(app: AppContext) -> None:
    """Dependencies from every dependency group, duplicates included."""
    app.emit(app.service.dependencies())
