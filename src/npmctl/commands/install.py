"""Commands: install all dependencies, add a new one."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.command(
    cls=NpmCommand,
    examples="""\
  npmctl install
  npmctl --dry-run install
  npmctl --json install""",
)
@click.pass_obj
def install(app: AppContext) -> None:
    """Install every dependency declared in package.json."""
    app.emit(app.service.install())


@click.command(
    cls=NpmCommand,
    examples="""\
  npmctl add lodash
  npmctl add --dev jest
  npmctl add           # prompts for the name""",
)
@click.argument("dependency", required=False)
@click.option("-D", "--dev", is_flag=True, help="Save as a development dependency.")
@click.pass_obj
def add(app: AppContext, dependency: str | None, dev: bool) -> None:
    """Install DEPENDENCY and save it to package.json."""
    if dependency is None:
        if not app.interactive:
            app.fail("add", "MISSING_ARGUMENT", "A dependency is required with --no-interact")
        dependency = click.prompt("Dependency", default="", show_default=False)
    app.emit(app.service.add(dependency, dev=dev))
