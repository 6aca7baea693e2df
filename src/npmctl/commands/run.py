"""Command: run a package.json script."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.command(
    cls=NpmCommand,
    examples="""\
  npmctl run build
  npmctl run -i dev    # keep the terminal attached
  npmctl run           # choose from package.json scripts""",
)
@click.argument("script", required=False)
@click.option(
    "-i/-I",
    "--interactive/--captured",
    default=None,
    help="Attach the terminal instead of capturing output.",
)
@click.pass_obj
def run(app: AppContext, script: str | None, interactive: bool | None) -> None:
    """Run SCRIPT from package.json."""
    svc = app.service
    if script is None:
        script = app.choose(svc.scripts(), "script")
    app.emit(svc.run(script, interactive=interactive))
