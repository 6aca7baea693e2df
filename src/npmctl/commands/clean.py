"""Command: delete node_modules."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.command(
    cls=NpmCommand,
    examples="""\
  npmctl clean
  npmctl clean --yes
  npmctl --dry-run clean""",
)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def clean(app: AppContext, yes: bool) -> None:
    """Delete the project's node_modules directory."""

    def confirm(target: Path) -> bool:
        return click.confirm(f"Delete {target}?", default=False)

    if yes:
        app.emit(app.service.clean(lambda _target: True))
    elif app.interactive:
        app.emit(app.service.clean(confirm))
    else:
        app.emit(app.service.clean())
