"""Command: list top-level installed packages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext


@click.command("list", cls=NpmCommand, examples="  npmctl list\n  npmctl -q list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List installed packages (depth 0)."""
    app.emit(app.service.list_packages())
