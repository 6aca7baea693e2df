"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.commands._base import NpmCommand

if TYPE_CHECKING:
    from npmctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  npmctl init
  npmctl -C packages/web init
  npmctl --dry-run init"""


@click.command("init", cls=NpmCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Run the package manager's interactive init."""
    app.emit(app.service.init())
