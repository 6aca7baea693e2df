"""Subcommand modules for npmctl.

Provides register_commands() which uses deferred imports to keep
``npmctl --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group, in help order."""
    from npmctl.commands.clean import clean
    from npmctl.commands.init_cmd import init_cmd
    from npmctl.commands.install import add, install
    from npmctl.commands.list_cmd import list_cmd
    from npmctl.commands.run import run
    from npmctl.commands.show import show
    from npmctl.commands.uninstall import uninstall

    cli.add_command(init_cmd)
    cli.add_command(install)
    cli.add_command(add)
    cli.add_command(uninstall)
    cli.add_command(run)
    cli.add_command(list_cmd)
    cli.add_command(clean)
    cli.add_command(show)
