"""Root CLI group for npmctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from npmctl import __version__
from npmctl.commands import register_commands
from npmctl.commands._base import NpmGroup
from npmctl.commands._context import AppContext
from npmctl.config.settings import NpmctlSettings


@click.group(cls=NpmGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="npmctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-n", "--dry-run", is_flag=True, help="Print the command instead of running it.")
@click.option(
    "-C",
    "--directory",
    "start_dir",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Search for the project from this directory instead of the CWD.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    dry_run: bool,
    start_dir: Path | None,
    config_path: str | None,
) -> None:
    """npmctl — run npm, yarn, or pnpm, whichever the project uses."""
    settings = NpmctlSettings.from_cli(
        config_path=config_path,
        start_dir=start_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        dry_run=dry_run,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
