"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading, the project service,
candidate prompts, and centralized result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from npmctl.output.formatters import OutputSettings, format_result
from npmctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from npmctl.config.settings import NpmctlSettings
    from npmctl.plugins.manager import PluginManager
    from npmctl.services.project import ProjectService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered lazily, on the first hook a service fires, so
    ``--help``, ``--dry-run`` and read-only queries never import plugin code.
    """

    def __init__(self, settings: NpmctlSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from npmctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def interactive(self) -> bool:
        """Whether prompts may be shown."""
        return not self.settings.no_interact

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from npmctl.domain.errors import ProjectNotFoundError
            from npmctl.infrastructure.project import project_root
            from npmctl.plugins.manager import LOCAL_PLUGIN_DIR, PluginManager

            try:
                root = project_root(
                    self.settings.start_dir,
                    max_depth=self.settings.search.max_depth,
                )
                local_dir = root / LOCAL_PLUGIN_DIR
            except ProjectNotFoundError:
                local_dir = None
            self._plugins = PluginManager()
            self._plugins.discover_and_load(local_dir=local_dir)
        return self._plugins

    @property
    def service(self) -> ProjectService:
        """A project service bound to the current settings."""
        from npmctl.services.project import ProjectService

        return ProjectService(self.settings, plugin_loader=lambda: self.plugins)

    def choose(self, listing: ServiceResult, label: str) -> str:
        """Prompt for one name from a scripts/dependencies listing.

        Emits the listing (and exits) when it failed, is empty, or
        prompting is disabled.
        """
        if not listing.ok:
            self.emit(listing)
        names = [item["name"] for item in listing.data.get("items", [])]
        if not names:
            self.fail(listing.op, "NO_CANDIDATES", f"No {listing.op} declared in package.json")
        if not self.interactive:
            self.fail(listing.op, "MISSING_ARGUMENT", f"A {label} is required with --no-interact")
        unique = list(dict.fromkeys(names))
        return click.prompt(label.capitalize(), type=click.Choice(unique))

    def fail(self, op: str, code: str, message: str) -> None:
        """Emit a failure produced by the command layer itself."""
        self.emit(
            ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=message))
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
