"""Rich Console factory and theme for npmctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NPM_THEME = Theme(
    {
        "npm.ok": "bold green",
        "npm.error": "bold red",
        "npm.warning": "bold yellow",
        "npm.op": "bold cyan",
        "npm.key": "dim",
        "npm.path": "dim",
        "npm.command": "bold",
        "npm.name": "bold blue",
        "npm.manager.npm": "red",
        "npm.manager.yarn": "cyan",
        "npm.manager.pnpm": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NPM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_manager(manager: str) -> str:
    """Return the Rich style name for a package manager."""
    if manager in ("npm", "yarn", "pnpm"):
        return f"npm.manager.{manager}"
    return ""
