"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from npmctl.output.console import create_console, get_output, style_for_manager

if TYPE_CHECKING:
    from rich.console import Console

    from npmctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # Listings print one name per line so they can be piped.
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)

    captured = result.data.get("stdout")
    if captured:
        return str(captured).rstrip("\n")
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="npm.ok")
    op = Text(f"  {result.op}", style="npm.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="npm.key")
    if key == "manager":
        v = Text(str(value), style=style_for_manager(str(value)))
    elif key in ("path", "project_root", "manifest"):
        v = Text(str(value), style="npm.path")
    elif key == "command":
        v = Text(str(value), style="npm.command")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _captured(console: Console, data: dict[str, Any]) -> None:
    """Print captured process output below the fields."""
    for stream in ("stdout", "stderr"):
        text = str(data.get(stream) or "").rstrip("\n")
        if text:
            console.print()
            console.print(Text(text), soft_wrap=True)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="npm.error")
    op = Text(f"  {result.op}", style="npm.op")
    dash = Text(" — ")
    console.print(label, op, dash, msg, sep="")

    if not err:
        return
    # A failing package manager explains itself on stderr; show it always.
    stderr = str(err.detail.get("stderr") or "").rstrip("\n")
    if stderr:
        console.print()
        console.print(Text(stderr), soft_wrap=True)
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k in ("stdout", "stderr"):
                continue
            console.print(f"    {k}: {v}")


# ── Invocation renderer ───────────────────────────────────────────────


def _render_invocation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render init/install/add/uninstall/list/run results."""
    d = result.data
    _status_line(console, result)
    _field(console, "command", d.get("command", ""))
    if d.get("dry_run"):
        _field(console, "dry_run", True)
    if verbose:
        for key in ("manager", "project_root", "interactive", "returncode"):
            if key in d:
                _field(console, key, d[key])
    _captured(console, d)


# ── Listing renderers ─────────────────────────────────────────────────


def _render_entries(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render scripts/dependencies as a name → preview table."""
    d = result.data
    items = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="npm.name", no_wrap=True)
    table.add_column("Runs", style="npm.command")
    for item in items:
        table.add_row(str(item.get("name", "")), str(item.get("preview", "")))
    console.print(table)
    noun = "scripts" if result.op == "scripts" else "dependencies"
    console.print(f"\n{d.get('count', len(items))} {noun} ({d.get('manager', '?')})")
    if verbose:
        _field(console, "project_root", d.get("project_root", ""))


def _render_clean(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "path", d.get("path", ""))
    _field(console, "removed", d.get("removed", False))
    if d.get("dry_run"):
        _field(console, "dry_run", True)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "init": _render_invocation,
    "install": _render_invocation,
    "add": _render_invocation,
    "uninstall": _render_invocation,
    "list": _render_invocation,
    "run": _render_invocation,
    "scripts": _render_entries,
    "dependencies": _render_entries,
    "clean": _render_clean,
}
