"""Command table — translate (operation, manager, argument) into an Invocation.

npm and pnpm share one syntax; yarn has its own. The table is keyed on
``(operation, manager is yarn)`` so the dispatch is a closed two-way split
with no silent fallback: anything missing from the table raises.

Arguments are never validated. An empty dependency name produces
``npm install `` exactly as typed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from npmctl.domain.errors import UnsupportedOperationError
from npmctl.domain.types import NODE_MODULES_DIRNAME, Operation, PackageManager


class Invocation(BaseModel):
    """A fully resolved command line: binary + subcommand words + argument."""

    model_config = {"frozen": True}

    manager: PackageManager
    words: tuple[str, ...]
    interactive: bool = False

    @property
    def argv(self) -> list[str]:
        """Argument vector suitable for :func:`subprocess.run`."""
        return [str(self.manager), *self.words]

    @property
    def command_line(self) -> str:
        """The command line as a single space-joined string."""
        return " ".join(self.argv)

    def __str__(self) -> str:
        return self.command_line


# (operation, is_yarn) -> (subcommand words, takes_argument)
COMMAND_TABLE: dict[tuple[Operation, bool], tuple[tuple[str, ...], bool]] = {
    (Operation.INIT, False): (("init",), False),
    (Operation.INIT, True): (("init",), False),
    (Operation.INSTALL, False): (("install",), False),
    (Operation.INSTALL, True): (("install",), False),
    (Operation.INSTALL_SAVE, False): (("install",), True),
    (Operation.INSTALL_SAVE, True): (("add",), True),
    (Operation.INSTALL_SAVE_DEV, False): (("install", "--save-dev"), True),
    (Operation.INSTALL_SAVE_DEV, True): (("add", "--dev"), True),
    (Operation.UNINSTALL, False): (("uninstall",), True),
    (Operation.UNINSTALL, True): (("remove",), True),
    (Operation.LIST, False): (("list", "--depth=0"), False),
    (Operation.LIST, True): (("list", "--depth=0"), False),
    (Operation.RUN, False): (("run",), True),
    (Operation.RUN, True): (("run",), True),
}


def build(
    operation: Operation | str,
    manager: PackageManager | str,
    arg: str | None = None,
    *,
    interactive: bool = False,
) -> Invocation:
    """Build the invocation for *operation* under *manager*.

    Raises:
        UnsupportedOperationError: *operation* has no table entry (``clean``
            included, see :func:`clean_target`), or an argument-taking
            operation was given ``arg=None``.
    """
    try:
        op = Operation(operation)
        pm = PackageManager(manager)
    except ValueError as exc:
        raise UnsupportedOperationError(
            f"Unsupported operation {operation!r} for manager {manager!r}",
            operation=str(operation),
            manager=str(manager),
        ) from exc

    entry = COMMAND_TABLE.get((op, pm is PackageManager.YARN))
    if entry is None:
        raise UnsupportedOperationError(
            f"{op} is not a {pm} invocation",
            operation=str(op),
            manager=str(pm),
        )

    words, takes_arg = entry
    if takes_arg:
        if arg is None:
            raise UnsupportedOperationError(
                f"{op} requires an argument",
                operation=str(op),
                manager=str(pm),
            )
        words = (*words, arg)
    return Invocation(manager=pm, words=words, interactive=interactive)


def clean_target(project_root: Path) -> Path:
    """Directory removed by the clean operation (not a package manager call)."""
    return project_root / NODE_MODULES_DIRNAME
