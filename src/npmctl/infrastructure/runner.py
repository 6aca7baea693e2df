"""Subprocess runner for resolved invocations.

Two modes:
- Captured (default): stdout/stderr collected and returned to the caller.
- Interactive: the child inherits the terminal, for commands that prompt
  (``npm init``). Nothing is captured.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npmctl.domain.commands import Invocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    """Exit status and captured streams of a finished invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_invocation(invocation: Invocation, cwd: Path) -> RunOutcome:
    """Run *invocation* in *cwd* and wait for it to exit.

    Raises:
        OSError: The package manager binary could not be started.
    """
    logger.debug(
        "Running %s in %s (interactive=%s)",
        invocation.command_line,
        cwd,
        invocation.interactive,
    )
    if invocation.interactive:
        proc = subprocess.run(invocation.argv, cwd=cwd, check=False)
        return RunOutcome(returncode=proc.returncode)

    proc = subprocess.run(
        invocation.argv,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    return RunOutcome(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
