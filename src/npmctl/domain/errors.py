"""Error taxonomy for project resolution and command building.

Each exception carries a stable ``code`` that the service layer copies
into :class:`~npmctl.services.result.ServiceError` unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class NpmctlError(Exception):
    """Base class for all npmctl domain errors."""

    code = "NPMCTL_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = {k: str(v) if isinstance(v, Path) else v for k, v in detail.items()}


class ProjectNotFoundError(NpmctlError):
    """No ``package.json`` in the start directory or any ancestor."""

    code = "PROJECT_NOT_FOUND"


class NoLockfileError(NpmctlError):
    """No recognized lockfile in the start directory or any ancestor."""

    code = "NO_LOCKFILE"


class ManifestIOError(NpmctlError):
    """The manifest exists but could not be read."""

    code = "MANIFEST_IO_ERROR"


class ManifestParseError(NpmctlError):
    """The manifest is not a valid JSON object."""

    code = "MANIFEST_PARSE_ERROR"


class UnsupportedOperationError(NpmctlError):
    """Operation has no entry in the command table."""

    code = "UNSUPPORTED_OPERATION"
