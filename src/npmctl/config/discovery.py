"""Config file discovery and loading.

Walk-up finder locates npmctl.toml, the same way package.json is found.
Supports NPMCTL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from npmctl.config.models import NpmctlConfig
from npmctl.infrastructure.filesystem import find_upward

CONFIG_FILENAME = "npmctl.toml"
CONFIG_ENV_VAR = "NPMCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for npmctl.toml.

    Returns the path to the config file, or None if not found.
    Checks NPMCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    return find_upward(start or Path.cwd(), CONFIG_FILENAME)


def load_config(path: Path | None = None, cwd: Path | None = None) -> NpmctlConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default NpmctlConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return NpmctlConfig()

    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = tomllib.loads(raw)
    return NpmctlConfig.model_validate(data)
