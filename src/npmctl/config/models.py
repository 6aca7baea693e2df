"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, npmctl.toml only contains
overrides. Most projects need no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from npmctl.domain.types import PackageManager
from npmctl.infrastructure.filesystem import DEFAULT_MAX_DEPTH

# --- npmctl.toml sections ---


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    # Used by ``init`` only, when no lockfile exists yet. Unset keeps the
    # lockfile requirement for every operation.
    default_manager: PackageManager | None = None


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)


class RunnerConfig(BaseModel):
    """[runner] section."""

    model_config = {"frozen": True}

    interactive_run: bool = False
    confirm_clean: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class NpmctlConfig(BaseModel):
    """Root config model — all sections with defaults."""

    model_config = {"frozen": True}

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
