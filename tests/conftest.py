"""Shared pytest fixtures and test helpers for npmctl tests."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from npmctl.config.settings import NpmctlSettings

MakeProject = Callable[..., Path]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's NPMCTL_* environment out of the tests."""
    for var in (
        "NPMCTL_CONFIG",
        "NPMCTL_DRY_RUN",
        "NPMCTL_NO_INTERACT",
        "NPMCTL_PROJECT__DEFAULT_MANAGER",
        "NPMCTL_PLUGINS__ENABLED",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path) -> MakeProject:
    """Factory for a project directory with a manifest and lockfiles.

    ``make_project({"scripts": {...}}, "yarn.lock")`` writes
    ``package.json`` plus each named (empty) lockfile. Pass
    ``manifest=None`` to skip the manifest, or a ``str`` to write raw text.
    """

    def _make(
        manifest: dict[str, Any] | str | None = None,
        *lockfiles: str,
        subdir: str = "project",
    ) -> Path:
        root = tmp_path / subdir
        root.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            text = manifest if isinstance(manifest, str) else json.dumps(manifest)
            (root / "package.json").write_text(text, encoding="utf-8")
        for name in lockfiles:
            (root / name).write_text("", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def project_root(make_project: MakeProject) -> Path:
    """An npm project with two scripts and overlapping dependency groups."""
    return make_project(
        {
            "name": "demo",
            "scripts": {"build": "webpack", "test": "jest"},
            "dependencies": {"react": "^18.0.0", "x": "1.0.0"},
            "devDependencies": {"x": "1.0.0", "jest": "^29.0.0"},
        },
        "package-lock.json",
    )


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the demo project so the CLI resolves it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


MakeSettings = Callable[..., NpmctlSettings]


@pytest.fixture
def make_settings() -> MakeSettings:
    """Factory for settings rooted at a start directory, plugins off by default."""

    def _make(start: Path, **overrides: Any) -> NpmctlSettings:
        overrides.setdefault("plugins", {"enabled": False})
        return NpmctlSettings.from_cli(start_dir=start, **overrides)

    return _make


class FakeRun:
    """Stand-in for ``subprocess.run`` that records argv and cwd."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.returncode = 0
        self.stdout = ""
        self.stderr = ""
        self.raises: OSError | None = None

    def __call__(self, argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append({"argv": list(argv), **kwargs})
        if self.raises is not None:
            raise self.raises
        captured = kwargs.get("capture_output", False)
        return subprocess.CompletedProcess(
            argv,
            self.returncode,
            stdout=self.stdout if captured else None,
            stderr=self.stderr if captured else None,
        )

    @property
    def last_argv(self) -> list[str]:
        return self.calls[-1]["argv"]


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    """Replace the runner's subprocess call with a recorder."""
    fake = FakeRun()
    monkeypatch.setattr("npmctl.infrastructure.runner.subprocess.run", fake)
    return fake
