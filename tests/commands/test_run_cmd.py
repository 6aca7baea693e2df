"""Tests for the run command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from npmctl.cli import cli

if TYPE_CHECKING:
    from tests.conftest import FakeRun, MakeProject


@pytest.mark.usefixtures("_isolated_project")
class TestRunCommand:
    def test_run_named_script(self, cli_runner: CliRunner, fake_run: FakeRun) -> None:
        result = cli_runner.invoke(cli, ["run", "build"])
        assert result.exit_code == 0
        assert fake_run.last_argv == ["npm", "run", "build"]
        assert fake_run.calls[0]["capture_output"] is True

    def test_interactive_flag(self, cli_runner: CliRunner, fake_run: FakeRun) -> None:
        result = cli_runner.invoke(cli, ["run", "-i", "build"])
        assert result.exit_code == 0
        assert "capture_output" not in fake_run.calls[0]

    def test_choose_script(self, cli_runner: CliRunner, fake_run: FakeRun) -> None:
        result = cli_runner.invoke(cli, ["run"], input="test\n")
        assert result.exit_code == 0
        assert fake_run.last_argv == ["npm", "run", "test"]

    def test_invalid_choice_reprompts(self, cli_runner: CliRunner, fake_run: FakeRun) -> None:
        result = cli_runner.invoke(cli, ["run"], input="deploy\nbuild\n")
        assert result.exit_code == 0
        assert fake_run.last_argv == ["npm", "run", "build"]

    def test_no_interact_requires_script(self, cli_runner: CliRunner, fake_run: FakeRun) -> None:
        result = cli_runner.invoke(cli, ["--json", "--no-interact", "run"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "MISSING_ARGUMENT"
        assert fake_run.calls == []


class TestRunWithoutScripts:
    def test_no_candidates(
        self,
        cli_runner: CliRunner,
        make_project: MakeProject,
        fake_run: FakeRun,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(make_project({"name": "bare"}, "pnpm-lock.yaml"))
        result = cli_runner.invoke(cli, ["--json", "run"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NO_CANDIDATES"

    def test_broken_manifest(
        self,
        cli_runner: CliRunner,
        make_project: MakeProject,
        fake_run: FakeRun,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(make_project("{", "pnpm-lock.yaml"))
        result = cli_runner.invoke(cli, ["--json", "run"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "MANIFEST_PARSE_ERROR"
