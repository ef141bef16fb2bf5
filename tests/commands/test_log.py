"""Tests for the journal CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from patterncraft.cli import cli


@pytest.mark.usefixtures("_isolated_workspace")
class TestLogWriteCommand:
    def test_write_default_info(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["log", "write", "Application started"])
        assert result.exit_code == 0
        assert (tmp_path / "logs.txt").read_text() == "INFO: Application started\n"

    def test_level_case_insensitive(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["log", "write", "careful", "--level", "warning"])
        assert result.exit_code == 0
        assert (tmp_path / "logs.txt").read_text() == "WARNING: careful\n"

    def test_gate_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "patterncraft.toml").write_text('[journal]\nmin_severity = "WARNING"\n')
        result = cli_runner.invoke(cli, ["--json", "log", "write", "chatter"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["recorded"] is False
        assert not (tmp_path / "logs.txt").exists()

    def test_gate_from_env(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PATTERNCRAFT_JOURNAL__MIN_SEVERITY", "ERROR")
        cli_runner.invoke(cli, ["log", "write", "careful", "--level", "WARNING"])
        cli_runner.invoke(cli, ["log", "write", "broken", "--level", "ERROR"])
        assert (tmp_path / "logs.txt").read_text() == "ERROR: broken\n"

    def test_unknown_level(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["log", "write", "x", "--level", "DEBUG"])
        assert result.exit_code == 2

    def test_write_failure_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "patterncraft.toml").write_text('[journal]\npath = "nope/logs.txt"\n')
        result = cli_runner.invoke(cli, ["log", "write", "lost"])
        assert result.exit_code == 1
        assert "Cannot write journal" in result.output


@pytest.mark.usefixtures("_isolated_workspace")
class TestLogReadCommand:
    def test_read_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["log", "read"])
        assert result.exit_code == 0
        assert "0 entries" in result.output

    def test_read_filtered_quiet(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["log", "write", "started"])
        cli_runner.invoke(cli, ["log", "write", "broken", "--level", "ERROR"])
        result = cli_runner.invoke(cli, ["-q", "log", "read", "--level", "ERROR"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["ERROR: broken"]

    def test_read_json(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["log", "write", "started"])
        result = cli_runner.invoke(cli, ["--json", "log", "read"])
        data = json.loads(result.output)
        assert data["data"]["entries"] == [{"severity": "INFO", "message": "started"}]

    def test_multiline_write_reads_back_as_one_entry(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["log", "write", "x\nERROR: y"])
        result = cli_runner.invoke(cli, ["-q", "log", "read", "--level", "ERROR"])
        assert result.exit_code == 0
        assert result.output == "\n"
