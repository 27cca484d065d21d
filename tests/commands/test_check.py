"""Tests for the check command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from datestr.cli import cli


class TestCheckCommand:
    def test_reports_each_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "2023-02-29", "2023-02-30"])
        assert result.exit_code == 0
        assert "valid: 1" in result.stdout
        assert "invalid: 1" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "2023-04-30", "2023-04-31"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["valid_count"] == 1
        assert data["data"]["items"][1]["code"] == "INVALID_DAY"

    def test_strict_fails_on_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--strict", "2023-01-01", "2023-13-01"])
        assert result.exit_code == 1

    def test_strict_passes_when_all_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--strict", "2023-01-01", "2023-12-31"])
        assert result.exit_code == 0

    def test_requires_an_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 2

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "2023-01-01", "x"])
        assert result.stdout.splitlines() == ["2023-01-01\tvalid", "x\tinvalid"]
