"""Tests for the parse command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from datestr.cli import cli


class TestParseCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2023-1-4"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "2023-01-04" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "2023-1-4"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "parse"
        assert data["data"]["date"] == "2023-01-04"
        assert data["data"]["month"] == 1

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "0-3-1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0-03-01"

    def test_invalid_goes_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "2023-55-02"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INVALID_MONTH"
        assert payload["error"]["detail"]["month"] == 55

    def test_verbose_error_detail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "2023-12-32"])
        assert result.exit_code == 1
        assert "INVALID_DAY" in result.stderr
        assert "detail" in result.stderr

    def test_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "2023-12"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "MALFORMED_INPUT"
