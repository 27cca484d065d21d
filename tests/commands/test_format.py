"""Tests for the format command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from datestr.cli import cli


class TestFormatCommand:
    def test_template(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "2022-12-29", "--template", "dd-mm-yyyy"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "29-12-2022"

    def test_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "format", "2022-12-29", "-t", "dd/mm/yyyy", "-s", "/"]
        )
        assert result.stdout.strip() == "29/12/2022"

    def test_default_template(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "2023-01-04"])
        assert result.stdout.strip() == "2023-1-4"

    def test_env_template(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "format", "2022-12-29"],
            env={"DATESTR_FORMAT__TEMPLATE": "dd-mm-yyyy"},
        )
        assert result.stdout.strip() == "29-12-2022"

    def test_bad_template(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "format", "2022-12-29", "-t", "2020_10_20", "-s", "/"]
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_FORMAT"
