"""Tests for the format_result dispatcher and OutputSettings."""

import json

from datestr.output.formatters import OutputSettings, format_result
from datestr.services.result import ServiceError, ServiceResult


def _ok(op: str = "parse", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "parse", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok(date="2023-01-04"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["date"] == "2023-01-04"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(date="2023-01-04"), settings=settings))["ok"]

    def test_quiet_mode(self) -> None:
        output = format_result(_ok(date="2023-01-04"), settings=OutputSettings(quiet=True))
        assert output == "2023-01-04"

    def test_human_mode_default(self) -> None:
        output = format_result(_ok(date="2023-01-04"))
        assert "OK" in output
        assert "2023-01-04" in output
