"""Tests for the format_result dispatcher and OutputSettings."""

import json

from patterncraft.output.formatters import OutputSettings, format_result
from patterncraft.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("build_report", lines=["H"])
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "build_report"
        assert data["data"]["lines"] == ["H"]

    def test_json_mode_error(self) -> None:
        output = format_result(_err("build_report", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg_without_settings(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"), settings=OutputSettings(json_output=False), json_output=True
        )
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("log_write", recorded=True), settings=OutputSettings(quiet=True))
        assert output == "OK: log_write"

    def test_quiet_report_prints_lines(self) -> None:
        result = _ok("build_report", lines=["H", "C", "F"])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "H\nC\nF"

    def test_quiet_error(self) -> None:
        output = format_result(_err("build_report", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultDefault:
    def test_default_success_contains_ok(self) -> None:
        output = format_result(_ok("custom_op", key="val"))
        assert "OK" in output
        assert "custom_op" in output
        assert "key: val" in output

    def test_default_error_contains_error(self) -> None:
        output = format_result(_err("build_report", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
