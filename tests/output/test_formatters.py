"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest
from pydantic import ValidationError

from recipectl.output.formatters import OutputSettings, format_result
from recipectl.services.result import ServiceError, ServiceResult


def _ok(op: str = "validate", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "validate", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings()
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok(recipe="r.yaml", rows_validated=4), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "validate"
        assert data["data"]["rows_validated"] == 4

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "ERR"
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True

    def test_quiet_mode(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "OK: validate"

    def test_quiet_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: validate — Bad"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok(recipe="r.yaml", output="o.txt", rows_validated=2))
        assert output.startswith("OK")
        assert "rows_validated: 2" in output
