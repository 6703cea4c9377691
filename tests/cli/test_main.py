"""Tests for the ``main()`` entry point: exit codes and error reporting."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from tempconv.cli.main import main


def _run_failing(argv: list[str]) -> int:
    with (
        patch("tempconv.cli.convert._run", side_effect=RuntimeError("boom")),
        pytest.raises(SystemExit) as exc_info,
    ):
        main(argv)
    return exc_info.value.code


class TestMain:
    def test_success_returns_normally(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["f2c", "212", "--format", "json"])
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["data"]["result"] == 100

    def test_usage_error_exits_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["c2f", "hot"])
        assert exc_info.value.code == 2
        assert "hot" in capsys.readouterr().err

    def test_interrupt_exits_1(self) -> None:
        with (
            patch("tempconv.cli.convert._run", side_effect=KeyboardInterrupt),
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["f2c", "1", "--format", "json"])
        assert exc_info.value.code == 1


class TestErrorReporting:
    def test_json_envelope_names_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(["f2c", "1", "--format", "json"]) == 1
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["ok"] is False
        assert parsed["command"] == "f2c"
        assert parsed["error"] == {"code": "RuntimeError", "message": "boom"}

    def test_group_level_format_and_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(["--format", "json", "convert", "1", "--from", "C", "--to", "F"]) == 1
        assert json.loads(capsys.readouterr().out)["command"] == "convert"

    def test_rich_format_respected(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(["c2f", "1", "--format", "rich"]) == 1
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "boom" in out
        assert '"ok"' not in out

    def test_quiet_keeps_stdout_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(["f2c", "1", "--quiet"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "boom" in captured.err


class TestInvalidSettings:
    def test_bad_precision_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEMPCONV_PRECISION", "abc")
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "json", "f2c", "212"])
        assert exc_info.value.code == 1
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["command"] == "f2c"
        assert parsed["error"]["code"] == "ValidationError"

    def test_negative_precision_env_rejected(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEMPCONV_PRECISION", "-1")
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "json", "f2c", "212"])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"]["code"] == "ValidationError"
