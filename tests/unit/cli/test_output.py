"""Tests for cli/output.py module."""

import json

import pytest

from productive.cli.exit_codes import ExitCode
from productive.cli.output import error_exit, markup_output


class TestErrorExit:
    """Tests for error_exit function."""

    def test_human_format_exit(self, capsys) -> None:
        """Human format should print 'Error: message' and exit."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Something failed", ExitCode.CONFIG_ERROR, json_output=False)

        assert exc_info.value.code == 11
        assert "Error: Something failed" in capsys.readouterr().err

    def test_json_format_exit(self, capsys) -> None:
        """JSON format should print JSON error and exit."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Bad pattern", ExitCode.INVALID_INPUT, json_output=True)

        assert exc_info.value.code == 10

        parsed = json.loads(capsys.readouterr().err)
        assert parsed["status"] == "failed"
        assert parsed["error"]["code"] == "INVALID_INPUT"
        assert parsed["error"]["message"] == "Bad pattern"

    def test_int_exit_code(self, capsys) -> None:
        """Should work with integer exit codes."""
        with pytest.raises(SystemExit) as exc_info:
            error_exit("Failed", 42, json_output=True)

        assert exc_info.value.code == 42
        assert json.loads(capsys.readouterr().err)["error"]["code"] == "UNKNOWN_ERROR"


class TestMarkupOutput:
    """Tests for markup_output function."""

    def test_text_output(self, capsys) -> None:
        markup_output("short_date", "03/5/24")
        assert capsys.readouterr().out == "03/5/24\n"

    def test_json_output(self, capsys) -> None:
        markup_output("short_date", "03/5/24", json_output=True)
        assert json.loads(capsys.readouterr().out) == {
            "helper": "short_date",
            "markup": "03/5/24",
        }
