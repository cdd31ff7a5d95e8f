"""Tests for the command-line entry point."""

import logging

import pytest
from typer.testing import CliRunner

from promptcalc.cli import app, configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PROMPTCALC_BANNER", "PROMPTCALC_STRICT_OPERANDS", "PROMPTCALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestCli:
    """Full runs through the typer app."""

    def test_addition(self):
        result = runner.invoke(app, [], input="3\n4\n+\n")
        assert result.exit_code == 0
        assert "🧮 Welcome to the Calculator!" in result.stdout
        assert "✅ Result: 3 + 4 = 7" in result.stdout

    def test_prompt_order(self):
        result = runner.invoke(app, [], input="3\n4\n+\n")
        out = result.stdout
        first = out.index("Enter a value ?")
        second = out.index("Enter a second value ?")
        third = out.index("Enter an operand ?")
        assert first < second < third

    def test_unrecognized_operator_exit_code(self):
        result = runner.invoke(app, [], input="6\n7\n%\n")
        assert result.exit_code == 2
        assert "✅ Result: 6 % 7 = Not a proper operand !" in result.stdout

    def test_division_by_zero_exit_code(self):
        result = runner.invoke(app, [], input="5\n0\n/\n")
        assert result.exit_code == 1
        assert "✅ Result:" not in result.stdout

    def test_strict_mode_from_env(self):
        result = runner.invoke(
            app, [], input="x\n4\n+\n", env={"PROMPTCALC_STRICT_OPERANDS": "1"}
        )
        assert result.exit_code == 1
        assert "✅ Result:" not in result.stdout

    def test_invalid_config_exit_code(self):
        result = runner.invoke(app, [], input="", env={"PROMPTCALC_LOG_LEVEL": "loud"})
        assert result.exit_code == 1
        assert "Enter a value ?" not in result.stdout

    def test_configure_logging_replaces_handler(self):
        package_logger = logging.getLogger("promptcalc")
        first = configure_logging(logging.INFO)
        second = configure_logging(logging.DEBUG)
        try:
            assert first not in package_logger.handlers
            assert second in package_logger.handlers
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.removeHandler(second)
            package_logger.setLevel(logging.NOTSET)
