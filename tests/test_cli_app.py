import importlib
from pathlib import Path

import pytest
from typer.testing import CliRunner

cli_app_module = importlib.import_module("shroom.cli.app")


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch) -> None:
    for name in ("SHROOM_LOG_LEVEL", "SHROOM_REPORT_EXIT_CODES", "SHROOM_PROMPT_SUFFIX"):
        monkeypatch.delenv(name, raising=False)


def test_command_option_returns_command_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["-c", "exit 3"])
    assert result.exit_code == 3


def test_command_option_reports_builtin_failure() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["--command", "cd a b"])
    assert result.exit_code == 1
    assert "shroom: cd: too many arguments" in result.output
    assert "shroom: exit code: 1" in result.output


def test_command_option_parse_error() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["-c", 'echo "abc'])
    assert result.exit_code == 2
    assert "shroom: parse error: unclosed delimiter" in result.output


def test_missing_command_exits_127() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["-c", "shroom-definitely-missing-command"])
    assert result.exit_code == 127
    assert "shroom-definitely-missing-command" in result.output


def test_interactive_loop_reads_stdin(tmp_path: Path) -> None:
    runner = CliRunner()
    script = f'cd "{tmp_path}"\nexit notanumber\nexit 7\n'
    result = runner.invoke(cli_app_module.app, [], input=script)
    assert result.exit_code == 7
    assert f"{tmp_path.resolve()}> " in result.output
    assert "can't parse exit code" in result.output


def test_interactive_loop_exits_zero_at_end_of_input() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["--no-report-exit-codes"], input="cd a b\n")
    assert result.exit_code == 0
    assert "exit code" not in result.output


def test_invalid_log_level_is_rejected() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["--log-level", "chatty", "-c", "exit"])
    assert result.exit_code == 2
    assert "unknown log level: chatty" in result.output
