from pathlib import Path

from shroom.core.dispatcher import Dispatcher
from shroom.core.parser import parse_line
from shroom.core.types import CommandResult, Empty
from shroom.system import TerminationStatus


def _dispatcher(environment, spawner) -> Dispatcher:
    return Dispatcher(environment=environment, spawner=spawner)


def test_empty_ast_is_success(environment, spawner) -> None:
    assert _dispatcher(environment, spawner).execute(Empty()) == CommandResult(name="", exit_code=0)
    assert spawner.calls == []


def test_cd_with_too_many_arguments(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).execute(parse_line("cd a b\n"))
    assert result == CommandResult(name="cd", exit_code=1, error="cd: too many arguments")
    assert environment.changes == []


def test_cd_home(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).execute(parse_line("cd\n"))
    assert result.exit_code == 0
    assert result.error is None
    assert environment.cwd == Path("/home/user")


def test_cd_uses_evaluated_argument(environment, spawner) -> None:
    _dispatcher(environment, spawner).execute(parse_line('cd "/my"dir\n'))
    assert environment.changes == ["/mydir"]


def test_cd_failure(environment, spawner) -> None:
    environment.missing.add("/nowhere")
    result = _dispatcher(environment, spawner).execute(parse_line("cd /nowhere"))
    assert result == CommandResult(name="cd", exit_code=1, error="cd: No such file or directory")


def test_exit_requests_termination(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).execute(parse_line("exit 0"))
    assert result == CommandResult(name="exit", exit_code=0, terminate=True)


def test_exit_with_bad_code_keeps_running(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).execute(parse_line("exit notanumber"))
    assert result.terminate is False
    assert result.exit_code == 1
    assert result.error == "exit: can't parse exit code: invalid digit found in string"


def test_external_command_receives_evaluated_args(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).execute(parse_line('true a"b c" d\n'))
    assert result == CommandResult(name="true", exit_code=0)
    assert spawner.calls == [("true", ["ab c", "d"])]


def test_external_command_exit_code_is_passed_through(environment, spawner) -> None:
    assert _dispatcher(environment, spawner).dispatch("false", []).exit_code == 1


def test_missing_external_command(environment, spawner) -> None:
    result = _dispatcher(environment, spawner).dispatch("no-such-command", [])
    assert result.exit_code == 127
    assert result.error == "no-such-command: No such file or directory"


def test_signal_termination_maps_to_128_plus_signal(environment, spawner) -> None:
    spawner.statuses["killed"] = TerminationStatus(code=None, signal=9)
    assert _dispatcher(environment, spawner).dispatch("killed", []).exit_code == 137


def test_unknown_termination_falls_back_to_127(environment, spawner) -> None:
    spawner.statuses["odd"] = TerminationStatus(code=None)
    assert _dispatcher(environment, spawner).dispatch("odd", []).exit_code == 127
