"""Command dispatch between builtins and external programs."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from shroom.builtins.builtin import build_builtin_registry
from shroom.builtins.registry import BuiltinContext, BuiltinRegistry
from shroom.core.evaluator import evaluate_arguments
from shroom.core.types import Ast, CommandResult, Empty, Terminate
from shroom.errors import BuiltinError, SpawnError
from shroom.system import (
    COMMAND_NOT_RUN_EXIT_CODE,
    Environment,
    OsEnvironment,
    ProcessSpawner,
    SubprocessSpawner,
)

BUILTIN_FAILURE_EXIT_CODE = 1


class Dispatcher:
    """Runs evaluated commands and normalizes them into exit codes."""

    def __init__(
        self,
        registry: BuiltinRegistry | None = None,
        *,
        environment: Environment | None = None,
        spawner: ProcessSpawner | None = None,
    ) -> None:
        self._registry = registry or build_builtin_registry()
        self._environment = environment or OsEnvironment()
        self._spawner = spawner or SubprocessSpawner()

    def execute(self, ast: Ast) -> CommandResult:
        if isinstance(ast, Empty):
            return CommandResult(name="", exit_code=0)
        return self.dispatch(ast.command, evaluate_arguments(ast.args))

    def dispatch(self, command: str, args: Sequence[str]) -> CommandResult:
        logger.debug("command.dispatch name={} args={}", command, list(args))
        if self._registry.has(command):
            return self._execute_builtin(command, args)
        return self._execute_external(command, args)

    def _execute_builtin(self, command: str, args: Sequence[str]) -> CommandResult:
        context = BuiltinContext(environment=self._environment)
        try:
            outcome = self._registry.execute(command, args, context=context)
        except BuiltinError as exc:
            return CommandResult(
                name=command,
                exit_code=BUILTIN_FAILURE_EXIT_CODE,
                error=f"{command}: {exc}",
            )

        if isinstance(outcome, Terminate):
            return CommandResult(name=command, exit_code=outcome.code, terminate=True)
        return CommandResult(name=command, exit_code=0)

    def _execute_external(self, command: str, args: Sequence[str]) -> CommandResult:
        try:
            status = self._spawner.spawn(command, args)
        except SpawnError as exc:
            return CommandResult(name=command, exit_code=COMMAND_NOT_RUN_EXIT_CODE, error=str(exc))
        return CommandResult(name=command, exit_code=status.exit_code)
