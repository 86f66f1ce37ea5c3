"""Operating-system services used by the interpreter core."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from loguru import logger

from shroom.errors import SpawnError

SIGNAL_EXIT_BASE = 128
COMMAND_NOT_RUN_EXIT_CODE = 127


@dataclass(frozen=True)
class TerminationStatus:
    """How a child process ended."""

    code: int | None
    signal: int | None = None

    @property
    def exit_code(self) -> int:
        if self.code is not None:
            return self.code
        if self.signal is not None:
            return SIGNAL_EXIT_BASE + self.signal
        return COMMAND_NOT_RUN_EXIT_CODE


class Environment(Protocol):
    """Working-directory service."""

    def current_directory(self) -> Path: ...

    def set_current_directory(self, path: str | Path) -> None: ...

    def home_directory(self) -> Path | None: ...


class OsEnvironment:
    """Process-wide working directory and home lookup."""

    def current_directory(self) -> Path:
        return Path.cwd()

    def set_current_directory(self, path: str | Path) -> None:
        os.chdir(path)

    def home_directory(self) -> Path | None:
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None


class SignalTranslator(Protocol):
    """Maps a raw return code onto a termination status."""

    def termination_status(self, returncode: int) -> TerminationStatus: ...


class PosixSignalTranslator:
    """Negative return codes mean the child was killed by that signal."""

    def termination_status(self, returncode: int) -> TerminationStatus:
        if returncode < 0:
            return TerminationStatus(code=None, signal=-returncode)
        return TerminationStatus(code=returncode)


class NullSignalTranslator:
    """Platforms without termination signals never report one."""

    def termination_status(self, returncode: int) -> TerminationStatus:
        if returncode < 0:
            return TerminationStatus(code=None)
        return TerminationStatus(code=returncode)


def default_signal_translator() -> SignalTranslator:
    if os.name == "posix":
        return PosixSignalTranslator()
    return NullSignalTranslator()


class ProcessSpawner(Protocol):
    """Runs an external command to completion."""

    def spawn(self, command: str, args: Sequence[str]) -> TerminationStatus: ...


class SubprocessSpawner:
    """Spawn children with inherited standard streams and wait for them."""

    def __init__(self, signals: SignalTranslator | None = None) -> None:
        self._signals = signals or default_signal_translator()

    def spawn(self, command: str, args: Sequence[str]) -> TerminationStatus:
        logger.debug("command.spawn name={} args={}", command, list(args))
        try:
            # The user asked for exactly this program; no shell is involved.
            completed = subprocess.run([command, *args], check=False)  # noqa: S603
        except OSError as exc:
            logger.debug("command.spawn.error name={} error={}", command, exc)
            raise SpawnError(command, exc.strerror or str(exc)) from exc
        except (ValueError, subprocess.SubprocessError) as exc:
            logger.debug("command.spawn.error name={} error={}", command, exc)
            raise SpawnError(command, str(exc)) from exc
        return self._signals.termination_status(completed.returncode)
