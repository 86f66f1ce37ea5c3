from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from shroom.errors import SpawnError
from shroom.system import TerminationStatus


@dataclass
class FakeEnvironment:
    cwd: Path = Path("/work")
    home: Path | None = Path("/home/user")
    missing: set[str] = field(default_factory=set)
    changes: list[str] = field(default_factory=list)

    def current_directory(self) -> Path:
        return self.cwd

    def set_current_directory(self, path: str | Path) -> None:
        if str(path) in self.missing:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        self.changes.append(str(path))
        self.cwd = Path(path)

    def home_directory(self) -> Path | None:
        return self.home


@dataclass
class FakeSpawner:
    statuses: dict[str, TerminationStatus] = field(default_factory=dict)
    calls: list[tuple[str, list[str]]] = field(default_factory=list)

    def spawn(self, command: str, args: Sequence[str]) -> TerminationStatus:
        self.calls.append((command, list(args)))
        status = self.statuses.get(command)
        if status is None:
            raise SpawnError(command, "No such file or directory")
        return status


@dataclass
class RecordingReporter:
    errors: list[str] = field(default_factory=list)
    exit_codes: list[int] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def exit_code(self, code: int) -> None:
        self.exit_codes.append(code)


@pytest.fixture(autouse=True)
def _restore_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    # monkeypatch.chdir records the current directory and restores it on teardown.
    monkeypatch.chdir(Path.cwd())


@pytest.fixture
def environment() -> FakeEnvironment:
    return FakeEnvironment()


@pytest.fixture
def spawner() -> FakeSpawner:
    return FakeSpawner(statuses={"true": TerminationStatus(code=0), "false": TerminationStatus(code=1)})


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
