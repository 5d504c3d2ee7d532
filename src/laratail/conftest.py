from __future__ import annotations

import json
from pathlib import Path

import pytest

from laratail.runner import CommandFailure
from laratail.ui.console import Console, set_console


class FakeRunner:
    """Records commands instead of running them; optionally fails on a substring."""

    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = fail_on

    def __call__(self, command: str, cwd: Path) -> None:
        self.calls.append((command, cwd))
        if self.fail_on and self.fail_on in command:
            raise CommandFailure(command=command, message="boom", exit_code=1)
        if command.endswith("init -y"):
            (cwd / "package.json").write_text(json.dumps({"name": cwd.name}), encoding="utf-8")

    @property
    def commands(self) -> list[str]:
        return [c for c, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture(autouse=True)
def quiet_console():
    console = Console()
    set_console(console)
    return console
