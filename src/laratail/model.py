# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class RunCommand:
    """A single external command, run relative to the project root."""
    name: str
    command: str
    cwd: str = "."


@dataclass(frozen=True)
class WriteFile:
    """Overwrite `path` (relative to the project root) with `contents`."""
    path: str
    contents: str


@dataclass(frozen=True)
class EnsureDir:
    path: str


@dataclass(frozen=True)
class EnsureManifest:
    """Create package.json with `npm init -y` unless it already exists."""


@dataclass(frozen=True)
class AddScript:
    """Merge one entry into the `scripts` object of package.json."""
    name: str
    command: str


@dataclass(frozen=True)
class Message:
    text: str


Step = Union[RunCommand, WriteFile, EnsureDir, EnsureManifest, AddScript, Message]


@dataclass(frozen=True)
class Variant:
    """
    One scaffolding recipe.

    `prepare` steps run as soon as the project root exists, before the
    base scaffold decision; `steps` run strictly in order after it.
    `watch` is the long-running command launched after the completion
    message; variants without one end in the DONE state.
    """
    label: str
    steps: tuple[Step, ...]
    requires_base_scaffold: bool = True
    watch: RunCommand | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)
    prepare: tuple[Step, ...] = field(default_factory=tuple)

    @property
    def launches_watcher(self) -> bool:
        return self.watch is not None


@dataclass(frozen=True)
class SetupRequest:
    project_name: str
    setup_type: str

    def __post_init__(self) -> None:
        if self.relative_name == Path("."):
            raise ValueError("Project name cannot be empty.")

    @property
    def relative_name(self) -> Path:
        """The project name as a path that always nests under the working directory."""
        name = Path(self.project_name.strip())
        return name.relative_to(name.anchor) if name.anchor else name


@dataclass(frozen=True)
class ExecutionContext:
    """Where a run happens. All relative step paths resolve against `project_root`."""
    project_root: Path

    @classmethod
    def for_request(cls, request: SetupRequest, cwd: str | Path | None = None) -> ExecutionContext:
        base = Path(cwd) if cwd is not None else Path.cwd()
        return cls(project_root=(base / request.relative_name).resolve())
