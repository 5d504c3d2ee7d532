# runner.py
from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from . import settings
from .model import (
    AddScript,
    EnsureDir,
    EnsureManifest,
    ExecutionContext,
    Message,
    RunCommand,
    Step,
    WriteFile,
)
from .ui.console import get_console


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

class ScaffoldError(Exception):
    """Base class for every failure that ends a scaffolding run."""


@dataclass
class CommandFailure(ScaffoldError):
    command: str
    message: str
    exit_code: Optional[int] = None

    def __str__(self) -> str:
        if self.exit_code is not None:
            return f"command failed (exit={self.exit_code}): {self.command}"
        return f"command failed: {self.command}: {self.message}"


@dataclass
class IoFailure(ScaffoldError):
    path: str
    message: str

    def __str__(self) -> str:
        return f"could not write {self.path}: {self.message}"


@dataclass
class InvalidSelection(ScaffoldError):
    label: str

    def __str__(self) -> str:
        return "Invalid setup type."


# run(command, cwd) -> None, raising CommandFailure
CommandRunner = Callable[[str, Path], None]


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def run_command(command: str, cwd: Path) -> None:
    """
    Run `command` through the shell in `cwd` with the terminal's stdio.

    Output is streamed live (package-manager progress stays visible), so
    nothing is captured here.
    """
    get_console().print_debug(f"run: {command} (cwd={cwd})")
    try:
        proc = subprocess.run(command, shell=True, cwd=str(cwd))
    except OSError as e:
        raise CommandFailure(command=command, message=str(e)) from e

    if proc.returncode != 0:
        raise CommandFailure(
            command=command,
            message=f"Command exited with status {proc.returncode}",
            exit_code=proc.returncode,
        )


def write_file(path: Path, contents: str) -> None:
    """Overwrite `path` with `contents`, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
    except OSError as e:
        raise IoFailure(path=str(path), message=e.strerror or str(e)) from e


def resolve_in_root(ctx: ExecutionContext, relative: str) -> Path:
    """Resolve a step path against the project root, refusing anything outside it."""
    root = ctx.project_root.resolve()
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        raise IoFailure(path=relative, message="path is outside the project root")
    return target


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailure(path=str(path), message=e.strerror or str(e)) from e


def _add_script(manifest: Path, name: str, command: str) -> None:
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except OSError as e:
        raise IoFailure(path=str(manifest), message=e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise IoFailure(path=str(manifest), message=f"invalid JSON: {e}") from e

    data["scripts"] = {**(data.get("scripts") or {}), name: command}
    write_file(manifest, json.dumps(data, indent=2))


def run_step(step: Step, ctx: ExecutionContext, run: CommandRunner = run_command) -> None:
    """Execute one step. Any failure propagates as a ScaffoldError."""
    console = get_console()

    if isinstance(step, RunCommand):
        console.print_debug(f"step: {step.name}")
        run(step.command, resolve_in_root(ctx, step.cwd))

    elif isinstance(step, WriteFile):
        target = resolve_in_root(ctx, step.path)
        console.print_debug(f"write: {target}")
        write_file(target, step.contents)

    elif isinstance(step, EnsureDir):
        _ensure_dir(resolve_in_root(ctx, step.path))

    elif isinstance(step, EnsureManifest):
        if not (ctx.project_root / "package.json").exists():
            console.print_info("package.json not found. Creating one...")
            run(f"{settings.NPM} init -y", ctx.project_root)

    elif isinstance(step, AddScript):
        _add_script(resolve_in_root(ctx, "package.json"), step.name, step.command)

    elif isinstance(step, Message):
        console.print_info(step.text)

    else:
        raise TypeError(f"Unknown step type: {type(step).__name__}")
