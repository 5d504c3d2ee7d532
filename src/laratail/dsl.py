# src/laratail/dsl.py
from __future__ import annotations

from typing import Iterable, Optional

from .content import landing_page, load
from .model import (
    AddScript,
    EnsureDir,
    EnsureManifest,
    Message,
    RunCommand,
    Step,
    Variant,
    WriteFile,
)


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def sh(name: str, cmd: str, *, cwd: str = ".") -> RunCommand:
    """Create a shell step."""
    return RunCommand(name=name, command=cmd, cwd=cwd)


def template(path: str, name: str) -> WriteFile:
    """Write the packaged template `name` to `path`."""
    return WriteFile(path=path, contents=load(name))


def page(path: str, head: str) -> WriteFile:
    """Write the landing page with the given head variant to `path`."""
    return WriteFile(path=path, contents=landing_page(head))


def mkdir(path: str) -> EnsureDir:
    return EnsureDir(path=path)


def ensure_manifest() -> EnsureManifest:
    return EnsureManifest()


def npm_script(name: str, cmd: str) -> AddScript:
    return AddScript(name=name, command=cmd)


def say(text: str) -> Message:
    return Message(text=text)


# ---------------------------------------------------------------------
# Variant helper
# ---------------------------------------------------------------------

def variant(
    label: str,
    *steps: Step,
    base_scaffold: bool = True,
    watch: Optional[RunCommand] = None,
    notes: Iterable[str] = (),
    prepare: Iterable[Step] = (),
) -> Variant:
    """
    Build a Variant.

    Example:
        variant(
            "Bare",
            page("resources/views/welcome.blade.php", "cdn"),
        )
    """
    if not steps:
        raise ValueError(f"variant({label!r}) must have at least one step")
    return Variant(
        label=label,
        steps=tuple(steps),
        requires_base_scaffold=base_scaffold,
        watch=watch,
        notes=tuple(notes),
        prepare=tuple(prepare),
    )
