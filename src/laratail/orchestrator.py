# orchestrator.py
from __future__ import annotations

import enum
from pathlib import Path
from typing import Optional

from .model import ExecutionContext, SetupRequest
from .runner import CommandRunner, IoFailure, ScaffoldError, run_command, run_step
from .ui.console import Console, get_console
from .variants import base_scaffold_command, get_variant


class State(enum.Enum):
    COLLECTING_INPUT = "collecting_input"
    RESOLVING_ROOT = "resolving_root"
    BASE_SCAFFOLD = "base_scaffold"
    RUNNING_STEPS = "running_steps"
    DONE = "done"
    # A watcher was launched and ran until it stopped or was interrupted.
    WATCHING = "watching"
    FAILED = "failed"


def _enter(console: Console, state: State) -> None:
    console.print_debug(f"state -> {state.value}")


def resolve_root(request: SetupRequest, cwd: str | Path | None = None) -> ExecutionContext:
    """Compute `cwd/project_name` and create it if it does not exist yet."""
    ctx = ExecutionContext.for_request(request, cwd)
    if not ctx.project_root.exists():
        try:
            ctx.project_root.mkdir(parents=True)
        except OSError as e:
            raise IoFailure(path=str(ctx.project_root), message=e.strerror or str(e)) from e
    return ctx


def scaffold(
    request: SetupRequest,
    *,
    cwd: str | Path | None = None,
    run: CommandRunner = run_command,
    console: Optional[Console] = None,
) -> State:
    """
    Materialize `request` on disk.

    Returns the terminal state (DONE or WATCHING). Any failure propagates
    as a ScaffoldError; nothing already written is rolled back.
    """
    console = console or get_console()

    # Look the variant up first so an unknown label never touches the filesystem.
    variant = get_variant(request.setup_type)

    try:
        _enter(console, State.RESOLVING_ROOT)
        ctx = resolve_root(request, cwd)
        for step in variant.prepare:
            run_step(step, ctx, run=run)

        if variant.requires_base_scaffold:
            _enter(console, State.BASE_SCAFFOLD)
            console.print_info(f"\nCreating Laravel project with name: {request.project_name}\n")
            run(base_scaffold_command(), ctx.project_root)
        else:
            console.print_info(f"\nSkipping Laravel installation for setup type: {variant.label}\n")

        _enter(console, State.RUNNING_STEPS)
        for step in variant.steps:
            run_step(step, ctx, run=run)
    except ScaffoldError:
        _enter(console, State.FAILED)
        raise

    for note in variant.notes:
        console.print_info(note)
    console.print_complete(str(ctx.project_root))

    if variant.watch is None:
        _enter(console, State.DONE)
        return State.DONE

    _enter(console, State.WATCHING)
    console.print_step(variant.watch.name)
    try:
        run_step(variant.watch, ctx, run=run)
    except KeyboardInterrupt:
        console.print_info("\nWatcher stopped.")
    return State.WATCHING
