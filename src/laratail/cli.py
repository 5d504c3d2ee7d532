# cli.py
from __future__ import annotations

import sys

import click

from laratail import __version__, settings
from laratail.model import SetupRequest
from laratail.orchestrator import State, scaffold
from laratail.runner import CommandFailure, InvalidSelection, IoFailure
from laratail.ui.console import Console, set_console
from laratail.update_check import UpdateCheck
from laratail.variants import LABELS


class ProjectName(click.ParamType):
    """Prompt value type that rejects blank names so click re-prompts."""

    name = "project name"

    def convert(self, value, param, ctx):
        value = (value or "").strip()
        try:
            SetupRequest(project_name=value, setup_type="")
        except ValueError as e:
            self.fail(str(e), param, ctx)
        return value


def prompt_request() -> SetupRequest:
    """Ask for the project name and the setup type."""
    project_name = click.prompt(
        "What is the name of your project?",
        default="my_project",
        type=ProjectName(),
    )

    click.echo("\nChoose your setup:")
    for index, label in enumerate(LABELS, start=1):
        click.echo(f"  {index}) {label}")
    choice = click.prompt(
        "Setup",
        type=click.IntRange(1, len(LABELS)),
        default=1,
    )
    return SetupRequest(project_name=project_name, setup_type=LABELS[choice - 1])


@click.command()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.option(
    "--update-check/--no-update-check",
    default=settings.UPDATE_CHECK,
    help="Look up the latest released version in the background",
)
@click.version_option(__version__, prog_name="laratail")
def cli(debug, update_check):
    """Laratail: scaffold a Laravel + Tailwind CSS project interactively."""
    console = Console(debug=debug)
    set_console(console)

    checker = UpdateCheck(__version__).start() if update_check else None

    console.print_banner()

    try:
        console.print_debug(f"state -> {State.COLLECTING_INPUT.value}")
        request = prompt_request()
    except (KeyboardInterrupt, click.Abort):
        console.print_info("\nInterrupted by user")
        sys.exit(130)

    if checker is not None:
        latest = checker.result()
        if latest:
            console.print_info(
                f"Update available: {__version__} -> {latest} (pip install -U laratail)"
            )

    try:
        scaffold(request, console=console)
    except CommandFailure as e:
        console.print_error(
            "Command failed",
            f"Error executing command: {e.command}",
            details=[e.message],
            suggestion="Fix the problem above and run laratail again.",
        )
        sys.exit(1)
    except IoFailure as e:
        console.print_error("Could not write file", e.path, details=[e.message])
        sys.exit(1)
    except InvalidSelection as e:
        console.print_error(str(e), f"Unknown setup type: {e.label!r}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_error("An unexpected error occurred", str(e))
        if console.debug:
            console.print_exception(e)
        sys.exit(1)


if __name__ == "__main__":
    cli()
