"""Console output formatting utilities for Laratail."""

from __future__ import annotations

import sys
from typing import Optional

import click


BANNER = r"""
 _                    _        _ _
| |    __ _ _ __ __ _| |_ __ _(_) |
| |   / _` | '__/ _` | __/ _` | | |
| |__| (_| | | | (_| | || (_| | | |
|_____\__,_|_|  \__,_|\__\__,_|_|_|
"""


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, color: str = "blue"):
        """
        Initialize console formatter.

        Args:
            debug: If True, show debug lines and stack traces
            color: Foreground colour for regular messages
        """
        self.debug = debug
        self.color = color

    def _echo(self, message: str, err: bool = False) -> None:
        click.echo(click.style(message, fg=self.color), err=err)

    def print_banner(self) -> None:
        """Print the ASCII-art banner and welcome line."""
        self._echo(BANNER)
        self._echo("Welcome to Laratail!")

    def print_info(self, message: str) -> None:
        """Print informational message."""
        self._echo(message)

    def print_step(self, name: str) -> None:
        """Print step start message."""
        self._echo(f"\n> {name}\n")

    def print_complete(self, project_root: str) -> None:
        self._echo("\nYour Laravel project setup is complete!")
        self._echo(f"Project: {project_root}\n")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        click.echo(click.style(f"\nERROR: {title}", fg="red", bold=True), err=True)
        click.echo(message, err=True)
        if details:
            for detail in details:
                click.echo(f"  {detail}", err=True)
        if suggestion:
            click.echo(f"\n{suggestion}", err=True)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
        else:
            click.echo(f"Error: {exc}", err=True)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            click.echo(f"[DEBUG] {message}", err=True)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
