"""Rich UI helpers for terminal output."""

from __future__ import annotations

import shlex

from rich.console import Console
from rich.markup import escape

console = Console()

RUNNING_GLYPH = "●"
STOPPED_GLYPH = "○"


def info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def show_command(cmd: list[str]) -> None:
    """Echo an external command before running it (verbose mode)."""
    console.print(f"[dim]$ {escape(shlex.join(cmd))}[/dim]")


def show_connecting(target: str) -> None:
    console.print(f"\nConnecting to: [bold]{escape(target)}[/bold]\n")


def status_glyph(running: bool) -> str:
    return RUNNING_GLYPH if running else STOPPED_GLYPH
