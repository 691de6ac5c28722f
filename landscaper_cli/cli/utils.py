# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI utility functions for output formatting and user interaction."""

from rich.console import Console
from rich.markup import escape

console = Console()


def configure_console(no_color: bool = False) -> None:
    """Apply output preferences to the shared console (NO_COLOR still applies)."""
    if no_color:
        console.no_color = True


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")

