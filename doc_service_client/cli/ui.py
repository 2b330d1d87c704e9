# doc_service_client/cli/ui.py
"""
Shared UI helpers for CLI commands.

Status messages go to stderr; stdout carries only command output
(document IDs, document bytes, JSON) so it can be piped.

Usage:
    from doc_service_client.cli.ui import ui

    ui.success("Stored document abc123")
    ui.error("Cannot fetch from document server")
    ui.print_json({"foo": "bar"})
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)
out = Console()


class UI:
    """Rich-styled status output for CLI commands."""

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[red]✗[/red] {escape(msg)}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")

    def print_json(self, data: Any) -> None:
        """Pretty-print JSON data to stdout."""
        out.print_json(data=data)


ui = UI()
