# doc_service_client/cli/cli.py
"""
docservice CLI - main application.

Commands:
    docservice store PATH      Store a file, print its document ID
    docservice fetch ID        Fetch a document (to stdout or --output)
    docservice extract ID      Print the service's extracted text as JSON

Connection options (--host, --port, --config, --timeout) go before the
command name:
    docservice --host docs.internal --port 9000 fetch abc123
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from doc_service_client.cli.context import CLIContext
from doc_service_client.document import DEFAULT_CONTENT_TYPE
from doc_service_client.logging.logger import configure_logging

app = typer.Typer(
    name="docservice",
    help="Store and fetch documents from a document service.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", "-H", help="Service host (default: localhost)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Service port (default: 8118)."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Store and fetch documents from a document service."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = CLIContext(host=host, port=port, timeout=timeout, config_path=config)


@app.command("store")
def store(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File to store."),
    content_type: Optional[str] = typer.Option(
        None, "--content-type", "-t", help="Content type (guessed from the file name if omitted)."
    ),
    doc_id: str = typer.Option("", "--id", help="Document ID to store under."),
) -> None:
    """Store a file and print its document ID."""
    from doc_service_client.cli.commands import store as mod

    mod.command(ctx.obj, path=path, content_type=content_type, doc_id=doc_id)


@app.command("fetch")
def fetch(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., help="Document ID."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file."),
    accept_type: str = typer.Option(DEFAULT_CONTENT_TYPE, "--accept", "-a", help="Accept header."),
    extract_text: bool = typer.Option(False, "--extract", help="Ask the service to extract text."),
) -> None:
    """Fetch a document."""
    from doc_service_client.cli.commands import fetch as mod

    mod.command(ctx.obj, doc_id=doc_id, output=output, accept_type=accept_type, extract_text=extract_text)


@app.command("extract")
def extract(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., help="Document ID."),
) -> None:
    """Print a document's extracted text as JSON."""
    from doc_service_client.cli.commands import extract as mod

    mod.command(ctx.obj, doc_id=doc_id)


if __name__ == "__main__":
    app()
