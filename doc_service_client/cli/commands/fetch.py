# doc_service_client/cli/commands/fetch.py
"""
Fetch a document from the document service.

Usage:
    docservice fetch abc123 > out.bin
    docservice fetch abc123 --output report.pdf
    docservice fetch abc123 --accept text/plain --extract
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from doc_service_client.cli.context import CLIContext
from doc_service_client.cli.ui import ui
from doc_service_client.cli.utils import run_or_exit
from doc_service_client.document import DEFAULT_CONTENT_TYPE


def command(
    ctx: CLIContext,
    doc_id: str,
    output: Optional[Path] = None,
    accept_type: str = DEFAULT_CONTENT_TYPE,
    extract_text: bool = False,
) -> None:
    """Fetch a document and write it to a file or stdout."""
    client = run_or_exit(ctx.build_client)
    document = run_or_exit(client.fetch, doc_id, accept_type, extract_text)

    if output is None:
        typer.echo(document.as_bytes(), nl=False)
        return

    output.write_bytes(document.as_bytes())
    ui.success(f"Wrote {document.size} bytes to {output}")
    ui.info(f"Content-Type: {document.content_type}")
