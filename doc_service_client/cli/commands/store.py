# doc_service_client/cli/commands/store.py
"""
Store a file in the document service.

Usage:
    docservice store report.pdf
    docservice store notes.txt --content-type text/markdown
    docservice store data.bin --id my-doc
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

import typer

from doc_service_client.cli.context import CLIContext
from doc_service_client.cli.ui import ui
from doc_service_client.cli.utils import run_or_exit
from doc_service_client.document import DEFAULT_CONTENT_TYPE, Document
from doc_service_client.logging.logger import get_logger
from doc_service_client.logging.tags import CLI

logger = get_logger(__name__)


def _guess_content_type(path: Path) -> str:
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or DEFAULT_CONTENT_TYPE


def command(
    ctx: CLIContext,
    path: Path,
    content_type: Optional[str] = None,
    doc_id: str = "",
) -> None:
    """Store a file and print its document ID."""
    if not path.is_file():
        ui.error(f"File not found: {path}")
        raise typer.Exit(code=1)

    document = Document(
        data=path.read_bytes(),
        content_type=content_type or _guess_content_type(path),
    )
    logger.debug(f"{CLI} Storing {path} as {document.content_type}")

    client = run_or_exit(ctx.build_client)
    stored_id = run_or_exit(client.store, document, doc_id)

    typer.echo(stored_id)
    ui.success(f"Stored {path.name} ({document.size} bytes)")
