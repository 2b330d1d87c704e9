# doc_service_client/cli/commands/extract.py
"""
Print the text the document service extracted from a document.

Usage:
    docservice extract abc123
"""

from __future__ import annotations

from doc_service_client.cli.context import CLIContext
from doc_service_client.cli.ui import ui
from doc_service_client.cli.utils import run_or_exit


def command(ctx: CLIContext, doc_id: str) -> None:
    """Fetch extracted text as JSON and pretty-print it."""
    client = run_or_exit(ctx.build_client)
    data = run_or_exit(client.fetch_extracted_text, doc_id)
    ui.print_json(data)
