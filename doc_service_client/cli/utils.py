# doc_service_client/cli/utils.py
"""Shared CLI utilities."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import typer

from doc_service_client.cli.ui import ui
from doc_service_client.result import Result

T = TypeVar("T")


def run_or_exit(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a client call; on DocServiceError print it and exit with code 1.
    """
    result = Result.capture(func, *args, **kwargs)
    if not result.ok:
        ui.error(str(result.error))
        raise typer.Exit(code=1)
    return result.unwrap()
