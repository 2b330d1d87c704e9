# doc_service_client/logging/logger.py
"""
Logging for the document service client.

The library only ever asks for loggers; it never installs handlers, so an
application embedding the client keeps full control of its own logging.
The ``docservice`` CLI is the one place that calls configure_logging(),
sending records to stderr because stdout carries fetched document bytes
and IDs that users pipe into other tools.

Every module logs under its own dotted name (``doc_service_client.http``
for request traces, ``doc_service_client.client`` for store/fetch
outcomes), so either layer can be silenced or turned up on its own.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """
    Install a stream handler for ``docservice`` runs.

    --verbose maps to DEBUG (every GET/POST with its URL and size); without it
    the CLI passes WARNING, which shows only wrapped store/fetch failures. A root
    logger that already has handlers (an embedding app, pytest) is left
    as is apart from its level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a client module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
