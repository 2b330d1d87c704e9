# doc_service_client/urls.py
"""
URL construction for document service endpoints.

Every request targets:

    http://{host}:{port}/document[/{id}][?key=value&key=value...]

Query keys and values are percent-encoded as UTF-8 (a space becomes %20).
Pairs keep the insertion order of the mapping they come from.

Usage:
    >>> build_document_url("localhost", 8118, "abc123", {"extract": "true"})
    'http://localhost:8118/document/abc123?extract=true'
"""

from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import quote

import httpx

DOCUMENT_PATH = "/document"
DEFAULT_HTTP_PORT = 80


class MalformedURLError(ValueError):
    """Raised when the assembled endpoint is not a valid URL."""

    pass


def encode_query(params: Mapping[str, str]) -> str:
    """
    Render a mapping as an ``&``-joined query string (without the ``?``).

    >>> encode_query({"extract": "false", "title": "a b"})
    'extract=false&title=a%20b'
    """
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}" for key, value in params.items()
    )


def build_document_url(
    host: str,
    port: int,
    doc_id: str = "",
    params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build the endpoint URL for a document.

    Args:
        host: IP address or host name of the service
        port: TCP port of the service
        doc_id: Document ID; empty means "no ID" (a new document)
        params: Query parameters, typically document metadata

    Returns:
        The URL as a string

    Raises:
        MalformedURLError: If the result is not a valid URL
    """
    if not host:
        raise MalformedURLError("host is empty")
    if not 0 <= port <= 65535:
        raise MalformedURLError(f"port out of range: {port}")

    url = f"http://{host}:{port}{DOCUMENT_PATH}"

    if doc_id:
        url += f"/{doc_id}"

    if params:
        url += f"?{encode_query(params)}"

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(f"Invalid document URL {url!r}: {e}") from e

    # Parsed URL must still address {host}:{port}/document
    if (
        parsed.host != host.lower().strip("[]")
        or (DEFAULT_HTTP_PORT if parsed.port is None else parsed.port) != port
        or not parsed.path.startswith(DOCUMENT_PATH)
    ):
        raise MalformedURLError(f"Document URL {url!r} does not address {host}:{port}")

    return url


__all__ = ["DOCUMENT_PATH", "MalformedURLError", "build_document_url", "encode_query"]
