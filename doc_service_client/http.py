# doc_service_client/http.py
"""
HTTP transport for the document service.

Two blocking operations, one connection each:

    get(url, accept_type)            -> HttpResponse
    post(url, content_type, data)    -> HttpResponse

Each call opens its own httpx.Client, reads the whole body and closes the
client before returning, on success and on failure alike. The transport
does not translate errors: connection problems surface as httpx transport
errors and non-success statuses as httpx.HTTPStatusError. Turning those
into DocServiceError is the client's job.

Usage:
    transport = HttpTransport(timeout=10.0)
    response = transport.get("http://localhost:8118/document/abc", "application/json")
    data = response.stream().read()

Tests inject an httpx.MockTransport:
    transport = HttpTransport(transport=httpx.MockTransport(handler))
"""

from __future__ import annotations

import codecs
import io
from dataclasses import dataclass
from typing import BinaryIO, Dict, Optional

import httpx

from doc_service_client.config import DEFAULT_TIMEOUT
from doc_service_client.logging.logger import get_logger
from doc_service_client.logging.tags import HTTP

logger = get_logger(__name__)


def _known_charset(charset: Optional[str]) -> Optional[str]:
    """Return the charset if Python has a codec for it, else None."""
    if not charset:
        return None
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.debug(f"{HTTP} Ignoring unknown charset {charset!r}")
        return None
    return charset


@dataclass(frozen=True)
class HttpResponse:
    """Fully read response from the document service."""

    status_code: int
    content: bytes
    content_type: Optional[str] = None
    encoding: Optional[str] = None

    def stream(self) -> BinaryIO:
        """Return a fresh readable binary stream over the body."""
        return io.BytesIO(self.content)

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8")


class HttpTransport:
    """
    Synchronous, one-connection-per-call HTTP helper.

    Holds no connection between calls, so one instance can be shared
    across threads.
    """

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            timeout: Request timeout in seconds (None waits forever)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.timeout = timeout
        self.transport = transport

    def get(self, url: str, accept_type: str) -> HttpResponse:
        """
        Send a GET request.

        Raises:
            httpx.HTTPError: On connection failure or a non-success status
        """
        return self._send("GET", url, headers={"Accept": accept_type})

    def post(self, url: str, content_type: str, data: bytes) -> HttpResponse:
        """
        Send a POST request with ``data`` as the whole body.

        Raises:
            httpx.HTTPError: On connection or write failure, or a non-success status
        """
        return self._send("POST", url, headers={"Content-Type": content_type}, content=data)

    def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[bytes] = None,
    ) -> HttpResponse:
        logger.debug(f"{HTTP} {method} {url}")

        with httpx.Client(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            response = client.request(method, url, headers=headers, content=content)
            response.raise_for_status()

            result = HttpResponse(
                status_code=response.status_code,
                content=response.content,
                content_type=response.headers.get("Content-Type"),
                encoding=_known_charset(response.charset_encoding),
            )

        logger.debug(f"{HTTP} {method} {url} -> {result.status_code} ({len(result.content)} bytes)")
        return result


__all__ = ["HttpResponse", "HttpTransport"]
