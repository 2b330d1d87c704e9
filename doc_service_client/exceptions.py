# doc_service_client/exceptions.py
"""
Error type for the document service client.

Every failure the client can hit (bad configuration, connection problems,
non-success responses, unparseable payloads) is reported as a single
DocServiceError. The underlying exception is kept on ``cause`` and chained
as ``__cause__`` so callers can still inspect it.

Usage:
    from doc_service_client import DocServiceClient, DocServiceError

    try:
        doc_id = client.store_text("hello")
    except DocServiceError as e:
        print(f"Store failed: {e}")
        if e.status_code == 404:
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class DocServiceError(Exception):
    """
    Client-level error with details.

    Attributes:
        message: Human-readable error message
        cause: The original exception that caused this error
        status_code: HTTP status code (if the server answered with one)
        url: Request URL that failed (if a request was made)
    """

    message: str
    cause: Optional[BaseException] = None
    status_code: Optional[int] = None
    url: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.cause is not None:
            parts.append(f"- {type(self.cause).__name__}: {self.cause}")

        return " ".join(parts)


__all__ = ["DocServiceError"]
