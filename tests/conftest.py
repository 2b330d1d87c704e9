# tests/conftest.py
"""
Shared fixtures.

No test talks to a real document service. HTTP traffic goes through
httpx.MockTransport, backed by StubDocumentService: an in-memory service
that stores POSTed bodies and echoes them back on GET.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from doc_service_client import DocServiceClient


class StubDocumentService:
    """
    In-memory stand-in for the document service.

    POST /document[/{id}]    stores the body, answers {"key": id}
    GET  /document/{id}      answers the stored bytes, or a JSON object
                             {"text": ...} when extract=true
    """

    def __init__(self) -> None:
        self.documents: Dict[str, Tuple[bytes, Optional[str]]] = {}
        self.requests: List[httpx.Request] = []
        self._counter = 0

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        parts = request.url.path.strip("/").split("/")
        if parts[0] != "document":
            return httpx.Response(404, text="unknown endpoint")
        doc_id = parts[1] if len(parts) > 1 else ""

        if request.method == "POST":
            if not doc_id:
                self._counter += 1
                doc_id = f"doc-{self._counter}"
            self.documents[doc_id] = (request.content, request.headers.get("Content-Type"))
            return httpx.Response(200, json={"key": doc_id})

        if request.method == "GET":
            if doc_id not in self.documents:
                return httpx.Response(404, text="no such document")

            data, content_type = self.documents[doc_id]
            if request.url.params.get("extract") == "true":
                return httpx.Response(200, json={"text": data.decode("utf-8", errors="replace")})

            headers = {"Content-Type": content_type} if content_type else {}
            return httpx.Response(200, content=data, headers=headers)

        return httpx.Response(405)


@pytest.fixture
def stub_service() -> StubDocumentService:
    return StubDocumentService()


@pytest.fixture
def client(stub_service) -> DocServiceClient:
    """Client wired to the in-memory stub service."""
    return DocServiceClient("localhost", 8118, transport=httpx.MockTransport(stub_service))


@pytest.fixture
def make_client():
    """Factory for a client whose every request is answered by ``handler``."""

    def _make(handler) -> DocServiceClient:
        return DocServiceClient("localhost", 8118, transport=httpx.MockTransport(handler))

    return _make
