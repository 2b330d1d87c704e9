# doc_service_client/client.py
"""Client for storing and fetching documents from a document service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from doc_service_client.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DocServiceConfig,
    build_config,
    config_from_mapping,
    load_config,
)
from doc_service_client.document import DEFAULT_CONTENT_TYPE, DEFAULT_TEXT_CONTENT_TYPE, Document
from doc_service_client.exceptions import DocServiceError
from doc_service_client.http import HttpTransport
from doc_service_client.logging.logger import get_logger
from doc_service_client.logging.tags import CLIENT
from doc_service_client.urls import build_document_url

logger = get_logger(__name__)

# Metadata / query key that toggles server-side text extraction
EXTRACT = "extract"

# Response field holding the ID of a stored document
KEY = "key"

JSON_CONTENT_TYPE = "application/json"

STORE_FAILED = "Cannot store to document server"
FETCH_FAILED = "Cannot fetch from document server"
PARSE_FAILED = "Cannot parse extracted text from document server"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _parse_key(body: str) -> str:
    """Pull the document ID out of a store response."""
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if KEY not in data:
        raise ValueError(f"Response has no {KEY!r} field")
    return str(data[KEY])


def _wrap_error(message: str, exc: Exception, url: Optional[str]) -> DocServiceError:
    """Convert a transport or parsing failure into a DocServiceError."""
    status_code = None
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code

    error = DocServiceError(message=message, cause=exc, status_code=status_code, url=url)
    logger.warning(f"{CLIENT} {error}")
    return error


class DocServiceClient:
    """
    Client for a document service.

    Provides:
    - store / store_text / store_bytes: upload a document, get its ID back
    - fetch: download a document by ID
    - fetch_extracted_text: download the service's text extraction as JSON

    Every failure is raised as DocServiceError with the original exception
    attached. Nothing is retried.

    Example:
        client = DocServiceClient("localhost", 8118)
        doc_id = client.store_text("hello world")
        doc = client.fetch(doc_id)
        assert doc.as_text() == "hello world"
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            host: IP address or host name of the service
            port: TCP port of the service
            timeout: Request timeout in seconds (None waits forever)
            transport: Optional httpx transport, mainly for tests

        Raises:
            DocServiceError: If host/port/timeout are invalid
        """
        self.config: DocServiceConfig = build_config(host=host, port=port, timeout=timeout)
        self.http = HttpTransport(timeout=self.config.timeout, transport=transport)

    @classmethod
    def from_config(
        cls,
        config: Optional[Mapping[str, Any]],
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "DocServiceClient":
        """
        Build a client from a mapping with "host" and "port" entries.

        Port may be given as a string. Other keys (except "timeout") are ignored.

        Raises:
            DocServiceError: If the mapping is None, host is missing, or port
                is not an integer
        """
        parsed = config_from_mapping(config)
        return cls(parsed.host, parsed.port, timeout=parsed.timeout, transport=transport)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "DocServiceClient":
        """Build a client from a YAML config file."""
        parsed = load_config(path)
        return cls(parsed.host, parsed.port, timeout=parsed.timeout, transport=transport)

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        return self.config.port

    def document_url(self, doc_id: str = "", params: Optional[Mapping[str, str]] = None) -> str:
        """URL for a document on this client's service."""
        return build_document_url(self.host, self.port, doc_id, params)

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    def store(self, document: Document, doc_id: str = "") -> str:
        """
        Store a document.

        Marks the document's metadata with ``extract=false`` (the service
        should not run text extraction) and sends the metadata along as
        query parameters.

        Args:
            document: The document to store
            doc_id: ID to store under; empty lets the service assign one

        Returns:
            Document ID reported by the service

        Raises:
            DocServiceError: On connection failure, a non-success status,
                or a response without a "key" field
        """
        url = None
        try:
            document.metadata[EXTRACT] = _flag(False)
            url = self.document_url(doc_id, document.metadata)

            response = self.http.post(url, document.content_type, document.as_bytes())
            stored_id = _parse_key(response.text)
        except (httpx.HTTPError, ValueError) as e:
            raise _wrap_error(STORE_FAILED, e, url) from e

        logger.info(f"{CLIENT} Stored document {stored_id} ({document.size} bytes)")
        return stored_id

    def store_text(
        self,
        text: str,
        content_type: str = DEFAULT_TEXT_CONTENT_TYPE,
        doc_id: str = "",
    ) -> str:
        """Store text as a UTF-8 document."""
        return self.store(Document.from_text(text, content_type=content_type), doc_id)

    def store_bytes(
        self,
        data: bytes,
        content_type: str = DEFAULT_CONTENT_TYPE,
        doc_id: str = "",
    ) -> str:
        """Store raw bytes with the given content type."""
        return self.store(Document(data=data, content_type=content_type), doc_id)

    # -------------------------------------------------------------------------
    # Fetch
    # -------------------------------------------------------------------------

    def fetch(
        self,
        doc_id: str,
        accept_type: str = DEFAULT_CONTENT_TYPE,
        extract_text: bool = False,
    ) -> Document:
        """
        Fetch a document.

        Args:
            doc_id: ID of the document
            accept_type: Content type to ask the service for
            extract_text: Ask the service to extract the document's text

        Returns:
            Document built from the response body and content type

        Raises:
            DocServiceError: On connection failure or a non-success status
        """
        url = None
        try:
            url = self.document_url(doc_id, {EXTRACT: _flag(extract_text)})
            response = self.http.get(url, accept_type)
        except (httpx.HTTPError, ValueError) as e:
            raise _wrap_error(FETCH_FAILED, e, url) from e

        document = Document.from_stream(
            response.stream(),
            content_type=response.content_type,
            encoding=response.encoding,
        )
        logger.info(f"{CLIENT} Fetched document {doc_id} ({document.size} bytes)")
        return document

    def fetch_extracted_text(self, doc_id: str) -> Dict[str, Any]:
        """
        Fetch the text the service extracted from a document.

        Returns:
            The service's JSON object, as a dict

        Raises:
            DocServiceError: On fetch failure, or if the body is not a JSON object
        """
        document = self.fetch(doc_id, JSON_CONTENT_TYPE, True)

        try:
            data = json.loads(document.as_text())
        except ValueError as e:
            raise _wrap_error(PARSE_FAILED, e, None) from e

        if not isinstance(data, dict):
            raise _wrap_error(
                PARSE_FAILED,
                ValueError(f"Expected a JSON object, got {type(data).__name__}"),
                None,
            )

        return data

    def __repr__(self) -> str:
        return f"DocServiceClient({self.host!r}, {self.port})"


__all__ = ["DocServiceClient", "EXTRACT"]
