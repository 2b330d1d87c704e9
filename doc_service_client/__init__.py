# doc_service_client/__init__.py
"""
doc_service_client - store and fetch documents from a document service over HTTP.

Public API:
    - DocServiceClient: store / fetch / fetch_extracted_text
    - Document: bytes + content type + metadata
    - DocServiceError: the single error raised by the client
    - DocServiceConfig: validated host/port/timeout settings
    - Result: explicit success/error wrapper around client calls

Quick Start:
    >>> from doc_service_client import DocServiceClient
    >>> client = DocServiceClient("localhost", 8118)
    >>> doc_id = client.store_text("hello world")
    >>> client.fetch(doc_id).as_text()
    'hello world'
"""

from doc_service_client.client import DocServiceClient
from doc_service_client.config import DocServiceConfig, load_config
from doc_service_client.document import Document
from doc_service_client.exceptions import DocServiceError
from doc_service_client.result import Result

__version__ = "0.1.0"

__all__ = [
    "DocServiceClient",
    "DocServiceConfig",
    "DocServiceError",
    "Document",
    "Result",
    "load_config",
]
