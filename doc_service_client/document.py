# doc_service_client/document.py
"""
Document type exchanged with the document service.

A Document is a plain data holder: raw bytes, a MIME content type, the
character encoding used when the bytes are read as text, and a mapping of
string metadata. Callers build one before storing; the client builds one
from the response body when fetching.

Flow: caller → Document → store() → ID → fetch() → Document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_TEXT_CONTENT_TYPE = "text/plain"
DEFAULT_ENCODING = "utf-8"


@dataclass
class Document:
    """
    In-memory document.

    Attributes:
        data: Raw payload bytes
        content_type: MIME type sent as Content-Type when storing
        encoding: Character encoding used by as_text()
        metadata: String key/value pairs, rendered into the store URL
    """

    data: bytes = b""
    content_type: str = DEFAULT_CONTENT_TYPE
    encoding: str = DEFAULT_ENCODING
    metadata: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.data, str):
            raise TypeError("Document data must be bytes; use Document.from_text() for text")
        if isinstance(self.data, (bytearray, memoryview)):
            self.data = bytes(self.data)
        if not self.content_type:
            self.content_type = DEFAULT_CONTENT_TYPE
        if not self.encoding:
            self.encoding = DEFAULT_ENCODING

    @classmethod
    def from_text(
        cls,
        text: str,
        content_type: str = DEFAULT_TEXT_CONTENT_TYPE,
        encoding: str = DEFAULT_ENCODING,
        metadata: Optional[Dict[str, str]] = None,
    ) -> "Document":
        """Build a document from text, encoding it with the given charset."""
        return cls(
            data=text.encode(encoding),
            content_type=content_type,
            encoding=encoding,
            metadata=dict(metadata or {}),
        )

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        content_type: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> "Document":
        """
        Build a document by reading a binary stream to the end.

        A missing content type or encoding falls back to the defaults.
        """
        return cls(
            data=stream.read(),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            encoding=encoding or DEFAULT_ENCODING,
        )

    def as_bytes(self) -> bytes:
        return self.data

    def as_text(self) -> str:
        """Decode the payload with the document's encoding."""
        return self.data.decode(self.encoding)

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    def __repr__(self) -> str:
        return f"Document({self.content_type!r}, {self.size} bytes, {len(self.metadata)} metadata)"


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_ENCODING",
    "DEFAULT_TEXT_CONTENT_TYPE",
    "Document",
]
