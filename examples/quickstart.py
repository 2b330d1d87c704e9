# examples/quickstart.py
"""
Quickstart - store a document, fetch it back, read the extracted text.

Requirements:
    pip install doc-service-client
    A document service listening on localhost:8118

Run:
    python examples/quickstart.py
"""

from doc_service_client import DocServiceClient, DocServiceError, Document, Result

# =============================================================================
# Setup: Create a client
# =============================================================================

client = DocServiceClient("localhost", 8118)

# =============================================================================
# Step 1: Store documents
# =============================================================================

text_id = client.store_text("The quick brown fox jumps over the lazy dog.")
print(f"Stored text as {text_id}")

report = Document(
    data=b"%PDF-1.4 ...",
    content_type="application/pdf",
    metadata={"title": "Quarterly report"},
)
report_id = client.store(report)
print(f"Stored report as {report_id}")

# =============================================================================
# Step 2: Fetch them back
# =============================================================================

fetched = client.fetch(text_id)
print(f"Fetched {fetched.size} bytes ({fetched.content_type}): {fetched.as_text()}")

# =============================================================================
# Step 3: Ask the service for extracted text
# =============================================================================

try:
    extracted = client.fetch_extracted_text(report_id)
    print(f"Extracted fields: {sorted(extracted)}")
except DocServiceError as e:
    print(f"Extraction failed: {e}")

# Same call, as a value instead of an exception
result = Result.capture(client.fetch_extracted_text, "no-such-document")
if not result.ok:
    print(f"Expected failure: {result.error.message} (HTTP {result.error.status_code})")
