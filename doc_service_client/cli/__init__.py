# doc_service_client/cli/__init__.py
from doc_service_client.cli.cli import app

__all__ = ["app"]
