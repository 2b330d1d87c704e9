# doc_service_client/logging/__init__.py
from doc_service_client.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
