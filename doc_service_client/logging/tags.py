# doc_service_client/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output from each layer is easy to grep.
"""

CLIENT = "[CLIENT]"
HTTP = "[HTTP]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
