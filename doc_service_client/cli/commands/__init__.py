# doc_service_client/cli/commands/__init__.py
