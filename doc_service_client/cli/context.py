# doc_service_client/cli/context.py
"""
CLI context - connection settings shared by all commands.

The root callback collects --host/--port/--config/--timeout once and
stores a CLIContext on the typer context. Commands ask it for a client.

Resolution order:
    1. Package defaults (localhost:8118)
    2. --config YAML file
    3. Explicit --host / --port / --timeout flags
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from doc_service_client.client import DocServiceClient
from doc_service_client.config import DocServiceConfig, build_config, load_config
from doc_service_client.logging.logger import get_logger
from doc_service_client.logging.tags import CLI

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Connection options given on the command line."""

    host: Optional[str] = None
    port: Optional[int] = None
    timeout: Optional[float] = None
    config_path: Optional[Path] = None

    def resolve(self) -> DocServiceConfig:
        """
        Merge defaults, the config file and explicit flags.

        Raises:
            DocServiceError: If the config file or the merged values are invalid
        """
        base = load_config(self.config_path) if self.config_path else DocServiceConfig()

        return build_config(
            host=self.host or base.host,
            port=self.port if self.port is not None else base.port,
            timeout=self.timeout if self.timeout is not None else base.timeout,
        )

    def build_client(self) -> DocServiceClient:
        """Create a client for the resolved settings."""
        config = self.resolve()
        logger.debug(f"{CLI} Using document service at {config.host}:{config.port}")
        return DocServiceClient(config.host, config.port, timeout=config.timeout)
