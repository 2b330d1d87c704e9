# doc_service_client/config.py
"""
Configuration for the document service client.

The client needs only to know where the service lives. Configuration can
come from keyword arguments, from a plain mapping, or from a YAML file.

Example YAML:
    doc_service:
      host: docs.internal
      port: "8118"
      timeout: 10

Usage:
    from doc_service_client.config import load_config

    config = load_config("docservice.yaml")
    client = DocServiceClient(config.host, config.port, timeout=config.timeout)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from doc_service_client.exceptions import DocServiceError
from doc_service_client.logging.logger import get_logger
from doc_service_client.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8118
DEFAULT_TIMEOUT = 30.0

# Optional top-level section name in YAML files
CONFIG_SECTION = "doc_service"

# Characters that would move the host into the path, query or userinfo of a URL
FORBIDDEN_HOST_CHARS = set("/?#@\\")


class DocServiceConfig(BaseModel):
    """
    Connection settings for a document service.

    Immutable once built; the client never changes where it talks to.
    """

    host: str = Field(
        default=DEFAULT_HOST,
        min_length=1,
        description="IP address or host name of the document service",
    )

    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        description="TCP port of the document service",
    )

    timeout: Optional[float] = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="HTTP request timeout in seconds (None waits forever)",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("host")
    @classmethod
    def check_host(cls, v: str) -> str:
        """Reject hosts that cannot stand alone in the authority part of a URL."""
        bad = sorted(c for c in set(v) if c in FORBIDDEN_HOST_CHARS or c.isspace())
        if bad:
            raise ValueError(f"host contains invalid characters: {''.join(bad)!r}")
        return v


def build_config(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> DocServiceConfig:
    """
    Validate connection settings.

    Raises:
        DocServiceError: If host is empty or contains URL delimiters,
            port is not a valid TCP port, or timeout is not positive
    """
    try:
        return DocServiceConfig(host=host, port=port, timeout=timeout)
    except ValidationError as e:
        raise DocServiceError("invalid configuration", cause=e) from e


def config_from_mapping(config: Optional[Mapping[str, Any]]) -> DocServiceConfig:
    """
    Build a config from a mapping.

    Recognised keys are "host" and "port" (both required; port may be a
    string such as "8118") plus an optional "timeout". Anything else is
    ignored.

    Raises:
        DocServiceError: If the mapping is None, host is missing, or port
            is missing or not an integer
    """
    if config is None:
        raise DocServiceError("config is null")

    host = config.get("host")
    if host is None:
        raise DocServiceError("host is null")

    try:
        port = int(str(config.get("port")))
    except ValueError as e:
        raise DocServiceError("invalid port", cause=e) from e

    timeout = config.get("timeout", DEFAULT_TIMEOUT)

    return build_config(host=str(host), port=port, timeout=timeout)


def load_config(path: Union[str, Path]) -> DocServiceConfig:
    """
    Load a config from a YAML file.

    The file is either flat (host/port at the top level) or nests the
    settings under a ``doc_service:`` section.

    Raises:
        DocServiceError: If the file is missing, not valid YAML, or holds
            invalid settings
    """
    config_path = Path(path)

    if not config_path.exists():
        raise DocServiceError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise DocServiceError(f"Invalid YAML in {config_path}", cause=e) from e

    if isinstance(raw, dict) and CONFIG_SECTION in raw:
        raw = raw[CONFIG_SECTION] or {}

    if not isinstance(raw, dict):
        raise DocServiceError(f"Config file must contain a mapping: {config_path}")

    config = config_from_mapping(raw)
    logger.debug(f"{CONFIG} Loaded config from {config_path} ({config.host}:{config.port})")
    return config


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "DocServiceConfig",
    "build_config",
    "config_from_mapping",
    "load_config",
]
