"""
Server configuration, sourced from environment variables.

    LETTA_API_KEY            credential for the Letta API (required before any remote call)
    LETTA_DEFAULT_AGENT_ID   agent used when a tool call omits agent_id
    LETTA_BASE_URL           API base URL for self-hosted servers (SDK default otherwise)
    LETTA_MCP_LOG_LEVEL      log level for the server (default: INFO)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_API_KEY = "LETTA_API_KEY"
ENV_DEFAULT_AGENT_ID = "LETTA_DEFAULT_AGENT_ID"
ENV_BASE_URL = "LETTA_BASE_URL"
ENV_LOG_LEVEL = "LETTA_MCP_LOG_LEVEL"

# Caller-facing defaults
DEFAULT_LIST_AGENTS_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 10
PREVIEW_LENGTH = 200


def _read(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration."""
    api_key: Optional[str] = None
    default_agent_id: Optional[str] = None
    base_url: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment. Empty values count as unset."""
        if environ is None:
            environ = os.environ
        return cls(
            api_key=_read(environ, ENV_API_KEY),
            default_agent_id=_read(environ, ENV_DEFAULT_AGENT_ID),
            base_url=_read(environ, ENV_BASE_URL),
            log_level=_read(environ, ENV_LOG_LEVEL) or "INFO",
        )


def load_settings() -> Settings:
    return Settings.from_env()
