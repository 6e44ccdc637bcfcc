"""
Shared context for MCP handlers.

The transport builds one HandlerContext at startup and passes it to every
dispatch; handlers reach settings and the Letta client only through it.
"""

from dataclasses import dataclass
from typing import Optional

from letta_mcp.config import Settings, load_settings
from letta_mcp.letta_api import LettaAPI, LettaClientProvider


@dataclass
class HandlerContext:
    settings: Settings
    provider: LettaClientProvider

    @property
    def default_agent_id(self) -> Optional[str]:
        return self.settings.default_agent_id

    def client(self) -> LettaAPI:
        """Get the Letta API handle, building it on first use."""
        return self.provider.get()


def create_context(settings: Optional[Settings] = None) -> HandlerContext:
    """Build a context from explicit settings, or from the environment."""
    if settings is None:
        settings = load_settings()
    return HandlerContext(settings=settings, provider=LettaClientProvider(settings))
