"""
Letta API access.

Connection management:
- Lazy initialization (client is built on first remote call)
- One handle per provider, reused for the life of the process
- Credential is checked once, at construction time

LettaAPI exposes one method per remote operation the tools need, so handlers
never touch the SDK's resource layout directly.
"""

from __future__ import annotations

import inspect
from typing import Any, AsyncIterator, Callable, Optional

from letta_client import AsyncLetta

from letta_mcp.config import Settings, ENV_API_KEY
from letta_mcp.exceptions import ConfigurationError
from letta_mcp.logging_utils import get_logger

logger = get_logger(__name__)


async def _iterate(result: Any) -> AsyncIterator[Any]:
    """Yield items from an SDK list result (async page, awaitable, or plain list)."""
    if inspect.isawaitable(result) and not hasattr(result, "__aiter__"):
        result = await result
    if hasattr(result, "__aiter__"):
        async for item in result:
            yield item
        return
    # Some SDK versions return a page object wrapping a list
    items = getattr(result, "items", None)
    if isinstance(items, list):
        result = items
    for item in result or []:
        yield item


class LettaAPI:
    """Operation-shaped facade over an AsyncLetta client."""

    def __init__(self, client: Any):
        self.client = client

    async def iter_agents(self, limit: int) -> AsyncIterator[Any]:
        async for agent in _iterate(self.client.agents.list(limit=limit)):
            yield agent

    async def retrieve_agent(self, agent_id: str) -> Any:
        return await self.client.agents.retrieve(agent_id)

    async def send_message(self, agent_id: str, text: str) -> Any:
        return await self.client.agents.messages.create(
            agent_id,
            messages=[{"role": "user", "content": text}],
        )

    async def iter_blocks(self, agent_id: str) -> AsyncIterator[Any]:
        async for block in _iterate(self.client.agents.blocks.list(agent_id)):
            yield block

    async def retrieve_block(self, agent_id: str, label: str) -> Any:
        return await self.client.agents.blocks.retrieve(label, agent_id=agent_id)

    async def update_block(self, block_id: str, value: str) -> Any:
        return await self.client.blocks.update(block_id, value=value)

    async def search_passages(self, agent_id: str, query: str, top_k: int) -> Any:
        return await self.client.agents.passages.search(agent_id, query=query, top_k=top_k)

    async def create_passage(self, agent_id: str, text: str) -> Any:
        return await self.client.agents.passages.create(agent_id, text=text)


class LettaClientProvider:
    """
    Owns the single Letta client handle.

    get() builds the handle on first use and memoizes it. Two concurrent first
    calls may both build a client; the last assignment wins, which is harmless
    because the credential never changes after startup.
    """

    def __init__(self, settings: Settings, client_factory: Optional[Callable[..., Any]] = None):
        self.settings = settings
        self._client_factory = client_factory or AsyncLetta
        self._api: Optional[LettaAPI] = None

    @property
    def initialized(self) -> bool:
        return self._api is not None

    def get(self) -> LettaAPI:
        if self._api is not None:
            return self._api

        if not self.settings.api_key:
            raise ConfigurationError(f"{ENV_API_KEY} environment variable is required")

        kwargs = {"api_key": self.settings.api_key}
        if self.settings.base_url:
            kwargs["base_url"] = self.settings.base_url
        client = self._client_factory(**kwargs)
        logger.info(
            "Letta client initialized (base_url=%s)",
            self.settings.base_url or "default",
        )
        self._api = LettaAPI(client)
        return self._api
