"""
Pytest configuration and fixtures for letta-cloud-mcp tests.

The Letta SDK is never reached: every test builds its HandlerContext around a
MagicMock client, so no network access or API key is needed.
"""
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from letta_mcp.config import Settings
from letta_mcp.letta_api import LettaClientProvider
from letta_mcp.mcp_handlers.shared import HandlerContext


class AsyncPage:
    """Stand-in for an auto-paginating SDK page; counts consumed items."""

    def __init__(self, items):
        self.items = list(items)
        self.consumed = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for item in self.items:
            self.consumed += 1
            yield item


def make_ctx(client=None, api_key="test-key", default_agent_id=None) -> HandlerContext:
    """Build a HandlerContext whose provider hands out `client`."""
    settings = Settings(api_key=api_key, default_agent_id=default_agent_id)
    client = client if client is not None else MagicMock()
    provider = LettaClientProvider(settings, client_factory=lambda **kwargs: client)
    return HandlerContext(settings=settings, provider=provider)


def parse_result(result):
    """Extract parsed JSON from a CallToolResult or a list of TextContent."""
    content = getattr(result, "content", result)
    assert len(content) == 1
    return json.loads(content[0].text)


@pytest.fixture
def letta_client():
    """MagicMock shaped like AsyncLetta, with sensible empty defaults."""
    client = MagicMock()
    client.agents.list = MagicMock(return_value=AsyncPage([]))
    client.agents.retrieve = AsyncMock()
    client.agents.messages.create = AsyncMock()
    client.agents.blocks.list = MagicMock(return_value=AsyncPage([]))
    client.agents.blocks.retrieve = AsyncMock()
    client.blocks.update = AsyncMock()
    client.agents.passages.search = AsyncMock()
    client.agents.passages.create = AsyncMock()
    return client


@pytest.fixture
def ctx(letta_client):
    """Context with a default agent configured."""
    return make_ctx(letta_client, default_agent_id="agent-default")


@pytest.fixture
def ctx_no_default(letta_client):
    """Context without a default agent id."""
    return make_ctx(letta_client, default_agent_id=None)


def ns(**kwargs):
    return SimpleNamespace(**kwargs)
