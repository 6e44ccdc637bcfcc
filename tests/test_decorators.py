"""
Tests for letta_mcp/mcp_handlers/decorators.py - MCP tool decorator and registry.
"""

import asyncio

import pytest
from mcp.types import TextContent

from letta_mcp.mcp_handlers.decorators import (
    _TOOL_DEFINITIONS,
    get_tool_definition,
    mcp_tool,
)
from letta_mcp.mcp_handlers.schemas import SendMessageParams, ToolParams


@pytest.fixture(autouse=True)
def clean_registry():
    """Restore the registry after each test to prevent cross-contamination."""
    original = dict(_TOOL_DEFINITIONS)
    yield
    _TOOL_DEFINITIONS.clear()
    _TOOL_DEFINITIONS.update(original)


class TestMcpToolDecorator:

    def test_registers_tool(self):
        @mcp_tool("test_tool_alpha", params=SendMessageParams)
        async def handle_test_tool_alpha(args, ctx):
            return []

        td = get_tool_definition("test_tool_alpha")
        assert td is not None
        assert td.params_model is SendMessageParams

    def test_auto_name_from_function(self):
        @mcp_tool()
        async def handle_my_auto_tool(args, ctx):
            return []

        assert "my_auto_tool" in _TOOL_DEFINITIONS
        assert _TOOL_DEFINITIONS["my_auto_tool"].params_model is ToolParams

    def test_description_from_docstring(self):
        @mcp_tool("test_doc_tool")
        async def handle_test_doc_tool(args, ctx):
            """First line.

            More detail.
            """
            return []

        assert get_tool_definition("test_doc_tool").description == "First line."

    def test_register_false(self):
        @mcp_tool("test_hidden_tool", register=False)
        async def handle_test_hidden_tool(args, ctx):
            return []

        assert get_tool_definition("test_hidden_tool") is None

    def test_no_timeout_by_default(self):
        @mcp_tool("test_default_to")
        async def handle_test_default_to(args, ctx):
            return []

        assert get_tool_definition("test_default_to").timeout is None


class TestWrapper:

    @pytest.mark.asyncio
    async def test_single_text_content_wrapped_in_list(self):
        @mcp_tool("test_wrap", register=False)
        async def handle_test_wrap(args, ctx):
            return TextContent(type="text", text="x")

        result = await handle_test_wrap(ToolParams(), None)
        assert isinstance(result, list)
        assert result[0].text == "x"

    @pytest.mark.asyncio
    async def test_exceptions_propagate(self):
        @mcp_tool("test_raise", register=False)
        async def handle_test_raise(args, ctx):
            raise RuntimeError("upstream")

        with pytest.raises(RuntimeError):
            await handle_test_raise(ToolParams(), None)

    @pytest.mark.asyncio
    async def test_timeout_enforced_when_configured(self):
        @mcp_tool("test_slow", timeout=0.01, register=False)
        async def handle_test_slow(args, ctx):
            await asyncio.sleep(1)
            return []

        with pytest.raises(asyncio.TimeoutError):
            await handle_test_slow(ToolParams(), None)
