#!/usr/bin/env python3
"""
Letta Cloud MCP Server - stdio transport

Exposes Letta agent, memory-block and archival-memory operations as MCP tools.

Usage:
    letta-cloud-mcp
    python -m letta_mcp

Configuration comes from the environment (see letta_mcp.config).
"""

import asyncio
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from letta_mcp import SERVER_NAME, __version__
from letta_mcp.config import Settings, load_settings
from letta_mcp.logging_utils import configure_logging, get_logger
from letta_mcp.mcp_handlers import HandlerContext, create_context, dispatch_tool
from letta_mcp.tool_schemas import get_tool_definitions

logger = get_logger(__name__)


def create_server(ctx: HandlerContext) -> Server:
    """Build the MCP server with the tool catalog and dispatcher bound to ctx."""
    server = Server(SERVER_NAME, version=__version__)
    tools = get_tool_definitions()

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available MCP tools"""
        return tools

    # Arguments are validated by dispatch_tool so failures use our error envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Handle tool calls from MCP client"""
        return await dispatch_tool(name, arguments, ctx)

    return server


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the server on stdio until the client closes the stream."""
    ctx = create_context(settings)
    server = create_server(ctx)

    if not ctx.settings.api_key:
        logger.warning("LETTA_API_KEY is not set; tool calls will fail until it is configured")

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Letta Cloud MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> None:
    """Main entry point for the MCP server"""
    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
