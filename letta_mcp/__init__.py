"""
letta_mcp - Letta agent platform tools over MCP

Exposes agent listing, messaging, memory-block and archival-memory operations
on the Letta platform as MCP tools.

Quick start:
    export LETTA_API_KEY=...
    export LETTA_DEFAULT_AGENT_ID=agent-...   # optional
    letta-cloud-mcp
"""

SERVER_NAME = "letta-cloud-mcp"
__version__ = "0.1.0"
__all__ = ["SERVER_NAME", "__version__"]
