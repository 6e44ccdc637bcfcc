"""
Tool Schema Definitions

Single source of truth for the MCP tool catalog advertised by list_tools.
Argument validation itself uses the pydantic models in mcp_handlers.schemas;
tests keep the two in sync.
"""

from mcp.types import Tool

AGENT_ID_PROPERTY = {
    "type": "string",
    "description": "The agent ID. If not provided, uses LETTA_DEFAULT_AGENT_ID environment variable.",
}


def get_tool_definitions() -> list[Tool]:
    """Get MCP tool definitions."""
    return [
        Tool(
            name="list_agents",
            description="List all Letta agents in your account. Returns agent IDs, names, and descriptions.",
            inputSchema={
                "type": "object",
                "properties": {
                    "limit": {
                        "type": "integer",
                        "minimum": 0,
                        "description": "Maximum number of agents to return (default: 50)",
                    },
                },
            },
        ),
        Tool(
            name="get_agent",
            description="Get detailed information about a specific Letta agent, including its configuration and memory blocks.",
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                },
            },
        ),
        Tool(
            name="send_message",
            description=(
                "Send a message to a Letta agent. The agent will process the message and may update "
                "its memory based on the content. Use this to trigger learning or have conversations with the agent."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                    "message": {
                        "type": "string",
                        "description": "The message to send to the agent.",
                    },
                },
                "required": ["message"],
            },
        ),
        Tool(
            name="list_memory_blocks",
            description=(
                "List all memory blocks attached to a Letta agent. Memory blocks contain persistent "
                "information like persona, human info, project context, etc."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                },
            },
        ),
        Tool(
            name="get_memory_block",
            description="Get the content of a specific memory block by its label (e.g., 'persona', 'human', 'project').",
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                    "label": {
                        "type": "string",
                        "description": "The label of the memory block to retrieve (e.g., 'persona', 'human', 'project').",
                    },
                },
                "required": ["label"],
            },
        ),
        Tool(
            name="update_memory_block",
            description=(
                "Update the content of a memory block. Use this to directly modify agent memory from "
                "external sources. Warning: This completely replaces the block content."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "block_id": {
                        "type": "string",
                        "description": "The block ID to update. Get this from list_memory_blocks.",
                    },
                    "value": {
                        "type": "string",
                        "description": "The new content for the memory block.",
                    },
                },
                "required": ["block_id", "value"],
            },
        ),
        Tool(
            name="search_memory",
            description=(
                "Search the agent's archival memory for relevant information. Archival memory stores "
                "historical data that doesn't fit in the context window."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                    "query": {
                        "type": "string",
                        "description": "Search query to find relevant memories.",
                    },
                    "limit": {
                        "type": "integer",
                        "minimum": 0,
                        "description": "Maximum number of results to return (default: 10).",
                    },
                },
                "required": ["query"],
            },
        ),
        Tool(
            name="add_to_archival",
            description=(
                "Add new information to the agent's archival memory. Use this to store important "
                "information that should be retrievable later."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "agent_id": AGENT_ID_PROPERTY,
                    "content": {
                        "type": "string",
                        "description": "The content to add to archival memory.",
                    },
                },
                "required": ["content"],
            },
        ),
    ]
