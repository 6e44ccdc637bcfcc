"""
Agent tool handlers: list_agents, get_agent, send_message.
"""

from contextlib import aclosing
from typing import Any, Dict, List, Sequence
from mcp.types import TextContent

from letta_mcp.config import DEFAULT_LIST_AGENTS_LIMIT
from letta_mcp.logging_utils import get_logger
from .decorators import mcp_tool
from .schemas import ListAgentsParams, GetAgentParams, SendMessageParams
from .shared import HandlerContext
from .utils import success_response, resolve_agent_id, field, truncate_preview

logger = get_logger(__name__)


def project_agent_summary(agent: Any) -> Dict[str, Any]:
    return {
        "id": field(agent, "id"),
        "name": field(agent, "name"),
        "description": field(agent, "description"),
        "model": field(agent, "llm_config", "model"),
        "created_at": field(agent, "created_at"),
    }


def project_agent_detail(agent: Any) -> Dict[str, Any]:
    # Newer API versions expose blocks at the top level
    blocks = field(agent, "memory", "blocks")
    if blocks is None:
        blocks = field(agent, "blocks")
    tools = field(agent, "tools")
    return {
        "id": field(agent, "id"),
        "name": field(agent, "name"),
        "description": field(agent, "description"),
        "model": field(agent, "llm_config", "model"),
        "embedding": field(agent, "embedding_config", "embedding_model"),
        "memory_blocks": None if blocks is None else [
            {
                "id": field(block, "id"),
                "label": field(block, "label"),
                "value_preview": truncate_preview(field(block, "value")),
            }
            for block in blocks
        ],
        "tools": None if tools is None else [field(tool, "name") for tool in tools],
        "created_at": field(agent, "created_at"),
    }


def format_message(message: Any) -> Dict[str, Any]:
    """
    Reshape one agent response message by its message_type tag.

    Known tags get a uniform {type, content} or {type, name, arguments} shape;
    anything else is passed through as {type, raw}.
    """
    message_type = field(message, "message_type")
    match message_type:
        case "reasoning_message":
            return {"type": "reasoning", "content": field(message, "reasoning")}
        case "assistant_message":
            return {"type": "assistant", "content": field(message, "content")}
        case "tool_call_message":
            return {
                "type": "tool_call",
                "name": field(message, "tool_call", "name"),
                "arguments": field(message, "tool_call", "arguments"),
            }
        case "tool_return_message":
            return {"type": "tool_return", "content": field(message, "tool_return")}
        case _:
            return {"type": message_type, "raw": message}


@mcp_tool("list_agents", params=ListAgentsParams)
async def handle_list_agents(args: ListAgentsParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """List all Letta agents in your account"""
    limit = args.limit or DEFAULT_LIST_AGENTS_LIMIT
    api = ctx.client()

    agents: List[Dict[str, Any]] = []
    async with aclosing(api.iter_agents(limit)) as upstream:
        async for agent in upstream:
            agents.append(project_agent_summary(agent))
            if len(agents) >= limit:
                break

    return success_response(agents)


@mcp_tool("get_agent", params=GetAgentParams)
async def handle_get_agent(args: GetAgentParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Get detailed information about a specific Letta agent"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    agent = await ctx.client().retrieve_agent(agent_id)
    return success_response(project_agent_detail(agent))


@mcp_tool("send_message", params=SendMessageParams)
async def handle_send_message(args: SendMessageParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Send a message to a Letta agent"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    response = await ctx.client().send_message(agent_id, args.message)

    messages = field(response, "messages", default=[])
    logger.debug(f"send_message: agent {agent_id} returned {len(messages)} message(s)")

    return success_response({
        "agent_id": agent_id,
        "messages": [format_message(m) for m in messages],
        "usage": field(response, "usage"),
    })
