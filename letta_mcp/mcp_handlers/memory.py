"""
Memory block tool handlers.

Memory blocks are labeled units of in-context memory (persona, human, project...)
attached to an agent.
"""

from typing import Any, Dict, Sequence
from mcp.types import TextContent

from .decorators import mcp_tool
from .schemas import ListMemoryBlocksParams, GetMemoryBlockParams, UpdateMemoryBlockParams
from .shared import HandlerContext
from .utils import success_response, resolve_agent_id, field


def project_block(block: Any) -> Dict[str, Any]:
    return {
        "id": field(block, "id"),
        "label": field(block, "label"),
        "description": field(block, "description"),
        "limit": field(block, "limit"),
        "value": field(block, "value"),
    }


@mcp_tool("list_memory_blocks", params=ListMemoryBlocksParams)
async def handle_list_memory_blocks(args: ListMemoryBlocksParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """List all memory blocks attached to a Letta agent"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    blocks = [project_block(block) async for block in ctx.client().iter_blocks(agent_id)]
    return success_response(blocks)


@mcp_tool("get_memory_block", params=GetMemoryBlockParams)
async def handle_get_memory_block(args: GetMemoryBlockParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Get the content of a specific memory block by its label"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    block = await ctx.client().retrieve_block(agent_id, args.label)
    return success_response(project_block(block))


@mcp_tool("update_memory_block", params=UpdateMemoryBlockParams)
async def handle_update_memory_block(args: UpdateMemoryBlockParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Replace the content of a memory block"""
    block = await ctx.client().update_block(args.block_id, args.value)
    return success_response({
        "success": True,
        "block": {
            "id": field(block, "id"),
            "label": field(block, "label"),
            "value": field(block, "value"),
        },
    })
