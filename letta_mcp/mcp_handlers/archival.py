"""
Archival memory tool handlers: search_memory, add_to_archival.

Archival memory holds passages outside the agent's context window; search is
done server-side by the Letta platform.
"""

from typing import Any, Dict, Sequence
from mcp.types import TextContent

from letta_mcp.config import DEFAULT_SEARCH_LIMIT
from .decorators import mcp_tool
from .schemas import SearchMemoryParams, AddToArchivalParams
from .shared import HandlerContext
from .utils import success_response, resolve_agent_id, field


def project_search_result(result: Any) -> Dict[str, Any]:
    return {
        "content": field(result, "content"),
        "timestamp": field(result, "timestamp"),
        "tags": field(result, "tags"),
    }


def first_created(passages: Any) -> Any:
    """passages.create may return a list of created passages or a single one."""
    if isinstance(passages, (list, tuple)):
        return passages[0] if passages else None
    return passages


@mcp_tool("search_memory", params=SearchMemoryParams)
async def handle_search_memory(args: SearchMemoryParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Search the agent's archival memory for relevant information"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    top_k = args.limit or DEFAULT_SEARCH_LIMIT

    response = await ctx.client().search_passages(agent_id, args.query, top_k)
    if isinstance(response, (list, tuple)):
        results = list(response)[:top_k]
        count = len(results)
    else:
        results, count = list(field(response, "results", default=[]))[:top_k], field(response, "count")

    return success_response({
        "query": args.query,
        "count": count,
        "results": [project_search_result(r) for r in results],
    })


@mcp_tool("add_to_archival", params=AddToArchivalParams)
async def handle_add_to_archival(args: AddToArchivalParams, ctx: HandlerContext) -> Sequence[TextContent]:
    """Add new information to the agent's archival memory"""
    agent_id = resolve_agent_id(args.agent_id, ctx.default_agent_id)
    created = first_created(await ctx.client().create_passage(agent_id, args.content))

    return success_response({
        "success": True,
        "passage": {
            "id": field(created, "id"),
            "text": field(created, "text"),
            "created_at": field(created, "created_at"),
        },
    })
