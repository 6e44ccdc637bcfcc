"""
MCP Tool Handlers

Handler registry pattern for tool dispatch.
Each tool handler is a separate function for better testability.
"""

from typing import Any, Callable, Dict, Optional
from mcp.types import CallToolResult
import time

# Import all handlers (decorators register them)
from .agents import (
    handle_list_agents,
    handle_get_agent,
    handle_send_message,
)
from .memory import (
    handle_list_memory_blocks,
    handle_get_memory_block,
    handle_update_memory_block,
)
from .archival import (
    handle_search_memory,
    handle_add_to_archival,
)

from letta_mcp.exceptions import UnknownToolError
from letta_mcp.logging_utils import get_logger
from .decorators import get_tool_definition, get_tool_registry, list_registered_tools
from .error_helpers import error_from_exception, is_expected_error
from .shared import HandlerContext, create_context
from .validators import validate_params

# Handler registry - populated by @mcp_tool decorators on import
TOOL_HANDLERS: Dict[str, Callable] = dict(get_tool_registry())

_logger = get_logger(__name__)


async def dispatch_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    ctx: HandlerContext,
) -> CallToolResult:
    """
    Dispatch a tool call: look up the handler, validate arguments, run it.

    Every failure (unknown tool, validation, missing agent id, configuration,
    Letta API errors) is caught here and returned as an error result with
    isError set; nothing propagates to the transport.

    Args:
        name: Tool name
        arguments: Raw tool arguments (None is treated as empty)
        ctx: Handler context holding settings and the Letta client provider

    Returns:
        CallToolResult with one text part
    """
    start_time = time.monotonic()
    try:
        definition = get_tool_definition(name)
        if definition is None:
            raise UnknownToolError(name, list_registered_tools())

        params = validate_params(name, definition.params_model, arguments)
        content = await definition.handler(params, ctx)
    except Exception as e:
        if is_expected_error(e):
            _logger.warning(f"Tool '{name}' rejected: {e}")
        else:
            _logger.error(f"Tool '{name}' error: {e}", exc_info=True)
        return CallToolResult(content=[error_from_exception(e)], isError=True)

    _logger.debug(f"Tool '{name}' completed in {time.monotonic() - start_time:.3f}s")
    return CallToolResult(content=list(content), isError=False)


__all__ = [
    "TOOL_HANDLERS",
    "HandlerContext",
    "create_context",
    "dispatch_tool",
    "handle_list_agents",
    "handle_get_agent",
    "handle_send_message",
    "handle_list_memory_blocks",
    "handle_get_memory_block",
    "handle_update_memory_block",
    "handle_search_memory",
    "handle_add_to_archival",
]
