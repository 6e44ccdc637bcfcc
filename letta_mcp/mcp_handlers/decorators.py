"""
MCP Tool Decorators - Auto-registration and utilities

Handlers declare their parameter model once; the dispatcher validates raw
arguments against it and calls the handler with the typed result.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Type
from functools import wraps
import asyncio
import time
from mcp.types import TextContent

from letta_mcp.logging_utils import get_logger
from .schemas import ToolParams

logger = get_logger(__name__)


# --- Unified Tool Registry ---

@dataclass
class ToolDefinition:
    """Single source of truth for a registered MCP tool."""
    name: str
    handler: Callable
    params_model: Type[ToolParams]
    timeout: Optional[float] = None
    description: str = ""

_TOOL_DEFINITIONS: Dict[str, ToolDefinition] = {}


def mcp_tool(
    name: Optional[str] = None,
    params: Optional[Type[ToolParams]] = None,
    timeout: Optional[float] = None,
    description: Optional[str] = None,
    register: bool = True
):
    """
    Decorator for MCP tool handlers with auto-registration.

    Usage:
        @mcp_tool("send_message", params=SendMessageParams)
        async def handle_send_message(args: SendMessageParams, ctx: HandlerContext) -> Sequence[TextContent]:
            ...

    Args:
        name: Tool name (defaults to function name without 'handle_' prefix)
        params: Pydantic model the raw arguments are validated against
        timeout: Optional deadline in seconds. None (default) waits indefinitely.
        description: Tool description (defaults to first docstring line)
        register: If False, tool is NOT registered (useful in tests)
    """
    def decorator(func: Callable) -> Callable:
        tool_name = name or func.__name__.replace('handle_', '')
        tool_description = description or (func.__doc__ and func.__doc__.strip().split('\n')[0].strip()) or ""
        params_model = params or ToolParams

        @wraps(func)
        async def wrapper(args: ToolParams, ctx: Any) -> Sequence[TextContent]:
            start_time = time.monotonic()
            if timeout is None:
                result = await func(args, ctx)
            else:
                result = await asyncio.wait_for(func(args, ctx), timeout=timeout)
            elapsed = time.monotonic() - start_time
            if timeout is not None and elapsed > timeout * 0.8:
                logger.warning(
                    f"Tool '{tool_name}' took {elapsed:.2f}s "
                    f"({elapsed/timeout*100:.1f}% of {timeout}s timeout)"
                )
            # MCP SDK calls list() on the return value; pydantic models are
            # iterable, so a bare TextContent would be destructured.
            if isinstance(result, TextContent):
                result = [result]
            return result

        wrapper._mcp_tool_name = tool_name

        if register:
            _TOOL_DEFINITIONS[tool_name] = ToolDefinition(
                name=tool_name,
                handler=wrapper,
                params_model=params_model,
                timeout=timeout,
                description=tool_description,
            )

        return wrapper
    return decorator


def get_tool_registry() -> Dict[str, Callable]:
    """Get the registered tool handlers."""
    return {name: td.handler for name, td in _TOOL_DEFINITIONS.items()}


def get_tool_definition(tool_name: str) -> Optional[ToolDefinition]:
    """Get the full ToolDefinition for a registered tool."""
    return _TOOL_DEFINITIONS.get(tool_name)


def list_registered_tools() -> list[str]:
    """List all registered tool names, sorted."""
    return sorted(_TOOL_DEFINITIONS.keys())
