"""
Error envelope builders for MCP handlers.

Each builder maps one failure class onto the uniform error payload,
with recovery guidance for the calling model.
"""

import difflib

from mcp.types import TextContent

from letta_mcp.exceptions import (
    ConfigurationError,
    LettaMCPError,
    MissingAgentIdError,
    ToolValidationError,
    UnknownToolError,
)
from .utils import error_response

REMOTE_CALL_ERROR = "REMOTE_CALL_ERROR"

RECOVERY_PATTERNS = {
    "validation_error": {
        "action": "Check parameter names and types against the tool schema",
        "workflow": [
            "1. Review the fields listed in details",
            "2. Supply every required parameter with the right type",
            "3. Retry the tool call",
        ],
    },
    "missing_agent_id": {
        "action": "Pass agent_id explicitly or configure LETTA_DEFAULT_AGENT_ID",
        "related_tools": ["list_agents"],
        "workflow": [
            "1. Call list_agents to find the agent ID",
            "2. Retry with agent_id set",
        ],
    },
    "configuration_error": {
        "action": "Set LETTA_API_KEY in the server environment and restart the server",
        "workflow": [
            "1. Create an API key in the Letta dashboard",
            "2. Export LETTA_API_KEY for the MCP server process",
            "3. Restart the server",
        ],
    },
    "unknown_tool": {
        "action": "Use one of the available tools, or try a suggested alternative",
        "workflow": [
            "1. Check the tool list reported by the server",
            "2. Retry with a valid tool name",
        ],
    },
    "remote_call_error": {
        "action": "Check the identifiers and the Letta service status, then retry",
        "related_tools": ["list_agents", "list_memory_blocks"],
        "workflow": [
            "1. Verify the agent/block IDs exist",
            "2. Inspect the upstream error body in details",
            "3. Retry once the cause is fixed",
        ],
    },
}


def validation_error(exc: ToolValidationError) -> TextContent:
    """Validation failure: details enumerate every offending field."""
    return error_response(
        str(exc),
        error_code=exc.error_code,
        details=exc.issues,
        recovery=RECOVERY_PATTERNS["validation_error"],
    )


def missing_agent_id_error(exc: MissingAgentIdError) -> TextContent:
    return error_response(
        str(exc),
        error_code=exc.error_code,
        details={"error_type": "missing_agent_id", "param_name": "agent_id"},
        recovery=RECOVERY_PATTERNS["missing_agent_id"],
    )


def configuration_error(exc: ConfigurationError) -> TextContent:
    return error_response(
        str(exc),
        error_code=exc.error_code,
        details={"error_type": "configuration_error"},
        recovery=RECOVERY_PATTERNS["configuration_error"],
    )


def tool_not_found_error(exc: UnknownToolError) -> TextContent:
    """
    Unknown tool, with fuzzy suggestions.

    Uses difflib to find similar tool names.
    """
    similar = difflib.get_close_matches(exc.tool_name, exc.available, n=3, cutoff=0.4)
    return error_response(
        str(exc),
        error_code=exc.error_code,
        details={
            "error_type": "unknown_tool",
            "requested_tool": exc.tool_name,
            "similar_tools": similar,
            "available_tools": exc.available,
        },
        recovery=RECOVERY_PATTERNS["unknown_tool"],
    )


def remote_call_error(exc: Exception) -> TextContent:
    """
    Failure raised by the Letta SDK (or anything else unexpected).

    The upstream body is surfaced verbatim when present, else the error's string form.
    """
    body = getattr(exc, "body", None)
    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return error_response(
        message,
        error_code=REMOTE_CALL_ERROR,
        details=body if body is not None else str(exc),
        recovery=RECOVERY_PATTERNS["remote_call_error"],
    )


_BUILDERS = (
    (ToolValidationError, validation_error),
    (MissingAgentIdError, missing_agent_id_error),
    (ConfigurationError, configuration_error),
    (UnknownToolError, tool_not_found_error),
)


def error_from_exception(exc: Exception) -> TextContent:
    """Map any exception raised during dispatch to its error payload."""
    for exc_type, builder in _BUILDERS:
        if isinstance(exc, exc_type):
            return builder(exc)
    if isinstance(exc, LettaMCPError):
        return error_response(str(exc), error_code=exc.error_code)
    return remote_call_error(exc)


def is_expected_error(exc: Exception) -> bool:
    """Caller-recoverable conditions (logged at warning, without traceback)."""
    return isinstance(exc, LettaMCPError)
