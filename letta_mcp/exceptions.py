"""
Exception classes for the Letta MCP server.

Every class carries a machine-readable error_code used in error envelopes.
Failures raised by the Letta SDK are not wrapped; they surface as remote-call errors.
"""

from typing import Any, Dict, List, Optional


class LettaMCPError(Exception):
    """Base class for server-side tool errors."""
    error_code = "INTERNAL_ERROR"


class ConfigurationError(LettaMCPError):
    """Raised on first remote call when the API credential is not configured."""
    error_code = "CONFIGURATION_ERROR"


class MissingAgentIdError(LettaMCPError):
    """Raised when neither an explicit nor a default agent id is available."""
    error_code = "MISSING_AGENT_ID"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "agent_id is required. Either provide it in the request "
               "or set LETTA_DEFAULT_AGENT_ID environment variable."
        )


class ToolValidationError(LettaMCPError):
    """Raised when tool arguments do not match the tool's parameter model."""
    error_code = "VALIDATION_ERROR"

    def __init__(self, tool_name: str, issues: List[Dict[str, Any]]):
        self.tool_name = tool_name
        self.issues = issues
        summary = ", ".join(
            f"{'.'.join(str(p) for p in issue['path'])}: {issue['message']}" if issue["path"] else issue["message"]
            for issue in issues
        )
        super().__init__(f"Validation error: {summary}")


class UnknownToolError(LettaMCPError):
    """Raised when a call names a tool that is not registered."""
    error_code = "UNKNOWN_TOOL"

    def __init__(self, tool_name: str, available: Optional[List[str]] = None):
        self.tool_name = tool_name
        self.available = sorted(available or [])
        super().__init__(f"Unknown tool: {tool_name}")
