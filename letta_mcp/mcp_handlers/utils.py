"""
Common utilities for MCP tool handlers.
"""

from typing import Any, Dict, Optional, Sequence
from mcp.types import TextContent
from pydantic_core import PydanticSerializationError
import json
from datetime import datetime, date
from enum import Enum

from letta_mcp.config import PREVIEW_LENGTH
from letta_mcp.exceptions import MissingAgentIdError
from letta_mcp.logging_utils import get_logger

logger = get_logger(__name__)

ELLIPSIS = "..."


def resolve_agent_id(provided: Optional[str], default: Optional[str]) -> str:
    """
    Pick the effective agent id: explicit argument, else configured default.

    Raises:
        MissingAgentIdError: neither is set (empty strings count as unset)
    """
    agent_id = provided or default
    if not agent_id:
        raise MissingAgentIdError()
    return agent_id


def field(obj: Any, *path: str, default: Any = None) -> Any:
    """
    Read a nested field from an SDK model or a plain dict.

    Missing intermediate values short-circuit to the default:
        field(agent, "llm_config", "model")
    """
    current = obj
    for name in path:
        if current is None:
            return default
        if isinstance(current, dict):
            current = current.get(name)
        else:
            current = getattr(current, name, None)
    return default if current is None else current


def truncate_preview(value: Optional[str], length: int = PREVIEW_LENGTH) -> Optional[str]:
    """Cut a value to `length` characters plus an ellipsis marker; shorter values pass through."""
    if value is None:
        return None
    if len(value) > length:
        return value[:length] + ELLIPSIS
    return value


def _make_json_serializable(obj: Any) -> Any:
    """
    Recursively convert SDK results into JSON-compatible values.

    Handles:
    - pydantic models (letta_client types) → dicts
    - datetime/date objects → ISO format strings
    - Enum types → their values
    - Other non-serializable types → strings
    """
    if obj is None:
        return None

    if isinstance(obj, (str, int, float, bool)):
        return obj

    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value

    if hasattr(obj, "model_dump"):
        try:
            return _make_json_serializable(obj.model_dump(mode="json"))
        except (TypeError, PydanticSerializationError):
            return _make_json_serializable(obj.model_dump())

    if isinstance(obj, dict):
        return {str(key): _make_json_serializable(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_make_json_serializable(item) for item in obj]

    return str(obj)


def success_response(data: Any) -> Sequence[TextContent]:
    """
    Create a success payload: one text part holding pretty-printed JSON.
    """
    payload = _make_json_serializable(data)
    return [TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=False)
    )]


def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    recovery: Optional[Dict[str, Any]] = None,
) -> TextContent:
    """
    Create an error payload.

    Example:
        >>> error_response(
        ...     "Unknown tool: foo",
        ...     error_code="UNKNOWN_TOOL",
        ...     details={"requested_tool": "foo"}
        ... )
    """
    response: Dict[str, Any] = {
        "error": True,
        "message": message,
    }
    if error_code:
        response["error_code"] = error_code
    if details is not None:
        response["details"] = _make_json_serializable(details)
    if recovery:
        response["recovery"] = recovery

    return TextContent(
        type="text",
        text=json.dumps(response, indent=2, ensure_ascii=False)
    )
