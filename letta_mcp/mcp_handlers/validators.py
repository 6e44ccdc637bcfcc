"""
Parameter validation for MCP tools.

Arguments are validated against the tool's pydantic model before the handler
runs. Validation is all-or-nothing: every offending field is reported, and the
handler never sees a partially valid request.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import ValidationError

from letta_mcp.exceptions import ToolValidationError
from .schemas import ToolParams


def _issue_from_error(error: Dict[str, Any]) -> Dict[str, Any]:
    path = [p for p in error.get("loc", ())]
    error_type = error.get("type", "value_error")
    if error_type == "missing" and path:
        message = f"{path[-1]} is required"
    else:
        message = error.get("msg", "Invalid value")
    return {
        "path": path,
        "message": message,
        "type": error_type,
    }


def format_validation_issues(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten a pydantic ValidationError into {path, message, type} issues."""
    return [_issue_from_error(err) for err in exc.errors()]


def validate_params(
    tool_name: str,
    model: Type[ToolParams],
    arguments: Optional[Dict[str, Any]],
) -> ToolParams:
    """
    Validate raw tool arguments.

    Raises:
        ToolValidationError: one issue per offending field
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolValidationError(tool_name, [{
            "path": [],
            "message": f"arguments must be an object, got {type(arguments).__name__}",
            "type": "dict_type",
        }])
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise ToolValidationError(tool_name, format_validation_issues(e)) from e
