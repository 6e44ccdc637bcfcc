from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolParams(BaseModel):
    """Base for tool parameter models. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")


class AgentIdentityMixin(ToolParams):
    """Common parameter for tools that act on one agent."""
    agent_id: Optional[str] = Field(
        default=None,
        description="The agent ID. If not provided, uses LETTA_DEFAULT_AGENT_ID environment variable."
    )


class ResultLimitMixin(ToolParams):
    """Optional non-negative `limit`; booleans are not counts."""
    limit: Optional[int] = Field(default=None, ge=0)

    @field_validator("limit", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("limit must be a number, not a boolean")
        return value
