from typing import Optional
from pydantic import Field
from .mixins import AgentIdentityMixin, ResultLimitMixin


class SearchMemoryParams(ResultLimitMixin, AgentIdentityMixin):
    """
    Search the agent's archival memory.
    """
    query: str = Field(
        ...,
        description="Search query to find relevant memories."
    )
    limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of results to return (default: 10)."
    )


class AddToArchivalParams(AgentIdentityMixin):
    """
    Add new information to the agent's archival memory.
    """
    content: str = Field(
        ...,
        description="The content to add to archival memory."
    )
