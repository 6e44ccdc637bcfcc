from typing import Optional
from pydantic import Field
from .mixins import AgentIdentityMixin, ResultLimitMixin


class ListAgentsParams(ResultLimitMixin):
    """
    List all Letta agents in your account.
    """
    limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of agents to return (default: 50)"
    )


class GetAgentParams(AgentIdentityMixin):
    """
    Get detailed information about a specific Letta agent.
    """


class SendMessageParams(AgentIdentityMixin):
    """
    Send a message to a Letta agent.
    """
    message: str = Field(
        ...,
        description="The message to send to the agent."
    )
