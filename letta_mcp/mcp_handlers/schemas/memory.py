from pydantic import Field
from .mixins import AgentIdentityMixin, ToolParams


class ListMemoryBlocksParams(AgentIdentityMixin):
    """
    List all memory blocks attached to a Letta agent.
    """


class GetMemoryBlockParams(AgentIdentityMixin):
    """
    Get the content of a specific memory block by its label.
    """
    label: str = Field(
        ...,
        description="The label of the memory block to retrieve (e.g., 'persona', 'human', 'project')."
    )


class UpdateMemoryBlockParams(ToolParams):
    """
    Replace the content of a memory block.
    """
    block_id: str = Field(
        ...,
        description="The block ID to update. Get this from list_memory_blocks."
    )
    value: str = Field(
        ...,
        description="The new content for the memory block."
    )
