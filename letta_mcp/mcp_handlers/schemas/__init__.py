"""
Pydantic parameter models, one per tool.
"""

from .mixins import ToolParams, AgentIdentityMixin, ResultLimitMixin
from .agents import ListAgentsParams, GetAgentParams, SendMessageParams
from .memory import ListMemoryBlocksParams, GetMemoryBlockParams, UpdateMemoryBlockParams
from .archival import SearchMemoryParams, AddToArchivalParams

__all__ = [
    "ToolParams",
    "AgentIdentityMixin",
    "ResultLimitMixin",
    "ListAgentsParams",
    "GetAgentParams",
    "SendMessageParams",
    "ListMemoryBlocksParams",
    "GetMemoryBlockParams",
    "UpdateMemoryBlockParams",
    "SearchMemoryParams",
    "AddToArchivalParams",
]
