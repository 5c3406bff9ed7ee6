"""humanagent data models for knowledge entries, responses and chat transcripts."""

from .base import HumanAgentBaseModel, generate_id
from .chat import ChatMessage
from .enums import ConfidenceLevel, MessageRole
from .knowledge import CategoryCount, KnowledgeEntry
from .response import AgentResponse, AnswerResponse, EntryMatch, FallbackResponse

__all__ = [
    # Base
    "HumanAgentBaseModel",
    "generate_id",
    # Enums
    "ConfidenceLevel",
    "MessageRole",
    # Knowledge
    "KnowledgeEntry",
    "CategoryCount",
    # Responses
    "AgentResponse",
    "AnswerResponse",
    "FallbackResponse",
    "EntryMatch",
    # Chat
    "ChatMessage",
]
