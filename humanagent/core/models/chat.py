"""Chat transcript models used by the interactive session (Pydantic only)."""

from typing import Optional

from pydantic import Field

from .base import HumanAgentBaseModel, generate_id
from .enums import MessageRole
from .response import AgentResponse


class ChatMessage(HumanAgentBaseModel):
    """One message of an in-memory chat transcript."""

    id: str = Field(default_factory=generate_id, description="Message identifier")
    role: MessageRole = Field(..., description="Who wrote the message")
    content: str = Field(..., description="Displayed text")
    response: Optional[AgentResponse] = Field(None, description="Structured agent response")

    @classmethod
    def from_user(cls, content: str) -> "ChatMessage":
        return cls(id=generate_id("user-"), role=MessageRole.USER, content=content)

    @classmethod
    def from_agent(cls, response: AgentResponse) -> "ChatMessage":
        return cls(
            id=generate_id("agent-"),
            role=MessageRole.AGENT,
            content=response.answer,
            response=response,
        )
