"""Agent response models returned by the matching engine (Pydantic only)."""

from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from .base import HumanAgentBaseModel
from .enums import ConfidenceLevel
from .knowledge import KnowledgeEntry


# =============================================================================
# Pydantic Schemas
# =============================================================================


class EntryMatch(HumanAgentBaseModel):
    """Keyword overlap between one question and one knowledge entry."""

    entry: KnowledgeEntry = Field(..., description="Scored entry")
    position: int = Field(..., ge=0, description="Index of the entry in the knowledge base")
    matched_keywords: tuple[str, ...] = Field(
        default_factory=tuple, description="Matched keywords in entry order"
    )

    @property
    def score(self) -> int:
        return len(self.matched_keywords)

    @property
    def matched_chars(self) -> int:
        return sum(len(keyword) for keyword in self.matched_keywords)

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """Total order: more keywords, then longer keywords, then earlier entry."""
        return (-self.score, -self.matched_chars, self.position)


class AnswerResponse(HumanAgentBaseModel):
    """A knowledge entry matched the question."""

    type: Literal["answer"] = "answer"
    entry: KnowledgeEntry = Field(..., description="Matched knowledge entry")
    answer: str = Field(..., description="Canonical answer of the entry")
    follow_up: tuple[str, ...] = Field(default_factory=tuple, description="Follow-up prompts")
    confidence: ConfidenceLevel = Field(..., description="Confidence label")
    matched_keywords: tuple[str, ...] = Field(
        ..., min_length=1, description="Matched keywords in entry order"
    )

    @model_validator(mode="after")
    def check_keywords_belong_to_entry(self) -> "AnswerResponse":
        unknown = set(self.matched_keywords) - set(self.entry.keywords)
        if unknown:
            raise ValueError(f"matched keywords not in entry {self.entry.id}: {sorted(unknown)}")
        return self


class FallbackResponse(HumanAgentBaseModel):
    """No knowledge entry matched the question."""

    type: Literal["fallback"] = "fallback"
    answer: str = Field(..., description="Generic fallback answer")
    suggestions: tuple[str, ...] = Field(default_factory=tuple, description="Starter questions")


AgentResponse = Annotated[Union[AnswerResponse, FallbackResponse], Field(discriminator="type")]
