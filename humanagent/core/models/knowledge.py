"""Knowledge entry models (Pydantic only)."""

from pydantic import Field, field_validator

from ..utils.text import normalize
from .base import HumanAgentBaseModel


# =============================================================================
# Pydantic Schemas
# =============================================================================


class KnowledgeEntry(HumanAgentBaseModel):
    """One curated topic record of the knowledge base."""

    id: str = Field(..., min_length=1, description="Stable entry slug")
    category: str = Field(..., min_length=1, description="Topic group, e.g. Biologie")
    title: str = Field(..., min_length=1, description="Short heading")

    # Matching
    keywords: tuple[str, ...] = Field(
        ..., min_length=1, description="Normalized trigger words and phrases"
    )

    # Content
    answer: str = Field(..., min_length=1, description="Canonical answer text")
    details: tuple[str, ...] = Field(default_factory=tuple, description="Supplementary facts")
    follow_up: tuple[str, ...] = Field(
        default_factory=tuple, description="Suggested next questions"
    )

    @field_validator("keywords", mode="before")
    @classmethod
    def normalize_keywords(cls, value):
        """Normalize keywords and drop duplicates, keeping declaration order."""
        if isinstance(value, str):
            value = [value]
        if value is not None and not isinstance(value, (list, tuple)):
            # Let the tuple validation report the type error
            return value
        seen: dict[str, None] = {}
        for keyword in value or ():
            normalized = normalize(str(keyword))
            if normalized:
                seen.setdefault(normalized, None)
        return tuple(seen)


class CategoryCount(HumanAgentBaseModel):
    """Number of entries in one category."""

    category: str
    count: int = Field(..., ge=0)
