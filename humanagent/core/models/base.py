"""Base Pydantic schemas and helpers for humanagent models."""

import uuid

from pydantic import BaseModel, ConfigDict


# =============================================================================
# Pydantic Base Classes
# =============================================================================


class HumanAgentBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Allow conversion from plain objects
        from_attributes=True,
        # Knowledge entries and responses never change after construction
        frozen=True,
        # Reject unknown fields so typos in knowledge files surface early
        extra="forbid",
        str_strip_whitespace=True,
    )


# =============================================================================
# Utility Functions
# =============================================================================


def generate_id(prefix: str = "") -> str:
    """Generate a short prefixed identifier.

    Args:
        prefix: Optional prefix for the ID (e.g., "user-", "agent-")

    Returns:
        Prefixed hex string
    """
    uid = uuid.uuid4().hex[:12]
    return f"{prefix}{uid}" if prefix else uid
