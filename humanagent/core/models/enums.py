"""Enumeration types for humanagent models."""

from enum import Enum


class ConfidenceLevel(str, Enum):
    """How strongly a question matched its knowledge entry.

    Members are declared weakest first; ``rank`` exposes that order.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return list(ConfidenceLevel).index(self)

    @property
    def label(self) -> str:
        """German display label used by the chat renderer."""
        return _CONFIDENCE_LABELS[self]


_CONFIDENCE_LABELS = {
    ConfidenceLevel.LOW: "niedrig",
    ConfidenceLevel.MEDIUM: "mittel",
    ConfidenceLevel.HIGH: "hoch",
}


class MessageRole(str, Enum):
    """Chat transcript roles."""

    USER = "user"
    AGENT = "agent"
