"""Matching engine: maps a free-text question to the best knowledge entry.

Scoring is plain keyword overlap:

- a single-word keyword matches when it is one of the question's words
- a multi-word keyword matches when it occurs as a contiguous substring of
  the normalized question

Entries are ordered by matched keyword count, then by the total length of the
matched keywords, then by their position in the knowledge base. The engine
holds no per-call state and never raises for any string input.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.enums import ConfidenceLevel
from ..models.knowledge import KnowledgeEntry
from ..models.response import AgentResponse, AnswerResponse, EntryMatch, FallbackResponse
from ..utils.text import normalize, tokenize
from ...observability.logger import get_logger

logger = get_logger(__name__)

# Confidence policy
MEDIUM_CONFIDENCE_MIN_MATCHES = 2
HIGH_CONFIDENCE_MIN_MATCHES = 3
HIGH_CONFIDENCE_MIN_RATIO = 0.5

FALLBACK_ANSWER = (
    "Dazu habe ich in meiner Wissensbasis leider nichts Passendes gefunden. "
    "Versuche es mit klaren Stichworten oder starte mit einer dieser Fragen."
)

# Static and independent of the question.
# TODO: suggest the titles of the closest entries instead of a fixed list.
FALLBACK_SUGGESTIONS: tuple[str, ...] = (
    "Wie funktioniert das Herz-Kreislauf-System?",
    "Warum sind Emotionen für Menschen wichtig?",
    "Welche Meilensteine prägen die Geschichte der Menschheit?",
)


def derive_confidence(matched: int, total_keywords: int) -> ConfidenceLevel:
    """Map a keyword overlap to a confidence label.

    Args:
        matched: Number of matched keywords (at least 1)
        total_keywords: Number of keywords of the entry

    Returns:
        HIGH for 3+ matches or at least half of the entry's keywords,
        MEDIUM for 2 matches, LOW otherwise
    """
    ratio = matched / total_keywords if total_keywords else 0.0
    if matched >= HIGH_CONFIDENCE_MIN_MATCHES or ratio >= HIGH_CONFIDENCE_MIN_RATIO:
        return ConfidenceLevel.HIGH
    if matched >= MEDIUM_CONFIDENCE_MIN_MATCHES:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


class MatchingEngine:
    """Answers questions from an injected, read-only knowledge base."""

    def __init__(
        self,
        knowledge_base: Sequence[KnowledgeEntry],
        fallback_answer: str = FALLBACK_ANSWER,
        fallback_suggestions: Sequence[str] = FALLBACK_SUGGESTIONS,
    ):
        self.knowledge_base = knowledge_base
        self.fallback_answer = fallback_answer
        self.fallback_suggestions = tuple(fallback_suggestions)

    def answer(self, question: str) -> AgentResponse:
        """Answer a question with the best matching entry or a fallback."""
        ranked = self.rank(question, limit=1)

        if not ranked:
            logger.debug("question_unmatched", question=question)
            return FallbackResponse(
                answer=self.fallback_answer,
                suggestions=self.fallback_suggestions,
            )

        best = ranked[0]
        confidence = derive_confidence(best.score, len(best.entry.keywords))

        logger.debug(
            "question_answered",
            entry_id=best.entry.id,
            score=best.score,
            matched_chars=best.matched_chars,
            confidence=confidence.value,
        )

        return AnswerResponse(
            entry=best.entry,
            answer=best.entry.answer,
            follow_up=best.entry.follow_up,
            confidence=confidence,
            matched_keywords=best.matched_keywords,
        )

    def rank(self, question: str, limit: int | None = None) -> list[EntryMatch]:
        """Score every entry and return those with at least one match, best first.

        Args:
            question: Raw user text
            limit: Maximum number of matches to return (all when None)

        Returns:
            Matches ordered by (-score, -matched_chars, position)
        """
        normalized = normalize(question)
        if not normalized:
            return []

        tokens = tokenize(normalized)
        matches: list[EntryMatch] = []
        for position, entry in enumerate(self.knowledge_base):
            match = self._score_entry(entry, position, normalized, tokens)
            if match.score > 0:
                matches.append(match)
        matches.sort(key=lambda m: m.sort_key)

        return matches if limit is None else matches[:limit]

    def _score_entry(
        self,
        entry: KnowledgeEntry,
        position: int,
        normalized: str,
        tokens: frozenset[str],
    ) -> EntryMatch:
        matched = tuple(
            keyword
            for keyword in entry.keywords
            if (keyword in normalized if " " in keyword else keyword in tokens)
        )
        return EntryMatch(entry=entry, position=position, matched_keywords=matched)
