"""Read-only, ordered collection of knowledge entries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

from ..core.models.knowledge import CategoryCount, KnowledgeEntry


class KnowledgeBaseError(ValueError):
    """Knowledge data is missing or malformed."""


class KnowledgeBase(Sequence):
    """Immutable ordered sequence of KnowledgeEntry.

    Entry order is significant: it breaks ties between equally scored entries
    in the matching engine.
    """

    def __init__(self, entries: Iterable[KnowledgeEntry]):
        self._entries: tuple[KnowledgeEntry, ...] = tuple(entries)
        self._by_id: dict[str, KnowledgeEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise KnowledgeBaseError(f"Duplicate knowledge entry id: {entry.id}")
            self._by_id[entry.id] = entry

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[KnowledgeEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"KnowledgeBase(entries={len(self._entries)})"

    def get(self, entry_id: str) -> KnowledgeEntry | None:
        """Look up an entry by id."""
        return self._by_id.get(entry_id)

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        return list(dict.fromkeys(entry.category for entry in self._entries))

    def category_overview(self) -> list[CategoryCount]:
        """Entry count per category, sorted by category name."""
        counts = Counter(entry.category for entry in self._entries)
        return [
            CategoryCount(category=category, count=count)
            for category, count in sorted(counts.items(), key=lambda item: (item[0].casefold(), item[0]))
        ]
