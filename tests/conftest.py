"""Shared fixtures: small synthetic knowledge bases."""

import pytest

from humanagent.core.engine.matching import MatchingEngine
from humanagent.core.models.knowledge import KnowledgeEntry
from humanagent.kb.knowledge_base import KnowledgeBase


def make_entry(entry_id: str, keywords, category: str = "Biologie", **overrides) -> KnowledgeEntry:
    data = {
        "id": entry_id,
        "category": category,
        "title": f"Titel {entry_id}",
        "keywords": keywords,
        "answer": f"Antwort zu {entry_id}",
        "details": [f"Detail zu {entry_id}"],
        "follow_up": [f"Mehr zu {entry_id}?"],
    }
    data.update(overrides)
    return KnowledgeEntry(**data)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep developer environment variables out of config-dependent tests."""
    monkeypatch.setenv("HUMANAGENT_ENV", "test")
    monkeypatch.delenv("HUMANAGENT_KNOWLEDGE_PATH", raising=False)
    monkeypatch.delenv("HUMANAGENT_LOGGING_LEVEL", raising=False)


@pytest.fixture
def small_kb() -> KnowledgeBase:
    return KnowledgeBase(
        [
            make_entry(
                "immunsystem",
                ["immunsystem", "antikörper", "impfung", "abwehr", "lymphozyten", "infektion"],
            ),
            make_entry(
                "herz",
                ["herz kreislauf system", "herz", "kreislauf", "blut", "puls", "arterien"],
            ),
            make_entry(
                "schlaf",
                ["schlaf", "träume", "müdigkeit", "geistige leistung", "tiefschlaf", "rem"],
                category="Gesundheit",
            ),
        ]
    )


@pytest.fixture
def engine(small_kb) -> MatchingEngine:
    return MatchingEngine(small_kb)
