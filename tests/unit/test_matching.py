"""Matching engine behaviour on synthetic knowledge bases."""

import pytest

from conftest import make_entry
from humanagent.core.engine.matching import (
    FALLBACK_ANSWER,
    FALLBACK_SUGGESTIONS,
    HIGH_CONFIDENCE_MIN_MATCHES,
    MatchingEngine,
    derive_confidence,
)
from humanagent.core.models.enums import ConfidenceLevel
from humanagent.core.models.response import AnswerResponse, FallbackResponse
from humanagent.kb.knowledge_base import KnowledgeBase


def test_single_keyword_question_names_entry(engine, small_kb):
    response = engine.answer("Wie funktioniert das Immunsystem?")

    assert isinstance(response, AnswerResponse)
    assert response.type == "answer"
    assert response.entry is small_kb.get("immunsystem")
    assert response.matched_keywords == ("immunsystem",)
    assert response.answer == "Antwort zu immunsystem"
    assert response.follow_up == ("Mehr zu immunsystem?",)


@pytest.mark.parametrize("question", ["", "   ", "?!...", "\n\t", "xyzabc123 völlig irrelevanter text"])
def test_unmatched_questions_fall_back(engine, question):
    response = engine.answer(question)

    assert isinstance(response, FallbackResponse)
    assert response.type == "fallback"
    assert response.answer == FALLBACK_ANSWER
    assert response.suggestions == FALLBACK_SUGGESTIONS


def test_fallback_suggestions_do_not_depend_on_question(engine):
    assert engine.answer("foo").suggestions == engine.answer("bar baz").suggestions


def test_injected_fallback_suggestions(small_kb):
    engine = MatchingEngine(small_kb, fallback_suggestions=["Frag mich etwas"])
    assert engine.answer("nichts").suggestions == ("Frag mich etwas",)


def test_single_word_keyword_needs_whole_word(engine):
    # "herzlich" contains "herz" but is a different word
    assert isinstance(engine.answer("Herzlich willkommen"), FallbackResponse)


def test_multi_word_keyword_matches_as_phrase(engine):
    response = engine.answer("Was leistet das Herz-Kreislauf-System?")

    assert response.entry.id == "herz"
    assert response.matched_keywords == ("herz kreislauf system", "herz", "kreislauf")


def test_phrase_keyword_requires_contiguous_words(engine):
    response = engine.answer("Leistung, geistige Frische und Schlaf")

    assert response.entry.id == "schlaf"
    assert response.matched_keywords == ("schlaf",)


def test_matched_keywords_follow_entry_order(engine):
    response = engine.answer("Puls, Blut und Arterien")

    assert response.matched_keywords == ("blut", "puls", "arterien")


def test_case_and_punctuation_are_ignored(engine):
    response = engine.answer("IMMUNSYSTEM!!! und...Antikörper???")

    assert response.entry.id == "immunsystem"
    assert response.matched_keywords == ("immunsystem", "antikörper")


def test_more_matched_keywords_win(engine):
    response = engine.answer("Hilft Schlaf dem Immunsystem, wenn Träume und Müdigkeit kommen?")

    assert response.entry.id == "schlaf"


def test_equal_counts_prefer_longer_keywords():
    kb = KnowledgeBase(
        [
            make_entry("kurz", ["dna"]),
            make_entry("lang", ["vererbung"]),
        ]
    )

    response = MatchingEngine(kb).answer("dna und vererbung")

    assert response.entry.id == "lang"


def test_full_tie_prefers_earlier_entry():
    kb = KnowledgeBase(
        [
            make_entry("erster", ["kultur"]),
            make_entry("zweiter", ["kunst1"]),
        ]
    )
    response = MatchingEngine(kb).answer("kultur kunst1")
    assert response.entry.id == "erster"

    reversed_kb = KnowledgeBase(list(reversed(kb)))
    response = MatchingEngine(reversed_kb).answer("kultur kunst1")
    assert response.entry.id == "zweiter"


def test_tie_between_entries_sharing_a_keyword():
    kb = KnowledgeBase(
        [
            make_entry("a", ["gehirn", "neuronen"]),
            make_entry("b", ["gehirn", "synapsen"]),
        ]
    )

    response = MatchingEngine(kb).answer("Wie arbeitet das Gehirn?")

    assert response.entry.id == "a"


def test_answer_is_deterministic(engine):
    question = "Herz und Schlaf"
    assert engine.answer(question) == engine.answer(question)
    assert engine.answer("") == engine.answer("")


def test_three_matched_keywords_give_high_confidence(engine):
    response = engine.answer("Immunsystem, Antikörper und Impfung")

    assert len(response.matched_keywords) == 3
    assert response.confidence == ConfidenceLevel.HIGH


def test_confidence_levels_for_large_entry(engine):
    assert engine.answer("Blut").confidence == ConfidenceLevel.LOW
    assert engine.answer("Blut und Puls").confidence == ConfidenceLevel.MEDIUM
    assert engine.answer("Blut, Puls, Arterien").confidence == ConfidenceLevel.HIGH


def test_confidence_ratio_rule_for_small_entry():
    kb = KnowledgeBase([make_entry("klein", ["sprache", "schrift"])])

    response = MatchingEngine(kb).answer("Woher kommt die Schrift?")

    assert response.confidence == ConfidenceLevel.HIGH


@pytest.mark.parametrize("total", [1, 2, 5, 12])
def test_confidence_is_monotonic_in_matches(total):
    levels = [derive_confidence(matched, total).rank for matched in range(1, total + 1)]
    assert levels == sorted(levels)


def test_derive_confidence_thresholds():
    assert derive_confidence(1, 10) == ConfidenceLevel.LOW
    assert derive_confidence(2, 10) == ConfidenceLevel.MEDIUM
    assert derive_confidence(HIGH_CONFIDENCE_MIN_MATCHES, 10) == ConfidenceLevel.HIGH
    assert derive_confidence(1, 2) == ConfidenceLevel.HIGH


def test_matched_keywords_are_subset_of_entry_keywords(engine):
    for question in ["Herz", "Schlaf und REM", "Impfung gegen Infektion", "Blut Puls Herz"]:
        response = engine.answer(question)
        assert response.matched_keywords
        assert set(response.matched_keywords) <= set(response.entry.keywords)


def test_rank_orders_all_matching_entries(engine):
    matches = engine.rank("Schlaf, Träume, Herz")

    assert [m.entry.id for m in matches] == ["schlaf", "herz"]
    assert [m.position for m in matches] == [2, 1]
    assert matches[0].score == 2
    assert matches[0].matched_chars == len("schlaf") + len("träume")


def test_rank_respects_limit(engine):
    assert len(engine.rank("Schlaf Herz Immunsystem", limit=2)) == 2
    assert engine.rank("") == []


def test_engine_accepts_plain_list(small_kb):
    response = MatchingEngine(list(small_kb)).answer("Immunsystem")
    assert response.entry.id == "immunsystem"
