"""Tests for the curated topic table."""

import pytest

from cardgen.modules.flashcards.knowledge_bank import KNOWLEDGE_BANK, lookup, match_entry
from tests.conftest import assert_card_shape


class TestKnowledgeBankContent:
    @pytest.mark.parametrize("entry", KNOWLEDGE_BANK, ids=lambda e: e.name)
    def test_every_card_fits_length_rules(self, entry) -> None:
        assert 4 <= len(entry.cards) <= 8
        for card in entry.cards:
            assert_card_shape(card.question, card.answer)

    def test_patterns_are_lowercase(self) -> None:
        for entry in KNOWLEDGE_BANK:
            assert all(p == p.lower() for p in entry.patterns)


class TestLookup:
    def test_substring_match(self) -> None:
        cards = lookup("pollination in flowering plants")
        assert cards[0].question == "How do flowers transfer pollen between plants?"
        assert len(cards) == 8

    def test_alias_pattern(self) -> None:
        assert match_entry("wwii pacific theater").name == "world war ii"
        assert match_entry("meiosis").name == "cell division"

    def test_first_entry_wins(self) -> None:
        # "brain" is listed before "breathing"
        assert match_entry("how the brain controls breathing").name == "brain"

    def test_no_match_is_empty(self) -> None:
        assert lookup("xyzzy-nonexistent-topic") == []

    def test_returns_fresh_list(self) -> None:
        first = lookup("photosynthesis")
        first.clear()
        assert len(lookup("photosynthesis")) == 7
