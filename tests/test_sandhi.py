#!/usr/bin/env python3
"""
Tests for passage sandhi planning.
"""

import pytest

from src.bg_nlp.phonetic.tables import DEFAULT_CLITICS
from src.bg_nlp.pipeline import SandhiProcessor


@pytest.fixture
def sandhi():
    return SandhiProcessor(DEFAULT_CLITICS)


class TestCliticDetection:

    @pytest.mark.parametrize("word", ["от", "От", "от,", "о̀т", "като"])
    def test_clitics(self, sandhi, word):
        assert sandhi.is_clitic(word)

    @pytest.mark.parametrize("word", ["град", "череша", ""])
    def test_content_words(self, sandhi, word):
        assert not sandhi.is_clitic(word)


class TestBoundary:
    """Rules applied between two neighbouring words."""

    @pytest.mark.parametrize("word,next_word,is_clitic,expected", [
        ("от", "град", True, ("од", False)),
        ("без", "път", True, ("бес", False)),
        ("с", "дете", True, ("з", False)),
        ("град", "с", False, ("грат", False)),
        ("меч", "до", False, ("медж", False)),
        ("без", "ада", True, ("без", False)),
        ("в", "ада", True, ("в", True)),
        ("във", "вода", True, ("във", False)),
        ("като", "дете", True, ("като", True)),
        ("от", "мен", True, ("от", True)),
    ])
    def test_boundary(self, sandhi, word, next_word, is_clitic, expected):
        assert sandhi.boundary(word, next_word, is_clitic) == expected

    def test_next_word_of_obstruents_only(self, sandhi):
        """Gathering the next word's consonants stops at its end."""
        assert sandhi.boundary("от", "с", True) == ("от", False)

    def test_punctuation_blocks_assimilation(self, sandhi):
        assert sandhi.boundary("от", "„град“", True) == ("от", True)


class TestPlan:
    """Whole-passage plans."""

    def test_plan_from_city(self, sandhi):
        planned = sandhi.plan("от град")
        assert [w.text for w in planned] == ["од", "град"]
        assert [w.context.devoice for w in planned] == [False, True]
        assert [w.context.destressed for w in planned] == [True, False]
        assert all(w.context.in_passage for w in planned)

    def test_no_clitics_no_sandhi(self):
        planned = SandhiProcessor([]).plan("от град")
        assert [w.text for w in planned] == ["от", "град"]
        assert [w.context.devoice for w in planned] == [True, True]
        assert not any(w.context.destressed for w in planned)

    def test_clitics_alone_keep_stress(self, sandhi):
        planned = sandhi.plan("да не")
        assert not any(w.context.destressed for w in planned)

    def test_clitic_chain_leans_on_content_word(self, sandhi):
        planned = sandhi.plan("ако не дойде")
        assert [w.context.destressed for w in planned] == [True, True, False]

    def test_clitics_on_both_sides(self, sandhi):
        planned = sandhi.plan("и от града до")
        assert [w.context.destressed for w in planned] == [True, True, False, True]

    def test_whitespace_runs(self, sandhi):
        assert [w.text for w in sandhi.plan("  от   град ")] == ["од", "град"]
