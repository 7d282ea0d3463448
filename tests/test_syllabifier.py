#!/usr/bin/env python3
"""
Tests for syllabification and stress mark placement.
"""

import logging

import pytest

from src.bg_nlp.phonetic import StressPlacer, Syllabifier, syllable_spans
from src.bg_nlp.phonetic.syllabifier import nucleus_positions


@pytest.fixture
def syllabifier():
    return Syllabifier()


class TestSyllabifier:
    """Orthographic syllables."""

    @pytest.mark.parametrize("word,expected", [
        ("хладилник", ["хла", "дил", "ник"]),
        ("череша", ["че", "ре", "ша"]),
        ("уединения", ["уе", "ди", "не", "ния"]),
        ("шофьор", ["шо", "фьор"]),
        ("апартамент", ["а", "пар", "та", "мент"]),
        ("джоб", ["джоб"]),
        ("светлосин", ["свет", "ло", "син"]),
    ])
    def test_syllabify(self, syllabifier, word, expected):
        assert syllabifier.syllabify(word) == expected

    def test_uppercase_input(self, syllabifier):
        assert syllabifier.syllabify("Череша") == ["че", "ре", "ша"]

    def test_hyphenated_word(self, syllabifier):
        assert syllabifier.syllabify("по-добре") == ["по", "доб", "ре"]

    @pytest.mark.parametrize("text", ["от град", "по добре", " като  дете "])
    def test_passage_is_rejected(self, syllabifier, caplog, text):
        with caplog.at_level(logging.WARNING):
            assert syllabifier.syllabify(text) == []
        assert "single word" in caplog.text

    def test_no_vowels(self, syllabifier):
        assert syllabifier.syllabify("") == []
        assert syllabifier.syllabify("вс") == []

    @pytest.mark.parametrize("word", ["хладилник", "уединения", "шофьор", "апартамент", "страст", "аорта"])
    def test_syllables_partition_word(self, syllabifier, word):
        """Every letter lands in exactly one syllable, one syllable per nucleus."""
        syllables = syllabifier.syllabify(word)
        assert "".join(syllables) == word
        assert len(syllables) == len(nucleus_positions(word))

    def test_spans_are_contiguous(self):
        spans = syllable_spans("хладилник")
        assert spans == [(0, 3), (3, 6), (6, 9)]
        assert all(end == start for (_, end), (start, _) in zip(spans, spans[1:]))


class TestStressPlacer:
    """Insertion points for stress marks."""

    CHERESHA = [(0, 2), (2, 4), (4, 6)]
    SVETLOSIN = [(0, 4), (4, 6), (6, 9)]

    @pytest.mark.parametrize("stressed,expected", [(1, 0), (3, 2), (5, 4)])
    def test_single(self, stressed, expected):
        assert StressPlacer().place_single(self.CHERESHA, stressed, vowel_count=3) == expected

    def test_unstressed(self):
        placer = StressPlacer()
        assert placer.place_single(self.CHERESHA, None, vowel_count=3) is None
        assert placer.place_single(self.CHERESHA, -1, vowel_count=3) is None

    def test_single_vowel_word_has_no_mark(self):
        assert StressPlacer().place_single([(0, 4)], 2, vowel_count=1) is None

    def test_single_vowel_compound_part_is_marked(self):
        assert StressPlacer().place_single([(0, 3)], 1, vowel_count=1, dashed=True) == 0

    def test_double(self):
        placer = StressPlacer()
        assert placer.place_double(self.SVETLOSIN, 7, 2) == (6, 0)
        assert placer.place_double(self.CHERESHA, 1, 5) == (0, 4)
