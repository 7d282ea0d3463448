#!/usr/bin/env python3
"""
Tests for grapheme classification and the obstruent voicing tables.
"""

import pytest

from src.bg_nlp.phonetic import Voicing, counterpart, is_obstruent, is_vowel, to_graphemes, voicing_class
from src.bg_nlp.phonetic.tables import (
    DZE,
    DZH,
    OBSTRUENT_PAIRS,
    UNPAIRED_VOICELESS,
    VOICED_TO_VOICELESS,
    VOICELESS_TO_VOICED,
)


class TestVowels:
    """Vowel/consonant split."""

    @pytest.mark.parametrize("letter", list("аиеояъую"))
    def test_vowels(self, letter):
        assert is_vowel(letter)

    @pytest.mark.parametrize("letter", ["б", "й", "ь", "щ", DZH, "-", "a"])
    def test_non_vowels(self, letter):
        assert not is_vowel(letter)


class TestVoicing:
    """Voicing classes and counterparts."""

    @pytest.mark.parametrize("letter,expected", [
        ("з", Voicing.VOICED),
        ("б", Voicing.VOICED),
        (DZH, Voicing.VOICED),
        (DZE, Voicing.VOICED),
        ("с", Voicing.VOICELESS),
        ("ч", Voicing.VOICELESS),
        ("х", Voicing.VOICELESS),
        ("м", Voicing.NEITHER),
        ("а", Voicing.NEITHER),
        ("ь", Voicing.NEITHER),
        (",", Voicing.NEITHER),
    ])
    def test_voicing_class(self, letter, expected):
        assert voicing_class(letter) is expected

    @pytest.mark.parametrize("letter,target,expected", [
        ("д", Voicing.VOICELESS, "т"),
        ("т", Voicing.VOICED, "д"),
        ("в", Voicing.VOICELESS, "ф"),
        ("ч", Voicing.VOICED, DZH),
        ("ц", Voicing.VOICED, DZE),
        ("б", Voicing.VOICED, "б"),
        ("х", Voicing.VOICED, None),
        ("м", Voicing.VOICED, None),
        ("д", Voicing.NEITHER, None),
    ])
    def test_counterpart(self, letter, target, expected):
        assert counterpart(letter, target) == expected

    def test_pair_table_is_symmetric(self):
        """Every voiced letter maps to a voiceless one that maps back."""
        for voiced, voiceless in OBSTRUENT_PAIRS:
            assert VOICED_TO_VOICELESS[voiced] == voiceless
            assert VOICELESS_TO_VOICED[voiceless] == voiced

    def test_single_unpaired_obstruent(self):
        assert is_obstruent(UNPAIRED_VOICELESS)
        assert UNPAIRED_VOICELESS not in VOICELESS_TO_VOICED
        assert len(VOICED_TO_VOICELESS) == len(VOICELESS_TO_VOICED) == len(OBSTRUENT_PAIRS)


class TestGraphemeTagging:
    """Position-tagged graphemes."""

    def test_dzh_collapses_to_one_grapheme(self):
        graphemes = to_graphemes("джоб")
        assert [g.letter for g in graphemes] == [DZH, "о", "б"]
        assert [g.source for g in graphemes] == [0, 2, 3]

    def test_plain_word_keeps_indices(self):
        graphemes = to_graphemes("град")
        assert [g.source for g in graphemes] == [0, 1, 2, 3]

    def test_empty_word(self):
        assert to_graphemes("") == ()
