#!/usr/bin/env python3
"""
Tests for letter-level IPA conversion and single-word transcription.
"""

import pytest

from src.bg_nlp.phonetic import (
    BulgarianPhoneticTranscriber,
    GraphemeToPhone,
    StressSpec,
    TranscriptionConfig,
    WordContext,
    context_flag,
    spell,
)
from src.bg_nlp.phonetic.tables import DZE, DZH


@pytest.fixture
def transcriber():
    return BulgarianPhoneticTranscriber()


class TestGraphemeToPhone:
    """Single letters."""

    @pytest.mark.parametrize("letter,stressed,unstressed", [
        ("а", "a", "ɐ"),
        ("о", "ɔ", "o"),
        ("у", "u", "o"),
        ("ъ", "ɤ", "ɐ"),
        ("ю", "ju", "jo"),
        ("я", "ja", "jɐ"),
        ("е", "ɛ", "ɛ"),
        ("и", "i", "i"),
    ])
    def test_vowels(self, letter, stressed, unstressed):
        converter = GraphemeToPhone()
        assert converter.convert(letter, True) == stressed
        assert converter.convert(letter, False) == unstressed

    def test_contextual_consonants(self):
        converter = GraphemeToPhone()
        assert converter.convert("л", True) == "l"
        assert converter.convert("л", False) == "ɫ"
        assert converter.convert("н", True) == "ŋ"
        assert converter.convert("н", False) == "n"

    @pytest.mark.parametrize("letter,linked,plain", [
        ("ц", "t͡s", "ts"),
        ("ч", "t͡ʃ", "tʃ"),
        (DZH, "d͡ʒ", "dʒ"),
        (DZE, "d͡z", "dz"),
    ])
    def test_affricates_follow_link_setting(self, letter, linked, plain):
        for flag in (True, False):
            assert GraphemeToPhone(links=True).convert(letter, flag) == linked
            assert GraphemeToPhone(links=False).convert(letter, flag) == plain

    @pytest.mark.parametrize("letter,expected", [("щ", "ʃt"), ("ь", "j"), ("х", "x"), ("й", "j")])
    def test_plain_letters(self, letter, expected):
        assert GraphemeToPhone().convert(letter) == expected

    @pytest.mark.parametrize("symbol", ["!", "ʃ", "w", "7"])
    def test_unmapped_input_passes_through(self, symbol):
        assert GraphemeToPhone().convert(symbol) == symbol

    def test_context_flag(self):
        assert context_flag("лиска", 0, False) is True
        assert context_flag("бал", 2, True) is False
        assert context_flag("банка", 2, False) is True
        assert context_flag("банка", 1, True) is True


class TestSingleWord:
    """Whole-word transcription with known stress."""

    @pytest.mark.parametrize("word,stress,expected", [
        ("череша", 3, "t͡ʃɛˈrɛʃɐ"),
        ("вестник", 1, "ˈvɛsnik"),
        ("вестник", 5, "vɛsˈnik"),
        ("банка", 1, "ˈbaŋkɐ"),
        ("лале", 1, "ˈɫalɛ"),
        ("апартамент", 5, "ɐpɐrˈtamɛnt"),
    ])
    def test_transcribe(self, transcriber, word, stress, expected):
        assert transcriber.transcribe(word, StressSpec(first=stress)) == expected

    def test_without_tie_bars(self):
        transcriber = BulgarianPhoneticTranscriber(TranscriptionConfig(links=False))
        assert transcriber.transcribe("череша", StressSpec(first=3)) == "tʃɛˈrɛʃɐ"

    def test_single_vowel_word_has_no_mark(self, transcriber):
        assert transcriber.transcribe("град", StressSpec(first=2)) == "grat"

    def test_devoicing_suppressed_by_context(self, transcriber):
        assert transcriber.transcribe("град", StressSpec(first=2), WordContext(devoice=False)) == "grad"

    def test_compound_part_keeps_mark(self, transcriber):
        assert transcriber.transcribe("най", StressSpec(first=1), WordContext(dashed=True)) == "ˈnaj"

    def test_secondary_single_stress(self, transcriber):
        assert transcriber.transcribe("череша", StressSpec(first=3), primary=False) == "t͡ʃɛˌrɛʃɐ"

    def test_two_stresses(self, transcriber):
        spec = StressSpec(first=7, second=2, second_primary=False)
        assert transcriber.transcribe("светлосин", spec) == "ˌsfɛtɫoˈsin"

    def test_dzh_is_one_sound(self, transcriber):
        assert transcriber.transcribe("джоб", StressSpec(first=2)) == "d͡ʒɔp"

    def test_word_initial_dze(self, transcriber):
        assert transcriber.transcribe("дзифт", StressSpec(first=2)) == "d͡zift"

    def test_loan_word_semivowel(self, transcriber):
        assert transcriber.transcribe("уеб", StressSpec(first=1)) == "wɛp"

    def test_loan_prefixes_are_configurable(self):
        transcriber = BulgarianPhoneticTranscriber(TranscriptionConfig(loan_prefixes=[]))
        assert "w" not in transcriber.transcribe("уеб", StressSpec(first=1))

    def test_loan_word_semivowel_is_not_a_stress_candidate(self, transcriber):
        assert transcriber.stress_candidates("уиски") == [1, 4]
        assert transcriber.stress_candidates("Уеб") == [1]
        assert transcriber.stress_candidates("ухо") == [0, 2]

    def test_unstressed_word(self, transcriber):
        assert transcriber.transcribe("като") == "kɐto"

    def test_prepare(self, transcriber):
        assert spell(transcriber.prepare("изток")) == "исток"
        assert spell(transcriber.prepare("град", WordContext(devoice=False))) == "град"


class TestStressSpec:
    """Stress value object."""

    def test_positions(self):
        assert StressSpec().positions == ()
        assert StressSpec(first=3).positions == (3,)
        assert StressSpec(first=7, second=2).positions == (7, 2)

    def test_second_requires_first(self):
        with pytest.raises(ValueError):
            StressSpec(second=2)
