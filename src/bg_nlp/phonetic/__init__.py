"""
Phonetic Transcription Package

Rule-based Bulgarian Cyrillic to IPA conversion for single words:
phonotactic normalization, syllabification, stress mark placement and
letter-level IPA mapping.

Usage:
    from src.bg_nlp.phonetic import BulgarianPhoneticTranscriber, StressSpec

    transcriber = BulgarianPhoneticTranscriber()
    transcriber.transcribe("череша", StressSpec(first=3))  # "t͡ʃɛˈrɛʃɐ"
"""

from .types import (
    Grapheme,
    GraphemeSeq,
    StressSpec,
    TranscriptionConfig,
    UNSTRESSED,
    WordContext,
    spell,
    to_graphemes,
)
from .graphemes import Voicing, counterpart, is_obstruent, is_sonorant, is_vowel, voicing_class
from .normalizer import PhonotacticNormalizer, analyze_cluster, assimilate, assimilate_text, devoice_final
from .syllabifier import Syllabifier, syllable_spans
from .stress_placer import StressPlacer
from .grapheme_to_phone import GraphemeToPhone, context_flag
from .transcriber import BulgarianPhoneticTranscriber, vowel_positions

__all__ = [
    "BulgarianPhoneticTranscriber",
    "GraphemeToPhone",
    "PhonotacticNormalizer",
    "StressPlacer",
    "Syllabifier",
    "Grapheme",
    "GraphemeSeq",
    "StressSpec",
    "TranscriptionConfig",
    "UNSTRESSED",
    "Voicing",
    "WordContext",
    "analyze_cluster",
    "assimilate",
    "assimilate_text",
    "context_flag",
    "counterpart",
    "devoice_final",
    "is_obstruent",
    "is_sonorant",
    "is_vowel",
    "spell",
    "syllable_spans",
    "to_graphemes",
    "voicing_class",
    "vowel_positions",
]
