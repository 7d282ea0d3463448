"""
Bulgarian Transcription Pipeline Package

Public engine for Cyrillic to IPA transcription:
- Stress detection (accent marks, stress lookup, or all candidates)
- Passage sandhi (clitic destressing, cross-word assimilation)
- Phonetic transcription (IPA)
"""

from .pipeline import BulgarianTranscriptionEngine, UNSTRESSED_INDEX
from .sandhi import PassageWord, SandhiProcessor

__all__ = [
    'BulgarianTranscriptionEngine',
    'PassageWord',
    'SandhiProcessor',
    'UNSTRESSED_INDEX',
]
