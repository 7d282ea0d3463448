"""
Grapheme Classification

Vowel/consonant split and obstruent voicing lookups for Bulgarian Cyrillic.
All functions expect a single lowercase letter (or one of the internal
affricate placeholders) and never fail: unknown characters are simply
consonants of voicing class NEITHER.
"""

from enum import Enum
from typing import Optional

from .tables import (
    SONORANTS,
    VOICED_TO_VOICELESS,
    VOICELESS_TO_VOICED,
    VOWELS,
    UNPAIRED_VOICELESS,
)


class Voicing(str, Enum):
    """Voicing class of a consonant."""
    VOICED = "voiced"
    VOICELESS = "voiceless"
    NEITHER = "neither"


def is_vowel(letter: str) -> bool:
    """True for the eight vowel letters а, и, е, о, я, ъ, у, ю."""
    return letter in VOWELS


def is_sonorant(letter: str) -> bool:
    return letter in SONORANTS


def voicing_class(letter: str) -> Voicing:
    """
    Classify a letter by obstruent voicing.

    Vowels, sonorants and anything outside the pair table are NEITHER.

    Example:
        >>> voicing_class("з")
        <Voicing.VOICED: 'voiced'>
        >>> voicing_class("х")
        <Voicing.VOICELESS: 'voiceless'>
    """
    if letter in VOICED_TO_VOICELESS:
        return Voicing.VOICED
    if letter in VOICELESS_TO_VOICED or letter == UNPAIRED_VOICELESS:
        return Voicing.VOICELESS
    return Voicing.NEITHER


def is_obstruent(letter: str) -> bool:
    return voicing_class(letter) is not Voicing.NEITHER


def counterpart(letter: str, target: Voicing) -> Optional[str]:
    """
    Return the obstruent matching ``letter`` with the requested voicing.

    A letter that already has the target voicing is returned unchanged.
    None means there is no such counterpart ('х' has no voiced partner,
    and non-obstruents have neither).
    """
    current = voicing_class(letter)
    if current is Voicing.NEITHER or target is Voicing.NEITHER:
        return None
    if current is target:
        return letter
    if target is Voicing.VOICED:
        return VOICELESS_TO_VOICED.get(letter)
    return VOICED_TO_VOICELESS.get(letter)
