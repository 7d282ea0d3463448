"""
Grapheme to IPA Conversion

Maps one normalized letter to its IPA symbol(s). The boolean flag passed
with each letter means different things for different letters:

- а, о, у, ъ, ю, я: the vowel is stressed
- л: the next letter is 'и' or 'е' (plain [l] instead of velarized [ɫ])
- н: the next letter is 'к' or 'г' (velar nasal [ŋ])

Use context_flag() to compute the right flag for a position in a word.
"""

from typing import Sequence

from .tables import (
    AFFRICATES,
    CONTEXTUAL_CONSONANTS,
    FRONT_VOWELS,
    PLAIN_LETTERS,
    REDUCIBLE_VOWELS,
    VELAR_STOPS,
)


class GraphemeToPhone:
    """
    Letter-level IPA converter.

    Args:
        links: Write affricates with the tie bar (t͡s) instead of plain (ts)
    """

    def __init__(self, links: bool = True):
        self.links = links

    def convert(self, letter: str, flag: bool = False) -> str:
        """
        Convert one letter to IPA.

        Characters without a mapping (punctuation, Latin letters, symbols
        that are already IPA) are returned unchanged.

        Example:
            >>> GraphemeToPhone().convert("а", True)
            'a'
            >>> GraphemeToPhone().convert("а", False)
            'ɐ'
        """
        if letter in REDUCIBLE_VOWELS:
            stressed, unstressed = REDUCIBLE_VOWELS[letter]
            return stressed if flag else unstressed

        if letter in CONTEXTUAL_CONSONANTS:
            when_set, when_unset = CONTEXTUAL_CONSONANTS[letter]
            return when_set if flag else when_unset

        if letter in AFFRICATES:
            linked, plain = AFFRICATES[letter]
            return linked if self.links else plain

        return PLAIN_LETTERS.get(letter, letter)


def context_flag(letters: Sequence[str], position: int, stressed: bool) -> bool:
    """
    Flag to pass to GraphemeToPhone.convert() for ``letters[position]``.

    For 'л' and 'н' the flag comes from the following letter; for every
    other letter it is the stress flag.
    """
    letter = letters[position]
    following = letters[position + 1] if position + 1 < len(letters) else ""

    if letter == "л":
        return following in FRONT_VOWELS
    if letter == "н":
        return following in VELAR_STOPS
    return stressed
