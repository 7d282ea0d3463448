"""
Syllabification

Splits a Bulgarian word into syllables, one per vowel nucleus:

- The consonants before the first vowel belong to the first syllable.
- Consonants between two vowels are halved: the first half closes the
  earlier syllable, the second half opens the next one. A trailing 'ь' is
  not counted, so "ьо" always stays together.
- Consonants after the last vowel close the last syllable.
- Two vowels at the very start or the very end of a word share a syllable
  (уе-ди-не-ни-я is written уе-ди-не-ния).

"дж" is never split across syllables.
"""

from typing import List, Sequence, Tuple
from logging import getLogger

from .graphemes import is_vowel
from .tables import DZH
from .types import spell, to_graphemes

logger = getLogger(__name__)

Span = Tuple[int, int]


def nucleus_positions(letters: Sequence[str]) -> List[int]:
    """
    Positions of the vowels that start their own syllable.

    A vowel pair at the start of the word counts once (the second vowel),
    and so does a vowel pair at the end (the first vowel).
    """
    positions = [i for i, letter in enumerate(letters) if is_vowel(letter)]

    if len(positions) >= 2 and positions[1] == 1:
        positions.pop(0)

    if (len(positions) >= 2 and len(letters) >= 2
            and is_vowel(letters[-2]) and is_vowel(letters[-1])):
        positions.pop()

    return positions


def syllable_spans(letters: Sequence[str]) -> List[Span]:
    """
    Compute syllables as half-open (start, end) ranges over ``letters``.

    The ranges cover every letter exactly once. A word without vowels has
    no syllables.

    Example:
        >>> syllable_spans("хладилник")
        [(0, 3), (3, 6), (6, 9)]
    """
    nuclei = nucleus_positions(letters)
    if not nuclei:
        return []

    spans = []
    start = 0
    for i, nucleus in enumerate(nuclei):
        if i == len(nuclei) - 1:
            end = len(letters)
        else:
            following = letters[nucleus + 1:nuclei[i + 1]]
            length = len(following)
            if length > 0 and following[-1] == "ь":
                length -= 1
            end = nucleus + 1 + length // 2
        spans.append((start, end))
        start = end

    return spans


class Syllabifier:
    """
    Orthographic syllabification of single words and hyphenated compounds.

    Usage:
        syllabifier = Syllabifier()
        syllabifier.syllabify("хладилник")  # ["хла", "дил", "ник"]
    """

    def syllabify(self, word: str) -> List[str]:
        """
        Split a word into syllables.

        Each part of a hyphenated compound is split on its own; the hyphen
        itself is not part of any syllable.

        Args:
            word: Single Bulgarian word (case-insensitive)

        Returns:
            Lowercase syllables in order; empty list for a word without
            vowels or for multi-word input
        """
        if len(word.split()) > 1:
            logger.warning(f"Expected a single word, got '{word}'; no syllables returned")
            return []

        if "-" in word:
            syllables: List[str] = []
            for part in word.split("-"):
                syllables.extend(self.syllabify(part))
            return syllables

        graphemes = to_graphemes(word.lower())
        letters = [g.letter for g in graphemes]
        syllables = [
            spell(graphemes[start:end]).replace(DZH, "дж")
            for start, end in syllable_spans(letters)
        ]
        logger.debug(f"Syllables of '{word}': {syllables}")
        return syllables
