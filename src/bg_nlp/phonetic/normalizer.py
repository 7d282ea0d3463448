"""
Phonotactic Normalization

Rewrites a word into the letters it is actually pronounced with, before any
IPA mapping happens:

- Word-final devoicing of obstruents (град -> грат)
- Deletion of 'т'/'д' inside consonant clusters (вестник -> весник)
- Regressive voicing assimilation inside clusters (изток -> исток)

All functions work on position-tagged graphemes and return new tuples, so
stress positions stay attached to the vowels they were given for.
"""

from typing import List, Sequence
from logging import getLogger

from .graphemes import Voicing, counterpart, is_vowel, voicing_class
from .types import Grapheme, GraphemeSeq, replace_letter, spell, to_graphemes
from .tables import DZH

logger = getLogger(__name__)

# Consonants dropped between two other consonants, unless followed by 'р'
_DROPPABLE_STOPS = frozenset("тд")


def devoice_final(word: Sequence[Grapheme]) -> GraphemeSeq:
    """
    Devoice the last letter of the word if it is a voiced obstruent.

    Trailing punctuation is skipped, so "град," devoices like "град".
    The "дж" placeholder devoices to 'ч'.
    """
    graphemes = list(word)
    for position in range(len(graphemes) - 1, -1, -1):
        letter = graphemes[position].letter
        if not letter.isalpha():
            continue
        if voicing_class(letter) is Voicing.VOICED:
            graphemes[position] = replace_letter(
                graphemes[position], counterpart(letter, Voicing.VOICELESS)
            )
        break
    return tuple(graphemes)


def assimilate(cluster: Sequence[Grapheme]) -> GraphemeSeq:
    """
    Regressive voicing assimilation over one consonant cluster.

    After the fixed "св" -> "сф" exception, the cluster is scanned right to
    left and every obstruent takes the voicing of the obstruent after it.
    The new voicing keeps propagating leftwards. 'в' neither voices nor
    devoices the letter before it, and sonorants break the chain.

    Example:
        >>> spell(assimilate(to_graphemes("зк")))
        'ск'
        >>> spell(assimilate(to_graphemes("тб")))
        'дб'
    """
    letters = list(cluster)

    for i in range(len(letters) - 1):
        if letters[i].letter == "с" and letters[i + 1].letter == "в":
            letters[i + 1] = replace_letter(letters[i + 1], "ф")

    next_type = Voicing.NEITHER
    for i in range(len(letters) - 1, -1, -1):
        original = letters[i].letter
        own_type = voicing_class(original)

        if (own_type is not next_type
                and own_type is not Voicing.NEITHER
                and next_type is not Voicing.NEITHER):
            replacement = counterpart(original, next_type)
            if replacement is not None:
                letters[i] = replace_letter(letters[i], replacement)
                own_type = next_type

        next_type = Voicing.NEITHER if original == "в" else own_type

    return tuple(letters)


def assimilate_text(cluster: str) -> str:
    """String convenience wrapper around assimilate()."""
    return spell(assimilate(to_graphemes(cluster))).replace(DZH, "дж")


def analyze_cluster(cluster: Sequence[Grapheme]) -> GraphemeSeq:
    """
    Simplify and assimilate one consonant cluster.

    'щ' is treated as "шт" while the rules run, so its 'т' can be dropped
    like any other; a surviving "шт" is written back as 'щ'.
    """
    expanded: List[Grapheme] = []
    for grapheme in cluster:
        if grapheme.letter == "щ":
            expanded.append(Grapheme("ш", grapheme.source))
            expanded.append(Grapheme("т", grapheme.source))
        else:
            expanded.append(grapheme)

    if len(expanded) > 2:
        last = len(expanded) - 1
        expanded = [
            grapheme for i, grapheme in enumerate(expanded)
            if not (0 < i < last
                    and grapheme.letter in _DROPPABLE_STOPS
                    and expanded[i + 1].letter != "р")
        ]

    if len(expanded) > 1:
        expanded = list(assimilate(expanded))

    return _contract_sht(expanded)


def _contract_sht(cluster: Sequence[Grapheme]) -> GraphemeSeq:
    contracted = []
    i = 0
    while i < len(cluster):
        if (cluster[i].letter == "ш" and i + 1 < len(cluster)
                and cluster[i + 1].letter == "т"):
            contracted.append(Grapheme("щ", cluster[i].source))
            i += 2
        else:
            contracted.append(cluster[i])
            i += 1
    return tuple(contracted)


class PhonotacticNormalizer:
    """
    Spells a lowercase word the way it is pronounced.

    Usage:
        normalizer = PhonotacticNormalizer()
        graphemes = normalizer.normalize(to_graphemes("изток"))
        spell(graphemes)  # "исток"
    """

    def normalize(self, word: Sequence[Grapheme], devoice: bool = True) -> GraphemeSeq:
        """
        Apply devoicing, cluster simplification and assimilation.

        Args:
            word: Position-tagged lowercase graphemes
            devoice: Apply word-final devoicing (sandhi may switch it off)

        Returns:
            New grapheme tuple; vowels keep their source indices
        """
        graphemes = devoice_final(word) if devoice else tuple(word)

        output: List[Grapheme] = []
        cluster: List[Grapheme] = []
        for grapheme in graphemes:
            if is_vowel(grapheme.letter):
                output.extend(analyze_cluster(cluster))
                output.append(grapheme)
                cluster = []
            else:
                cluster.append(grapheme)
        output.extend(analyze_cluster(cluster))

        logger.debug(f"Normalized '{spell(word)}' -> '{spell(output)}'")
        return tuple(output)

    def normalize_text(self, word: str, devoice: bool = True) -> str:
        """Normalize a plain lowercase string; "дж" stays spelled out."""
        return spell(self.normalize(to_graphemes(word), devoice)).replace(DZH, "дж")
