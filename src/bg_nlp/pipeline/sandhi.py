"""
Passage Sandhi

Decides how each word of a multi-word passage is pronounced in connected
speech before the words are transcribed one by one:

- Clitics (prepositions, pronouns, auxiliaries) lose their stress next to
  a content word.
- Consonants across a clitic boundary assimilate in voicing
  ("от град" -> "од грат").
- A clitic preposition ending in a voiced consonant keeps it before a vowel
  ("без онзи" -> "без онзи", not "бес онзи"), except "в" and "във".

The processor only plans; the engine transcribes every PassageWord it
returns with the word's own context.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple
from logging import getLogger

from src.bg_nlp.phonetic.graphemes import Voicing, is_obstruent, is_sonorant, is_vowel, voicing_class
from src.bg_nlp.phonetic.normalizer import assimilate
from src.bg_nlp.phonetic.tables import DEVOICING_PREPOSITIONS, DZH
from src.bg_nlp.phonetic.types import WordContext, spell, to_graphemes
from src.bg_nlp.utils.stress_marks import split_punctuation, strip_stress_marks

logger = getLogger(__name__)


@dataclass(frozen=True)
class PassageWord:
    """
    One word of a passage, ready for single-word transcription.

    Attributes:
        text: The word as it is pronounced at its right boundary (tail
              consonants may be rewritten by assimilation)
        context: Devoicing and stress flags for this word
    """
    text: str
    context: WordContext


class SandhiProcessor:
    """
    Cross-word assimilation and clitic destressing.

    Usage:
        sandhi = SandhiProcessor(DEFAULT_CLITICS)
        [w.text for w in sandhi.plan("от град")]   # ["од", "град"]
    """

    def __init__(self, clitics: Iterable[str]):
        """
        Initialize sandhi processor.

        Args:
            clitics: Lowercase words pronounced without stress; an empty
                     collection switches cross-word effects off
        """
        self.clitics: FrozenSet[str] = frozenset(clitics)

    def is_clitic(self, word: str) -> bool:
        """True if ``word`` (ignoring case, stress marks and punctuation) is a clitic."""
        _, bare, _ = split_punctuation(strip_stress_marks(word.lower()))
        return bare in self.clitics

    def plan(self, text: str) -> List[PassageWord]:
        """
        Split a passage on whitespace and decide each word's pronunciation context.

        A clitic is destressed when it leans on a content word: the run of
        clitics it belongs to ("и от", "ако не") has a content word right
        before or after it.

        Args:
            text: Passage, possibly with stress marks from a lookup

        Returns:
            One PassageWord per whitespace-separated token, in order
        """
        words = text.lower().split()
        clitic_flags = [self.is_clitic(word) for word in words]

        planned = []
        for i, word in enumerate(words):
            next_word = words[i + 1] if i + 1 < len(words) else ""
            devoice = True

            if next_word and (clitic_flags[i] or clitic_flags[i + 1]):
                word, devoice = self.boundary(word, next_word, clitic_flags[i])

            context = WordContext(
                devoice=devoice,
                in_passage=True,
                destressed=clitic_flags[i] and _leans_on_content_word(clitic_flags, i),
            )
            planned.append(PassageWord(text=word, context=context))

        logger.debug(f"Sandhi plan for '{text}': {[(w.text, w.context.devoice) for w in planned]}")
        return planned

    def boundary(self, word: str, next_word: str, word_is_clitic: bool) -> Tuple[str, bool]:
        """
        Apply the boundary rules between ``word`` and the word after it.

        Args:
            word: Current lowercase word
            next_word: Following lowercase word (non-empty)
            word_is_clitic: Whether ``word`` is a clitic

        Returns:
            Tuple of (possibly rewritten word, whether final devoicing still applies)
        """
        graphemes = to_graphemes(word)
        bare = strip_stress_marks(word)
        first = next_word[0]
        devoice = True

        if (graphemes and voicing_class(graphemes[-1].letter) is Voicing.VOICED
                and is_vowel(first) and word_is_clitic
                and bare not in DEVOICING_PREPOSITIONS):
            devoice = False

        # "във вода": the final 'в' merges with the next one
        if bare == "във" and first == "в":
            devoice = False

        if is_vowel(first) or is_sonorant(first) or first == "в":
            return word, devoice

        tail_start = len(graphemes)
        while tail_start > 0 and is_obstruent(graphemes[tail_start - 1].letter):
            tail_start -= 1
        tail = graphemes[tail_start:]

        head = []
        for grapheme in to_graphemes(next_word):
            if not is_obstruent(grapheme.letter):
                break
            head.append(grapheme)

        if not tail or not head:
            return word, devoice

        assimilated = assimilate(tail + tuple(head))
        new_tail = spell(assimilated[:len(tail)]).replace(DZH, "дж")
        rewritten = word[:tail[0].source] + new_tail
        if rewritten != word:
            logger.debug(f"Sandhi: '{word} {next_word}' -> '{rewritten} {next_word}'")
        return rewritten, False


def _leans_on_content_word(clitic_flags: List[bool], index: int) -> bool:
    """True if a non-clitic borders the clitic run around ``index``."""
    left = index
    while left > 0 and clitic_flags[left - 1]:
        left -= 1
    right = index
    while right < len(clitic_flags) - 1 and clitic_flags[right + 1]:
        right += 1
    return left > 0 or right < len(clitic_flags) - 1
