"""
Bulgarian Phonetic Transcriber

Single-word transcription from Cyrillic to IPA. Composes the pipeline
stages in order:

1. PhonotacticNormalizer - spell the word as pronounced
2. Loan-word [w] and word-initial "дз" affricate
3. Syllabification of the normalized word
4. StressPlacer - where the ˈ / ˌ marks go
5. GraphemeToPhone - letter by letter IPA

The transcriber expects a single hyphen-free word whose stress positions
have already been validated; hyphenated compounds, stress detection and
multi-word passages are handled by the pipeline engine.

Example:
    transcriber = BulgarianPhoneticTranscriber()
    transcriber.transcribe("череша", StressSpec(first=3))  # "t͡ʃɛˈrɛʃɐ"
"""

from typing import Dict, List, Optional
from logging import getLogger

from .grapheme_to_phone import GraphemeToPhone, context_flag
from .graphemes import is_vowel
from .normalizer import PhonotacticNormalizer
from .stress_placer import StressPlacer
from .syllabifier import syllable_spans
from .tables import DZE, LOAN_SEMIVOWEL, PRIMARY_STRESS, SECONDARY_STRESS
from .types import (
    Grapheme,
    GraphemeSeq,
    StressSpec,
    TranscriptionConfig,
    UNSTRESSED,
    WordContext,
    find_source,
    replace_letter,
    to_graphemes,
)

logger = getLogger(__name__)


def vowel_positions(word: str) -> List[int]:
    """Indices of all vowel letters in ``word`` (case-insensitive)."""
    return [i for i, letter in enumerate(word.lower()) if is_vowel(letter)]


class BulgarianPhoneticTranscriber:
    """
    Transcribes one Bulgarian word with known stress into IPA.

    The transcriber holds no per-call state: everything that depends on the
    word's surroundings arrives in the WordContext argument.
    """

    def __init__(self, config: Optional[TranscriptionConfig] = None):
        """
        Initialize transcriber.

        Args:
            config: Engine settings (tie bars, loan-word prefixes).
                    If None, defaults are used.
        """
        self.config = config or TranscriptionConfig()
        self.normalizer = PhonotacticNormalizer()
        self.placer = StressPlacer()
        self.converter = GraphemeToPhone(links=self.config.links)

    def prepare(self, word: str, context: WordContext = WordContext()) -> GraphemeSeq:
        """
        Turn a spelled word into the graphemes that get converted to IPA.

        Args:
            word: Single word without hyphens or stress marks
            context: Devoicing and compound flags for this word

        Returns:
            Normalized, position-tagged graphemes
        """
        lowered = word.lower()
        graphemes = self.normalizer.normalize(to_graphemes(lowered), devoice=context.devoice)
        graphemes = self._mark_loan_word(lowered, graphemes)
        return _merge_initial_dze(graphemes)

    def transcribe(
        self,
        word: str,
        stress: StressSpec = UNSTRESSED,
        context: WordContext = WordContext(),
        primary: bool = True,
    ) -> str:
        """
        Convert a word to IPA.

        Args:
            word: Single word without hyphens or stress marks
            stress: Stressed vowel indices in the spelling of ``word``
            context: Devoicing and compound flags for this word
            primary: Mark a single stress as primary (ˈ) or secondary (ˌ)

        Returns:
            IPA transcription string
        """
        graphemes = self.prepare(word, context)
        letters = [g.letter for g in graphemes]
        stressed = [find_source(graphemes, index) for index in stress.positions]
        spans = syllable_spans(letters)

        marks: Dict[int, str] = {}
        if stress.second is None:
            vowel_count = sum(1 for letter in letters if is_vowel(letter))
            insert = self.placer.place_single(
                spans, stressed[0] if stressed else None, vowel_count, context.dashed
            )
            if insert is not None:
                marks[insert] = PRIMARY_STRESS if primary else SECONDARY_STRESS
        elif None not in stressed:
            first, second = self.placer.place_double(spans, stressed[0], stressed[1])
            if second is not None:
                marks[second] = PRIMARY_STRESS if stress.second_primary else SECONDARY_STRESS
            if first is not None:
                marks[first] = PRIMARY_STRESS

        stressed_set = {position for position in stressed if position is not None}
        ipa = []
        for position, letter in enumerate(letters):
            if position in marks:
                ipa.append(marks[position])
            flag = context_flag(letters, position, position in stressed_set)
            ipa.append(self.converter.convert(letter, flag))

        transcription = "".join(ipa)
        logger.debug(f"Transcribed '{word}' {stress.positions} -> [{transcription}]")
        return transcription

    def stress_candidates(self, word: str) -> List[int]:
        """
        Vowel indices of ``word`` that can carry stress.

        The initial 'у' of a loan word is read as [w] and is not a candidate.

        Example:
            >>> BulgarianPhoneticTranscriber().stress_candidates("уиски")
            [1, 4]
        """
        positions = vowel_positions(word)
        if positions and positions[0] == 0 and self._is_loan_word(word.lower()):
            return positions[1:]
        return positions

    def _is_loan_word(self, lowered: str) -> bool:
        return any(lowered.startswith(prefix) for prefix in self.config.loan_prefixes)

    def _mark_loan_word(self, lowered: str, graphemes: GraphemeSeq) -> GraphemeSeq:
        """Replace the initial 'у' of English loan words with [w]."""
        if not graphemes or graphemes[0].letter != "у":
            return graphemes
        if self._is_loan_word(lowered):
            return (replace_letter(graphemes[0], LOAN_SEMIVOWEL),) + graphemes[1:]
        return graphemes


def _merge_initial_dze(graphemes: GraphemeSeq) -> GraphemeSeq:
    """
    Word-initial "дз" is the single affricate of borrowed words (дзифт).

    Elsewhere "дз" is two sounds, as in подземен.
    """
    if len(graphemes) >= 2 and graphemes[0].letter == "д" and graphemes[1].letter == "з":
        return (Grapheme(DZE, graphemes[0].source),) + graphemes[2:]
    return graphemes
