#!/usr/bin/env python3
"""
Bulgarian Phonetic Transcription Engine

Public entry point for Cyrillic to IPA transcription:
1. Stress detection - combining accents in the input, or a stress lookup
2. Passage sandhi - clitic destressing and cross-word assimilation
3. Phonetic transcription - normalization, syllables, stress marks, IPA

A word without known stress is ambiguous, so transcribe() returns one
candidate per vowel. A passage always yields a single transcription.

Usage:
    from src.bg_nlp.pipeline import BulgarianTranscriptionEngine

    engine = BulgarianTranscriptionEngine()
    engine.transcribe_word("череша", 3)   # "t͡ʃɛˈrɛʃɐ"
    engine.transcribe("апартамент")       # four candidates
    engine.transcribe("от град")          # ["od grat"]
"""

import threading
from typing import Iterable, List, NamedTuple, Optional
from logging import getLogger

from src.bg_nlp.phonetic import (
    BulgarianPhoneticTranscriber,
    StressSpec,
    Syllabifier,
    TranscriptionConfig,
    WordContext,
    is_vowel,
)
from src.bg_nlp.phonetic.tables import DZE, DZH
from src.bg_nlp.pipeline.sandhi import SandhiProcessor
from src.bg_nlp.stress_service import OnlineStressService, StressLookup
from src.bg_nlp.utils.stress_marks import find_stress_marks, has_stress_mark, split_punctuation

logger = getLogger(__name__)

UNSTRESSED_INDEX = -1

# Letter pairs accepted by convert_grapheme() for the two affricate digraphs
_DIGRAPHS = {"дж": DZH, "дз": DZE}


class _EngineState(NamedTuple):
    """Everything one call needs, taken from the engine in a single step."""
    config: TranscriptionConfig
    transcriber: BulgarianPhoneticTranscriber
    sandhi: SandhiProcessor


class BulgarianTranscriptionEngine:
    """
    Bulgarian Cyrillic to IPA transcription.

    Configuration (clitics, loan-word prefixes) can be replaced between
    calls from any thread; a call in progress keeps the configuration it
    started with.

    Example:
        with BulgarianTranscriptionEngine(search_website=True) as engine:
            engine.transcribe("хладилник")   # stress from slovored.com
            engine.syllabify("хладилник")    # ["хла", "дил", "ник"]
    """

    def __init__(
        self,
        config: Optional[TranscriptionConfig] = None,
        stress_lookup: Optional[StressLookup] = None,
        search_website: bool = False,
    ):
        """
        Initialize engine.

        Args:
            config: Engine settings. If None, defaults are used.
            stress_lookup: Collaborator that adds stress marks to unstressed
                           words. None disables lookups.
            search_website: Build an OnlineStressService when no
                            stress_lookup is given
        """
        self._lock = threading.RLock()
        self.syllabifier = Syllabifier()
        self._state = self._build_state(config or TranscriptionConfig())

        if stress_lookup is None and search_website:
            stress_lookup = OnlineStressService(timeout=self._state.config.lookup_timeout)
        self.stress_lookup = stress_lookup

        lookup_name = type(stress_lookup).__name__ if stress_lookup else "none"
        logger.info(f"Transcription engine ready (links={self._state.config.links}, lookup={lookup_name})")

    @staticmethod
    def _build_state(config: TranscriptionConfig) -> _EngineState:
        return _EngineState(
            config=config,
            transcriber=BulgarianPhoneticTranscriber(config),
            sandhi=SandhiProcessor(config.clitics),
        )

    def _snapshot(self) -> _EngineState:
        with self._lock:
            return self._state

    @property
    def config(self) -> TranscriptionConfig:
        """Current configuration."""
        return self._snapshot().config

    def _replace_config(self, **changes) -> None:
        with self._lock:
            values = self._state.config.model_dump()
            values.update(changes)
            self._state = self._build_state(TranscriptionConfig.model_validate(values))

    def set_clitics(self, clitics: Iterable[str]) -> None:
        """
        Replace the clitic set.

        An empty collection turns off clitic destressing and cross-word
        assimilation for passages.

        Raises:
            pydantic.ValidationError: If an entry is not a string
        """
        self._replace_config(clitics=clitics)
        logger.info(f"Clitic set replaced ({len(self.config.clitics)} words)")

    def set_loan_prefixes(self, prefixes: Iterable[str]) -> None:
        """
        Replace the loan-word prefixes after which an initial 'у' is read as [w].

        Raises:
            pydantic.ValidationError: If an entry is not a string
        """
        self._replace_config(loan_prefixes=prefixes)
        logger.info(f"Loan-word prefixes replaced: {self.config.loan_prefixes}")

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def transcribe(self, text: str) -> List[str]:
        """
        Transcribe a word or passage with automatic stress detection.

        Stress comes from combining accents in ``text`` (grave or acute),
        otherwise from the stress lookup, otherwise every vowel is tried.

        Args:
            text: One word or a whitespace-separated passage

        Returns:
            One candidate per possible stress position for an ambiguous
            word; a single transcription for a passage, a stressed word or
            a word with at most one vowel.
        """
        state = self._snapshot()

        if len(text.split()) > 1:
            return [self._transcribe_passage(text, state)]

        prefix, word, suffix = split_punctuation(text.strip().lower())
        if not word:
            return [prefix + suffix]

        candidates = self._candidates(word, state, WordContext())
        return [prefix + candidate + suffix for candidate in candidates]

    def transcribe_word(
        self,
        word: str,
        stress: int,
        second_stress: Optional[int] = None,
        primary: bool = True,
    ) -> str:
        """
        Transcribe one word whose stress is known.

        Args:
            word: Single word, hyphenated compounds allowed ("по-добре")
            stress: Index of the stressed vowel, -1 for an unstressed word
            second_stress: Index of a second stressed vowel (compounds)
            primary: Mark the second stress as primary (ˈ) rather than
                     secondary (ˌ)

        Returns:
            IPA transcription. An index that does not point at a vowel is
            logged and the first automatic candidate is returned instead.
        """
        state = self._snapshot()
        if second_stress is None:
            return self._transcribe_single(word, stress, state, WordContext())
        return self._transcribe_double(word, stress, second_stress, primary, state, WordContext())

    def syllabify(self, word: str) -> List[str]:
        """
        Split a word into orthographic syllables.

        Example:
            >>> BulgarianTranscriptionEngine().syllabify("хладилник")
            ['хла', 'дил', 'ник']
        """
        return self.syllabifier.syllabify(word)

    def convert_grapheme(self, letter: str, flag: bool = False) -> str:
        """
        IPA for a single letter.

        ``flag`` is the stress flag for vowels, "followed by и/е" for 'л'
        and "followed by к/г" for 'н'. "дж" and "дз" are accepted as one
        letter.
        """
        letter = letter.lower()
        letter = _DIGRAPHS.get(letter, letter)
        return self._snapshot().transcriber.converter.convert(letter, flag)

    def lookup_stress(self, text: str) -> str:
        """
        Add stress marks to ``text`` with the stress lookup.

        Returns ``text`` unchanged when lookups are disabled or fail.
        """
        if self.stress_lookup is None:
            logger.warning("This engine has no stress lookup; returning the text unchanged")
            return text
        return self.stress_lookup.lookup(text)

    get_stressed = lookup_stress

    def close(self):
        """Close the stress lookup."""
        if self.stress_lookup is not None:
            self.stress_lookup.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidates(self, word: str, state: _EngineState, context: WordContext) -> List[str]:
        """
        All transcriptions of a single lowercase word with unknown stress.

        Stress marks in ``word`` are honoured first; the stress lookup is
        consulted at most once per word.
        """
        bare, marks = find_stress_marks(word)
        if marks:
            if context.destressed:
                return [self._transcribe_single(bare, UNSTRESSED_INDEX, state, context)]
            if len(marks) == 1:
                return [self._transcribe_single(bare, marks[0], state, context)]
            return [self._transcribe_double(bare, marks[0], marks[1], True, state, context)]

        vowels = state.transcriber.stress_candidates(word)

        if (context.use_lookup and not context.in_passage
                and self.stress_lookup is not None and len(vowels) > 1):
            stressed = self.stress_lookup.lookup(word)
            stressed_bare, found = find_stress_marks(stressed.lower())
            if found and stressed_bare == word and all(index in vowels for index in found):
                return self._candidates(stressed.lower(), state, context.model_copy(update={"use_lookup": False}))
            logger.debug(f"No usable stress for '{word}' from lookup ('{stressed}')")

        if context.destressed or not vowels:
            return [self._transcribe_single(word, UNSTRESSED_INDEX, state, context)]

        if context.in_passage:
            vowels = vowels[:1]
        return [self._transcribe_single(word, index, state, context) for index in vowels]

    def _fallback(self, word: str, state: _EngineState, context: WordContext) -> str:
        return self._candidates(word.lower(), state, context.model_copy(update={"use_lookup": False}))[0]

    def _is_valid_stress(self, word: str, index: int, context: WordContext) -> bool:
        if 0 <= index < len(word) and is_vowel(word[index].lower()):
            return True
        if 0 <= index < len(word):
            message = f"{index} is not an index of a vowel in word '{word}'"
        else:
            message = f"Index {index} is out of bounds for word '{word}'"
        # Lookup answers inside passages point at consonants every once in a while
        if context.in_passage:
            logger.debug(message)
        else:
            logger.warning(message)
        return False

    def _redirect_passage(self, word: str, state: _EngineState) -> str:
        logger.warning(f"Expected a single word, got '{word}'; transcribing it as a passage")
        return self._transcribe_passage(word, state)

    def _transcribe_single(
        self,
        word: str,
        stress: int,
        state: _EngineState,
        context: WordContext,
        primary: bool = True,
    ) -> str:
        if len(word.split()) > 1:
            return self._redirect_passage(word, state)

        if stress != UNSTRESSED_INDEX and not self._is_valid_stress(word, stress, context):
            return self._fallback(word, state, context)

        if "-" in word:
            return self._transcribe_compound(word, [stress], True, state, context)

        spec = StressSpec(first=stress) if stress >= 0 else StressSpec()
        return state.transcriber.transcribe(word, spec, context, primary)

    def _transcribe_double(
        self,
        word: str,
        stress: int,
        second_stress: int,
        primary: bool,
        state: _EngineState,
        context: WordContext,
    ) -> str:
        if len(word.split()) > 1:
            return self._redirect_passage(word, state)

        if not (self._is_valid_stress(word, stress, context)
                and self._is_valid_stress(word, second_stress, context)):
            return self._fallback(word, state, context)

        if stress == second_stress:
            return self._transcribe_single(word, stress, state, context)

        if "-" in word:
            return self._transcribe_compound(word, [stress, second_stress], primary, state, context)

        spec = StressSpec(first=stress, second=second_stress, second_primary=primary)
        return state.transcriber.transcribe(word, spec, context)

    def _transcribe_compound(
        self,
        word: str,
        stresses: List[int],
        primary: bool,
        state: _EngineState,
        context: WordContext,
    ) -> str:
        """
        Transcribe each part of a hyphenated word on its own.

        Each part gets the stresses that fall inside it. A stressed part is
        marked even when it has a single vowel ("най-", "по-"). The second
        of two stresses is primary or secondary per ``primary``.
        """
        dashed = context.model_copy(update={"dashed": True})
        transcribed = []
        offset = 0

        for part in word.split("-"):
            inside = [
                (order, index - offset)
                for order, index in enumerate(stresses)
                if index >= 0 and offset <= index < offset + len(part)
            ]

            if not inside:
                transcribed.append(state.transcriber.transcribe(part, StressSpec(), context))
            elif len(inside) == 1:
                order, local = inside[0]
                part_primary = primary if order == 1 else True
                transcribed.append(
                    state.transcriber.transcribe(part, StressSpec(first=local), dashed, part_primary)
                )
            else:
                (_, first), (_, second) = inside
                spec = StressSpec(first=first, second=second, second_primary=primary)
                transcribed.append(state.transcriber.transcribe(part, spec, dashed))

            offset += len(part) + 1

        return "-".join(transcribed)

    def _transcribe_passage(self, text: str, state: _EngineState) -> str:
        """
        Transcribe a multi-word passage into one string.

        The whole passage is looked up at once; every word then uses its
        first candidate.
        """
        text = text.lower()
        if self.stress_lookup is not None and not has_stress_mark(text):
            text = self.stress_lookup.lookup(text).lower()

        transcribed = []
        for planned in state.sandhi.plan(text):
            prefix, word, suffix = split_punctuation(planned.text)
            ipa = self._candidates(word, state, planned.context)[0] if word else ""
            transcribed.append(prefix + ipa + suffix)

        return " ".join(transcribed)
