"""
Phonetic Transcription Data Types

Position-tagged graphemes plus the immutable value objects threaded through
the transcription pipeline: where the stress falls (StressSpec), how the
current word sits in its surroundings (WordContext), and engine-wide
configuration (TranscriptionConfig).

Graphemes carry the index they had in the caller's spelling, so every
rewrite (deletions, digraph collapse, affricate merge) keeps stress
positions valid without manual index bookkeeping.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .tables import DEFAULT_CLITICS, DEFAULT_LOAN_PREFIXES, DZH


@dataclass(frozen=True)
class Grapheme:
    """
    One letter of a word being transcribed.

    Attributes:
        letter: Lowercase Cyrillic letter, an internal affricate placeholder,
                or any other character that passes through untouched
        source: Index of the letter in the caller's spelling (for a
                placeholder, the index of its first letter)
    """
    letter: str
    source: int


GraphemeSeq = Tuple[Grapheme, ...]


def to_graphemes(word: str) -> GraphemeSeq:
    """
    Tag each letter of ``word`` with its index, collapsing "дж" to one grapheme.

    Example:
        >>> [g.letter for g in to_graphemes("джоб")]
        ['џ', 'о', 'б']
    """
    graphemes = []
    i = 0
    while i < len(word):
        if word.startswith("дж", i):
            graphemes.append(Grapheme(DZH, i))
            i += 2
        else:
            graphemes.append(Grapheme(word[i], i))
            i += 1
    return tuple(graphemes)


def spell(graphemes: Iterable[Grapheme]) -> str:
    """Join grapheme letters back into a string (placeholders kept)."""
    return "".join(g.letter for g in graphemes)


def replace_letter(grapheme: Grapheme, letter: str) -> Grapheme:
    return Grapheme(letter, grapheme.source)


def find_source(graphemes: Sequence[Grapheme], source: int) -> Optional[int]:
    """Position of the grapheme that originated at ``source``, if it survived."""
    for position, grapheme in enumerate(graphemes):
        if grapheme.source == source:
            return position
    return None


class StressSpec(BaseModel):
    """
    Stressed vowel positions of one word, in the caller's spelling.

    ``first`` of -1 means the word is unstressed (short grammatical words).
    ``second`` is the optional second stress of a compound; it is marked as
    primary or secondary according to ``second_primary``.
    """

    first: int = Field(
        default=-1,
        ge=-1,
        description="Index of the (primary) stressed vowel, -1 for none",
        examples=[3, -1],
    )

    second: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the second stressed vowel in compounds",
        examples=[None, 2],
    )

    second_primary: bool = Field(
        default=True,
        description="Mark the second stress as primary (ˈ) instead of secondary (ˌ)",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _second_needs_first(self) -> "StressSpec":
        if self.second is not None and self.first < 0:
            raise ValueError("second stress given without a first stress")
        return self

    @property
    def is_stressed(self) -> bool:
        return self.first >= 0

    @property
    def positions(self) -> Tuple[int, ...]:
        """All stressed indices, in the order given."""
        if not self.is_stressed:
            return ()
        if self.second is None:
            return (self.first,)
        return (self.first, self.second)


UNSTRESSED = StressSpec()


class WordContext(BaseModel):
    """
    How a single word is being transcribed.

    Built fresh for every call and passed down explicitly; no pipeline stage
    keeps per-call state on shared objects.
    """

    devoice: bool = Field(
        default=True,
        description="Apply word-final devoicing (False when sandhi overrides it)",
    )

    dashed: bool = Field(
        default=False,
        description="Word is one part of a hyphenated compound and keeps its stress mark",
    )

    in_passage: bool = Field(
        default=False,
        description="Word is being transcribed as part of a multi-word passage",
    )

    destressed: bool = Field(
        default=False,
        description="Word is a clitic leaning on a content word and carries no stress",
    )

    use_lookup: bool = Field(
        default=True,
        description="Allow the stress-lookup collaborator to be consulted",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


class TranscriptionConfig(BaseModel):
    """
    Engine-wide settings, replaced as a whole value between calls.
    """

    links: bool = Field(
        default=True,
        description="Write affricates with the tie bar (t͡s, t͡ʃ, d͡ʒ, d͡z)",
    )

    clitics: FrozenSet[str] = Field(
        default=DEFAULT_CLITICS,
        description="Words pronounced without stress next to a content word",
    )

    loan_prefixes: Tuple[str, ...] = Field(
        default=DEFAULT_LOAN_PREFIXES,
        description="Word beginnings after which the initial 'у' is read as [w]",
        examples=[("уеб", "уест")],
    )

    lookup_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for the online stress lookup",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("clitics", mode="before")
    @classmethod
    def _normalize_clitics(cls, value):
        return frozenset(_clean_words(value))

    @field_validator("loan_prefixes", mode="before")
    @classmethod
    def _normalize_prefixes(cls, value):
        return tuple(_clean_words(value))


def _clean_words(value) -> list:
    """Lowercase and strip a collection of words, dropping blanks."""
    if isinstance(value, str):
        value = [value]
    if not hasattr(value, "__iter__"):
        raise ValueError(f"expected a collection of words, got {value!r}")
    words = []
    for word in value:
        if not isinstance(word, str):
            raise ValueError(f"expected a word, got {word!r}")
        word = word.strip().lower()
        if word:
            words.append(word)
    return words
