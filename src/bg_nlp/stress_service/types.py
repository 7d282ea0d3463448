"""
Type definitions for stress lookup.

Defines the collaborator interface the transcription engine calls to find
stressed vowels, and the record stored per word in the offline dictionary.
"""

from typing import List, Protocol, TypedDict, runtime_checkable


class StressEntryDict(TypedDict):
    """
    Dictionary representation of one word in the LMDB stress dictionary.

    Example:
        {"stress": [3]}            # черѐша
        {"stress": [2, 7]}         # свѐтлосѝн
    """
    stress: List[int]  # Character indices of the stressed vowels (0-indexed)


@runtime_checkable
class StressLookup(Protocol):
    """
    Anything that can add stress marks to Bulgarian text.

    ``lookup`` returns the text with a combining grave or acute accent right
    after every stressed vowel it knows about. It never raises for a word it
    cannot stress: the input comes back unchanged instead.
    """

    def lookup(self, text: str) -> str:
        ...

    def close(self) -> None:
        ...


class StressLookupError(RuntimeError):
    """A stress lookup could not be completed (transport or parse failure)."""
