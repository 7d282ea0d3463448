"""
Combining Stress Mark Utilities

Bulgarian dictionaries mark the stressed vowel with a combining grave
(U+0300) or acute (U+0301) accent written right after the vowel:
"черѐша", "чере́ша". These helpers find, strip and insert such marks.

Example:
    >>> find_stress_marks("черѐша")
    ('череша', [3])
    >>> add_stress_marks("череша", [3])
    'черѐша'
"""

from typing import Iterable, List, Tuple


COMBINING_GRAVE = "\u0300"
COMBINING_ACUTE = "\u0301"
STRESS_MARKS = frozenset({COMBINING_GRAVE, COMBINING_ACUTE})

# Characters the online accent dictionary cannot handle in a query
SERVICE_UNSAFE_CHARACTERS = ("—", "„", "“")
SERVICE_PLACEHOLDER = "+"


def has_stress_mark(text: str) -> bool:
    """True if ``text`` contains a combining grave or acute accent."""
    return any(char in STRESS_MARKS for char in text)


def strip_stress_marks(text: str) -> str:
    """Remove every combining grave/acute accent."""
    return "".join(char for char in text if char not in STRESS_MARKS)


def find_stress_marks(text: str) -> Tuple[str, List[int]]:
    """
    Split ``text`` into its unmarked form and the marked letter positions.

    Args:
        text: Text possibly containing combining stress marks

    Returns:
        Tuple of (text without marks, indices into it of the letters that
        carried a mark). A mark with no letter before it is dropped.
    """
    bare: List[str] = []
    positions: List[int] = []
    for char in text:
        if char in STRESS_MARKS:
            if bare and (not positions or positions[-1] != len(bare) - 1):
                positions.append(len(bare) - 1)
            continue
        bare.append(char)
    return "".join(bare), positions


def add_stress_marks(word: str, positions: Iterable[int], mark: str = COMBINING_GRAVE) -> str:
    """
    Insert ``mark`` after each letter index in ``positions``.

    Out-of-range positions are ignored.
    """
    wanted = set(positions)
    result = []
    for i, char in enumerate(word):
        result.append(char)
        if i in wanted:
            result.append(mark)
    return "".join(result)


def encode_for_service(text: str) -> str:
    """
    Prepare text for the accent dictionary URL.

    The three unsupported punctuation marks and all spaces become '+'.
    """
    for char in SERVICE_UNSAFE_CHARACTERS:
        text = text.replace(char, SERVICE_PLACEHOLDER)
    return text.replace(" ", SERVICE_PLACEHOLDER)


def split_punctuation(token: str) -> Tuple[str, str, str]:
    """
    Split a token into (leading punctuation, word, trailing punctuation).

    Stress marks count as part of the word, so "града̀," splits into
    ("", "града̀", ",").
    """
    def is_word_char(char: str) -> bool:
        return char.isalpha() or char in STRESS_MARKS

    start = 0
    while start < len(token) and not is_word_char(token[start]):
        start += 1
    end = len(token)
    while end > start and not is_word_char(token[end - 1]):
        end -= 1
    return token[:start], token[start:end], token[end:]
