"""
Stress Mark Placement

Decides where the IPA stress marks go. A mark is written at the start of
the syllable holding the stressed vowel. All positions are in normalized
grapheme coordinates (after devoicing, cluster simplification and affricate
merging), matching the syllable spans they are compared with.
"""

from typing import Optional, Sequence, Tuple

from .syllabifier import Span


class StressPlacer:
    """
    Computes insertion points for primary (ˈ) and secondary (ˌ) marks.

    Example:
        placer = StressPlacer()
        spans = [(0, 2), (2, 4), (4, 6)]          # че-ре-ша
        placer.place_single(spans, 3, vowel_count=3)   # 2
    """

    def place_single(
        self,
        spans: Sequence[Span],
        stressed: Optional[int],
        vowel_count: int,
        dashed: bool = False,
    ) -> Optional[int]:
        """
        Insertion point for a single stress, or None when no mark is written.

        Words with one vowel get no mark unless they are part of a
        hyphenated compound (най-, по-).

        Args:
            spans: Syllable spans of the normalized word
            stressed: Position of the stressed vowel (None for unstressed)
            vowel_count: Number of vowels in the normalized word
            dashed: Word is one part of a hyphenated compound
        """
        if stressed is None or stressed < 0:
            return None
        if vowel_count <= 1 and not dashed:
            return None

        length = 0
        for start, end in spans:
            if length + (end - start) >= stressed:
                return length
            length += end - start
        return None

    def place_double(
        self,
        spans: Sequence[Span],
        first: int,
        second: int,
    ) -> Tuple[Optional[int], Optional[int]]:
        """
        Insertion points for two stresses, in argument order.

        The two positions may be given in either order; each gets the start
        of the first syllable that extends past it.
        """
        first_insert: Optional[int] = None
        second_insert: Optional[int] = None

        length = 0
        for start, end in spans:
            length += end - start
            if first_insert is None and length > first:
                first_insert = start
            elif second_insert is None and length > second:
                second_insert = start

        return first_insert, second_insert
