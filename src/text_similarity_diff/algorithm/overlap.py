"""Set and multiset overlap metrics.

- character_overlap: directional multiset overlap of non-whitespace characters.
- jaccard_index / dice_coefficient: lower-cased word *sets* (duplicates collapse).
- ngram_similarity: Jaccard index of contiguous character n-gram sets.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from text_similarity_diff.algorithm.normalizer import safe_ratio

__all__ = [
    "char_ngrams",
    "character_overlap",
    "dice_coefficient",
    "jaccard_index",
    "ngram_similarity",
    "word_set",
]


def character_overlap(text1: str, text2: str) -> float:
    """Multiset overlap of the non-whitespace characters of two texts.

    ``overlap = sum(min(c1[ch], c2[ch]))`` and the total counts every
    character of ``text1`` plus the characters of ``text2`` that never
    appear in ``text1``.  Characters shared by both texts contribute only
    ``text1``'s count to the total, so the metric is asymmetric:
    ``character_overlap("aab", "ab")`` is 2/3 while the reverse is 1.0.

    Returns:
        Float in [0.0, 1.0]; 0.0 when neither text has a non-space character.
    """
    counts1 = Counter(ch for ch in text1 if not ch.isspace())
    counts2 = Counter(ch for ch in text2 if not ch.isspace())

    overlap = 0
    total = 0
    for ch, count1 in counts1.items():
        overlap += min(count1, counts2[ch])
        total += count1
    for ch, count2 in counts2.items():
        if ch not in counts1:
            total += count2

    return safe_ratio(overlap, total)


def word_set(words: Iterable[str]) -> set[str]:
    """Lower-case and de-duplicate a word list."""
    return {w.lower() for w in words}


def jaccard_index(words1: Iterable[str], words2: Iterable[str]) -> float:
    """``|A & B| / |A | B|`` over lower-cased word sets; 0.0 when both are empty."""
    set1 = word_set(words1)
    set2 = word_set(words2)
    intersection = len(set1 & set2)
    union = len(set1) + len(set2) - intersection
    return safe_ratio(intersection, union)


def dice_coefficient(words1: Iterable[str], words2: Iterable[str]) -> float:
    """``2 |A & B| / (|A| + |B|)`` over lower-cased word sets; 0.0 when both are empty."""
    set1 = word_set(words1)
    set2 = word_set(words2)
    return safe_ratio(2.0 * len(set1 & set2), len(set1) + len(set2))


def char_ngrams(text: str, n: int) -> list[str]:
    """Return every contiguous substring of ``n`` code points, left to right.

    A text shorter than ``n`` has no n-grams.
    """
    if len(text) < n:
        return []
    return [text[i : i + n] for i in range(len(text) - n + 1)]


def ngram_similarity(text1: str, text2: str, n: int) -> float:
    """Jaccard index of the character n-gram sets of two texts.

    Returns:
        Float in [0.0, 1.0]; 0.0 when either text is shorter than ``n``.
    """
    set1 = set(char_ngrams(text1, n))
    set2 = set(char_ngrams(text2, n))
    intersection = len(set1 & set2)
    union = len(set1) + len(set2) - intersection
    return safe_ratio(intersection, union)
