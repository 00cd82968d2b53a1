"""Structural similarity: sentence count and mean sentence length closeness."""

from __future__ import annotations

from collections.abc import Sequence

from text_similarity_diff.algorithm.normalizer import safe_ratio

__all__ = ["average_sentence_length", "structural_similarity"]


def average_sentence_length(sentences: Sequence[str]) -> float:
    """Mean number of whitespace-separated fields per sentence (0.0 if none)."""
    total_words = sum(len(s.split()) for s in sentences)
    return safe_ratio(total_words, len(sentences))


def structural_similarity(
    sentences1: Sequence[str],
    sentences2: Sequence[str],
) -> float:
    """Mean of sentence-count closeness and average-length closeness.

    Formula::

        count_sim  = 1 - |n1 - n2| / max(n1, n2)
        length_sim = 1 - |avg1 - avg2| / max(avg1, avg2)
        score      = (count_sim + length_sim) / 2

    Returns:
        Float in [0.0, 1.0]; 0.0 when either side has no sentences.
    """
    n1 = len(sentences1)
    n2 = len(sentences2)
    if n1 == 0 or n2 == 0:
        return 0.0

    count_sim = 1.0 - abs(n1 - n2) / max(n1, n2)

    avg1 = average_sentence_length(sentences1)
    avg2 = average_sentence_length(sentences2)
    # Both averages 0 (only blank sentences) means equal length
    length_sim = 1.0 - safe_ratio(abs(avg1 - avg2), max(avg1, avg2))

    return (count_sim + length_sim) / 2
