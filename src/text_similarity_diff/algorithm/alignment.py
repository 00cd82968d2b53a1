"""Sentence alignment: pairwise similarity matrix plus a pluggable matcher.

Cell ``(i, j)`` of the matrix is the mean of word Jaccard and word cosine
between sentence ``i`` of the first text and sentence ``j`` of the second.
Two matchers satisfy the ``SentenceAligner`` protocol:

- ``GreedySentenceAligner`` (default): two passes.  Pass 1 scans row-major
  and commits any free pair above ``similar_threshold``; pass 2 gives each
  still-unmatched row its best free column if that beats
  ``alignment_floor``.  Not globally optimal; kept for reproducible output.
- ``OptimalSentenceAligner``: Hungarian assignment maximising total
  similarity over pairs above ``alignment_floor``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from text_similarity_diff.algorithm.config import TextDiffConfig
from text_similarity_diff.algorithm.matcher import optimal_assignment
from text_similarity_diff.algorithm.overlap import jaccard_index
from text_similarity_diff.algorithm.vector import tf_cosine
from text_similarity_diff.result import AlignmentType, SentenceAlignment

__all__ = [
    "GreedySentenceAligner",
    "OptimalSentenceAligner",
    "sentence_similarity",
    "similarity_matrix",
]


def sentence_similarity(words1: Sequence[str], words2: Sequence[str]) -> float:
    """Mean of word Jaccard and term-frequency cosine for two word lists."""
    return (jaccard_index(words1, words2) + tf_cosine(words1, words2)) / 2


def similarity_matrix(
    words1: Sequence[Sequence[str]],
    words2: Sequence[Sequence[str]],
) -> np.ndarray:
    """Build the ``(len(words1), len(words2))`` sentence similarity matrix.

    Args:
        words1: Word list of each sentence in the first text.
        words2: Word list of each sentence in the second text.

    Returns:
        float64 matrix of pairwise ``sentence_similarity`` values.
    """
    matrix = np.zeros((len(words1), len(words2)), dtype=np.float64)
    for i, w1 in enumerate(words1):
        for j, w2 in enumerate(words2):
            matrix[i, j] = sentence_similarity(w1, w2)
    return matrix


class GreedySentenceAligner:
    """Two-pass greedy sentence matcher.

    Example::

        aligner = GreedySentenceAligner()
        aligner.align(np.array([[1.0, 0.1], [0.2, 0.5]]))
        # [(0, 0, 1.0, exact), (1, 1, 0.5, different)]
    """

    def __init__(self, config: TextDiffConfig | None = None) -> None:
        self._config = config if config is not None else TextDiffConfig()

    def align(self, matrix: np.ndarray) -> list[SentenceAlignment]:
        """Match rows to columns of a similarity matrix.

        Args:
            matrix: ``(n, m)`` similarity matrix from ``similarity_matrix``.

        Returns:
            Alignments sorted by ``text1_index``; each index used at most once
            per side.
        """
        n, m = matrix.shape
        cfg = self._config
        used1 = [False] * n
        used2 = [False] * m
        alignments: list[SentenceAlignment] = []

        # Pass 1: high-similarity pairs, row-major
        for i in range(n):
            for j in range(m):
                if used2[j]:
                    continue
                sim = float(matrix[i, j])
                if sim > cfg.similar_threshold:
                    kind = (
                        AlignmentType.EXACT
                        if sim > cfg.exact_threshold
                        else AlignmentType.SIMILAR
                    )
                    alignments.append(SentenceAlignment(i, j, sim, kind))
                    used1[i] = True
                    used2[j] = True
                    break

        # Pass 2: best remaining partner for each unmatched row
        for i in range(n):
            if used1[i]:
                continue
            best_j = -1
            best_sim = 0.0
            for j in range(m):
                sim = float(matrix[i, j])
                if not used2[j] and sim > best_sim:
                    best_j = j
                    best_sim = sim
            if best_j != -1 and best_sim > cfg.alignment_floor:
                alignments.append(
                    SentenceAlignment(i, best_j, best_sim, AlignmentType.DIFFERENT)
                )
                used2[best_j] = True

        alignments.sort(key=lambda a: a.text1_index)
        return alignments


class OptimalSentenceAligner:
    """Hungarian sentence matcher labelled with the greedy thresholds."""

    def __init__(self, config: TextDiffConfig | None = None) -> None:
        self._config = config if config is not None else TextDiffConfig()

    def align(self, matrix: np.ndarray) -> list[SentenceAlignment]:
        """Return the maximum-total-similarity matching, sorted by ``text1_index``."""
        cfg = self._config
        alignments: list[SentenceAlignment] = []
        for i, j in optimal_assignment(matrix, cfg.alignment_floor):
            sim = float(matrix[i, j])
            if sim > cfg.exact_threshold:
                kind = AlignmentType.EXACT
            elif sim > cfg.similar_threshold:
                kind = AlignmentType.SIMILAR
            else:
                kind = AlignmentType.DIFFERENT
            alignments.append(SentenceAlignment(i, j, sim, kind))
        return alignments
