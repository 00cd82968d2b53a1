"""Public API functions for text-similarity-diff.

This module provides the user-facing functions: similarity, diff,
similarity_score, is_similar and consistency_score.  Each call creates a
fresh TextComparator (or ConsistencyScorer) so no state survives between
calls.
"""

from __future__ import annotations

from collections.abc import Sequence

from text_similarity_diff.algorithm.config import TextDiffConfig
from text_similarity_diff.comparator import TextComparator
from text_similarity_diff.result import SimilarityResult, TextDiff
from text_similarity_diff.scorer import DEFAULT_METRIC, ConsistencyScorer, check_metric

__all__ = [
    "consistency_score",
    "diff",
    "is_similar",
    "similarity",
    "similarity_score",
]


def similarity(
    text1: str,
    text2: str,
    config: TextDiffConfig | None = None,
) -> SimilarityResult:
    """Compute every similarity metric between two texts.

    Args:
        text1:  First text.
        text2:  Second text.
        config: Engine thresholds.  Defaults to ``TextDiffConfig()`` when None.

    Returns:
        A ``SimilarityResult`` with all fourteen metrics populated.
    """
    return TextComparator(config=config).similarity(text1, text2)


def diff(
    text1: str,
    text2: str,
    config: TextDiffConfig | None = None,
) -> TextDiff:
    """Compute the structured difference turning ``text1`` into ``text2``.

    Args:
        text1:  Original text.
        text2:  Changed text.
        config: Engine thresholds.  Defaults to ``TextDiffConfig()`` when None.

    Returns:
        A ``TextDiff`` with word, sentence and character-level changes.
    """
    return TextComparator(config=config).diff(text1, text2)


def similarity_score(
    text1: str,
    text2: str,
    metric: str = DEFAULT_METRIC,
    config: TextDiffConfig | None = None,
) -> float:
    """Return a single ratio metric for two texts.

    Args:
        text1:  First text.
        text2:  Second text.
        metric: Name of a ``SimilarityResult`` ratio field.  Defaults to
                ``"normalized_levenshtein"``.
        config: Engine thresholds.

    Returns:
        A float in [0.0, 1.0].

    Raises:
        ValueError: When ``metric`` is not a ratio field.
    """
    check_metric(metric)
    result = similarity(text1, text2, config=config)
    return float(getattr(result, metric))


def is_similar(
    text1: str,
    text2: str,
    threshold: float = 0.85,
    metric: str = DEFAULT_METRIC,
    config: TextDiffConfig | None = None,
) -> bool:
    """Return True if ``metric`` for the two texts is at or above ``threshold``.

    Args:
        text1:     First text.
        text2:     Second text.
        threshold: Minimum score, in [0.0, 1.0].  Defaults to 0.85.
        metric:    Name of a ``SimilarityResult`` ratio field.
        config:    Engine thresholds.

    Returns:
        True if ``similarity_score(text1, text2, metric) >= threshold``.
    """
    return similarity_score(text1, text2, metric=metric, config=config) >= threshold


def consistency_score(
    texts: Sequence[str],
    metric: str = DEFAULT_METRIC,
    config: TextDiffConfig | None = None,
) -> float:
    """Return ``max(0, mean - std)`` of ``metric`` over all pairs of ``texts``.

    Args:
        texts:  Samples to compare.
        metric: Name of a ``SimilarityResult`` ratio field.
        config: Engine thresholds.

    Returns:
        A float in [0.0, 1.0].  1.0 for empty and single-text lists.
    """
    return ConsistencyScorer(metric=metric, config=config).compute(texts)
