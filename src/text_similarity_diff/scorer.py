"""ConsistencyScorer: measures how stable a set of texts is under one metric.

The consistency score quantifies how much a text generator drifts across
repeated samples.  It penalizes both low average similarity (samples differ)
and high variance (samples are erratic).

Formula:
    pairwise = [getattr(comparator.similarity(texts[i], texts[j]), metric)
                for all (i, j) pairs with i < j]
    score = max(0.0, mean(pairwise) - std(pairwise))

This means:
- Identical texts: mean=1.0, std=0.0 -> score=1.0
- Consistently mediocre: mean=0.6, std=0.0 -> score=0.6
- Erratic (high variance): mean=0.6, std=0.4 -> score=max(0, 0.2)=0.2
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from text_similarity_diff.algorithm.config import TextDiffConfig
from text_similarity_diff.comparator import TextComparator
from text_similarity_diff.result import SimilarityResult

__all__ = ["DEFAULT_METRIC", "ConsistencyScorer", "check_metric"]

logger = logging.getLogger(__name__)

DEFAULT_METRIC = "normalized_levenshtein"


def check_metric(metric: str) -> str:
    """Return ``metric`` if it names a ratio field of ``SimilarityResult``.

    Raises:
        ValueError: When ``metric`` is not one of ``SimilarityResult.RATIO_FIELDS``.
    """
    if metric not in SimilarityResult.RATIO_FIELDS:
        msg = (
            f"metric must be one of {', '.join(SimilarityResult.RATIO_FIELDS)}, "
            f"got {metric!r}"
        )
        raise ValueError(msg)
    return metric


class ConsistencyScorer:
    """Measures stability across multiple text samples.

    Creates a single ``TextComparator`` reused for every pairwise comparison.

    Example::

        from text_similarity_diff.scorer import ConsistencyScorer

        scorer = ConsistencyScorer()
        scorer.compute(["The cat sat.", "The cat sat.", "The cat sat."])  # 1.0
        scorer.compute(["alpha", "The cat sat.", "zzz"])                 # < 0.5
    """

    def __init__(
        self,
        metric: str = DEFAULT_METRIC,
        config: TextDiffConfig | None = None,
    ) -> None:
        """Initialise the scorer.

        Args:
            metric: Name of the ``SimilarityResult`` ratio field to aggregate.
            config: Engine thresholds forwarded to ``TextComparator``.

        Raises:
            ValueError: When ``metric`` is not a ratio field.
        """
        self._metric = check_metric(metric)
        self._comparator = TextComparator(config=config)

    @property
    def metric(self) -> str:
        """The aggregated metric name."""
        return self._metric

    def compute(self, texts: Sequence[str]) -> float:
        """Compute the consistency score for a list of texts.

        Args:
            texts: Samples to compare.  All C(N, 2) unique pairs are scored;
                a pair of texts repeated across samples is compared once.

        Returns:
            A float in [0.0, 1.0]; 1.0 for fewer than two texts.
        """
        n = len(texts)
        if n <= 1:
            return 1.0

        # Keyed in order: character_overlap is asymmetric
        seen: dict[tuple[str, str], float] = {}
        rows, cols = np.triu_indices(n, k=1)
        scores = np.empty(len(rows), dtype=float)
        for k, (i, j) in enumerate(zip(rows, cols, strict=True)):
            key = (texts[i], texts[j])
            if key not in seen:
                result = self._comparator.similarity(*key)
                seen[key] = getattr(result, self._metric)
            scores[k] = seen[key]

        mean = float(scores.mean())
        std = float(scores.std())
        logger.debug(
            "consistency over %d texts, %d distinct pairs (%s): "
            "mean=%.4f std=%.4f",
            n,
            len(seen),
            self._metric,
            mean,
            std,
        )
        return float(np.clip(mean - std, 0.0, 1.0))
