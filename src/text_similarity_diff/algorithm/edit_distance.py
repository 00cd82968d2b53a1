"""Levenshtein edit distance over Unicode code points.

The distance is the minimum number of single-element insertions, deletions
and substitutions turning one sequence into the other.  The table is the
classic (n+1) x (m+1) DP whose first row and column equal the index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from text_similarity_diff.algorithm.normalizer import safe_ratio

__all__ = ["levenshtein", "normalized_levenshtein"]


def levenshtein(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Compute the Levenshtein distance between two sequences.

    Strings are compared per code point; any other sequence of comparable
    items (e.g. word lists) works the same way.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        Edit distance, in ``[0, max(len(a), len(b))]``.
    """
    n = len(a)
    m = len(b)
    if n == 0:
        return m
    if m == 0:
        return n

    # dp[i][j] = distance between a[:i] and b[:j]
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # delete
                dp[i][j - 1] + 1,  # insert
                dp[i - 1][j - 1] + cost,  # substitute
            )

    return dp[n][m]


def normalized_levenshtein(a: str, b: str, distance: int | None = None) -> float:
    """Return ``1 - distance / max(len(a), len(b))``.

    Two empty strings score 0.0, not 1.0: there is nothing to compare.

    Args:
        a: First text.
        b: Second text.
        distance: Precomputed ``levenshtein(a, b)``, to avoid a second DP pass.

    Returns:
        Float in [0.0, 1.0].
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    if distance is None:
        distance = levenshtein(a, b)
    return 1.0 - safe_ratio(distance, longest)
