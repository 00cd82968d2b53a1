"""Longest common subsequence over arbitrary sequences.

One DP table serves three views: the length, the matched index pairs and
the matched items.  Reconstruction backtracks from the bottom-right cell;
when the two neighbours tie, it steps back in the *second* sequence, so the
chosen subsequence is deterministic for a given input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["lcs_length", "lcs_pairs", "lcs_sequence", "lcs_table"]


def lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    """Build the LCS DP table.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        ``(len(a)+1) x (len(b)+1)`` table where cell ``[i][j]`` is the LCS
        length of ``a[:i]`` and ``b[:j]``.
    """
    n = len(a)
    m = len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        row = dp[i]
        prev = dp[i - 1]
        item = a[i - 1]
        for j in range(1, m + 1):
            if item == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    if not a or not b:
        return 0
    return lcs_table(a, b)[len(a)][len(b)]


def lcs_pairs(a: Sequence[Any], b: Sequence[Any]) -> list[tuple[int, int]]:
    """Return the matched ``(index_in_a, index_in_b)`` pairs of one LCS.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        Pairs in ascending order of both indices.
    """
    if not a or not b:
        return []

    dp = lcs_table(a, b)
    pairs: list[tuple[int, int]] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs


def lcs_sequence(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return the items of one longest common subsequence, in order."""
    return [a[i] for i, _ in lcs_pairs(a, b)]
