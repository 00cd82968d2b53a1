"""PairSimilarityCache: LRU memo for a symmetric pairwise similarity function.

The sentence diff compares every unmatched sentence of each text against
every sentence of the other text, so most pairs are scored twice (once per
direction).  This proxy stores each unordered pair once.

A cache is created per ``diff()`` call and dropped when the call returns;
nothing is shared between calls or between comparators.

Example::

    from text_similarity_diff.cache import PairSimilarityCache

    cache = PairSimilarityCache(lambda a, b: float(a == b), max_size=128)
    cache.similarity("x", "y")   # computed
    cache.similarity("y", "x")   # served from memory
"""

from __future__ import annotations

from collections.abc import Callable

from cachetools import LRUCache

__all__ = ["PairSimilarityCache"]


class PairSimilarityCache:
    """LRU-backed memo around a symmetric ``(str, str) -> float`` function.

    Args:
        scorer: Symmetric similarity function; ``scorer(a, b) == scorer(b, a)``.
        max_size: Maximum number of pairs held.  The least-recently-used pair
            is silently evicted when exceeded.  Defaults to 1024.
    """

    def __init__(
        self,
        scorer: Callable[[str, str], float],
        max_size: int = 1024,
    ) -> None:
        self._scorer = scorer
        self._cache: LRUCache[tuple[str, str], float] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of pairs this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of pairs stored in the cache."""
        return int(self._cache.currsize)

    def similarity(self, a: str, b: str) -> float:
        """Return ``scorer(a, b)``, computing it at most once per unordered pair."""
        key = (a, b) if a <= b else (b, a)
        try:
            return self._cache[key]
        except KeyError:
            pass
        value = self._scorer(a, b)
        self._cache[key] = value
        return value
