"""Vector-space similarity: term-frequency cosine and TF-IDF strategies.

Sparse term -> weight mappings are projected onto the sorted union
vocabulary and compared with numpy.  Two term-weighting strategies satisfy
the ``TermWeighting`` protocol:

- ``PairwiseTfidf``: the compared pair *is* the corpus (two documents).
  A term present in both texts has ``idf = ln(2/2) = 0`` and vanishes from
  both vectors, so the score only reflects terms unique to each side.  This
  is the default and its behaviour is kept as-is.
- ``CorpusTfidf``: scikit-learn TF-IDF fitted once on a reference corpus
  supplied at construction.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

import numpy as np
from sklearn.feature_extraction.text import (  # type: ignore[import-untyped]
    TfidfVectorizer,
)
from sklearn.metrics.pairwise import (  # type: ignore[import-untyped]
    cosine_similarity,
)

from text_similarity_diff.algorithm.normalizer import clip_unit

__all__ = [
    "CorpusTfidf",
    "PairwiseTfidf",
    "term_frequencies",
    "tf_cosine",
    "vector_cosine",
]


def term_frequencies(words: Iterable[str]) -> Counter[str]:
    """Count lower-cased words."""
    return Counter(w.lower() for w in words)


def vector_cosine(v1: Mapping[str, float], v2: Mapping[str, float]) -> float:
    """Cosine similarity of two sparse vectors keyed by term.

    Args:
        v1: First vector (missing terms are 0).
        v2: Second vector.

    Returns:
        Float in [0.0, 1.0] for non-negative weights; 0.0 when either vector
        has zero magnitude.
    """
    vocabulary = sorted(set(v1) | set(v2))
    if not vocabulary:
        return 0.0

    a = np.array([v1.get(t, 0.0) for t in vocabulary], dtype=np.float64)
    b = np.array([v2.get(t, 0.0) for t in vocabulary], dtype=np.float64)
    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return clip_unit(float(np.dot(a, b)) / (norm_a * norm_b))


def tf_cosine(words1: Sequence[str], words2: Sequence[str]) -> float:
    """Cosine of raw term-frequency vectors over lower-cased words."""
    tf1 = term_frequencies(words1)
    tf2 = term_frequencies(words2)
    return vector_cosine(
        {t: float(c) for t, c in tf1.items()},
        {t: float(c) for t, c in tf2.items()},
    )


def _tfidf_vector(
    words: Sequence[str],
    idf: Mapping[str, float],
) -> dict[str, float]:
    # tf is the raw count over the text's total word count
    if not words:
        return {}
    total = len(words)
    return {
        term: (count / total) * idf[term]
        for term, count in term_frequencies(words).items()
    }


class PairwiseTfidf:
    """TF-IDF where the two compared texts form the whole corpus.

    ``df(term)`` is 1 or 2, ``idf = ln(2 / df)``.  Shared vocabulary is
    weighted to zero.

    Example::

        weighting = PairwiseTfidf()
        v1, v2 = weighting.weigh(["a", "b"], ["b", "c"])
        # v1 == {"a": 0.5 * ln 2, "b": 0.0}
    """

    def weigh(
        self,
        words1: Sequence[str],
        words2: Sequence[str],
    ) -> tuple[dict[str, float], dict[str, float]]:
        """Return the TF-IDF vectors of both texts."""
        docs = (set(term_frequencies(words1)), set(term_frequencies(words2)))
        df: Counter[str] = Counter()
        for terms in docs:
            df.update(terms)
        idf = {term: math.log(len(docs) / freq) for term, freq in df.items()}
        return _tfidf_vector(words1, idf), _tfidf_vector(words2, idf)

    def similarity(self, words1: Sequence[str], words2: Sequence[str]) -> float:
        """Cosine of the two TF-IDF vectors."""
        return vector_cosine(*self.weigh(words1, words2))


def _lowercase_words(words: Iterable[str]) -> list[str]:
    return [w.lower() for w in words]


class CorpusTfidf:
    """TF-IDF with document frequencies from a fixed reference corpus.

    A ``TfidfVectorizer`` is fitted once on the corpus (smoothed
    ``idf = ln((1 + N) / (1 + df)) + 1``, L2-normalised rows).  Terms that
    never occur in the corpus are outside the vocabulary and carry no weight.

    Args:
        documents: Word lists of the reference corpus.  Consumed once.

    Raises:
        ValueError: When the corpus contains no words at all.

    Example::

        weighting = CorpusTfidf([["the", "cat"], ["the", "dog"]])
        weighting.similarity(["the", "cat"], ["a", "cat"])
    """

    def __init__(self, documents: Iterable[Iterable[str]]) -> None:
        docs = [list(words) for words in documents]
        if not any(docs):
            msg = (
                f"reference corpus must contain at least one word, "
                f"got {len(docs)} empty documents"
            )
            raise ValueError(msg)
        self._vectorizer = TfidfVectorizer(analyzer=_lowercase_words, lowercase=False)
        self._vectorizer.fit(docs)
        self._terms = self._vectorizer.get_feature_names_out()
        self._n_docs = len(docs)

    @property
    def n_docs(self) -> int:
        """Number of documents in the reference corpus."""
        return self._n_docs

    def idf(self, term: str) -> float:
        """Fitted idf of a lower-cased term; 0.0 outside the vocabulary."""
        index = self._vectorizer.vocabulary_.get(term)
        if index is None:
            return 0.0
        return float(self._vectorizer.idf_[index])

    def weigh(
        self,
        words1: Sequence[str],
        words2: Sequence[str],
    ) -> tuple[dict[str, float], dict[str, float]]:
        """Return the L2-normalised TF-IDF vectors of both texts."""
        matrix = self._vectorizer.transform([words1, words2])
        rows: list[dict[str, float]] = []
        for i in range(2):
            row = matrix[i]
            rows.append(
                {
                    str(self._terms[j]): float(value)
                    for j, value in zip(row.indices, row.data, strict=True)
                }
            )
        return rows[0], rows[1]

    def similarity(self, words1: Sequence[str], words2: Sequence[str]) -> float:
        """Cosine of the two TF-IDF vectors; 0.0 when either has no known term."""
        matrix = self._vectorizer.transform([words1, words2])
        return clip_unit(float(cosine_similarity(matrix[0], matrix[1])[0, 0]))
