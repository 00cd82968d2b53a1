"""Protocols for the engine's extension points.

Collaborators are matched structurally: any object with the right methods
passes ``isinstance`` checks, no inheritance required.

- ``Tokenizer``: sentence and word splitting (supplied upstream).
- ``SentenceAligner``: turns a sentence similarity matrix into alignments.
- ``TermWeighting``: TF-IDF style vectorisation of two word lists.

Example::

    from text_similarity_diff.protocols import Tokenizer

    class WhitespaceTokenizer:
        def split_sentences(self, text: str) -> list[str]:
            return [line for line in text.splitlines() if line.strip()]

        def split_words(self, text: str) -> list[str]:
            return text.split()

    assert isinstance(WhitespaceTokenizer(), Tokenizer)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from text_similarity_diff.result import SentenceAlignment


@runtime_checkable
class Tokenizer(Protocol):
    """Structural protocol for sentence/word splitters.

    Both methods must be deterministic and free of side effects.  Returning an
    empty list is valid.
    """

    def split_sentences(self, text: str) -> list[str]: ...

    def split_words(self, text: str) -> list[str]: ...


@runtime_checkable
class SentenceAligner(Protocol):
    """Structural protocol for sentence matchers.

    ``align`` receives an ``(n, m)`` similarity matrix and returns a
    one-to-one partial matching sorted by ``text1_index``.
    """

    def align(self, matrix: np.ndarray) -> list[SentenceAlignment]: ...


@runtime_checkable
class TermWeighting(Protocol):
    """Structural protocol for TF-IDF strategies."""

    def weigh(
        self,
        words1: Sequence[str],
        words2: Sequence[str],
    ) -> tuple[dict[str, float], dict[str, float]]: ...

    def similarity(self, words1: Sequence[str], words2: Sequence[str]) -> float: ...
