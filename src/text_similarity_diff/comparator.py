"""TextComparator: orchestrator that wires Tokenizer + metrics + aligner + diff.

This is the central wiring layer between the metric functions and the
public API.  Each call tokenizes both texts once, fans out to the
independent metric modules, and aggregates a frozen result record.

Architecture:
- similarity() computes the character metrics on the raw texts, the word
  metrics on the tokenizer's word lists, and structural similarity plus
  alignment on the sentence lists.
- diff() computes word, sentence and character differences.  Sentence-pair
  similarities are memoised in a ``PairSimilarityCache`` created for that
  call only.
- The comparator holds only immutable collaborators (tokenizer, config,
  aligner, term weighting).  Results never depend on earlier calls.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from text_similarity_diff.algorithm.alignment import (
    GreedySentenceAligner,
    OptimalSentenceAligner,
    sentence_similarity,
    similarity_matrix,
)
from text_similarity_diff.algorithm.config import AlignmentMode, TextDiffConfig
from text_similarity_diff.algorithm.diff import (
    detect_sentence_reorders,
    detect_word_changes,
    diff_operations,
    sentence_diff,
    word_diff,
)
from text_similarity_diff.algorithm.edit_distance import (
    levenshtein,
    normalized_levenshtein,
)
from text_similarity_diff.algorithm.lcs import lcs_length
from text_similarity_diff.algorithm.normalizer import safe_ratio
from text_similarity_diff.algorithm.overlap import (
    character_overlap,
    dice_coefficient,
    jaccard_index,
    ngram_similarity,
)
from text_similarity_diff.algorithm.structure import structural_similarity
from text_similarity_diff.algorithm.vector import PairwiseTfidf, tf_cosine
from text_similarity_diff.cache import PairSimilarityCache
from text_similarity_diff.result import OpType, SimilarityResult, TextDiff
from text_similarity_diff.tokenizer import RegexTokenizer

if TYPE_CHECKING:
    from text_similarity_diff.protocols import SentenceAligner, TermWeighting, Tokenizer
    from text_similarity_diff.result import SentenceAlignment

__all__ = ["TextComparator"]

logger = logging.getLogger(__name__)


class TextComparator:
    """Orchestrator for text similarity and diff computation.

    Example::

        from text_similarity_diff.comparator import TextComparator

        cmp = TextComparator()
        result = cmp.similarity("hello world", "hello there")
        print(result.jaccard_index)      # 0.333...
        delta = cmp.diff("The cat sat.", "The dog sat.")
        print(delta.removed_words)       # ('cat',)
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        config: TextDiffConfig | None = None,
        aligner: SentenceAligner | None = None,
        weighting: TermWeighting | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            tokenizer: A Tokenizer-conformant object.  Defaults to
                ``RegexTokenizer()``.
            config:    Engine thresholds.  Defaults to ``TextDiffConfig()``.
            aligner:   A SentenceAligner-conformant object.  Defaults to the
                matcher selected by ``config.alignment_mode``.
            weighting: TF-IDF strategy.  Defaults to ``PairwiseTfidf()``.
        """
        self._config: TextDiffConfig = (
            config if config is not None else TextDiffConfig()
        )
        self._tokenizer: Tokenizer = (
            tokenizer if tokenizer is not None else RegexTokenizer()
        )
        self._aligner: SentenceAligner = (
            aligner if aligner is not None else self._default_aligner(self._config)
        )
        self._weighting: TermWeighting = (
            weighting if weighting is not None else PairwiseTfidf()
        )

    @staticmethod
    def _default_aligner(config: TextDiffConfig) -> SentenceAligner:
        if config.alignment_mode == AlignmentMode.OPTIMAL:
            return OptimalSentenceAligner(config)
        return GreedySentenceAligner(config)

    @property
    def config(self) -> TextDiffConfig:
        """The engine configuration in use."""
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def similarity(self, text1: str, text2: str) -> SimilarityResult:
        """Compute every similarity metric between two texts.

        Args:
            text1: First text.
            text2: Second text.

        Returns:
            A ``SimilarityResult``; ratio fields in [0, 1].
        """
        t0 = time.perf_counter()

        words1 = self._tokenizer.split_words(text1)
        words2 = self._tokenizer.split_words(text2)
        sentences1 = self._tokenizer.split_sentences(text1)
        sentences2 = self._tokenizer.split_sentences(text2)

        distance = levenshtein(text1, text2)
        longest = max(len(text1), len(text2))
        lcs = lcs_length(text1, text2)
        word_jaccard = jaccard_index(words1, words2)

        result = SimilarityResult(
            character_overlap=character_overlap(text1, text2),
            levenshtein_distance=distance,
            normalized_levenshtein=normalized_levenshtein(text1, text2, distance),
            word_overlap=word_jaccard,
            jaccard_index=word_jaccard,
            dice_coefficient=dice_coefficient(words1, words2),
            cosine_similarity=tf_cosine(words1, words2),
            tfidf_similarity=self._weighting.similarity(words1, words2),
            structural_similarity=structural_similarity(sentences1, sentences2),
            sentence_alignment=tuple(self._align(sentences1, sentences2)),
            bigram_similarity=ngram_similarity(text1, text2, 2),
            trigram_similarity=ngram_similarity(text1, text2, 3),
            lcs_length=lcs,
            lcs_ratio=safe_ratio(lcs, longest),
        )

        logger.debug(
            "similarity: %d/%d chars, %d/%d words, %d/%d sentences in %.2f ms",
            len(text1),
            len(text2),
            len(words1),
            len(words2),
            len(sentences1),
            len(sentences2),
            (time.perf_counter() - t0) * 1000.0,
        )
        return result

    def diff(self, text1: str, text2: str) -> TextDiff:
        """Compute the structured difference turning ``text1`` into ``text2``.

        Args:
            text1: Original text.
            text2: Changed text.

        Returns:
            A ``TextDiff`` whose ``apply(text1)`` equals ``text2``.
        """
        t0 = time.perf_counter()
        cfg = self._config

        words1 = self._tokenizer.split_words(text1)
        words2 = self._tokenizer.split_words(text2)
        sentences1 = self._tokenizer.split_sentences(text1)
        sentences2 = self._tokenizer.split_sentences(text2)

        added_words, removed_words = word_diff(words1, words2)

        pair_cache = PairSimilarityCache(
            self._sentence_similarity, max_size=cfg.pair_cache_size
        )
        added_sentences, removed_sentences = sentence_diff(
            sentences1,
            sentences2,
            pair_cache.similarity,
            cfg.sentence_match_threshold,
        )

        operations = diff_operations(text1, text2)
        chars = {OpType.INSERT: 0, OpType.DELETE: 0, OpType.EQUAL: 0}
        for op in operations:
            chars[op.op] += op.length

        result = TextDiff(
            operations=tuple(operations),
            added_words=tuple(added_words),
            removed_words=tuple(removed_words),
            changed_words=tuple(
                detect_word_changes(words1, words2, cfg.max_substitution_distance)
            ),
            added_sentences=tuple(added_sentences),
            removed_sentences=tuple(removed_sentences),
            reordered_sentences=tuple(detect_sentence_reorders(sentences1, sentences2)),
            word_count_delta=len(words2) - len(words1),
            sentence_count_delta=len(sentences2) - len(sentences1),
            chars_added=chars[OpType.INSERT],
            chars_removed=chars[OpType.DELETE],
            chars_unchanged=chars[OpType.EQUAL],
        )

        logger.debug(
            "diff: %d ops, +%d/-%d words, +%d/-%d sentences, %d pairs scored in %.2f ms",
            len(operations),
            len(added_words),
            len(removed_words),
            len(added_sentences),
            len(removed_sentences),
            pair_cache.curr_size,
            (time.perf_counter() - t0) * 1000.0,
        )
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _sentence_similarity(self, sentence1: str, sentence2: str) -> float:
        return sentence_similarity(
            self._tokenizer.split_words(sentence1),
            self._tokenizer.split_words(sentence2),
        )

    def _align(
        self, sentences1: list[str], sentences2: list[str]
    ) -> list[SentenceAlignment]:
        matrix = similarity_matrix(
            [self._tokenizer.split_words(s) for s in sentences1],
            [self._tokenizer.split_words(s) for s in sentences2],
        )
        return self._aligner.align(matrix)
