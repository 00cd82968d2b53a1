"""algorithm subpackage: the metric and diff building blocks.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from text_similarity_diff.algorithm import levenshtein, lcs_sequence

    levenshtein("kitten", "sitting")          # 3
    lcs_sequence("abcde", "ace")              # ['a', 'c', 'e']
"""

from __future__ import annotations

from text_similarity_diff.algorithm.alignment import (
    GreedySentenceAligner,
    OptimalSentenceAligner,
    sentence_similarity,
    similarity_matrix,
)
from text_similarity_diff.algorithm.config import AlignmentMode, TextDiffConfig
from text_similarity_diff.algorithm.edit_distance import (
    levenshtein,
    normalized_levenshtein,
)
from text_similarity_diff.algorithm.lcs import lcs_length, lcs_pairs, lcs_sequence
from text_similarity_diff.algorithm.overlap import (
    character_overlap,
    dice_coefficient,
    jaccard_index,
    ngram_similarity,
)
from text_similarity_diff.algorithm.structure import structural_similarity
from text_similarity_diff.algorithm.vector import CorpusTfidf, PairwiseTfidf, tf_cosine

__all__ = [
    "AlignmentMode",
    "CorpusTfidf",
    "GreedySentenceAligner",
    "OptimalSentenceAligner",
    "PairwiseTfidf",
    "TextDiffConfig",
    "character_overlap",
    "dice_coefficient",
    "jaccard_index",
    "lcs_length",
    "lcs_pairs",
    "lcs_sequence",
    "levenshtein",
    "ngram_similarity",
    "normalized_levenshtein",
    "sentence_similarity",
    "similarity_matrix",
    "structural_similarity",
    "tf_cosine",
]
