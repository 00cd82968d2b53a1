"""Text similarity and diff engine: classical metrics and structured diffs."""

from __future__ import annotations

from text_similarity_diff.algorithm.config import AlignmentMode, TextDiffConfig
from text_similarity_diff.api import (
    consistency_score,
    diff,
    is_similar,
    similarity,
    similarity_score,
)
from text_similarity_diff.comparator import TextComparator
from text_similarity_diff.result import (
    AlignmentType,
    DiffOperation,
    OpType,
    SentenceAlignment,
    SentenceReorder,
    SimilarityResult,
    TextDiff,
    WordChange,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "AlignmentMode",
    "AlignmentType",
    "DiffOperation",
    "OpType",
    "SentenceAlignment",
    "SentenceReorder",
    "SimilarityResult",
    "TextComparator",
    "TextDiff",
    "TextDiffConfig",
    "WordChange",
    "consistency_score",
    "diff",
    "is_similar",
    "similarity",
    "similarity_score",
]
