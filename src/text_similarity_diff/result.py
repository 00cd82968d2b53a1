"""Result records returned by similarity() and diff() calls.

Every record is a frozen, slotted dataclass built once per call.  Sequence
fields are tuples so a result can be shared freely without aliasing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar

__all__ = [
    "AlignmentType",
    "DiffOperation",
    "OpType",
    "SentenceAlignment",
    "SentenceReorder",
    "SimilarityResult",
    "TextDiff",
    "WordChange",
]


class AlignmentType(StrEnum):
    """Label attached to an aligned sentence pair.

    - EXACT     -> "exact"     : similarity above the exact threshold
    - SIMILAR   -> "similar"   : similarity above the similar threshold
    - DIFFERENT -> "different" : best remaining partner above the floor
    """

    EXACT = auto()
    SIMILAR = auto()
    DIFFERENT = auto()


class OpType(StrEnum):
    """Kind of a character-level diff operation.

    REPLACE is reserved for a future coalescing pass; the diff engine
    never emits it.
    """

    EQUAL = auto()
    INSERT = auto()
    DELETE = auto()
    REPLACE = auto()


@dataclass(frozen=True, slots=True)
class SentenceAlignment:
    """A matched pair of sentences across the two texts.

    Attributes:
        text1_index: Index of the sentence in the first text.
        text2_index: Index of the sentence in the second text.
        similarity: Mean of word Jaccard and word cosine, in [0.0, 1.0].
        alignment_type: How strongly the pair matched.
    """

    text1_index: int
    text2_index: int
    similarity: float
    alignment_type: AlignmentType


@dataclass(frozen=True, slots=True)
class SimilarityResult:
    """All similarity metrics computed for a pair of texts.

    Attributes:
        character_overlap: Directional multiset overlap of non-whitespace
            characters.  Not symmetric.
        levenshtein_distance: Code-point edit distance.
        normalized_levenshtein: ``1 - distance / max(len1, len2)``.
        word_overlap: Overlap of the lower-cased word sets.
        jaccard_index: Jaccard index of the lower-cased word sets.
        dice_coefficient: Dice coefficient of the lower-cased word sets.
        cosine_similarity: Cosine of the raw term-frequency vectors.
        tfidf_similarity: Cosine of the TF-IDF vectors.
        structural_similarity: Closeness of sentence count and mean sentence
            length.
        sentence_alignment: One-to-one sentence matching, sorted by
            ``text1_index``.
        bigram_similarity: Jaccard index of character bigram sets.
        trigram_similarity: Jaccard index of character trigram sets.
        lcs_length: Length of the character longest common subsequence.
        lcs_ratio: ``lcs_length / max(len1, len2)``.
    """

    RATIO_FIELDS: ClassVar[tuple[str, ...]] = (
        "character_overlap",
        "normalized_levenshtein",
        "word_overlap",
        "jaccard_index",
        "dice_coefficient",
        "cosine_similarity",
        "tfidf_similarity",
        "structural_similarity",
        "bigram_similarity",
        "trigram_similarity",
        "lcs_ratio",
    )

    character_overlap: float
    levenshtein_distance: int
    normalized_levenshtein: float
    word_overlap: float
    jaccard_index: float
    dice_coefficient: float
    cosine_similarity: float
    tfidf_similarity: float
    structural_similarity: float
    sentence_alignment: tuple[SentenceAlignment, ...]
    bigram_similarity: float
    trigram_similarity: float
    lcs_length: int
    lcs_ratio: float

    def ratio_fields(self) -> dict[str, float]:
        """Return the [0, 1] metrics keyed by field name, in declaration order."""
        return {name: getattr(self, name) for name in self.RATIO_FIELDS}


@dataclass(frozen=True, slots=True)
class DiffOperation:
    """One run of a character-level diff.

    Attributes:
        op: EQUAL, INSERT or DELETE.
        text: The literal span (from text1 for EQUAL/DELETE, from text2 for
            INSERT).
        position: Offset in text1 where the run applies.  For INSERT this is
            the insertion point in text1.
        length: Number of code points in ``text``.
        target_position: Offset of the run in text2.  For DELETE this is the
            text2 offset at which the deleted span would have been.
    """

    op: OpType
    text: str
    position: int
    length: int
    target_position: int


@dataclass(frozen=True, slots=True)
class WordChange:
    """A word substituted next to a shared anchor word."""

    original: str
    changed: str
    position: int


@dataclass(frozen=True, slots=True)
class SentenceReorder:
    """A sentence found verbatim in both texts at different positions."""

    sentence: str
    old_position: int
    new_position: int


@dataclass(frozen=True, slots=True)
class TextDiff:
    """Structured difference between two texts.

    Attributes:
        operations: Character-level runs.  Replaying them against text1
            reconstructs text2 (see ``apply``).
        added_words: Words whose count grew, repeated by the excess, in
            first-occurrence order.
        removed_words: Words whose count shrank, repeated by the excess.
        changed_words: Substitutions detected next to LCS anchor words.
        added_sentences: Sentences only in text2 with no near match in text1.
        removed_sentences: Sentences only in text1 with no near match in text2.
        reordered_sentences: Verbatim sentences that moved, by old position.
        word_count_delta: ``len(words2) - len(words1)``.
        sentence_count_delta: ``len(sentences2) - len(sentences1)``.
        chars_added: Code points carried by INSERT runs.
        chars_removed: Code points carried by DELETE runs.
        chars_unchanged: Code points carried by EQUAL runs.
    """

    operations: tuple[DiffOperation, ...]
    added_words: tuple[str, ...]
    removed_words: tuple[str, ...]
    changed_words: tuple[WordChange, ...]
    added_sentences: tuple[str, ...]
    removed_sentences: tuple[str, ...]
    reordered_sentences: tuple[SentenceReorder, ...]
    word_count_delta: int
    sentence_count_delta: int
    chars_added: int
    chars_removed: int
    chars_unchanged: int

    @property
    def is_identical(self) -> bool:
        """True when no run inserts or deletes anything."""
        return all(op.op == OpType.EQUAL for op in self.operations)

    def apply(self, text1: str) -> str:
        """Replay the character operations against ``text1``.

        Args:
            text1: The source text the diff was computed from.

        Returns:
            The reconstructed target text.
        """
        parts: list[str] = []
        cursor = 0
        for operation in self.operations:
            if operation.op == OpType.INSERT:
                parts.append(text1[cursor : operation.position])
                parts.append(operation.text)
                cursor = operation.position
            elif operation.op == OpType.DELETE:
                parts.append(text1[cursor : operation.position])
                cursor = operation.position + operation.length
            elif operation.op == OpType.EQUAL:
                end = operation.position + operation.length
                parts.append(text1[cursor:end])
                cursor = end
        parts.append(text1[cursor:])
        return "".join(parts)
