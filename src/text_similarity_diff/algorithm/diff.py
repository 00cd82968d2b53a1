"""Diff reconstruction at word, sentence and character granularity.

- word_diff:               multiset difference of raw word lists.
- sentence_diff:           exact set difference, minus near-matches.
- detect_word_changes:     substitutions just before word-LCS anchors.
- detect_sentence_reorders: verbatim sentences found at new positions.
- diff_operations:         character runs anchored on the character LCS.

All outputs are in a stable order derived from the inputs (first occurrence
for multisets, text order for runs), never from hash iteration.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence

from text_similarity_diff.algorithm.edit_distance import levenshtein
from text_similarity_diff.algorithm.lcs import lcs_pairs, lcs_sequence
from text_similarity_diff.result import (
    DiffOperation,
    OpType,
    SentenceReorder,
    WordChange,
)

__all__ = [
    "detect_sentence_reorders",
    "detect_word_changes",
    "diff_operations",
    "sentence_diff",
    "word_diff",
]


def _excess(counts_a: Counter[str], counts_b: Counter[str]) -> list[str]:
    # Words of a that occur more often in a than in b, repeated by the excess
    out: list[str] = []
    for word, count_a in counts_a.items():
        surplus = count_a - counts_b[word]
        if surplus > 0:
            out.extend([word] * surplus)
    return out


def word_diff(
    words1: Sequence[str],
    words2: Sequence[str],
) -> tuple[list[str], list[str]]:
    """Multiset difference of two word lists (case-sensitive).

    Args:
        words1: Words of the original text.
        words2: Words of the changed text.

    Returns:
        ``(added, removed)``; each word repeated by its count excess, in order
        of first occurrence.
    """
    counts1 = Counter(words1)
    counts2 = Counter(words2)
    return _excess(counts2, counts1), _excess(counts1, counts2)


def _unmatched(
    sentences: Sequence[str],
    others: Sequence[str],
    similarity: Callable[[str, str], float],
    threshold: float,
) -> list[str]:
    other_set = dict.fromkeys(others)
    out: list[str] = []
    for sentence in dict.fromkeys(sentences):
        if sentence in other_set:
            continue
        if any(similarity(sentence, other) > threshold for other in other_set):
            continue
        out.append(sentence)
    return out


def sentence_diff(
    sentences1: Sequence[str],
    sentences2: Sequence[str],
    similarity: Callable[[str, str], float],
    threshold: float = 0.9,
) -> tuple[list[str], list[str]]:
    """Sentences present on only one side, ignoring light rewordings.

    A sentence with no verbatim counterpart is still suppressed when some
    sentence on the other side scores above ``threshold``.

    Args:
        sentences1: Sentences of the original text.
        sentences2: Sentences of the changed text.
        similarity: Pairwise sentence similarity.
        threshold:  Similarity above which two sentences count as the same.

    Returns:
        ``(added, removed)``, de-duplicated, in order of first occurrence.
    """
    added = _unmatched(sentences2, sentences1, similarity, threshold)
    removed = _unmatched(sentences1, sentences2, similarity, threshold)
    return added, removed


def detect_word_changes(
    words1: Sequence[str],
    words2: Sequence[str],
    max_distance: int = 2,
) -> list[WordChange]:
    """Find single-word substitutions adjacent to shared anchor words.

    The word LCS supplies anchors.  Both lists are walked forward to each
    anchor in turn; when both cursors sit strictly inside their lists, the
    words immediately preceding the anchor are compared, and a pair that
    differs by at most ``max_distance`` edits is reported.  Changes that are
    not followed by a shared word are not detected.

    Args:
        words1: Words of the original text.
        words2: Words of the changed text.
        max_distance: Largest Levenshtein distance reported.

    Returns:
        Changes in text order; ``position`` indexes ``words1``.
    """
    changes: list[WordChange] = []
    i = 0
    j = 0
    n1 = len(words1)
    n2 = len(words2)
    for anchor in lcs_sequence(words1, words2):
        while i < n1 and words1[i] != anchor:
            i += 1
        while j < n2 and words2[j] != anchor:
            j += 1

        if 0 < i < n1 and 0 < j < n2:
            before1 = words1[i - 1]
            before2 = words2[j - 1]
            if before1 != before2 and levenshtein(before1, before2) <= max_distance:
                changes.append(WordChange(before1, before2, i - 1))

        i += 1
        j += 1
    return changes


def detect_sentence_reorders(
    sentences1: Sequence[str],
    sentences2: Sequence[str],
) -> list[SentenceReorder]:
    """Verbatim sentences whose position changed.

    A sentence repeated within one text is located at its last occurrence.

    Returns:
        Reorders sorted by ``old_position``.
    """
    old_positions = {s: i for i, s in enumerate(sentences1)}
    new_positions = {s: i for i, s in enumerate(sentences2)}

    reorders = [
        SentenceReorder(sentence, old_positions[sentence], new_pos)
        for sentence, new_pos in new_positions.items()
        if sentence in old_positions and old_positions[sentence] != new_pos
    ]
    reorders.sort(key=lambda r: r.old_position)
    return reorders


def _anchor_runs(pairs: list[tuple[int, int]]) -> list[tuple[int, int, int]]:
    # Collapse consecutive LCS pairs into (start1, start2, length) blocks
    runs: list[tuple[int, int, int]] = []
    for a, b in pairs:
        if runs:
            s1, s2, k = runs[-1]
            if a == s1 + k and b == s2 + k:
                runs[-1] = (s1, s2, k + 1)
                continue
        runs.append((a, b, 1))
    return runs


def diff_operations(text1: str, text2: str) -> list[DiffOperation]:
    """Character-level runs turning ``text1`` into ``text2``.

    Between consecutive blocks of the character LCS, the gap in ``text1`` is
    emitted as DELETE and the gap in ``text2`` as INSERT (in that order),
    followed by the EQUAL block itself.

    Args:
        text1: Original text.
        text2: Changed text.

    Returns:
        Runs in text order.  Identical non-empty texts give one EQUAL run;
        two empty texts give no runs.
    """
    ops: list[DiffOperation] = []
    i = 0
    j = 0

    def _gap(end1: int, end2: int) -> None:
        if end1 > i:
            ops.append(DiffOperation(OpType.DELETE, text1[i:end1], i, end1 - i, j))
        if end2 > j:
            ops.append(
                DiffOperation(OpType.INSERT, text2[j:end2], end1, end2 - j, j)
            )

    for a, b, k in _anchor_runs(lcs_pairs(text1, text2)):
        _gap(a, b)
        ops.append(DiffOperation(OpType.EQUAL, text1[a : a + k], a, k, b))
        i = a + k
        j = b + k

    _gap(len(text1), len(text2))
    return ops
