"""Tests for character overlap, word Jaccard/Dice and character n-gram similarity."""

from __future__ import annotations

import pytest

from text_similarity_diff.algorithm.overlap import (
    char_ngrams,
    character_overlap,
    dice_coefficient,
    jaccard_index,
    ngram_similarity,
    word_set,
)

# ---------------------------------------------------------------------------
# Character overlap
# ---------------------------------------------------------------------------


class TestCharacterOverlap:
    def test_identical_is_1(self) -> None:
        assert character_overlap("hello", "hello") == pytest.approx(1.0)

    def test_disjoint_is_0(self) -> None:
        assert character_overlap("ab", "cd") == pytest.approx(0.0)

    def test_whitespace_is_ignored(self) -> None:
        assert character_overlap("a b", "ab") == pytest.approx(1.0)

    def test_empty_is_0(self) -> None:
        assert character_overlap("", "") == 0.0

    def test_whitespace_only_is_0(self) -> None:
        assert character_overlap("   ", "\t\n") == 0.0

    def test_is_directional(self) -> None:
        # text1 "aab": overlap min(2,1)+min(1,1)=2, total 3
        assert character_overlap("aab", "ab") == pytest.approx(2 / 3)
        # text1 "ab": overlap 2, total counts only text1's characters = 2
        assert character_overlap("ab", "aab") == pytest.approx(1.0)

    def test_partial_overlap(self) -> None:
        # overlap: a=1; total: a,b from text1 (2) + c from text2 (1) = 3
        assert character_overlap("ab", "ac") == pytest.approx(1 / 3)


# ---------------------------------------------------------------------------
# Word sets
# ---------------------------------------------------------------------------


class TestWordSet:
    def test_lowercases_and_deduplicates(self) -> None:
        assert word_set(["The", "the", "Cat"]) == {"the", "cat"}


class TestJaccardIndex:
    def test_hello_world_hello_there(self) -> None:
        assert jaccard_index(["hello", "world"], ["hello", "there"]) == pytest.approx(
            1 / 3
        )

    def test_case_insensitive(self) -> None:
        assert jaccard_index(["Hello"], ["hello"]) == pytest.approx(1.0)

    def test_duplicates_collapse(self) -> None:
        assert jaccard_index(["a", "a", "b"], ["a", "b"]) == pytest.approx(1.0)

    def test_both_empty_is_0(self) -> None:
        assert jaccard_index([], []) == 0.0

    def test_one_empty_is_0(self) -> None:
        assert jaccard_index(["a"], []) == 0.0

    def test_symmetric(self) -> None:
        a, b = ["x", "y", "z"], ["y", "w"]
        assert jaccard_index(a, b) == jaccard_index(b, a)


class TestDiceCoefficient:
    def test_hello_world_hello_there(self) -> None:
        assert dice_coefficient(["hello", "world"], ["hello", "there"]) == pytest.approx(
            0.5
        )

    def test_identical_is_1(self) -> None:
        assert dice_coefficient(["a", "b"], ["B", "A"]) == pytest.approx(1.0)

    def test_both_empty_is_0(self) -> None:
        assert dice_coefficient([], []) == 0.0

    def test_symmetric(self) -> None:
        a, b = ["x", "y", "z"], ["y", "w"]
        assert dice_coefficient(a, b) == dice_coefficient(b, a)


# ---------------------------------------------------------------------------
# N-grams
# ---------------------------------------------------------------------------


class TestCharNgrams:
    def test_bigrams(self) -> None:
        assert char_ngrams("abcd", 2) == ["ab", "bc", "cd"]

    def test_trigrams(self) -> None:
        assert char_ngrams("abcd", 3) == ["abc", "bcd"]

    def test_exact_length(self) -> None:
        assert char_ngrams("ab", 2) == ["ab"]

    def test_too_short(self) -> None:
        assert char_ngrams("a", 2) == []


class TestNgramSimilarity:
    def test_identical_is_1(self) -> None:
        assert ngram_similarity("hello", "hello", 2) == pytest.approx(1.0)

    def test_bigram_partial(self) -> None:
        # {ab, bc} vs {ab, bd}
        assert ngram_similarity("abc", "abd", 2) == pytest.approx(1 / 3)

    def test_trigram_disjoint(self) -> None:
        assert ngram_similarity("abc", "abd", 3) == pytest.approx(0.0)

    def test_one_text_too_short_is_0(self) -> None:
        assert ngram_similarity("a", "abc", 2) == 0.0

    def test_both_too_short_is_0(self) -> None:
        assert ngram_similarity("a", "b", 3) == 0.0

    def test_repeated_ngrams_collapse(self) -> None:
        assert ngram_similarity("aaaa", "aa", 2) == pytest.approx(1.0)
