"""Tests for Levenshtein distance and its normalized score.

Covers:
- Classic reference pairs (kitten/sitting)
- Empty-string edge cases and the 0.0 normalized score for two empty strings
- Symmetry and the [0, max(len)] bound
- Code-point (not byte) comparison
- Non-string sequences (word lists)
"""

from __future__ import annotations

import pytest

from text_similarity_diff.algorithm.edit_distance import (
    levenshtein,
    normalized_levenshtein,
)


class TestLevenshtein:
    def test_kitten_sitting_is_3(self) -> None:
        assert levenshtein("kitten", "sitting") == 3

    def test_identical_is_0(self) -> None:
        assert levenshtein("same text", "same text") == 0

    def test_empty_left_is_length_of_right(self) -> None:
        assert levenshtein("", "abc") == 3

    def test_empty_right_is_length_of_left(self) -> None:
        assert levenshtein("abcd", "") == 4

    def test_both_empty_is_0(self) -> None:
        assert levenshtein("", "") == 0

    def test_single_substitution(self) -> None:
        assert levenshtein("cat", "bat") == 1

    def test_insertion_and_deletion(self) -> None:
        assert levenshtein("flaw", "lawn") == 2

    def test_counts_code_points_not_bytes(self) -> None:
        # "é" is two bytes in UTF-8 but one code point
        assert levenshtein("café", "cafe") == 1

    @pytest.mark.parametrize(
        ("a", "b"),
        [("kitten", "sitting"), ("", "xyz"), ("hello", "yellow"), ("ab", "ba")],
    )
    def test_symmetric(self, a: str, b: str) -> None:
        assert levenshtein(a, b) == levenshtein(b, a)

    @pytest.mark.parametrize(
        ("a", "b"),
        [("kitten", "sitting"), ("", "xyz"), ("abc", "xyz"), ("short", "a longer one")],
    )
    def test_bounded_by_longer_length(self, a: str, b: str) -> None:
        assert 0 <= levenshtein(a, b) <= max(len(a), len(b))

    def test_word_sequences(self) -> None:
        assert levenshtein(["the", "cat", "sat"], ["the", "dog", "sat"]) == 1


class TestNormalizedLevenshtein:
    def test_kitten_sitting(self) -> None:
        assert normalized_levenshtein("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_identical_is_1(self) -> None:
        assert normalized_levenshtein("abc", "abc") == pytest.approx(1.0)

    def test_both_empty_is_0(self) -> None:
        assert normalized_levenshtein("", "") == 0.0

    def test_one_empty_is_0(self) -> None:
        assert normalized_levenshtein("abc", "") == pytest.approx(0.0)

    def test_completely_different_is_0(self) -> None:
        assert normalized_levenshtein("abc", "xyz") == pytest.approx(0.0)

    def test_precomputed_distance_is_used(self) -> None:
        # A caller-supplied distance skips the DP pass
        assert normalized_levenshtein("abcd", "abcd", distance=2) == pytest.approx(0.5)
