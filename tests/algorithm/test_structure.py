"""Tests for structural similarity (sentence count + mean sentence length)."""

from __future__ import annotations

import pytest

from text_similarity_diff.algorithm.structure import (
    average_sentence_length,
    structural_similarity,
)


class TestAverageSentenceLength:
    def test_mean_of_field_counts(self) -> None:
        assert average_sentence_length(["a b", "c d e f"]) == pytest.approx(3.0)

    def test_no_sentences(self) -> None:
        assert average_sentence_length([]) == 0.0


class TestStructuralSimilarity:
    def test_identical_structure_is_1(self) -> None:
        sentences = ["The cat sat.", "It was warm."]
        assert structural_similarity(sentences, list(sentences)) == pytest.approx(1.0)

    def test_count_difference(self) -> None:
        # count_sim = 1 - 1/2, length_sim = 1
        assert structural_similarity(["a b c"], ["a b c", "d e f"]) == pytest.approx(
            0.75
        )

    def test_length_difference(self) -> None:
        # count_sim = 1, length_sim = 1 - 2/4
        assert structural_similarity(["a b"], ["a b c d"]) == pytest.approx(0.75)

    def test_either_empty_is_0(self) -> None:
        assert structural_similarity([], ["a"]) == 0.0
        assert structural_similarity(["a"], []) == 0.0
        assert structural_similarity([], []) == 0.0

    def test_symmetric(self) -> None:
        a = ["one two three", "four"]
        b = ["five six", "seven eight", "nine"]
        assert structural_similarity(a, b) == pytest.approx(structural_similarity(b, a))

    def test_sentences_without_words_have_equal_length(self) -> None:
        assert structural_similarity([""], [""]) == pytest.approx(1.0)
        assert structural_similarity([" "], ["", ""]) == pytest.approx(0.75)
