"""Tests for the generic LCS table, length, pairs and sequence helpers."""

from __future__ import annotations

from text_similarity_diff.algorithm.lcs import (
    lcs_length,
    lcs_pairs,
    lcs_sequence,
    lcs_table,
)


class TestLcsLength:
    def test_reference_pair(self) -> None:
        assert lcs_length("ABCBDAB", "BDCABA") == 4

    def test_identical(self) -> None:
        assert lcs_length("hello", "hello") == 5

    def test_disjoint(self) -> None:
        assert lcs_length("abc", "xyz") == 0

    def test_empty_inputs(self) -> None:
        assert lcs_length("", "abc") == 0
        assert lcs_length("abc", "") == 0
        assert lcs_length("", "") == 0

    def test_word_lists(self) -> None:
        assert lcs_length(["the", "cat", "sat"], ["the", "dog", "sat"]) == 2

    def test_symmetric(self) -> None:
        assert lcs_length("AGGTAB", "GXTXAYB") == lcs_length("GXTXAYB", "AGGTAB")


class TestLcsTable:
    def test_table_shape(self) -> None:
        table = lcs_table("abc", "ab")
        assert len(table) == 4
        assert all(len(row) == 3 for row in table)

    def test_first_row_and_column_are_zero(self) -> None:
        table = lcs_table("abc", "abc")
        assert table[0] == [0, 0, 0, 0]
        assert [row[0] for row in table] == [0, 0, 0, 0]


class TestLcsPairs:
    def test_subsequence_pairs(self) -> None:
        assert lcs_pairs("abcde", "ace") == [(0, 0), (2, 1), (4, 2)]

    def test_pairs_are_strictly_increasing(self) -> None:
        pairs = lcs_pairs("ABCBDAB", "BDCABA")
        for (i1, j1), (i2, j2) in zip(pairs, pairs[1:]):
            assert i1 < i2
            assert j1 < j2

    def test_pairs_point_at_equal_items(self) -> None:
        a, b = "ABCBDAB", "BDCABA"
        assert all(a[i] == b[j] for i, j in lcs_pairs(a, b))

    def test_empty_gives_no_pairs(self) -> None:
        assert lcs_pairs("", "abc") == []


class TestLcsSequence:
    def test_words(self) -> None:
        assert lcs_sequence(["The", "cat", "sat"], ["The", "dog", "sat"]) == [
            "The",
            "sat",
        ]

    def test_tie_steps_back_in_second_sequence(self) -> None:
        # "ab" vs "ba": both "a" and "b" are valid LCSs; the fixed tie-break
        # keeps the later item of the first sequence.
        assert lcs_sequence("ab", "ba") == ["b"]

    def test_deterministic(self) -> None:
        assert lcs_sequence("ABCBDAB", "BDCABA") == lcs_sequence("ABCBDAB", "BDCABA")

    def test_length_matches_lcs_length(self) -> None:
        assert len(lcs_sequence("AGGTAB", "GXTXAYB")) == lcs_length("AGGTAB", "GXTXAYB")
