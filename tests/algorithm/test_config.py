"""Tests for TextDiffConfig validation and AlignmentMode values."""

from __future__ import annotations

import dataclasses

import pytest

from text_similarity_diff.algorithm.config import AlignmentMode, TextDiffConfig


class TestDefaults:
    def test_default_values(self) -> None:
        cfg = TextDiffConfig()
        assert cfg.exact_threshold == 0.95
        assert cfg.similar_threshold == 0.8
        assert cfg.alignment_floor == 0.3
        assert cfg.sentence_match_threshold == 0.9
        assert cfg.max_substitution_distance == 2
        assert cfg.alignment_mode is AlignmentMode.GREEDY
        assert cfg.pair_cache_size == 1024

    def test_frozen(self) -> None:
        cfg = TextDiffConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.exact_threshold = 0.5  # type: ignore[misc]

    def test_hashable_and_equal(self) -> None:
        assert TextDiffConfig() == TextDiffConfig()
        assert hash(TextDiffConfig()) == hash(TextDiffConfig())


class TestAlignmentMode:
    def test_string_values(self) -> None:
        assert AlignmentMode.GREEDY == "greedy"
        assert AlignmentMode.OPTIMAL == "optimal"

    def test_from_string(self) -> None:
        assert AlignmentMode("optimal") is AlignmentMode.OPTIMAL


class TestValidation:
    @pytest.mark.parametrize(
        "field",
        [
            "exact_threshold",
            "similar_threshold",
            "alignment_floor",
            "sentence_match_threshold",
        ],
    )
    @pytest.mark.parametrize("value", [-0.1, 1.1])
    def test_threshold_out_of_range(self, field: str, value: float) -> None:
        with pytest.raises(ValueError, match=field):
            TextDiffConfig(**{field: value})

    def test_similar_above_exact(self) -> None:
        with pytest.raises(ValueError, match="similar_threshold"):
            TextDiffConfig(exact_threshold=0.7, similar_threshold=0.8)

    def test_floor_above_similar(self) -> None:
        with pytest.raises(ValueError, match="alignment_floor"):
            TextDiffConfig(alignment_floor=0.85)

    def test_negative_substitution_distance(self) -> None:
        with pytest.raises(ValueError, match="max_substitution_distance"):
            TextDiffConfig(max_substitution_distance=-1)

    def test_zero_cache_size(self) -> None:
        with pytest.raises(ValueError, match="pair_cache_size"):
            TextDiffConfig(pair_cache_size=0)

    def test_boundaries_accepted(self) -> None:
        cfg = TextDiffConfig(
            exact_threshold=1.0,
            similar_threshold=1.0,
            alignment_floor=0.0,
            sentence_match_threshold=0.0,
            max_substitution_distance=0,
            pair_cache_size=1,
        )
        assert cfg.exact_threshold == 1.0
