"""TextDiffConfig and AlignmentMode for engine configuration.

TextDiffConfig is a frozen (immutable) dataclass holding the thresholds
used by sentence alignment, sentence diffing and substitution detection.
AlignmentMode selects the sentence matcher: the two-pass greedy heuristic
or an optimal Hungarian assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class AlignmentMode(StrEnum):
    """How sentences are paired during alignment.

    - GREEDY:  Two-pass greedy scan (high-similarity pass, then best-remaining).
    - OPTIMAL: Maximum-total-similarity assignment via the Hungarian algorithm.
    """

    GREEDY = auto()
    OPTIMAL = auto()


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        msg = f"{name} must be in [0, 1], got {value}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TextDiffConfig:
    """Immutable configuration for the similarity and diff engine.

    Attributes:
        exact_threshold: Alignment similarity above which a pair is "exact".
        similar_threshold: Alignment similarity above which a pair is
            committed in the first greedy pass ("similar").
        alignment_floor: Minimum similarity (exclusive) for a "different"
            pair in the second pass.
        sentence_match_threshold: Similarity above which an unmatched sentence
            is considered a rewording and not reported as added/removed.
        max_substitution_distance: Largest word edit distance reported as a
            substitution.
        alignment_mode: Which sentence matcher to use.
        pair_cache_size: Size of the per-call sentence-pair similarity memo.
    """

    exact_threshold: float = 0.95
    similar_threshold: float = 0.8
    alignment_floor: float = 0.3
    sentence_match_threshold: float = 0.9
    max_substitution_distance: int = 2
    alignment_mode: AlignmentMode = AlignmentMode.GREEDY
    pair_cache_size: int = 1024

    def __post_init__(self) -> None:
        _check_unit("exact_threshold", self.exact_threshold)
        _check_unit("similar_threshold", self.similar_threshold)
        _check_unit("alignment_floor", self.alignment_floor)
        _check_unit("sentence_match_threshold", self.sentence_match_threshold)
        if self.similar_threshold > self.exact_threshold:
            msg = (
                f"similar_threshold must not exceed exact_threshold, "
                f"got {self.similar_threshold} > {self.exact_threshold}"
            )
            raise ValueError(msg)
        if self.alignment_floor > self.similar_threshold:
            msg = (
                f"alignment_floor must not exceed similar_threshold, "
                f"got {self.alignment_floor} > {self.similar_threshold}"
            )
            raise ValueError(msg)
        if self.max_substitution_distance < 0:
            msg = (
                f"max_substitution_distance must be >= 0, "
                f"got {self.max_substitution_distance}"
            )
            raise ValueError(msg)
        if self.pair_cache_size < 1:
            msg = f"pair_cache_size must be >= 1, got {self.pair_cache_size}"
            raise ValueError(msg)
