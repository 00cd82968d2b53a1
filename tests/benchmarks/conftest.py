"""Deterministic text generators for performance benchmarks.

All generators produce fixed, reproducible texts. No random values.
Three tiers: 5 sentences, 20 sentences, 40 sentences.
Each tier provides both "similar" and "dissimilar" pair generators.

Character-level metrics (Levenshtein, LCS, diff operations) are quadratic in
text length, so the largest tier dominates total runtime.
"""

from __future__ import annotations

import pytest

_SUBJECTS = ("The cat", "A dog", "The bird", "My neighbour", "The engineer")
_VERBS = ("watched", "ignored", "followed", "painted", "described")
_OBJECTS = ("the river", "a small boat", "the old bridge", "two trees", "the sky")


def generate_text(num_sentences: int, offset: int = 0) -> str:
    """Generate ``num_sentences`` short sentences cycling through fixed vocab."""
    sentences = []
    for i in range(num_sentences):
        k = i + offset
        sentences.append(
            f"{_SUBJECTS[k % 5]} {_VERBS[(k // 5) % 5]} {_OBJECTS[(k // 25) % 5]} "
            f"on day {k}."
        )
    return " ".join(sentences)


def _make_similar(num_sentences: int) -> tuple[str, str]:
    """Same sentences with every third day number changed."""
    left = generate_text(num_sentences)
    right_sentences = []
    for i, sentence in enumerate(left.split(". ")):
        if i % 3 == 0:
            sentence = sentence.replace(f"day {i}", f"day {i + 1000}")
        right_sentences.append(sentence)
    return left, ". ".join(right_sentences)


def _make_dissimilar(num_sentences: int) -> tuple[str, str]:
    """Disjoint day numbers and shifted vocabulary."""
    return generate_text(num_sentences), generate_text(num_sentences, offset=7919)


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_5_similar() -> tuple[str, str]:
    """5-sentence similar pair."""
    return _make_similar(5)


@pytest.fixture
def pair_5_dissimilar() -> tuple[str, str]:
    """5-sentence dissimilar pair."""
    return _make_dissimilar(5)


@pytest.fixture
def pair_20_similar() -> tuple[str, str]:
    """20-sentence similar pair."""
    return _make_similar(20)


@pytest.fixture
def pair_20_dissimilar() -> tuple[str, str]:
    """20-sentence dissimilar pair."""
    return _make_dissimilar(20)


@pytest.fixture
def pair_40_similar() -> tuple[str, str]:
    """40-sentence similar pair."""
    return _make_similar(40)


@pytest.fixture
def pair_40_dissimilar() -> tuple[str, str]:
    """40-sentence dissimilar pair."""
    return _make_dissimilar(40)
