"""pytest plugin for text-similarity-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from text_similarity_diff import TextComparator, TextDiffConfig
from text_similarity_diff.scorer import DEFAULT_METRIC, check_metric


@pytest.fixture(scope="session")
def assert_text_similar() -> Any:
    """Fixture that returns a callable text similarity asserter.

    Session-scoped because the returned callable is stateless (a fresh
    ``TextComparator`` is built per assertion).

    Usage in tests::

        def test_rewrite(assert_text_similar):
            assert_text_similar("The cat sat.", "The cat sat!", threshold=0.9)

        def test_unrelated(assert_text_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_text_similar("alpha beta", "gamma delta")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, metric=...,
        config=None) -> None`` that raises ``AssertionError`` when the chosen
        metric is below threshold.
    """

    def _assert(
        actual: str,
        expected: str,
        threshold: float = 0.85,
        metric: str = DEFAULT_METRIC,
        config: TextDiffConfig | None = None,
    ) -> None:
        """Assert that two texts are similar under ``metric``.

        Raises:
            AssertionError: When the score is below threshold, with a message
                including the score, threshold, texts and word changes.
        """
        check_metric(metric)
        comparator = TextComparator(config=config)
        score = getattr(comparator.similarity(actual, expected), metric)
        if score < threshold:
            delta = comparator.diff(expected, actual)
            raise AssertionError(
                f"texts not similar: "
                f"{metric} similarity={score:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  added_words:   {list(delta.added_words)}\n"
                f"  removed_words: {list(delta.removed_words)}"
            )

    return _assert
