"""Ratio helpers shared by the similarity metrics.

Every metric in this package reduces to ``numerator / denominator`` with a
defined value when the denominator is zero, and every cosine is clipped into
[0, 1] to absorb floating-point overshoot (``sqrt(x) * sqrt(x)`` may differ
from ``x`` in the last bit).
"""

from __future__ import annotations


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Return ``numerator / denominator``, or ``default`` when the denominator is 0.

    Args:
        numerator:   Dividend.
        denominator: Divisor.  Zero selects ``default``.
        default:     Value returned for a zero divisor.  Defaults to 0.0.

    Returns:
        The quotient as a float.
    """
    if denominator == 0:
        return default
    return numerator / denominator


def clip_unit(value: float) -> float:
    """Clamp ``value`` into [0.0, 1.0]."""
    return max(0.0, min(1.0, value))
