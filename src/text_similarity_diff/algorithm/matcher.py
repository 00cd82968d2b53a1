"""Optimal bipartite assignment over a similarity matrix.

Wraps scipy's ``linear_sum_assignment`` to *maximise* total similarity while
forbidding pairs at or below a floor.  Forbidden cells are marked ``np.inf``
in the cost matrix and then replaced by a guard value before solving (the
solver rejects infinite costs); pairs that land on a forbidden cell are
filtered out afterwards.

Guard value formula: ``finite_max * 2.0 + 1.0``
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]


def optimal_assignment(
    similarity: np.ndarray,
    floor: float,
) -> list[tuple[int, int]]:
    """Pair rows with columns to maximise summed similarity.

    Args:
        similarity: 2-D matrix of shape ``(m, n)`` with values in [0, 1].
        floor:      Pairs with similarity ``<= floor`` are never returned.

    Returns:
        ``(row, col)`` pairs sorted by row.  Empty when the matrix is empty or
        every cell is at or below the floor.
    """
    sim = np.asarray(similarity, dtype=float)
    if sim.size == 0:
        return []

    cost = 1.0 - sim
    forbidden = sim <= floor
    if forbidden.all():
        return []

    if forbidden.any():
        finite_max = float(cost[~forbidden].max())
        guard_value = finite_max * 2.0 + 1.0
        cost = np.where(forbidden, guard_value, cost)

    row_ind, col_ind = linear_sum_assignment(cost)

    pairs = [
        (int(r), int(c))
        for r, c in zip(row_ind.tolist(), col_ind.tolist(), strict=True)
        if not forbidden[r, c]
    ]
    pairs.sort()
    return pairs
