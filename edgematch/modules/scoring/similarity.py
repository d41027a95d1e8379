# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Positional Similarity
Fraction of cells holding the exact same piece (id and all four labels)
in two grids of equal size.
"""

from __future__ import annotations

import numpy as np

from edgematch.models.grid import Grid


def match_mask(grid: Grid, other: Grid) -> np.ndarray:
    """
    Boolean (N, N) mask, True where both grids hold an equal piece.
    Raises ValueError on mismatched sizes.
    """
    if grid.size != other.size:
        raise ValueError(
            f"Cannot compare grids of different sizes: {grid.size} vs {other.size}"
        )
    return np.array(
        [
            [a == b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(grid.rows, other.rows)
        ],
        dtype=bool,
    )


def similarity_score(grid: Grid, other: Grid) -> float:
    """Return the matching-cell fraction in [0.0, 1.0]."""
    return float(match_mask(grid, other).mean())
