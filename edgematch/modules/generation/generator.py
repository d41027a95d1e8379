# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Direct-Construction Grid Generator
Builds one valid grid per call by walking cells in row-major order:

  top    ← bottom of the cell above  (0 on the first row)
  left   ← right of the cell to the left (0 on the first column)
  bottom ← fresh draw in [1, edge_count] (0 on the last row)
  right  ← fresh draw in [1, edge_count] (0 on the last column)

Every shared edge is drawn exactly once and inherited by its neighbour,
so the output always satisfies the border and adjacency rules and the
generated arrangement is itself a valid assembly of its pieces.

The random source is injected. Anything exposing numpy's
Generator.integers(low, high) (high exclusive) works, which lets tests
script exact label sequences.
"""

from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from edgematch.models.grid import Grid
from edgematch.models.piece import BORDER, Piece


class RandomSource(Protocol):
    def integers(self, low: int, high: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the default random source. seed=None draws OS entropy."""
    return np.random.default_rng(seed)


def draw_edge(rng: RandomSource, edge_count: int) -> int:
    """Uniform edge label in [1, edge_count]."""
    return int(rng.integers(1, edge_count + 1))


def generate_grid(edge_count: int, size: int, rng: RandomSource) -> Grid:
    """
    Generate a random valid size×size grid.

    Args:
        edge_count: Highest edge label (inclusive), must be >= 1
        size:       Grid side length N
        rng:        Random source with an integers(low, high) method

    Returns:
        Grid whose piece ids are their row-major indices.
    """
    if edge_count < 1:
        raise ValueError(f"edge_count must be >= 1, got {edge_count}")
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    last = size - 1
    placed: list[Piece] = []

    for r in range(size):
        for c in range(size):
            idx = r * size + c
            top = BORDER if r == 0 else placed[idx - size].bottom
            left = BORDER if c == 0 else placed[idx - 1].right
            bottom = BORDER if r == last else draw_edge(rng, edge_count)
            right = BORDER if c == last else draw_edge(rng, edge_count)

            placed.append(
                Piece(id=idx, top=top, right=right, bottom=bottom, left=left)
            )

    return Grid.from_pieces(placed, size)
