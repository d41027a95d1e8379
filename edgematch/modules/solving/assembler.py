# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Exhaustive Backtracking Assembler
Enumerates every valid arrangement of a fixed piece multiset.

Placement fills positions in row-major order. For the next position k
a candidate piece is kept only if:
  - top  == placed[k - N].bottom   (or top == 0 on the first row)
  - left == placed[k - 1].right    (or left == 0 on the first column)

Only the top and left neighbours exist at placement time, so these two
checks prune a branch the moment it cannot satisfy local adjacency.
Bottom/right border rules are enforced by the full-grid validator once
all N² pieces are placed.

One working buffer (placed + used flags) is shared across the whole
recursion; every placement is undone before the next sibling is tried.
Candidates are scanned in input order, so discovery order is stable and
the generator's own arrangement is always among the results.
"""

from __future__ import annotations

from typing import Sequence

from edgematch.models.grid import Grid
from edgematch.models.piece import BORDER, Piece
from edgematch.utils.logger import get_logger

log = get_logger(__name__)


def solve(pieces: Sequence[Piece], size: int) -> list[Grid]:
    """
    Find all valid assemblies of the given pieces.

    Args:
        pieces: Exactly size² pieces (row-major flatten order)
        size:   Grid side length N

    Returns:
        Every valid Grid in discovery order. Value-equal grids reached by
        different permutations are all kept.
    """
    total = size * size
    if len(pieces) != total:
        raise ValueError(
            f"Expected {total} pieces for a {size}x{size} grid, got {len(pieces)}"
        )

    placed: list[Piece] = []
    used = [False] * total
    found: list[Grid] = []

    def _fits(piece: Piece, k: int) -> bool:
        row, col = divmod(k, size)
        if row == 0:
            if piece.top != BORDER:
                return False
        elif piece.top != placed[k - size].bottom:
            return False
        if col == 0:
            return piece.left == BORDER
        return piece.left == placed[k - 1].right

    def _place(k: int) -> None:
        if k == total:
            candidate = Grid.from_pieces(placed, size)
            if candidate.is_valid():
                found.append(candidate)
            return

        for i, piece in enumerate(pieces):
            if used[i] or not _fits(piece, k):
                continue
            used[i] = True
            placed.append(piece)
            _place(k + 1)
            placed.pop()
            used[i] = False

    _place(0)

    log.debug("solve_complete", size=size, assemblies=len(found))
    return found


def is_clean(assemblies: Sequence[Grid]) -> bool:
    """
    True if no two assemblies are value-equal and each one independently
    passes the grid validator.
    """
    seen: set[Grid] = set()
    for grid in assemblies:
        if not grid.is_valid() or grid in seen:
            return False
        seen.add(grid)
    return True
