# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Grid Model and Validator
A square N×N arrangement of pieces. Construction only enforces the
shape; whether the arrangement is a legal puzzle is decided by
is_valid(), which checks:

  Border rule:
    row 0 → top == 0, row N-1 → bottom == 0,
    col 0 → left == 0, col N-1 → right == 0

  Adjacency rule:
    above.bottom == below.top
    left.right   == right.left

The solver rebuilds grids from permuted piece orders and re-runs the
validator on each one as a final guard.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from edgematch.models.piece import BORDER, Piece


class Grid(BaseModel):
    """Immutable square matrix of pieces, stored as a tuple of rows."""
    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[Piece, ...], ...]

    @model_validator(mode="after")
    def _check_square(self) -> "Grid":
        n = len(self.rows)
        if n == 0:
            raise ValueError("Grid must have at least one row")
        for r, row in enumerate(self.rows):
            if len(row) != n:
                raise ValueError(
                    f"Grid must be square: row {r} has {len(row)} cells, expected {n}"
                )
        return self

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece], size: int) -> "Grid":
        """Reassemble a row-major piece sequence into a size×size grid."""
        if len(pieces) != size * size:
            raise ValueError(
                f"Expected {size * size} pieces for a {size}x{size} grid, got {len(pieces)}"
            )
        return cls(
            rows=tuple(
                tuple(pieces[r * size:(r + 1) * size]) for r in range(size)
            )
        )

    # ── Accessors ────────────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return len(self.rows)

    def cell(self, row: int, col: int) -> Piece:
        return self.rows[row][col]

    def flatten(self) -> list[Piece]:
        """Row-major piece list: the multiset handed to the solver."""
        return [piece for row in self.rows for piece in row]

    def cells(self) -> Iterator[tuple[int, int, Piece]]:
        """Yield (row, col, piece) in row-major order."""
        for r, row in enumerate(self.rows):
            for c, piece in enumerate(row):
                yield r, c, piece

    # ── Validation ───────────────────────────────────────────────────────────

    def is_valid(self) -> bool:
        """True if both the border rule and the adjacency rule hold."""
        last = self.size - 1
        for r, c, piece in self.cells():
            if (
                (r == 0 and piece.top != BORDER)
                or (r == last and piece.bottom != BORDER)
                or (c == 0 and piece.left != BORDER)
                or (c == last and piece.right != BORDER)
            ):
                return False

            if r > 0 and self.rows[r - 1][c].bottom != piece.top:
                return False
            if c > 0 and self.rows[r][c - 1].right != piece.left:
                return False

        return True


def validate_grid(grid: Grid) -> bool:
    """Functional alias for Grid.is_valid()."""
    return grid.is_valid()
