# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 2 — Data model tests.
Pure logic: piece value semantics, grid shape enforcement, row-major
flatten/reassemble and the border/adjacency validator.
"""

import pytest


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _make_2x2_pieces():
    """
    Hand-built valid 2×2 puzzle:

        [0|1]   top row: shared vertical edge label 1
        [2|3]   bottom row: shared vertical edge label 4
        column 0 shares label 2, column 1 shares label 3
    """
    from edgematch.models.piece import Piece
    return [
        Piece(id=0, top=0, right=1, bottom=2, left=0),
        Piece(id=1, top=0, right=0, bottom=3, left=1),
        Piece(id=2, top=2, right=4, bottom=0, left=0),
        Piece(id=3, top=3, right=0, bottom=0, left=4),
    ]


def _make_2x2_grid():
    from edgematch.models.grid import Grid
    return Grid.from_pieces(_make_2x2_pieces(), 2)


# ─── Piece ───────────────────────────────────────────────────────────────────

def test_piece_structural_equality():
    from edgematch.models.piece import Piece
    a = Piece(id=3, top=1, right=2, bottom=3, left=4)
    b = Piece(id=3, top=1, right=2, bottom=3, left=4)
    assert a == b
    assert hash(a) == hash(b)


def test_piece_id_participates_in_equality():
    from edgematch.models.piece import Piece
    a = Piece(id=3, top=1, right=2, bottom=3, left=4)
    b = Piece(id=4, top=1, right=2, bottom=3, left=4)
    assert a != b


def test_piece_is_immutable():
    from pydantic import ValidationError
    from edgematch.models.piece import Piece
    p = Piece(id=0, top=0, right=1, bottom=1, left=0)
    with pytest.raises(ValidationError):
        p.top = 5


def test_piece_rejects_negative_labels():
    from pydantic import ValidationError
    from edgematch.models.piece import Piece
    with pytest.raises(ValidationError):
        Piece(id=0, top=-1)


def test_piece_edges_clockwise():
    from edgematch.models.piece import Piece
    p = Piece(id=0, top=0, right=5, bottom=6, left=0)
    assert p.edges == (0, 5, 6, 0)


# ─── Grid Shape ──────────────────────────────────────────────────────────────

def test_grid_requires_square_rows():
    from edgematch.models.grid import Grid
    pieces = _make_2x2_pieces()
    with pytest.raises(ValueError):
        Grid(rows=((pieces[0], pieces[1]), (pieces[2],)))


def test_grid_rejects_empty():
    from edgematch.models.grid import Grid
    with pytest.raises(ValueError):
        Grid(rows=())


def test_from_pieces_wrong_count():
    from edgematch.models.grid import Grid
    with pytest.raises(ValueError):
        Grid.from_pieces(_make_2x2_pieces()[:3], 2)


def test_grid_accessors():
    grid = _make_2x2_grid()
    assert grid.size == 2
    assert grid.cell(1, 0).id == 2
    positions = [(r, c, p.id) for r, c, p in grid.cells()]
    assert positions == [(0, 0, 0), (0, 1, 1), (1, 0, 2), (1, 1, 3)]


def test_flatten_reassemble_roundtrip():
    from edgematch.models.grid import Grid
    grid = _make_2x2_grid()
    pieces = grid.flatten()
    assert [p.id for p in pieces] == [0, 1, 2, 3]
    assert Grid.from_pieces(pieces, 2) == grid


def test_grid_hashable_value_semantics():
    a = _make_2x2_grid()
    b = _make_2x2_grid()
    assert a == b
    assert len({a, b}) == 1


# ─── Validator ───────────────────────────────────────────────────────────────

def test_valid_grid_passes():
    from edgematch.models.grid import validate_grid
    grid = _make_2x2_grid()
    assert grid.is_valid() is True
    assert validate_grid(grid) is True


def test_border_violation_detected():
    from edgematch.models.grid import Grid
    pieces = _make_2x2_pieces()
    # Top-right piece exposes a non-zero label on the right border
    pieces[1] = pieces[1].model_copy(update={"right": 7})
    assert Grid.from_pieces(pieces, 2).is_valid() is False


def test_horizontal_adjacency_violation_detected():
    from edgematch.models.grid import Grid
    pieces = _make_2x2_pieces()
    pieces[0] = pieces[0].model_copy(update={"right": 9})
    assert Grid.from_pieces(pieces, 2).is_valid() is False


def test_vertical_adjacency_violation_detected():
    from edgematch.models.grid import Grid
    pieces = _make_2x2_pieces()
    pieces[2] = pieces[2].model_copy(update={"top": 9})
    assert Grid.from_pieces(pieces, 2).is_valid() is False


def test_zeroed_interior_edge_is_invalid():
    from edgematch.models.grid import Grid
    pieces = _make_2x2_pieces()
    pieces[0] = pieces[0].model_copy(update={"right": 0})
    assert Grid.from_pieces(pieces, 2).is_valid() is False


# ─── Solution ────────────────────────────────────────────────────────────────

def test_solution_accepted_flag():
    from edgematch.models.solution import Solution
    grid = _make_2x2_grid()
    accepted = Solution(
        score=0.0, tries=3, threshold=0.25, edge_count=4, grid_size=2,
        values=[grid, grid],
    )
    assert accepted.is_accepted is True
    assert accepted.size_tag == "2x2"

    partial = accepted.model_copy(update={"cancelled": True})
    assert partial.is_accepted is False
