# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Data Models
Public API for pieces, grids and solution records.
"""

from edgematch.models.grid import Grid, validate_grid
from edgematch.models.piece import BORDER, Piece
from edgematch.models.solution import RoundOutcome, Solution

__all__ = [
    "BORDER",
    "Piece",
    "Grid",
    "validate_grid",
    "RoundOutcome",
    "Solution",
]
