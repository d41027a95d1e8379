# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Generation Module
Public API for random grid construction.
"""

from edgematch.modules.generation.generator import (
    RandomSource,
    draw_edge,
    generate_grid,
    make_rng,
)

__all__ = [
    "RandomSource",
    "make_rng",
    "draw_edge",
    "generate_grid",
]
