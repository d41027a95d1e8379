# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Scoring Module
Public API for grid-to-grid similarity.
"""

from edgematch.modules.scoring.similarity import match_mask, similarity_score

__all__ = [
    "match_mask",
    "similarity_score",
]
