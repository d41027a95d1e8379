# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Solving Module
Public API for exhaustive reassembly and assembly-set checks.
"""

from edgematch.modules.solving.assembler import is_clean, solve

__all__ = [
    "solve",
    "is_clean",
]
