# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Core
Public API for the acceptance search, cancellation and persistence.
"""

from edgematch.core.cancellation import CancellationToken, install_interrupt_handler
from edgematch.core.errors import EdgeMatchError, SolutionFormatError, StorageError
from edgematch.core.persistence import load_solutions, save_solution
from edgematch.core.search import decide_round, search

__all__ = [
    # Search
    "search",
    "decide_round",
    # Cancellation
    "CancellationToken",
    "install_interrupt_handler",
    # Persistence
    "save_solution",
    "load_solutions",
    # Errors
    "EdgeMatchError",
    "StorageError",
    "SolutionFormatError",
]
