# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Solution Record
The outcome of one acceptance search, as returned by the search loop
and persisted to the puzzles directory.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from edgematch.models.grid import Grid


class RoundOutcome(str, Enum):
    """Classification of one generate → solve → decide round."""
    INCONCLUSIVE = "inconclusive"   # fewer than 2 assemblies
    REJECTED = "rejected"           # unclean set or score above threshold
    ACCEPTED = "accepted"


class Solution(BaseModel):
    """
    Accepted (or cancelled) search result.

    When cancelled is True, score is the best similarity seen across the
    run while values holds the last round's assemblies, a best-effort
    partial result, not a satisfied acceptance.
    """
    score: float = Field(..., ge=0.0, le=1.0)
    tries: int = Field(..., ge=0)
    threshold: float = Field(..., ge=0.0, le=1.0)
    edge_count: int = Field(..., ge=1)
    grid_size: int = Field(..., ge=1)
    values: list[Grid] = Field(default_factory=list)
    cancelled: bool = False

    @property
    def size_tag(self) -> str:
        return f"{self.grid_size}x{self.grid_size}"

    @property
    def is_accepted(self) -> bool:
        return not self.cancelled and len(self.values) >= 2 and self.score <= self.threshold
