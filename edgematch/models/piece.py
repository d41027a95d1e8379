# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Piece Data Model
A single square tile with four labelled edges. Label 0 is reserved for
edges that must face the puzzle border.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Edge label meaning "no connection"; only valid on the outer frame
BORDER = 0


class Piece(BaseModel):
    """
    Immutable tile value. Equality and hashing cover the id and all four
    labels, so two pieces with the same labels but different ids differ.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Row-major index assigned at generation")
    top: int = Field(BORDER, ge=0)
    right: int = Field(BORDER, ge=0)
    bottom: int = Field(BORDER, ge=0)
    left: int = Field(BORDER, ge=0)

    @property
    def edges(self) -> tuple[int, int, int, int]:
        """Labels in clockwise order: (top, right, bottom, left)."""
        return (self.top, self.right, self.bottom, self.left)
