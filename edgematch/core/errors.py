# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Error Taxonomy
Fatal error classes raised at the persistence boundary.
The search core has no retryable errors: an inconclusive or rejected
round is ordinary control flow, not a failure.
"""

from __future__ import annotations


class EdgeMatchError(Exception):
    """Base class for all fatal EdgeMatch errors caught by the CLI."""


class StorageError(EdgeMatchError, RuntimeError):
    """Raised when creating, reading or writing a puzzle file fails."""


class SolutionFormatError(EdgeMatchError, ValueError):
    """Raised when a persisted solution cannot be decoded."""


def describe(exc: BaseException) -> dict:
    """Flatten an exception into log-friendly key/value fields."""
    fields = {"error": str(exc), "exc_type": type(exc).__name__}
    if exc.__cause__ is not None:
        fields["cause"] = f"{type(exc.__cause__).__name__}: {exc.__cause__}"
    return fields
