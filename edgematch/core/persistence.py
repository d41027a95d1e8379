# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Solution Persistence
Writes and reads Solution records in the puzzles directory.

On-disk format: the Solution's pydantic JSON dump, UTF-8 encoded, and
zlib-compressed when the file ends in .puzz.gz. The JSON form is
self-describing (grid_size travels with the record), so a file can be
loaded without knowing the configuration that produced it.

Any OSError is re-raised as StorageError; any decode or validation
failure as SolutionFormatError. Both are fatal; there is no partial
write or rollback protection.
"""

from __future__ import annotations

import zlib
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from edgematch.core.errors import SolutionFormatError, StorageError
from edgematch.models.solution import Solution
from edgematch.utils.logger import get_logger
from edgematch.utils.storage import (
    is_compressed,
    is_solution_file,
    solution_filename,
    solution_path,
)

log = get_logger(__name__)


# ─── Codec ───────────────────────────────────────────────────────────────────

def encode_solution(solution: Solution, compress: bool) -> bytes:
    data = solution.model_dump_json().encode("utf-8")
    if compress:
        data = zlib.compress(data)
    return data


def decode_solution(data: bytes, compressed: bool) -> Solution:
    try:
        if compressed:
            data = zlib.decompress(data)
        return Solution.model_validate_json(data)
    except zlib.error as e:
        raise SolutionFormatError(f"Corrupt compressed solution data: {e}") from e
    except ValidationError as e:
        raise SolutionFormatError(
            f"Invalid solution record ({e.error_count()} errors)"
        ) from e


# ─── Directory Lifecycle ─────────────────────────────────────────────────────

def init_puzzles_dir(directory: Path) -> None:
    """Create the puzzles directory if missing. Safe to call repeatedly."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create puzzles directory {directory}: {e}") from e


# ─── Write ───────────────────────────────────────────────────────────────────

def save_solution(
    solution: Solution,
    directory: Optional[Path] = None,
    compress: bool = True,
) -> Path:
    """
    Persist a Solution and return the written path.
    The file name encodes score, tries, threshold, edge_count and NxN.
    """
    filename = solution_filename(
        score=solution.score,
        tries=solution.tries,
        threshold=solution.threshold,
        edge_count=solution.edge_count,
        grid_size=solution.grid_size,
        compressed=compress,
    )
    path = solution_path(filename, directory)
    data = encode_solution(solution, compress)

    try:
        path.write_bytes(data)
    except OSError as e:
        raise StorageError(f"Cannot write solution file {path}: {e}") from e

    log.info(
        "solution_written",
        path=str(path),
        grid=solution.size_tag,
        bytes=len(data),
        compressed=compress,
    )
    return path


# ─── Read ────────────────────────────────────────────────────────────────────

def load_solution(path: Path) -> Solution:
    """Load one solution file, decompressing when its suffix says so."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise StorageError(f"Cannot read solution file {path}: {e}") from e

    try:
        return decode_solution(data, is_compressed(path))
    except SolutionFormatError as e:
        raise SolutionFormatError(f"{path.name}: {e}") from e.__cause__


def load_solutions(directory: Path, grid_size: int) -> list[Solution]:
    """
    Load every persisted solution for the given grid size.
    Files for other sizes and unrelated files are skipped.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise StorageError(f"Cannot scan puzzles directory {directory}: {e}") from e

    solutions = [
        load_solution(path)
        for path in entries
        if path.is_file() and is_solution_file(path, grid_size)
    ]

    log.info(
        "solutions_loaded",
        directory=str(directory),
        grid=f"{grid_size}x{grid_size}",
        count=len(solutions),
    )
    return solutions
