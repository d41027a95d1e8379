# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Puzzle File Naming
All persisted solutions live flat in one puzzles directory:

    puzzles/
        puzzle_{score}_{tries}_{threshold}_{edge_count}_{N}x{N}.puzz
        puzzle_{score}_{tries}_{threshold}_{edge_count}_{N}x{N}.puzz.gz

The .puzz.gz suffix marks zlib-compressed files.
"""

from pathlib import Path
from typing import Optional

from edgematch.config import get_settings

SUFFIX = ".puzz"
SUFFIX_COMPRESSED = ".puzz.gz"


def _root() -> Path:
    return get_settings().puzzles_dir


# ─── Names ───────────────────────────────────────────────────────────────────

def size_tag(grid_size: int) -> str:
    return f"{grid_size}x{grid_size}"


def solution_filename(
    score: float,
    tries: int,
    threshold: float,
    edge_count: int,
    grid_size: int,
    compressed: bool,
) -> str:
    suffix = SUFFIX_COMPRESSED if compressed else SUFFIX
    return (
        f"puzzle_{score}_{tries}_{threshold}_{edge_count}_"
        f"{size_tag(grid_size)}{suffix}"
    )


def solution_path(
    filename: str,
    directory: Optional[Path] = None,
) -> Path:
    return (directory or _root()) / filename


# ─── Classification ──────────────────────────────────────────────────────────

def is_compressed(path: Path) -> bool:
    return path.name.endswith(SUFFIX_COMPRESSED)


def is_solution_file(path: Path, grid_size: int) -> bool:
    """True for .puzz / .puzz.gz files whose name carries the NxN tag."""
    name = path.name
    if size_tag(grid_size) not in name:
        return False
    return name.endswith(SUFFIX) or name.endswith(SUFFIX_COMPRESSED)
