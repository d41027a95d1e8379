# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 7 — Persistence tests.
Write/load of compressed and plain solution files, directory scanning
and fatal error mapping. Uses pytest's tmp_path for all I/O.
"""

import zlib

import numpy as np
import pytest


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _make_solution(size: int = 4, cancelled: bool = False):
    from edgematch.models.solution import Solution
    from edgematch.modules.generation.generator import generate_grid
    from edgematch.modules.solving.assembler import solve

    grid = generate_grid(1, size, np.random.default_rng(0))
    values = solve(grid.flatten(), size)[:2]
    return Solution(
        score=0.875,
        tries=42,
        threshold=0.9,
        edge_count=1,
        grid_size=size,
        values=values,
        cancelled=cancelled,
    )


# ─── Round Trip ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("compress", [True, False])
def test_save_and_load_roundtrip(tmp_path, compress):
    from edgematch.core.persistence import load_solution, save_solution

    solution = _make_solution()
    path = save_solution(solution, tmp_path, compress=compress)

    assert path.parent == tmp_path
    assert path.name == (
        "puzzle_0.875_42_0.9_1_4x4" + (".puzz.gz" if compress else ".puzz")
    )
    assert load_solution(path) == solution


def test_compressed_file_is_zlib(tmp_path):
    from edgematch.core.persistence import save_solution

    path = save_solution(_make_solution(), tmp_path, compress=True)
    raw = zlib.decompress(path.read_bytes())
    assert raw.startswith(b"{")


def test_cancelled_flag_persists(tmp_path):
    from edgematch.core.persistence import load_solution, save_solution

    path = save_solution(_make_solution(cancelled=True), tmp_path, compress=False)
    assert load_solution(path).cancelled is True


# ─── Directory Scan ──────────────────────────────────────────────────────────

def test_load_solutions_filters_by_size(tmp_path):
    from edgematch.core.persistence import load_solutions, save_solution

    save_solution(_make_solution(size=4), tmp_path, compress=True)
    save_solution(_make_solution(size=4).model_copy(update={"tries": 7}), tmp_path, compress=False)
    save_solution(_make_solution(size=3), tmp_path, compress=True)
    (tmp_path / "readme_4x4.txt").write_text("not a puzzle")

    loaded = load_solutions(tmp_path, 4)
    assert len(loaded) == 2
    assert all(s.grid_size == 4 for s in loaded)
    assert len(load_solutions(tmp_path, 3)) == 1
    assert load_solutions(tmp_path, 5) == []


def test_init_puzzles_dir_creates_nested(tmp_path):
    from edgematch.core.persistence import init_puzzles_dir

    target = tmp_path / "a" / "puzzles"
    init_puzzles_dir(target)
    init_puzzles_dir(target)
    assert target.is_dir()


# ─── Errors ──────────────────────────────────────────────────────────────────

def test_corrupt_compressed_file_raises(tmp_path):
    from edgematch.core.errors import SolutionFormatError
    from edgematch.core.persistence import load_solution

    path = tmp_path / "puzzle_0.1_1_0.25_6_5x5.puzz.gz"
    path.write_bytes(b"definitely not zlib")
    with pytest.raises(SolutionFormatError):
        load_solution(path)


def test_malformed_plain_file_raises(tmp_path):
    from edgematch.core.errors import SolutionFormatError
    from edgematch.core.persistence import load_solution

    path = tmp_path / "puzzle_0.1_1_0.25_6_5x5.puzz"
    path.write_bytes(b'{"score": "high"}')
    with pytest.raises(SolutionFormatError):
        load_solution(path)


def test_scan_propagates_malformed_file(tmp_path):
    from edgematch.core.errors import SolutionFormatError
    from edgematch.core.persistence import load_solutions

    (tmp_path / "puzzle_0.1_1_0.25_6_5x5.puzz").write_bytes(b"\xff\x00garbage")
    with pytest.raises(SolutionFormatError):
        load_solutions(tmp_path, 5)


def test_missing_directory_raises_storage_error(tmp_path):
    from edgematch.core.errors import StorageError
    from edgematch.core.persistence import load_solutions

    with pytest.raises(StorageError):
        load_solutions(tmp_path / "nope", 5)


def test_unwritable_target_raises_storage_error(tmp_path):
    from edgematch.core.errors import StorageError
    from edgematch.core.persistence import save_solution

    with pytest.raises(StorageError):
        save_solution(_make_solution(), tmp_path / "missing" / "dir", compress=True)


def test_save_logs_grid_tag(tmp_path, monkeypatch):
    import structlog
    from structlog.testing import capture_logs
    from edgematch.core.persistence import save_solution

    with capture_logs() as logs:
        monkeypatch.setattr(
            "edgematch.core.persistence.log",
            structlog.get_logger("edgematch.core.persistence"),
        )
        save_solution(_make_solution(), tmp_path, compress=False)

    written = next(e for e in logs if e["event"] == "solution_written")
    assert written["grid"] == "4x4"
    assert written["compressed"] is False
