# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Command-Line Entry Point
Loads settings, reports existing puzzles, runs the acceptance search
with Ctrl+C wired to cooperative cancellation, and persists the result.

    edgematch --edge-count 6 --threshold 0.25
    EDGEMATCH_SEED=42 edgematch --no-compress
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from edgematch import __version__
from edgematch.config import Settings, get_settings
from edgematch.core.cancellation import (
    CancellationToken,
    install_interrupt_handler,
    restore_interrupt_handler,
)
from edgematch.core.errors import EdgeMatchError, describe
from edgematch.core.persistence import init_puzzles_dir, load_solutions, save_solution
from edgematch.core.search import search
from edgematch.models.solution import Solution
from edgematch.modules.generation.generator import make_rng
from edgematch.utils.logger import configure_logging, get_logger

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgematch",
        description="Search for edge-matching puzzles with several dissimilar solutions",
    )
    parser.add_argument("--size", "-n", type=int, help="Grid side length N")
    parser.add_argument("--edge-count", "-e", type=int, help="Highest edge label")
    parser.add_argument("--threshold", "-t", type=float,
                        help="Accept when the first two assemblies score <= this")
    parser.add_argument("--seed", type=int, help="Seed for reproducible runs")
    parser.add_argument("--output-dir", "-o", type=Path, help="Puzzles directory")
    parser.add_argument("--no-compress", action="store_true",
                        help="Write plain .puzz files instead of .puzz.gz")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Overlay CLI flags on top of environment-derived settings."""
    base = base or get_settings()
    overrides = {
        "grid_size": args.size,
        "edge_count": args.edge_count,
        "threshold": args.threshold,
        "seed": args.seed,
        "puzzles_dir": args.output_dir,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    if args.no_compress:
        update["compress"] = False
    # Round-trip through validation so CLI values obey the same bounds
    return Settings.model_validate({**base.model_dump(), **update})


def run(settings: Settings, token: Optional[CancellationToken] = None) -> Solution:
    """Startup scan → search → persist. Raises EdgeMatchError on fatal I/O."""
    token = token or CancellationToken()

    init_puzzles_dir(settings.puzzles_dir)
    existing = load_solutions(settings.puzzles_dir, settings.grid_size)
    log.info("existing_puzzles", count=len(existing), grid=settings.size_tag)

    solution = search(
        threshold=settings.threshold,
        edge_count=settings.edge_count,
        size=settings.grid_size,
        rng=make_rng(settings.seed),
        cancel=token,
        progress_interval=settings.progress_interval,
    )

    path = save_solution(solution, settings.puzzles_dir, compress=settings.compress)
    log.info(
        "solution_saved",
        path=str(path),
        score=solution.score,
        tries=solution.tries,
        assemblies=len(solution.values),
        cancelled=solution.cancelled,
    )
    return solution


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as exc:
        parser.error(f"invalid configuration: {exc}")
    configure_logging(settings.log_level)

    log.info(
        "edgematch_startup",
        version=__version__,
        grid=settings.size_tag,
        pieces=settings.cell_count,
        edge_count=settings.edge_count,
        threshold=settings.threshold,
        compress=settings.compress,
        seed=settings.seed,
    )

    token = CancellationToken()
    previous = install_interrupt_handler(token)
    try:
        solution = run(settings, token)
    except EdgeMatchError as exc:
        log.error("fatal_error", **describe(exc))
        return 1
    finally:
        restore_interrupt_handler(previous)

    if solution.cancelled:
        log.warning("safely_terminated", tries=solution.tries, closest=solution.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
