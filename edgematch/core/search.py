# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Acceptance Search Loop
Repeats generate → solve → decide rounds until a puzzle is found whose
piece multiset has at least two clean, sufficiently different
assemblies, or until cancellation is requested.

Round decision:
  < 2 assemblies                    → INCONCLUSIVE (retry)
  unclean set or score > threshold  → REJECTED     (retry)
  clean set and score <= threshold  → ACCEPTED     (stop)

score is always the similarity of the first two assemblies in solver
discovery order. closest tracks the lowest score seen in any round that
produced two or more assemblies and is reported on cancellation.

Cancellation is checked once per completed non-accepting round. The
cancelled Solution pairs closest with the assemblies of the LAST round,
which need not be the round that reached closest.
"""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

import structlog

from edgematch.core.cancellation import CancellationToken
from edgematch.models.grid import Grid
from edgematch.models.solution import RoundOutcome, Solution
from edgematch.modules.generation.generator import RandomSource, generate_grid
from edgematch.modules.scoring.similarity import similarity_score
from edgematch.modules.solving.assembler import is_clean, solve
from edgematch.utils.logger import get_logger

log = get_logger(__name__)


def decide_round(
    assemblies: Sequence[Grid],
    threshold: float,
) -> tuple[RoundOutcome, Optional[float]]:
    """
    Classify one round's assemblies.

    Returns:
        (outcome, score); score is None for INCONCLUSIVE rounds.
    """
    if len(assemblies) < 2:
        return RoundOutcome.INCONCLUSIVE, None

    score = similarity_score(assemblies[0], assemblies[1])
    if is_clean(assemblies) and score <= threshold:
        return RoundOutcome.ACCEPTED, score
    return RoundOutcome.REJECTED, score


def search(
    threshold: float,
    edge_count: int,
    size: int,
    rng: RandomSource,
    cancel: Optional[CancellationToken] = None,
    progress_interval: int = 10_000,
) -> Solution:
    """
    Run the acceptance search.

    Args:
        threshold:         Accept when the first two assemblies score <= this
        edge_count:        Highest edge label passed to the generator
        size:              Grid side length N
        rng:               Injected random source for the generator
        cancel:            Optional token checked after every completed round
        progress_interval: Log progress every this many tries

    Returns:
        Solution: accepted, or cancelled=True as a best-effort partial result.
    """
    run_id = uuid.uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=run_id)

    log.info(
        "search_start",
        threshold=threshold,
        edge_count=edge_count,
        grid=f"{size}x{size}",
    )

    tries = 0
    closest = 1.0

    try:
        while True:
            # ── Generate + solve ──────────────────────────────────────────────
            grid = generate_grid(edge_count, size, rng)
            assemblies = solve(grid.flatten(), size)

            # ── Decide ────────────────────────────────────────────────────────
            outcome, score = decide_round(assemblies, threshold)
            tries += 1
            if score is not None and score < closest:
                closest = score

            if outcome is RoundOutcome.ACCEPTED:
                log.info(
                    "search_round_accepted",
                    tries=tries,
                    score=score,
                    assemblies=len(assemblies),
                )
                return Solution(
                    score=score,
                    tries=tries,
                    threshold=threshold,
                    edge_count=edge_count,
                    grid_size=size,
                    values=list(assemblies),
                )

            if outcome is RoundOutcome.REJECTED:
                log.debug(
                    "search_round_rejected",
                    tries=tries,
                    score=score,
                    assemblies=len(assemblies),
                )

            if tries % progress_interval == 0:
                log.info("search_progress", tries=tries, closest=closest)

            # ── Cancellation (between rounds only) ────────────────────────────
            if cancel is not None and cancel.is_set():
                log.warning("interrupt_received", tries=tries)
                log.warning(
                    "search_cancelled",
                    tries=tries,
                    closest=closest,
                    last_outcome=outcome.value,
                    assemblies=len(assemblies),
                )
                return Solution(
                    score=closest,
                    tries=tries,
                    threshold=threshold,
                    edge_count=edge_count,
                    grid_size=size,
                    values=list(assemblies),
                    cancelled=True,
                )
    finally:
        structlog.contextvars.unbind_contextvars("run_id")
