# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Structured Logging
Run logs for the puzzle search, written to stdout through structlog.
Each entry is tagged app=edgematch; entries emitted during a search also
carry that search's run_id.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor

from edgematch.config import get_settings


def _add_app_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    # Lets EdgeMatch lines be filtered out of a shared stdout stream
    event_dict["app"] = "edgematch"
    return event_dict


# Applied to every entry before rendering
_PRE_RENDER: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    _add_app_info,
]


def _render_chain(console: bool) -> list[Processor]:
    if console:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Set up structlog once per process, from main() before the first search.

    INFO and above emit one JSON object per line (machine-greppable run
    logs). DEBUG switches to the coloured console renderer, which is the
    level where every rejected round and solve_complete line is printed.
    log_level falls back to EDGEMATCH_LOG_LEVEL when not given.
    """
    level_name = (log_level or get_settings().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[*_PRE_RENDER, *_render_chain(level_name == "DEBUG")],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str = "edgematch") -> structlog.BoundLogger:
    """
    Module-level logger factory. Event names are snake_case verbs of what
    happened; numbers ride along as key/value pairs.

    Typical search output:
        log.info("search_start", threshold=0.25, edge_count=6, grid="5x5")
        log.info("search_progress", tries=10000, closest=0.36)
        log.warning("search_cancelled", tries=10412, closest=0.32)
        log.info("solution_saved", path="puzzles/...", cancelled=True)

    search() binds run_id for its own duration, so every line above shares
    one id and lines from later runs do not inherit it.
    """
    return structlog.get_logger(name)
