# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — Cooperative Cancellation
A set-once flag read by the search loop between rounds, plus the SIGINT
hook that sets it. The flag is never consulted inside the solver: a
round in flight always completes.

The signal handler only flips the flag. Logging the interrupt is left to
the search loop, which runs outside signal context.
"""

from __future__ import annotations

import signal
import threading
from typing import Any


class CancellationToken:
    """Set-once flag backed by threading.Event."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


def install_interrupt_handler(token: CancellationToken) -> Any:
    """
    Route SIGINT (Ctrl+C) to token.cancel().
    Must be called from the main thread. Returns the previous handler so
    callers can restore it once the search is over.
    """

    def _handler(signum: int, frame: Any) -> None:
        # Signal context: set the flag, nothing else
        token.cancel()

    return signal.signal(signal.SIGINT, _handler)


def restore_interrupt_handler(previous: Any) -> None:
    signal.signal(signal.SIGINT, previous)
