# Area: Core
"""
safe_respawn._core.scheduler - Next-tick deferral
=================================================

Queues callbacks to run at the next server tick boundary.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque

logger = logging.getLogger("safe_respawn.scheduler")


class TickScheduler:
    """
    FIFO queue of callbacks run once per tick.

    Callbacks queued while a tick is running are held for the following
    tick, so a deferred action always observes the effects of the tick
    that scheduled it.
    """

    def __init__(self) -> None:
        self._pending: Deque[Callable[[], None]] = deque()

    def next_tick(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def run_tick(self) -> int:
        """Run every callback queued before this call. Returns how many ran.

        A callback that raises is logged and does not stop the rest of
        the batch.
        """
        batch = self._pending
        self._pending = deque()
        for callback in batch:
            try:
                callback()
            except Exception:
                logger.exception("Deferred callback failed")
        if batch:
            logger.debug("Ran %d deferred callback(s)", len(batch))
        return len(batch)

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
