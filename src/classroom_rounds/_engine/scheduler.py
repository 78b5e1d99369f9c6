# Area: Engine
"""
classroom_rounds._engine.scheduler — Cancellable pause scheduling
=================================================================

Holds the callbacks behind the two deliberate pauses (quiz answer
feedback, memory card reveal). Nothing runs on a background thread:
the host loop polls ``run_due()`` on its tick and expired callbacks
fire on the caller's thread, so round logic stays single-threaded.

Each ``schedule`` returns a handle the owner can cancel, which is how
quitting a round drops a pending evaluation.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger("classroom_rounds.scheduler")

_counter = itertools.count(1)


@dataclass
class PauseHandle:
    """A pending callback."""

    name: str
    expires_at: float
    callback: Callable[[], None] = field(repr=False)
    handle_id: int = field(default_factory=lambda: next(_counter))
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class PauseScheduler:
    """
    Pending callbacks keyed by handle, ordered by expiry.

    ``flush()`` fires everything immediately, for headless play and tests.
    """

    def __init__(self) -> None:
        self._pending: List[PauseHandle] = []

    def schedule(
        self, name: str, delay_seconds: float, callback: Callable[[], None]
    ) -> PauseHandle:
        """Run ``callback`` once ``delay_seconds`` have passed."""
        handle = PauseHandle(
            name=name,
            expires_at=time.monotonic() + max(0.0, delay_seconds),
            callback=callback,
        )
        self._pending.append(handle)
        logger.debug(f"Pause scheduled: {name} ({delay_seconds:.2f}s)")
        return handle

    def cancel(self, handle: PauseHandle) -> bool:
        """Cancel a pending callback. Returns False if it already ran or was cancelled."""
        if not handle.active:
            return False
        handle.cancelled = True
        if handle in self._pending:
            self._pending.remove(handle)
        logger.debug(f"Pause cancelled: {handle.name}")
        return True

    def run_due(self) -> int:
        """Fire every callback whose deadline has passed. Returns how many fired."""
        now = time.monotonic()
        due = sorted(
            (h for h in self._pending if now >= h.expires_at),
            key=lambda h: (h.expires_at, h.handle_id),
        )
        fired = 0
        for handle in due:
            if self._fire(handle):
                fired += 1
        return fired

    def flush(self) -> int:
        """Fire every pending callback now, including ones scheduled while flushing."""
        fired = 0
        while self._pending:
            handle = min(self._pending, key=lambda h: (h.expires_at, h.handle_id))
            if self._fire(handle):
                fired += 1
        return fired

    def pending(self) -> int:
        return len(self._pending)

    def clear(self) -> None:
        """Cancel everything."""
        for handle in list(self._pending):
            self.cancel(handle)

    def _fire(self, handle: PauseHandle) -> bool:
        if handle in self._pending:
            self._pending.remove(handle)
        if not handle.active:
            return False
        handle.fired = True
        logger.debug(f"Pause elapsed: {handle.name}")
        handle.callback()
        return True
