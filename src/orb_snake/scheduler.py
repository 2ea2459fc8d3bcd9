"""Fixed-step tick driver that sits between a real clock and the engine."""

from __future__ import annotations

import logging
from typing import Protocol

from .config import MAX_CATCH_UP_TICKS, TICK_INTERVAL

logger = logging.getLogger(__name__)


class Tickable(Protocol):
    def advance_tick(self, now: int) -> None: ...


class FixedStepDriver:
    """Run ``target.advance_tick`` once per whole ``interval`` of real time.

    Each tick receives its own scheduled timestamp, so a frame that catches up
    two ticks still hands the engine two distinct ``now`` values. Ticks are
    serialized: a ``pump`` issued from inside a tick does nothing.
    """

    def __init__(
        self,
        target: Tickable,
        interval: int = TICK_INTERVAL,
        *,
        max_catch_up: int = MAX_CATCH_UP_TICKS,
    ) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self.target = target
        self.interval = interval
        self.max_catch_up = max_catch_up
        self.last_tick: int | None = None
        self.ticks = 0
        self._in_tick = False

    def start(self, now: int) -> None:
        """Anchor the cadence at ``now``; the first tick fires one interval later."""
        self.last_tick = now

    def stop(self) -> None:
        self.last_tick = None

    @property
    def running(self) -> bool:
        return self.last_tick is not None

    def pump(self, now: int) -> int:
        """Fire every tick that is due at ``now`` and return how many ran."""
        if self.last_tick is None:
            return 0
        if self._in_tick:
            logger.debug("Re-entrant pump at %d ignored", now)
            return 0

        fired = 0
        self._in_tick = True
        try:
            while now - self.last_tick >= self.interval:
                if fired >= self.max_catch_up:
                    # backlog past the cap is discarded
                    logger.debug("Dropping %d ms of tick backlog", now - self.last_tick)
                    self.last_tick = now
                    break
                self.last_tick += self.interval
                self.target.advance_tick(self.last_tick)
                fired += 1
        finally:
            self._in_tick = False
        self.ticks += fired
        return fired
