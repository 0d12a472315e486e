"""Animator - fixed-period repeating timer with idempotent start/stop."""

import logging
import time

from tick.clock import Clock
from tick.types import TickFn

logger = logging.getLogger(__name__)


class Animator:
    """Invokes a tick callback once per period while running.

    The animator knows nothing about what it ticks. A host loop drives it
    with :meth:`advance` (wall time since the last frame), or :meth:`run`
    paces it on its own until stopped.
    """

    def __init__(self, tps: int = 50) -> None:
        self._clock = Clock(tps)
        self._tick: TickFn | None = None
        self._running: bool = False
        self._elapsed: float = 0.0

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def period(self) -> float:
        return self._clock.dt

    @property
    def running(self) -> bool:
        return self._running

    @property
    def ticks(self) -> int:
        """Ticks fired since the last start."""
        return self._clock.tick_number

    def start(self, tick: TickFn) -> bool:
        if self._running:
            return False
        self._tick = tick
        self._running = True
        self._elapsed = 0.0
        self._clock.reset()
        logger.debug("animator started at %d tps", self._clock.tps)
        return True

    def stop(self) -> bool:
        if not self._running:
            return False
        self._running = False
        self._tick = None
        self._elapsed = 0.0
        logger.debug("animator stopped after %d ticks", self._clock.tick_number)
        return True

    def _fire(self) -> None:
        assert self._tick is not None
        self._clock.advance()
        self._tick(self._clock.context(self.stop))

    def advance(self, seconds: float) -> int:
        """Feed wall time and fire every tick that has come due, in order."""
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        if not self._running:
            return 0
        self._elapsed += seconds
        fired = 0
        # A tick may stop and restart the timer, so re-read what is due.
        while self._running and self._clock.tick_number < self._clock.due(self._elapsed):
            self._fire()
            fired += 1
        return fired

    def step(self) -> bool:
        """Fire one tick now, as if a full period had passed."""
        if not self._running:
            return False
        self._elapsed += self._clock.dt
        self._fire()
        return True

    def run(self, max_ticks: int | None = None) -> int:
        """Block, ticking at the clock's rate until stopped or ``max_ticks`` fired."""
        dt = self._clock.dt
        fired = 0
        last = time.monotonic()
        while self._running and (max_ticks is None or fired < max_ticks):
            sleep_time = dt - (time.monotonic() - last)
            if sleep_time > 0:
                time.sleep(sleep_time)
            last = time.monotonic()
            self._elapsed += dt
            self._fire()
            fired += 1
        return fired
