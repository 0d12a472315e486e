"""Clock and TickContext for the fixed-period animator."""

from typing import Callable

from tick.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def due(self, elapsed: float) -> int:
        """Number of whole periods contained in ``elapsed`` seconds."""
        # Tolerate float drift from summing many frame deltas.
        return int(elapsed * self._tps + 1e-9)

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
