"""Per-node scale state."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class ScaleState:
    """Scale of one node, moving one unit at a time between 0 and 1.

    ``settled`` is where the node last came to rest. ``direction`` is +1
    while growing, -1 while shrinking and 0 at rest.
    """

    step: float = 0.02
    scale: float = 0.0
    direction: int = 0
    settled: float = 0.0

    @property
    def moving(self) -> bool:
        return self.direction != 0

    def advance(self, on_complete: Callable[[], None] | None = None) -> bool:
        """Move one tick's worth. Return True when a unit of motion completes."""
        self.scale += self.direction * self.step
        if abs(self.scale - self.settled) > 1:
            self.scale = self.settled + self.direction
            self.direction = 0
            self.settled = self.scale
            if on_complete is not None:
                on_complete()
            return True
        return False

    def begin(self, on_start: Callable[[], None] | None = None) -> bool:
        """Head away from the current rest value. No-op while moving."""
        if self.direction != 0:
            return False
        self.direction = int(1 - 2 * self.settled)
        if on_start is not None:
            on_start()
        return True
