"""Back-and-forth sweep over a chain, one node in motion at a time."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from tick_sweep.chain import Chain, Node

if TYPE_CHECKING:
    from tick_sweep.renderer import Painter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepFrame:
    """Snapshot of the sweep after a transition. Not a component."""

    active_index: int
    sweep_direction: int
    scale: float
    node_direction: int


class Sweep:
    def __init__(self, chain: Chain) -> None:
        self._chain = chain
        self._active_index = 0
        self._direction = 1

    @property
    def chain(self) -> Chain:
        return self._chain

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active(self) -> Node:
        return self._chain[self._active_index]

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def moving(self) -> bool:
        return self.active.state.moving

    @property
    def frame(self) -> SweepFrame:
        state = self.active.state
        return SweepFrame(
            active_index=self._active_index,
            sweep_direction=self._direction,
            scale=state.scale,
            node_direction=state.direction,
        )

    def draw(self, surface: Any, painter: Painter) -> None:
        self._chain.draw_all(surface, painter)

    def _reverse(self) -> None:
        self._direction = -self._direction
        logger.debug(
            "sweep reversed at node %d, now heading %+d",
            self._active_index,
            self._direction,
        )

    def update(self, on_step_complete: Callable[[], None] | None = None) -> bool:
        """Advance the active node one tick.

        Returns True when its unit of motion completed; the pointer has then
        moved to the next node, or the sweep direction has flipped at an end.
        """
        if not self.active.advance():
            return False
        logger.debug(
            "node %d settled at %.0f", self._active_index, self.active.state.settled
        )
        self._active_index = self._chain.neighbor(
            self._active_index, self._direction, on_edge=self._reverse
        )
        if on_step_complete is not None:
            on_step_complete()
        return True

    def start(self, on_start: Callable[[], None] | None = None) -> bool:
        """Begin a unit of motion on the active node. No-op while it moves."""
        return self.active.begin(on_start)
