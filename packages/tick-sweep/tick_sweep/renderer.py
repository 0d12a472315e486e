"""Composition root: taps start the sweep, ticks drive it to rest."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from tick import Animator, TickContext
    from tick_sweep.sweep import Sweep


class Painter(Protocol):
    """Drawing collaborator. Pure side effects on ``surface``."""

    def clear(self, surface: Any) -> None: ...

    def draw_node(self, surface: Any, index: int, scale: float) -> None: ...


class Renderer:
    def __init__(self, sweep: Sweep, animator: Animator, painter: Painter) -> None:
        self._sweep = sweep
        self._animator = animator
        self._painter = painter

    @property
    def sweep(self) -> Sweep:
        return self._sweep

    @property
    def animator(self) -> Animator:
        return self._animator

    def render(self, surface: Any) -> None:
        self._painter.clear(surface)
        self._sweep.draw(surface, self._painter)

    def handle_tap(self, on_redraw: Callable[[], None]) -> bool:
        """Animate one unit of motion on the active node, then stop.

        Returns False when a unit is already in progress.
        """

        def tick(ctx: TickContext) -> None:
            on_redraw()
            if self._sweep.update():
                self._animator.stop()
                on_redraw()

        return self._sweep.start(on_start=lambda: self._animator.start(tick))
