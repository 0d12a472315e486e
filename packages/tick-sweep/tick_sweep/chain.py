"""Fixed-size row of nodes with index-based neighbor lookup."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterator

from tick_sweep.state import ScaleState

if TYPE_CHECKING:
    from tick_sweep.renderer import Painter


@dataclass
class Node:
    index: int
    state: ScaleState = field(default_factory=ScaleState)

    @property
    def scale(self) -> float:
        return self.state.scale

    def advance(self, on_complete: Callable[[], None] | None = None) -> bool:
        return self.state.advance(on_complete)

    def begin(self, on_start: Callable[[], None] | None = None) -> bool:
        return self.state.begin(on_start)


class Chain:
    """Nodes ``0..count-1`` built once, never resized."""

    def __init__(self, nodes: tuple[Node, ...]) -> None:
        if not nodes:
            raise ValueError("chain needs at least one node")
        for i, node in enumerate(nodes):
            if node.index != i:
                raise ValueError(f"node at position {i} has index {node.index}")
        self._nodes = nodes

    @classmethod
    def build(cls, count: int, step: float = 0.02) -> Chain:
        if count < 1:
            raise ValueError("count must be at least 1")
        nodes = []
        for i in range(count):
            nodes.append(Node(index=i, state=ScaleState(step=step)))
        return cls(tuple(nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    @property
    def head(self) -> Node:
        return self._nodes[0]

    def draw_all(self, surface: Any, painter: Painter) -> None:
        for node in self._nodes:
            painter.draw_node(surface, node.index, node.scale)

    def neighbor(
        self,
        index: int,
        direction: int,
        on_edge: Callable[[], None] | None = None,
    ) -> int:
        """Index of the next node in ``direction``.

        At either end of the row ``on_edge`` is called and ``index`` is
        returned unchanged.
        """
        if direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, got {direction!r}")
        target = index + direction
        if 0 <= target < len(self._nodes):
            return target
        if on_edge is not None:
            on_edge()
        return index
