"""Node geometry: where a node's square, line, and arc land for a given scale."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_sweep.easing import sinify

if TYPE_CHECKING:
    from tick_sweep.config import SweepConfig

Point = tuple[float, float]


@dataclass(frozen=True)
class NodeLayout:
    cx: float
    cy: float
    size: float
    stroke: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float


def layout(width: float, height: float, index: int, config: SweepConfig) -> NodeLayout:
    """Nodes sit evenly spaced along the horizontal midline."""
    gap = width / (config.node_count + 1)
    return NodeLayout(
        cx=gap * (index + 1),
        cy=height / 2,
        size=gap / config.size_factor,
        stroke=min(width, height) / config.stroke_factor,
    )


def block_rect(node: NodeLayout, height: float, scale: float) -> Rect:
    """Square of half-side ``size``, lifted toward the top edge as scale peaks."""
    lift = (height / 2 - node.size) * sinify(scale)
    return Rect(
        x=node.cx - node.size,
        y=node.cy - lift - node.size,
        w=2 * node.size,
        h=2 * node.size,
    )


def line_segment(node: NodeLayout) -> tuple[Point, Point]:
    return (node.cx - node.size, node.cy), (node.cx + node.size, node.cy)


def arc_points(node: NodeLayout, scale: float, max_deg: int = 180) -> list[Point]:
    """Fan polygon from the center, one rim point per swept degree."""
    sweep = math.floor(max_deg * sinify(scale))
    points: list[Point] = [(node.cx, node.cy)]
    for deg in range(sweep + 1):
        rad = math.radians(deg)
        points.append(
            (node.cx + node.size * math.cos(rad), node.cy + node.size * math.sin(rad))
        )
    return points
