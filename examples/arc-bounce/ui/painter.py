"""Node painter: square, line, and sweeping arc for one node."""
from __future__ import annotations

import pygame

from tick_sweep import SweepConfig
from tick_sweep.shapes import arc_points, block_rect, layout, line_segment


class NodePainter:
    """Draws nodes into the area above the status bar."""

    def __init__(self, config: SweepConfig, width: int, height: int) -> None:
        self._config = config
        self._width = width
        self._height = height

    def clear(self, surface: pygame.Surface) -> None:
        surface.fill(self._config.back_color, (0, 0, self._width, self._height))

    def draw_node(self, surface: pygame.Surface, index: int, scale: float) -> None:
        color = self._config.fore_color
        node = layout(self._width, self._height, index, self._config)
        stroke = max(1, round(node.stroke))

        rect = block_rect(node, self._height, scale)
        pygame.draw.rect(surface, color, pygame.Rect(rect.x, rect.y, rect.w, rect.h))

        start, end = line_segment(node)
        pygame.draw.line(surface, color, start, end, stroke)
        # Round caps
        for cap in (start, end):
            pygame.draw.circle(surface, color, cap, stroke / 2)

        points = arc_points(node, scale, self._config.max_deg)
        if len(points) >= 3:
            pygame.draw.polygon(surface, color, points)
