"""Bottom status bar."""
from __future__ import annotations

import pygame

from tick_sweep import SweepFrame
from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    frame: SweepFrame,
    running: bool,
) -> None:
    """Active node, sweep heading, and whether the animator is ticking."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    heading = "->" if frame.sweep_direction > 0 else "<-"
    state = "animating" if running else "at rest"
    text = f"node {frame.active_index} {heading}  scale {frame.scale:.2f}  {state}"
    surface.blit(font.render(text, True, TEXT_COLOR), (10, y + 6))

    hint = font.render("Click: advance   Esc: quit", True, TEXT_DIM)
    surface.blit(hint, (SCREEN_W - hint.get_width() - 10, y + 6))
