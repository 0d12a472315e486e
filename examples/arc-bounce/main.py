"""Arc Bounce Sweep — tap-driven node sweep.

Exercises tick (Animator) and tick-sweep.

Each click animates the active node through one unit of motion: its square
rises and falls while its arc sweeps open and closed. The next click moves
on to the neighbor, bouncing back at either end of the row.

Controls:
  Click   Advance the sweep by one node
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_sweep import Renderer, SweepConfig
from ui.constants import CAPTION, FPS, SCREEN_H, SCREEN_W, STATUS_H
from ui.painter import NodePainter
from ui.status import draw_status_bar

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arc Bounce Sweep — tick-sweep demo")
    p.add_argument("--nodes", type=int, default=5, help="Number of nodes (1-12, default: 5)")
    p.add_argument("--step", type=float, default=0.02, help="Scale step per tick (default: 0.02)")
    p.add_argument("--tps", type=int, default=50, help="Ticks per second (default: 50)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log sweep transitions")
    args = p.parse_args()
    args.nodes = max(1, min(12, args.nodes))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = SweepConfig(node_count=args.nodes, step=args.step, tps=args.tps)
    except ValueError as exc:
        sys.exit(f"error: {exc}")
    painter = NodePainter(config, SCREEN_W, SCREEN_H - STATUS_H)
    renderer = Renderer(config.build_sweep(), config.build_animator(), painter)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    dirty = True

    def request_redraw() -> None:
        nonlocal dirty
        dirty = True

    logger.info("%d nodes at %d tps, click to advance", config.node_count, config.tps)
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not renderer.handle_tap(request_redraw):
                    logger.debug("tap ignored, node %d still moving", renderer.sweep.active_index)

        # --- Tick ---
        renderer.animator.advance(dt)

        # --- Render ---
        if dirty:
            renderer.render(screen)
            draw_status_bar(screen, font, renderer.sweep.frame, renderer.animator.running)
            pygame.display.flip()
            dirty = False

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
