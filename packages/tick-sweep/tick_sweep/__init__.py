"""tick-sweep - Tap-driven back-and-forth node sweep on the tick scheduler."""
from __future__ import annotations

from tick_sweep.chain import Chain, Node
from tick_sweep.config import SweepConfig
from tick_sweep.easing import divide_scale, max_scale, sinify
from tick_sweep.renderer import Painter, Renderer
from tick_sweep.state import ScaleState
from tick_sweep.sweep import Sweep, SweepFrame

__all__ = [
    "Chain",
    "Node",
    "Painter",
    "Renderer",
    "ScaleState",
    "Sweep",
    "SweepConfig",
    "SweepFrame",
    "divide_scale",
    "max_scale",
    "sinify",
]
