"""Sweep configuration."""
from __future__ import annotations

from dataclasses import dataclass

from tick import Animator
from tick_sweep.chain import Chain
from tick_sweep.sweep import Sweep

Color = tuple[int, int, int]


@dataclass(frozen=True)
class SweepConfig:
    """Numeric and color constants for the node row and its animation."""

    node_count: int = 5
    step: float = 0.02
    tps: int = 50
    stroke_factor: float = 90.0
    size_factor: float = 2.9
    max_deg: int = 180
    fore_color: Color = (63, 81, 181)
    back_color: Color = (189, 189, 189)

    def __post_init__(self) -> None:
        if self.node_count < 1:
            raise ValueError("node_count must be at least 1")
        if not 0 < self.step <= 1:
            raise ValueError("step must be in (0, 1]")
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.stroke_factor <= 0 or self.size_factor <= 0:
            raise ValueError("stroke_factor and size_factor must be positive")
        if not 0 <= self.max_deg <= 360:
            raise ValueError("max_deg must be within [0, 360]")

    @property
    def tick_period(self) -> float:
        return 1.0 / self.tps

    def build_sweep(self) -> Sweep:
        return Sweep(Chain.build(self.node_count, self.step))

    def build_animator(self) -> Animator:
        return Animator(tps=self.tps)
