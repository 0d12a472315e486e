"""Scale helpers: per-segment progress and half-sine easing."""
from __future__ import annotations

import math


def sinify(x: float) -> float:
    """Map linear progress in [0, 1] onto a rise-and-fall curve peaking at 0.5."""
    return math.sin(x * math.pi)


def max_scale(scale: float, i: int, n: int) -> float:
    if n <= 0:
        raise ValueError("n must be positive")
    return max(0.0, scale - i / n)


def divide_scale(scale: float, i: int, n: int) -> float:
    """Progress of segment ``i`` when ``scale`` is split into ``n`` equal parts."""
    progress = max_scale(scale, i, n)
    return min(1 / n, progress) * n
