"""tick - A minimal fixed-period tick scheduler in Python."""

from tick.animator import Animator
from tick.clock import Clock
from tick.types import TickContext, TickFn

__all__ = [
    "Animator",
    "Clock",
    "TickContext",
    "TickFn",
]
