"""Simulation package exposing the arrow drawer and the circle animation loop."""

from .logic import AnimationConfig
from .logic import AnimationState
from .logic import draw_arrow
from .recording import RecordingSurface
from .runtime import AnimationLoop
from .runtime import AnimationSnapshot

__all__ = [
    "logic",
    "AnimationConfig",
    "AnimationLoop",
    "AnimationSnapshot",
    "AnimationState",
    "RecordingSurface",
    "draw_arrow",
]
