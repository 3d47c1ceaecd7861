"""Render frames without a window, for inspection and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from dataclasses_json import dataclass_json

from .logic import AnimationConfig
from .logic import draw_arrow
from .recording import DrawCommand
from .recording import RecordingSurface
from .runtime import AnimationLoop
from .runtime import AnimationSnapshot


@dataclass_json
@dataclass(frozen=True)
class FrameRecord:
    """Snapshot of one tick together with the commands it issued."""

    snapshot: AnimationSnapshot
    commands: List[DrawCommand]


def render_frames(
    count: int,
    width: int,
    height: int,
    config: Optional[AnimationConfig] = None,
    *,
    log_callback: Optional[Callable[[str], None]] = None,
) -> List[FrameRecord]:
    """Run ``count`` ticks of a fresh loop and capture each frame."""

    if not isinstance(count, int) or count < 0:
        raise ValueError("count must be a non-negative integer")

    surface = RecordingSurface()
    loop = AnimationLoop(surface, width, height, config, log_callback=log_callback)
    frames: List[FrameRecord] = []
    for _ in range(count):
        surface.reset()
        snapshot = loop.tick()
        frames.append(FrameRecord(snapshot=snapshot, commands=list(surface.commands)))
    return frames


def render_arrow(base_x: float, base_y: float, length: float) -> List[DrawCommand]:
    """Return the commands ``draw_arrow`` issues on a fresh surface."""

    surface = RecordingSurface()
    draw_arrow(surface, base_x, base_y, length)
    return surface.commands


__all__ = ["FrameRecord", "render_arrow", "render_frames"]
