"""Runtime helpers for driving the fixed timestep circle animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from dataclasses_json import dataclass_json

from .logic import AnimationConfig
from .logic import AnimationState
from .logic import DrawingSurface
from .logic import _default_logger


@dataclass_json
@dataclass(frozen=True)
class AnimationSnapshot:
    """Serializable view of the animation after a tick."""

    tick: int
    position_x: float
    width: int
    height: int


class PeriodicScheduler(Protocol):
    """Anything able to call ``callback`` every ``interval`` seconds."""

    def __call__(self, callback: Callable[..., Any], interval: float) -> Any:
        """Register ``callback`` to run repeatedly at ``interval`` seconds."""


class AnimationLoop:
    """Clears the surface and fills a moving circle once per tick."""

    def __init__(
        self,
        surface: DrawingSurface,
        width: int,
        height: int,
        config: Optional[AnimationConfig] = None,
        *,
        log_callback: Optional[Callable[[str], None]] = None,
        state: Optional[AnimationState] = None,
    ) -> None:
        if not isinstance(width, int) or width <= 0:
            raise ValueError("width must be a positive integer")
        if not isinstance(height, int) or height <= 0:
            raise ValueError("height must be a positive integer")

        self._surface = surface
        self._width = width
        self._height = height
        self._config = config or AnimationConfig()
        self._state = state or AnimationState()
        self._log = log_callback or _default_logger
        self._tick = 0

        self._log(
            f"Initialized animation loop on {width}x{height} surface at "
            f"{self._config.fps} ticks/s, velocity {self._config.velocity_x} px/s"
        )

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def interval_seconds(self) -> float:
        """Wall clock seconds between ticks."""

        return self._config.interval_ms / 1000

    def snapshot(self) -> AnimationSnapshot:
        """Return a serializable snapshot of the current animation state."""

        return AnimationSnapshot(
            tick=self._tick,
            position_x=self._state.position_x,
            width=self._width,
            height=self._height,
        )

    def tick(self, *_: Any) -> AnimationSnapshot:
        """Advance one timestep, redraw the frame and return the snapshot.

        Extra positional arguments are ignored so the method can be handed
        directly to schedulers that pass the elapsed time.
        """

        self._tick += 1
        config = self._config
        position_x = self._state.advance(config.velocity_x, config.dt)

        surface = self._surface
        surface.fill_style = config.background
        surface.fill_rect(0, 0, self._width, self._height)

        surface.begin_path()
        surface.arc(position_x, config.circle_y, config.circle_radius, 0, 2 * math.pi)
        surface.fill_style = config.foreground
        surface.fill()

        return self.snapshot()

    def start(self, scheduler: PeriodicScheduler) -> None:
        """Hand ``tick`` to ``scheduler``; the loop then runs until the host exits."""

        self._log(f"Scheduling animation tick every {self._config.interval_ms} ms")
        scheduler(self.tick, self.interval_seconds)


__all__ = ["AnimationLoop", "AnimationSnapshot", "PeriodicScheduler"]
