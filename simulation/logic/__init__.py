"""Core drawing logic for the canvas motion demo."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import field
from typing import List
from typing import Optional
from typing import Protocol
from typing import Tuple

from dataclasses_json import dataclass_json


ARROW_HEAD_SIZE = 3 / 10

Point = Tuple[float, float]


class DrawingSurface(Protocol):
    """2D drawing context exposing canvas style path and fill primitives."""

    fill_style: str
    stroke_style: str

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...


def _default_logger(message: str) -> None:
    """No-op logger used when a caller does not provide a callback."""

    return None


def draw_arrow(surface: DrawingSurface, base_x: float, base_y: float, length: float) -> None:
    """Stroke a rightward arrow from ``(base_x, base_y)`` spanning ``length``.

    The head legs fold back at 45 degrees from the tip, each offset by
    ``ARROW_HEAD_SIZE * length`` on both axes. A negative length mirrors the
    arrow to point left.
    """

    tip_x = base_x + length
    tip_y = base_y
    head_offset = ARROW_HEAD_SIZE * length

    surface.begin_path()

    # Shaft
    surface.move_to(base_x, base_y)
    surface.line_to(tip_x, tip_y)

    # Head
    surface.move_to(tip_x, tip_y)
    surface.line_to(tip_x - head_offset, tip_y - head_offset)
    surface.move_to(tip_x, tip_y)
    surface.line_to(tip_x - head_offset, tip_y + head_offset)

    surface.stroke()


@dataclass_json
@dataclass(frozen=True)
class AnimationConfig:
    """Constants driving the fixed timestep circle animation."""

    fps: int = 1000
    velocity_x: float = 50.0
    circle_y: float = 100.0
    circle_radius: float = 50.0
    background: str = "white"
    foreground: str = "black"

    def __post_init__(self) -> None:
        if isinstance(self.fps, bool) or not isinstance(self.fps, int) or self.fps <= 0:
            raise ValueError("fps must be a positive integer")
        for name in ("velocity_x", "circle_y", "circle_radius"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be numeric")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite")
        if self.velocity_x <= 0:
            raise ValueError("velocity_x must be positive")
        if self.circle_radius < 0:
            raise ValueError("circle_radius cannot be negative")

    @property
    def dt(self) -> float:
        """Seconds of simulated time covered by one tick."""

        return 1 / self.fps

    @property
    def interval_ms(self) -> float:
        return 1000 * self.dt


@dataclass
class AnimationState:
    """Mutable state owned by the animation loop."""

    position_x: float = 0.0

    def advance(self, velocity_x: float, dt: float) -> float:
        """Move forward by one timestep and return the new position."""

        self.position_x = self.position_x + velocity_x * dt
        return self.position_x


def arc_points(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    *,
    segments: Optional[int] = None,
) -> List[Point]:
    """Flatten a clockwise canvas arc into a list of points.

    Sweeps of a full turn or more are clamped to exactly one turn, so the
    first and last points coincide. An empty sweep yields only its start point.
    """

    sweep = end_angle - start_angle
    if sweep >= math.tau:
        sweep = math.tau
    elif sweep < 0:
        sweep = sweep % math.tau
    if sweep == 0:
        return [(cx + radius * math.cos(start_angle), cy + radius * math.sin(start_angle))]
    if segments is None:
        segments = max(8, int(math.ceil(abs(radius) * sweep / 4)))
    step = sweep / segments
    return [
        (
            cx + radius * math.cos(start_angle + index * step),
            cy + radius * math.sin(start_angle + index * step),
        )
        for index in range(segments + 1)
    ]


def canvas_to_cartesian(point: Point, height: float) -> Point:
    """Map a top-left origin canvas point to a bottom-left origin point."""

    x, y = point
    return x, height - y


@dataclass
class PathBuilder:
    """Accumulates subpaths following canvas path construction rules."""

    subpaths: List[List[Point]] = field(default_factory=list)

    def begin(self) -> None:
        self.subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self.subpaths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        if not self.subpaths:
            self.move_to(x, y)
            return
        self.subpaths[-1].append((float(x), float(y)))

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        points = arc_points(cx, cy, radius, start_angle, end_angle)
        if not self.subpaths:
            self.subpaths.append([])
        # An arc joins the current point with a straight line to its start.
        self.subpaths[-1].extend(points)

    def polylines(self) -> List[List[Point]]:
        """Return subpaths that contain at least one segment."""

        return [list(subpath) for subpath in self.subpaths if len(subpath) >= 2]

    def polygons(self) -> List[List[Point]]:
        """Return subpaths that enclose an area when implicitly closed."""

        return [list(subpath) for subpath in self.subpaths if len(subpath) >= 3]


__all__ = [
    "ARROW_HEAD_SIZE",
    "AnimationConfig",
    "AnimationState",
    "DrawingSurface",
    "PathBuilder",
    "Point",
    "arc_points",
    "canvas_to_cartesian",
    "draw_arrow",
]
