"""Immediate mode drawing surface backed by ``arcade`` primitives."""

from __future__ import annotations

import arcade
from arcade.types import Color

from .logic import PathBuilder
from .logic import canvas_to_cartesian


def resolve_color(name: str) -> Color:
    """Look up a CSS style colour name or ``#rrggbb`` string."""

    if name.startswith("#"):
        return Color.from_hex_string(name)
    color = getattr(arcade.color, name.upper(), None)
    if color is None:
        raise ValueError(f"Unknown colour: {name}")
    return color


class ArcadeSurface:
    """Draws canvas style commands inside an ``arcade.Window.on_draw`` pass.

    Canvas coordinates put the origin at the top left, arcade puts it at the
    bottom left, so every y coordinate is flipped against ``height``.
    """

    def __init__(self, height: int, *, line_width: float = 1.0) -> None:
        self.height = height
        self.line_width = line_width
        self.fill_style = "black"
        self.stroke_style = "black"
        self._path = PathBuilder()

    def begin_path(self) -> None:
        self._path.begin()

    def move_to(self, x: float, y: float) -> None:
        self._path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.line_to(x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._path.arc(cx, cy, radius, start_angle, end_angle)

    def stroke(self) -> None:
        color = resolve_color(self.stroke_style)
        for polyline in self._path.polylines():
            arcade.draw_line_strip(self._flip(polyline), color, self.line_width)

    def fill(self) -> None:
        color = resolve_color(self.fill_style)
        for polygon in self._path.polygons():
            arcade.draw_polygon_filled(self._flip(polygon), color)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        left, right = sorted((x, x + width))
        bottom, top = sorted(
            (
                canvas_to_cartesian((x, y), self.height)[1],
                canvas_to_cartesian((x, y + height), self.height)[1],
            )
        )
        arcade.draw_lrbt_rectangle_filled(
            left, right, bottom, top, resolve_color(self.fill_style)
        )

    def _flip(self, points):
        return [canvas_to_cartesian(point, self.height) for point in points]


__all__ = ["ArcadeSurface", "resolve_color"]
