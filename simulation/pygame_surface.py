"""Immediate mode drawing surface backed by ``pygame.draw``."""

from __future__ import annotations

import pygame

from .logic import PathBuilder


class PygameSurface:
    """Draws canvas style commands straight onto a ``pygame.Surface``.

    pygame already uses a top-left origin, so coordinates pass through.
    """

    def __init__(self, target: pygame.Surface, *, line_width: int = 1) -> None:
        self.target = target
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
        color = pygame.Color(self.stroke_style)
        for polyline in self._path.polylines():
            pygame.draw.lines(self.target, color, False, polyline, self.line_width)

    def fill(self) -> None:
        color = pygame.Color(self.fill_style)
        for polygon in self._path.polygons():
            pygame.draw.polygon(self.target, color, polygon)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        rect.normalize()
        pygame.draw.rect(self.target, pygame.Color(self.fill_style), rect)


__all__ = ["PygameSurface"]
