"""Display list surface that records drawing commands for later replay."""

from __future__ import annotations

import json
from dataclasses import dataclass
from dataclasses import field
from typing import List, Union

from dataclasses_json import dataclass_json

from .logic import DrawingSurface


CommandArgument = Union[float, str]

_STYLE_PROPERTIES = ("fill_style", "stroke_style")


@dataclass_json
@dataclass(frozen=True)
class DrawCommand:
    """A single surface call, either a method invocation or a style change."""

    name: str
    args: List[CommandArgument] = field(default_factory=list)

    def apply(self, target: DrawingSurface) -> None:
        """Invoke this command on ``target``."""

        if self.name in _STYLE_PROPERTIES:
            setattr(target, self.name, self.args[0])
            return
        getattr(target, self.name)(*self.args)


class RecordingSurface:
    """Drawing surface that stores every call as a ``DrawCommand``."""

    def __init__(self, fill_style: str = "black", stroke_style: str = "black") -> None:
        self.commands: List[DrawCommand] = []
        # Initial styles match the canvas defaults and are not recorded.
        self._fill_style = fill_style
        self._stroke_style = stroke_style

    @property
    def fill_style(self) -> str:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._fill_style = value
        self._record("fill_style", value)

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._stroke_style = value
        self._record("stroke_style", value)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle)

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("fill_rect", x, y, width, height)

    def names(self) -> List[str]:
        """Return the command names in call order."""

        return [command.name for command in self.commands]

    def reset(self) -> None:
        """Forget every recorded command."""

        self.commands = []

    def replay(self, target: DrawingSurface) -> None:
        """Apply the recorded commands, in order, to another surface."""

        for command in self.commands:
            command.apply(target)

    def to_json(self) -> str:
        return json.dumps([command.to_dict() for command in self.commands])

    def _record(self, name: str, *args: CommandArgument) -> None:
        self.commands.append(DrawCommand(name=name, args=list(args)))


__all__ = ["DrawCommand", "RecordingSurface"]
